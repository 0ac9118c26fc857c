"""Environment variable loading for photoship settings.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at the explicit `env_file` path (if provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so a .env from outside the repo is never picked up.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and export KEY=value."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | os.PathLike | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            logger.warning(f'env file not found: {path}')
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    logger.debug(f'loaded {len(parsed)} variable(s) from {path}')
    return path

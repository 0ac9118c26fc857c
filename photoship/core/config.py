"""Runtime settings for photoship filters.

    PHOTOSHIP_SEPIA_MODE     legacy | standard      (default: legacy)
    PHOTOSHIP_BW_THRESHOLD   integer 0-256          (default: 128)

Values come from the process environment, falling back to a .env file
located by photoship.core.env.load_env(). The pure functions in
photoship.core.pixels never read settings; the registered filters read them
once per process through get_settings().
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from photoship.core.env import load_env
from photoship.core.pixels import BW_THRESHOLD, SEPIA_MODES

logger = logging.getLogger(__name__)

ENV_PREFIX = 'PHOTOSHIP_'


@dataclass(frozen=True)
class Settings:
    sepia_mode: str = 'legacy'
    bw_threshold: int = BW_THRESHOLD


def _read_sepia_mode(environ: Mapping[str, str]) -> str:
    name = f'{ENV_PREFIX}SEPIA_MODE'
    raw = environ.get(name, '').strip().lower()
    if not raw:
        return Settings.sepia_mode
    if raw not in SEPIA_MODES:
        raise ValueError(f'{name}={raw!r} is invalid. Available: {", ".join(SEPIA_MODES)}')
    return raw


def _read_bw_threshold(environ: Mapping[str, str]) -> int:
    name = f'{ENV_PREFIX}BW_THRESHOLD'
    raw = environ.get(name, '').strip()
    if not raw:
        return Settings.bw_threshold
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name}={raw!r} is not an integer') from None
    # 256 turns every pixel black, 0 every pixel white
    if not 0 <= value <= 256:
        raise ValueError(f'{name}={value} outside [0, 256]')
    return value


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from an environment mapping (os.environ by default)."""
    env = os.environ if environ is None else environ
    settings = Settings(
        sepia_mode=_read_sepia_mode(env),
        bw_threshold=_read_bw_threshold(env),
    )
    logger.debug(f'resolved {settings}')
    return settings


def load_settings(env_file: str | os.PathLike | None = None) -> Settings:
    """Load .env (OS variables win), then resolve Settings."""
    env_path = load_env(env_file=env_file)
    if env_path:
        logger.info(f'photoship: loaded {env_path}')
    return settings_from_env()


_cache: dict[str, Settings] = {}


def get_settings() -> Settings:
    """Settings for this process. The first call loads .env; later calls reuse the result."""
    if 'settings' not in _cache:
        _cache['settings'] = load_settings()
    return _cache['settings']


def reset_settings() -> None:
    """Forget the cached Settings so the next get_settings() reloads them."""
    _cache.clear()

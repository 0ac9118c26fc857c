"""Filter auto-discovery and registration.

Scans photoship/filters/ for modules that define a `pixel_filter` object
of type Filter. Collects them into a dict keyed by name.
"""

import importlib
import logging
import pkgutil

from photoship.core.types import Filter

logger = logging.getLogger(__name__)

_registry: dict[str, Filter] = {}


def discover() -> dict[str, Filter]:
    """Import all filter modules and return the registry."""
    if _registry:
        return _registry

    import photoship.filters as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'photoship.filters.{modname}')
        flt = getattr(module, 'pixel_filter', None)
        if isinstance(flt, Filter):
            _registry[flt.name] = flt

    logger.debug(f'discovered {len(_registry)} filters: {", ".join(sorted(_registry))}')
    return _registry


def get(name: str) -> Filter:
    """Get a filter by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown filter: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_filters() -> dict[str, Filter]:
    """Return all registered filters."""
    return discover()

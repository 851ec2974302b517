"""
Process-wide table of TypeConfig by type name.

Populate it during startup, then call freeze(); lookups afterwards are plain
dict reads and need no locking.
"""
import threading
from typing import Dict, List

from config import logger
from errors import ConfigurationError
from models import TypeConfig, configure

_configs: Dict[str, TypeConfig] = {}
_lock = threading.Lock()
_frozen = False


def register(type_name: str, **options) -> TypeConfig:
    """Configures a type and stores it; each type may be registered once."""
    type_config = configure(type_name, **options)
    with _lock:
        if _frozen:
            raise ConfigurationError(f"Cannot register {type_name!r}: the registry is frozen.")
        if type_name in _configs:
            raise ConfigurationError(f"{type_name!r} is already registered.")
        _configs[type_name] = type_config
    return type_config


def get_config(type_name: str) -> TypeConfig:
    """Raises KeyError for unregistered types."""
    try:
        return _configs[type_name]
    except KeyError:
        raise KeyError(f"No obfuscation configured for {type_name!r}") from None


def registered_types() -> List[str]:
    return sorted(_configs)


def freeze() -> None:
    """Ends the registration window."""
    global _frozen
    with _lock:
        _frozen = True
    logger.info(f"Obfuscation registry frozen with {len(_configs)} type(s).")


def is_frozen() -> bool:
    return _frozen


def reset() -> None:
    """Clears the table. Intended for tests only."""
    global _frozen
    with _lock:
        _configs.clear()
        _frozen = False

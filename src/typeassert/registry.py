# ===== MODULE DOCSTRING ===== #
"""
Process-wide registry of custom checking routines.

Maps a nominal type descriptor (a class or an ``Interface``) to the routine
that replaces its default ``isinstance`` check. Populated only through
``define()``; the dispatcher reads it on every attempt. Last writer wins.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Callable, Optional, Final,
    Dict, List, Any
)
import threading
import logging

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('typeassert')

## ===== TYPE ALIASES ===== ##
# routine(value, check) -> Any; ``check`` is the per-invocation CheckContext
CustomCheck = Callable[[Any, Any], Any]

## ===== REGISTRY ===== ##
_CUSTOM_CHECKS: Dict[Any, CustomCheck] = {}
_custom_checks_lock = threading.Lock()

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'CustomCheck',
    'register_custom_check',
    'get_custom_check',
    'clear_custom_checks',
]

# ===== FUNCTIONS ===== #

def register_custom_check(target: Any, routine: CustomCheck) -> None:
    """Attach ``routine`` to ``target``, replacing any routine already attached."""
    with _custom_checks_lock:
        replaced = target in _CUSTOM_CHECKS
        _CUSTOM_CHECKS[target] = routine
    if _log.isEnabledFor(logging.DEBUG):
        action = "Replaced" if replaced else "Registered"
        _log.debug(f"TRACE registry.register_custom_check: {action} custom check {routine!r} for {target!r}")

def get_custom_check(target: Any) -> Optional[CustomCheck]:
    """Return the routine attached to ``target``, or None."""
    try:
        return _CUSTOM_CHECKS.get(target)
    except TypeError:
        # Unhashable objects can never have been registered
        return None

def clear_custom_checks() -> None:
    """Forget every registered routine."""
    with _custom_checks_lock:
        _CUSTOM_CHECKS.clear()
    _log.debug("TRACE registry.clear_custom_checks: Registry cleared.")

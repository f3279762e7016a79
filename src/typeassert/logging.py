# ===== MODULE DOCSTRING ===== #
"""
typeassert Logging Configuration

This module configures the package logger used by every other typeassert
module. Checks never log above DEBUG; a failed check is reported by raising
TypeAssertionError, not by logging.

At DEBUG the package traces:
- each dispatch decision in type_utils.attempt (descriptor and value)
- routines handed to the custom-check registry, and redefinitions
- exceptions raised inside custom routines, which are folded into a reason
- the failure tree behind every TypeAssertionError that is raised

Defaults:
- Output: Standard error stream (sys.stderr)
- Format: "%(levelname)s:%(name)s: %(message)s"
- Default Level: WARNING

Usage:
    from typeassert.logging import logger, set_verbosity
    import logging

    # Trace every dispatch decision
    set_verbosity(logging.DEBUG)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List
import logging
import sys

## ===== LOCAL ===== ##
from .config import LOGGER_NAME

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
LOG_FORMAT: Final[str] = '%(levelname)s:%(name)s: %(message)s'

VALID_LEVELS: Final[List[int]] = [
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL
]

## ===== LOGGER SETUP ===== ##
_log: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)

handler: Final[logging.StreamHandler] = logging.StreamHandler(sys.stderr)
handler.setFormatter(logging.Formatter(LOG_FORMAT))

# Guard against duplicate handlers on module reload
if not _log.handlers:
    _log.addHandler(handler)
    _log.propagate = True
    _log.setLevel(logging.WARNING)

## ===== PUBLIC API ALIAS ===== ##
logger = _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'logger',
    'set_verbosity',
]

# ===== FUNCTIONS ===== #

def set_verbosity(level: int) -> None:
    """Set the logging verbosity level for the typeassert logger.

    Args:
        level: A logging level constant from the logging module
              (e.g., logging.DEBUG, logging.INFO, logging.WARNING)

    Raises:
        ValueError: If an invalid logging level is provided

    Example:
        >>> import logging
        >>> from typeassert.logging import set_verbosity
        >>> set_verbosity(logging.DEBUG)
    """
    if level not in VALID_LEVELS:
        raise ValueError(
            f"Invalid logging level: {level}. "
            f"Use logging module constants (e.g., logging.DEBUG). "
            f"Valid levels: {[logging.getLevelName(l) for l in VALID_LEVELS]}"
        )

    _log.setLevel(level)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE logging.set_verbosity: typeassert verbosity set to {logging.getLevelName(level)}")

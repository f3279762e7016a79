# ===== MODULE DOCSTRING ===== #
"""Failure records, the assertion error, value rendering and message formatting for typeassert."""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from collections.abc import Mapping
from typing import (
    Optional, Final,
    Tuple, List, Any
)
import dataclasses
import inspect
import logging

## ===== LOCAL ===== ##
from .config import (
    REASON_INDENT, REASON_BULLET, MISMATCH_REASON, UNDEFINED_NAME,
    ORDINAL_SUFFIXES, ORDINAL_DEFAULT_SUFFIX, ORDINAL_TEENS
)

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('typeassert')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'UNDEFINED',
    'Failure',
    'TypeAssertionError',
    'render_value',
    'format_reasons',
    'format_failure',
    'ordinal',
]

# ===== CLASSES ===== #

class _Undefined:
    """The absent value. Distinct from None, which plays the part of null."""
    _instance: Optional['_Undefined'] = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return UNDEFINED_NAME

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())

UNDEFINED: Final[_Undefined] = _Undefined()

@dataclasses.dataclass(frozen=True)
class Failure:
    """Why a value did not satisfy a type.

    A node with reasons reads "subject failed expected because of each reason,
    in order". A node carrying a ``message`` is a terminal reason whose text
    came from ``fail()`` or from an exception raised by a custom routine.

    Attributes:
        subject (str): Rendered value that was checked.
        expected (str): Name of the type it was checked against.
        reasons (Tuple[Failure, ...]): Ordered sub-reasons.
        message (Optional[str]): Explicit reason text for leaf reasons.
    """
    subject: str
    expected: str
    reasons: Tuple['Failure', ...] = ()
    message: Optional[str] = None

    def describe(self) -> str:
        """One-line description of this node, as it appears in a bullet."""
        if self.message is not None:
            return self.message
        return MISMATCH_REASON.format(subject=self.subject, expected=self.expected)

class TypeAssertionError(TypeError):
    """Raised by the public entry points when a value does not conform."""
    def __init__(self, message: str, failure: Optional[Failure] = None, cause: Optional[str] = 'unknown'):
        super().__init__(message)
        self.failure = failure
        self.cause = cause

# ===== FUNCTIONS ===== #

## ===== VALUE RENDERING ===== ##
def _render_key(key: Any) -> str:
    return key if isinstance(key, str) else render_value(key)

def render_value(value: Any) -> str:
    """Render a value for embedding in a diagnostic.

    Strings are double-quoted verbatim, sequences use brackets, mappings and
    dataclass instances use braces, classes and functions render as their
    names. Everything else falls back to ``repr()``, which also covers the
    literal tokens (``None``, ``True``, ``12345``) and type descriptors.
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (list, tuple, set, frozenset)):
        return '[' + ', '.join(render_value(item) for item in value) + ']'
    if isinstance(value, Mapping):
        return '{' + ', '.join(
            f"{_render_key(key)}: {render_value(item)}" for key, item in value.items()
        ) + '}'
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return '{' + ', '.join(
            f"{field.name}: {render_value(getattr(value, field.name))}"
            for field in dataclasses.fields(value)
        ) + '}'
    if inspect.isclass(value) or inspect.isroutine(value):
        return getattr(value, '__name__', repr(value))
    return repr(value)

## ===== ORDINALS ===== ##
def ordinal(position: int) -> str:
    """English ordinal for a 1-based position: 1st, 2nd, 3rd, 4th, 11th, 21st."""
    if position % 100 in ORDINAL_TEENS:
        return f"{position}{ORDINAL_DEFAULT_SUFFIX}"
    return f"{position}{ORDINAL_SUFFIXES.get(position % 10, ORDINAL_DEFAULT_SUFFIX)}"

## ===== MESSAGE FORMATTING ===== ##
def _reason_lines(reasons: Tuple[Failure, ...], depth: int) -> List[str]:
    lines: List[str] = []
    for reason in reasons:
        lines.append(f"{REASON_INDENT * depth}{REASON_BULLET}{reason.describe()}")
        lines.extend(_reason_lines(reason.reasons, depth + 1))
    return lines

def format_reasons(reasons: Tuple[Failure, ...], depth: int = 1) -> str:
    """Render a reason tree as indented bullet lines, one line per node."""
    return '\n'.join(_reason_lines(reasons, depth))

def format_failure(headline: str, failure: Optional[Failure]) -> str:
    """Headline followed by the failure's reasons, if it has any."""
    if failure is None or not failure.reasons:
        return headline
    message = headline + '\n' + format_reasons(failure.reasons)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE error_utils.format_failure: Formatted {len(failure.reasons)} top-level reason(s) (length={len(message)}).")
    return message

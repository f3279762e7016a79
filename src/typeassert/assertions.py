# ===== MODULE DOCSTRING ===== #
"""
Public entry points for typeassert.

These are the calls application code, or an instrumentation step working
from type annotations, places at argument and return boundaries:

    from typeassert import argument_types, return_type, string, number

    def repeat(text, times):
        argument_types(text, string, times, number)
        return return_type(text * times, string)

Each entry point either returns quietly or raises one TypeAssertionError
whose message is a headline followed by the indented reason tree.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import (
    Final, Union,
    List, Any
)
import logging

## ===== LOCAL ===== ##
from .config import (
    TYPE_HEADLINE, RETURN_HEADLINE,
    ARGUMENTS_HEADLINE, ARGUMENT_REASON
)
from .error_utils import (
    TypeAssertionError, Failure,
    format_failure, render_value, ordinal
)
from .registry import CustomCheck, register_custom_check
from .type_utils import Interface, TypeDescriptor, attempt, type_name

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('typeassert')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'assert_type',
    'argument_types',
    'return_type',
    'define',
]

# ===== FUNCTIONS ===== #

## ===== TYPE ERROR HANDLING ===== ##
def _raise_type_error(cause: str, headline: str, failure: Failure) -> None:
    """Format the failure under ``headline`` and raise it."""
    message = format_failure(headline, failure)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE assertions._raise_type_error: Raising TypeAssertionError (cause={cause!r}): {failure!r}")
    raise TypeAssertionError(message, failure=failure, cause=cause)

## ===== ENTRY POINTS ===== ##
def assert_type(value: Any, expected_type: Any) -> None:
    """Raise TypeAssertionError unless ``value`` conforms to ``expected_type``.

    Args:
        value: The value to check.
        expected_type: Any type descriptor: a class, a primitive marker,
            an interface or a composite.

    Raises:
        TypeAssertionError: If the value does not conform.
        TypeError: If ``expected_type`` is not a type descriptor.
    """
    failure = attempt(value, expected_type)
    if failure is not None:
        headline = TYPE_HEADLINE.format(expected=type_name(expected_type), subject=render_value(value))
        _raise_type_error('type', headline, failure)

def argument_types(*pairs: Any) -> None:
    """Check positional ``value, type, value, type, ...`` pairs in order.

    Only the first failing pair is reported, by its 1-based position.

    Raises:
        TypeAssertionError: On the first argument that does not conform.
        TypeError: If ``pairs`` has an odd length.
    """
    if len(pairs) % 2:
        raise TypeError(f"argument_types() expects value/type pairs, got {len(pairs)} arguments")

    for index in range(0, len(pairs), 2):
        value, expected_type = pairs[index], pairs[index + 1]
        failure = attempt(value, expected_type)
        if failure is None:
            continue
        position = index // 2 + 1
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE assertions.argument_types: Argument #{position} failed against {type_name(expected_type)}")
        reason = Failure(
            failure.subject, failure.expected, failure.reasons,
            message=ARGUMENT_REASON.format(
                ordinal=ordinal(position),
                expected=type_name(expected_type),
                subject=render_value(value),
            )
        )
        _raise_type_error('argument', ARGUMENTS_HEADLINE, Failure(reason.subject, reason.expected, (reason,)))

def return_type(value: Any, expected_type: Any) -> Any:
    """Check a value about to be returned and hand it back unchanged.

    Raises:
        TypeAssertionError: If the value does not conform.
    """
    failure = attempt(value, expected_type)
    if failure is not None:
        headline = RETURN_HEADLINE.format(expected=type_name(expected_type), subject=render_value(value))
        _raise_type_error('return', headline, failure)
    return value

## ===== CUSTOM CHECKS ===== ##
def define(target: Union[str, type, Interface], routine: CustomCheck) -> Union[type, Interface]:
    """Attach a custom checking routine to a type, or create an interface.

    The routine is called as ``routine(value, check)`` where ``check`` offers
    ``fail(reason)`` and ``is_(value, *types)``. It fails the value by
    recording reasons, by returning ``False`` or by raising; anything else
    passes. Defining a type again replaces its previous routine.

    Args:
        target: A name for a new interface, a class, or an existing interface.
        routine: The checking routine.

    Returns:
        The class or interface the routine is now attached to.

    Raises:
        TypeError: If ``routine`` is not callable, or ``target`` is a
            primitive or composite descriptor, or is not a type at all.
    """
    if not callable(routine):
        raise TypeError(f"define() expects a callable routine, got {routine!r}")

    if isinstance(target, str):
        descriptor: Union[type, Interface] = Interface(target)
    elif isinstance(target, Interface) or isinstance(target, type):
        descriptor = target
    elif isinstance(target, TypeDescriptor):
        raise TypeError(f"Cannot define a custom check for built-in descriptor {target!r}")
    else:
        raise TypeError(f"define() expects a name, a class or an interface, got {target!r}")

    register_custom_check(descriptor, routine)
    return descriptor

# ===== MODULE DOCSTRING ===== #
"""
Type descriptors and the dispatcher for typeassert.

A type descriptor is anything a value can be checked against:
- a primitive marker (``string``, ``number``, ``boolean``, ``void``)
- a built-in kind used by the combinators (``Array``, ``Object``)
- a plain Python class, checked with ``isinstance``
- an ``Interface`` created by ``define('Name', routine)``
- a composite built by ``array_of()`` or ``structure()``

Every check goes through ``attempt()``, which resolves the strategy in a
fixed order: null passthrough, registered custom routine, the descriptor's
own ``attempt``, then the default instance check.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import (
    Callable, Optional, Final,
    Tuple, Dict, List, Any
)
import logging

## ===== LOCAL ===== ##
from .config import (
    STRING_NAME, NUMBER_NAME, BOOLEAN_NAME, VOID_NAME,
    ARRAY_NAME, OBJECT_NAME,
    ARRAY_OF_PREFIX, ARRAY_OF_SEPARATOR,
    STRUCTURE_PREFIX, STRUCTURE_SEPARATOR
)
from .error_utils import UNDEFINED, Failure, render_value
from .registry import CustomCheck, get_custom_check

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('typeassert')

# ===== CLASSES ===== #

## ===== DESCRIPTORS ===== ##
class TypeDescriptor(ABC):
    """A named, checkable unit that is not a plain Python class."""
    name: str

    @abstractmethod
    def attempt(self, value: Any) -> Optional[Failure]:
        """Check a non-null value. Returns None on pass, a Failure otherwise."""

    def __repr__(self) -> str:
        return self.name

class Kind(TypeDescriptor):
    """A fixed descriptor checked by value kind rather than class ancestry."""
    def __init__(self, name: str, predicate: Callable[[Any], bool]):
        self.name = name
        self._predicate = predicate

    def attempt(self, value: Any) -> Optional[Failure]:
        if self._predicate(value):
            return None
        return Failure(render_value(value), self.name)

class Interface(TypeDescriptor):
    """A bare name whose only behaviour is the routine registered for it."""
    def __init__(self, name: str):
        self.name = name

    def attempt(self, value: Any) -> Optional[Failure]:
        # Reached only when no routine is registered: nothing conforms
        return Failure(render_value(value), self.name)

class Composite(TypeDescriptor):
    """Immutable descriptor whose check runs as a built-in routine."""

    @abstractmethod
    def check(self, value: Any, check: 'CheckContext') -> None:
        """Record reasons on ``check`` for every way ``value`` falls short."""

    def attempt(self, value: Any) -> Optional[Failure]:
        return run_custom_check(self, self.check, value)

class ArrayOf(Composite):
    """A list or tuple whose every item is one of ``element_types``."""
    def __init__(self, element_types: Tuple[Any, ...]):
        self.element_types = element_types
        self.name = ARRAY_OF_PREFIX + ARRAY_OF_SEPARATOR.join(type_name(t) for t in element_types)

    def check(self, value: Any, check: 'CheckContext') -> None:
        if not check.is_(value, Array):
            return
        for item in value:
            check.is_(item, *self.element_types)

class Structure(Composite):
    """An object whose listed properties have the given types.

    Mappings are read by key, any other object by attribute.
    """
    def __init__(self, fields: Mapping):
        self.fields: Dict[str, Any] = dict(fields)
        self.name = STRUCTURE_PREFIX + STRUCTURE_SEPARATOR.join(self.fields)

    def check(self, value: Any, check: 'CheckContext') -> None:
        if not check.is_(value, Object):
            return
        for field_name, field_type in self.fields.items():
            check.is_(_get_property(value, field_name), field_type)

## ===== ROUTINE SCOPE ===== ##
class CheckContext:
    """Per-invocation scope handed to a custom routine as its second argument.

    Reasons recorded through ``fail()`` and ``is_()`` accumulate in call
    order and become the children of the routine's Failure.
    """
    def __init__(self, value: Any, descriptor: Any):
        self.value = value
        self.descriptor = descriptor
        self._reasons: List[Failure] = []

    @property
    def reasons(self) -> Tuple[Failure, ...]:
        return tuple(self._reasons)

    def fail(self, reason: str) -> None:
        """Record a reason. Does not stop the routine."""
        self._reasons.append(Failure(
            render_value(self.value), type_name(self.descriptor), message=str(reason)
        ))

    def is_(self, value: Any, *types: Any) -> bool:
        """Pass if ``value`` satisfies at least one of ``types``.

        When none does, one reason per alternative is recorded in declaration
        order, each keeping the alternative's own reasons as children.
        """
        if not types:
            raise TypeError("is_() requires at least one type to check against")
        failures: List[Failure] = []
        for expected_type in types:
            failure = attempt(value, expected_type)
            if failure is None:
                return True
            failures.append(Failure(render_value(value), type_name(expected_type), failure.reasons))
        self._reasons.extend(failures)
        return False

# ===== FUNCTIONS ===== #

## ===== KIND PREDICATES ===== ##
_NON_OBJECT_TYPES: Final[Tuple[type, ...]] = (str, bytes, int, float, bool, list, tuple)

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def _is_object(value: Any) -> bool:
    # Anything carrying properties: not null, not a primitive kind, not an array
    if value is None or value is UNDEFINED:
        return False
    return not isinstance(value, _NON_OBJECT_TYPES)

def _get_property(value: Any, field_name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(field_name, UNDEFINED)
    return getattr(value, field_name, UNDEFINED)

## ===== NAMING ===== ##
def type_name(expected_type: Any) -> str:
    """Display name of a type descriptor."""
    if isinstance(expected_type, TypeDescriptor):
        return expected_type.name
    if isinstance(expected_type, type):
        return expected_type.__name__
    return render_value(expected_type)

def is_descriptor(candidate: Any) -> bool:
    """True for anything ``attempt()`` can dispatch on."""
    return isinstance(candidate, (TypeDescriptor, type))

## ===== CUSTOM ROUTINES ===== ##
def run_custom_check(descriptor: Any, routine: CustomCheck, value: Any) -> Optional[Failure]:
    """Run a routine against ``value`` and fold its outcome into a Failure.

    An exception becomes the sole reason. Otherwise recorded reasons win,
    then an explicit ``False`` return fails without reasons; anything else passes.
    """
    subject = render_value(value)
    expected = type_name(descriptor)
    context = CheckContext(value, descriptor)
    try:
        result = routine(value, context)
    except Exception as e:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.run_custom_check: Routine for {expected} raised {e!r}; discarding {len(context.reasons)} recorded reason(s).", exc_info=True)
        return Failure(subject, expected, (Failure(subject, expected, message=str(e)),))

    if context.reasons:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.run_custom_check: Routine for {expected} recorded {len(context.reasons)} reason(s).")
        return Failure(subject, expected, context.reasons)
    if result is False:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.run_custom_check: Routine for {expected} returned False.")
        return Failure(subject, expected)
    return None

## ===== DISPATCH ===== ##
def attempt(value: Any, expected_type: Any) -> Optional[Failure]:
    """Check ``value`` against ``expected_type``.

    Resolution order, first match wins:
    1. ``undefined`` always passes; ``None`` passes unless the type is ``void``.
    2. A custom routine registered for the type.
    3. The descriptor's own check (primitive kinds, interfaces, composites).
    4. ``isinstance`` for plain classes. ``bool`` values do not satisfy ``int``.

    Returns:
        None if the value conforms, otherwise the Failure explaining why.

    Raises:
        TypeError: If ``expected_type`` is not a type descriptor.
    """
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE type_utils.attempt: Entering with value={value!r}, expected_type={expected_type!r}")

    if not is_descriptor(expected_type):
        raise TypeError(f"{expected_type!r} is not a type descriptor")

    if value is UNDEFINED or (value is None and expected_type is not void):
        return None

    routine = get_custom_check(expected_type)
    if routine is not None:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE type_utils.attempt: Dispatching to custom check for {type_name(expected_type)}")
        return run_custom_check(expected_type, routine, value)

    if isinstance(expected_type, TypeDescriptor):
        return expected_type.attempt(value)

    if expected_type is int and isinstance(value, bool):
        return Failure(render_value(value), expected_type.__name__)
    if isinstance(value, expected_type):
        return None
    return Failure(render_value(value), expected_type.__name__)

def check_type(value: Any, expected_type: Any) -> Tuple[bool, Optional[Failure]]:
    """Non-raising check.

    Returns:
        Tuple[bool, Optional[Failure]]: (True, None) if match,
                                        (False, failure) if mismatch.
    """
    failure = attempt(value, expected_type)
    return failure is None, failure

## ===== COMBINATORS ===== ##
def array_of(*element_types: Any) -> ArrayOf:
    """Descriptor for a list or tuple whose items are each one of ``element_types``."""
    if not element_types:
        raise TypeError("array_of() requires at least one element type")
    for element_type in element_types:
        if not is_descriptor(element_type):
            raise TypeError(f"{element_type!r} is not a type descriptor")
    return ArrayOf(element_types)

def structure(fields: Mapping) -> Structure:
    """Descriptor for an object whose named properties have the given types."""
    if not isinstance(fields, Mapping):
        raise TypeError(f"structure() expects a mapping of property names to types, got {fields!r}")
    for field_name, field_type in fields.items():
        if not isinstance(field_name, str):
            raise TypeError(f"Property names must be strings, got {field_name!r}")
        if not is_descriptor(field_type):
            raise TypeError(f"{field_type!r} is not a type descriptor")
    return Structure(fields)

# ===== PRIMITIVE MARKERS ===== #
string: Final[Kind] = Kind(STRING_NAME, lambda value: isinstance(value, str))
number: Final[Kind] = Kind(NUMBER_NAME, _is_number)
boolean: Final[Kind] = Kind(BOOLEAN_NAME, lambda value: isinstance(value, bool))
# Only undefined satisfies void, and attempt() passes it before reaching here
void: Final[Kind] = Kind(VOID_NAME, lambda value: value is UNDEFINED)

Array: Final[Kind] = Kind(ARRAY_NAME, lambda value: isinstance(value, (list, tuple)))
Object: Final[Kind] = Kind(OBJECT_NAME, _is_object)

# ===== PUBLIC API EXPORTS ===== #
__all__: Final[List[str]] = [
    'TypeDescriptor', 'Kind', 'Interface', 'Composite', 'ArrayOf', 'Structure',
    'CheckContext',
    'attempt',
    'check_type',
    'run_custom_check',
    'type_name',
    'is_descriptor',
    'array_of',
    'structure',
    'string', 'number', 'boolean', 'void', 'Array', 'Object',
]

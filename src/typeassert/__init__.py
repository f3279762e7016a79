# ===== MODULE DOCSTRING ===== #
"""
typeassert: runtime type assertions with readable, nested diagnostics.

    from typeassert import assert_type, define, array_of, string, number

    Titles = define('ListOfTitles', lambda value, check: check.is_(value, array_of(string, number)))
    assert_type(['one', 55, 'two'], Titles)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List

## ===== LOCAL ===== ##
from .assertions import assert_type, argument_types, return_type, define
from .error_utils import (
    UNDEFINED, Failure, TypeAssertionError,
    render_value, format_failure, format_reasons
)
from .logging import logger, set_verbosity
from .registry import get_custom_check, clear_custom_checks
from .type_utils import (
    TypeDescriptor, Interface, CheckContext,
    attempt, check_type, type_name,
    array_of, structure,
    string, number, boolean, void, Array, Object
)

# ===== GLOBALS ===== #
__version__: Final[str] = '0.1.0'

undefined = UNDEFINED

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'assert_type', 'argument_types', 'return_type', 'define',
    'array_of', 'structure',
    'string', 'number', 'boolean', 'void', 'Array', 'Object',
    'undefined',
    'attempt', 'check_type', 'type_name', 'render_value',
    'format_failure', 'format_reasons',
    'Failure', 'TypeAssertionError', 'TypeDescriptor', 'Interface', 'CheckContext',
    'get_custom_check', 'clear_custom_checks',
    'logger', 'set_verbosity',
]

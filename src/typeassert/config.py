# ===== MODULE DOCSTRING ===== #
"""
Configuration constants for typeassert.

Message templates, reason-tree layout and naming constants shared by the
dispatcher, the formatter and the public entry points.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, Dict, List

# ===== GLOBALS ===== #

## ===== LOGGING ===== ##
LOGGER_NAME: Final[str] = 'typeassert'

## ===== REASON TREE LAYOUT ===== ##
# Each nesting level adds one indent; depth 1 is "  - reason"
REASON_INDENT: Final[str] = '  '
REASON_BULLET: Final[str] = '- '

## ===== MESSAGE TEMPLATES ===== ##
TYPE_HEADLINE: Final[str] = 'Expected an instance of {expected}, got {subject}!'
RETURN_HEADLINE: Final[str] = 'Expected to return an instance of {expected}, got {subject}!'
ARGUMENTS_HEADLINE: Final[str] = 'Invalid arguments given!'
ARGUMENT_REASON: Final[str] = '{ordinal} argument has to be an instance of {expected}, got {subject}'
MISMATCH_REASON: Final[str] = '{subject} is not instance of {expected}'

## ===== DESCRIPTOR NAMES ===== ##
STRING_NAME: Final[str] = 'string'
NUMBER_NAME: Final[str] = 'number'
BOOLEAN_NAME: Final[str] = 'boolean'
VOID_NAME: Final[str] = 'voidType'
ARRAY_NAME: Final[str] = 'Array'
OBJECT_NAME: Final[str] = 'Object'
UNDEFINED_NAME: Final[str] = 'undefined'

ARRAY_OF_PREFIX: Final[str] = 'array of '
ARRAY_OF_SEPARATOR: Final[str] = '/'
STRUCTURE_PREFIX: Final[str] = 'object with properties '
STRUCTURE_SEPARATOR: Final[str] = ', '

## ===== ORDINALS ===== ##
ORDINAL_SUFFIXES: Final[Dict[int, str]] = {1: 'st', 2: 'nd', 3: 'rd'}
ORDINAL_DEFAULT_SUFFIX: Final[str] = 'th'
# 11th, 12th, 13th ignore the last digit
ORDINAL_TEENS: Final[range] = range(11, 14)

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'LOGGER_NAME',
    'REASON_INDENT', 'REASON_BULLET',
    'TYPE_HEADLINE', 'RETURN_HEADLINE', 'ARGUMENTS_HEADLINE',
    'ARGUMENT_REASON', 'MISMATCH_REASON',
    'STRING_NAME', 'NUMBER_NAME', 'BOOLEAN_NAME', 'VOID_NAME',
    'ARRAY_NAME', 'OBJECT_NAME', 'UNDEFINED_NAME',
    'ARRAY_OF_PREFIX', 'ARRAY_OF_SEPARATOR',
    'STRUCTURE_PREFIX', 'STRUCTURE_SEPARATOR',
    'ORDINAL_SUFFIXES', 'ORDINAL_DEFAULT_SUFFIX', 'ORDINAL_TEENS',
]

import dataclasses
import logging

import pytest

from typeassert import assert_type, define, string, array_of, undefined
from typeassert.error_utils import (
    UNDEFINED, Failure, TypeAssertionError,
    render_value, format_reasons, format_failure, ordinal
)
from typeassert.logging import logger, set_verbosity


class Point:
    pass

def helper():
    pass

@dataclasses.dataclass
class Pair:
    left: int
    right: str


# ===== VALUE RENDERING ===== #
@pytest.mark.parametrize("value, expected", [
    ('abc', '"abc"'),
    ('', '""'),
    ('say "hi"', '"say "hi""'),
    (12345, '12345'),
    (1.5, '1.5'),
    (True, 'True'),
    (False, 'False'),
    (None, 'None'),
    (UNDEFINED, 'undefined'),
    ([], '[]'),
    (['aaa', True], '["aaa", True]'),
    (('a', 1), '["a", 1]'),
    ([[1], ['x']], '[[1], ["x"]]'),
    ({}, '{}'),
    ({'name': 'Vojta', 'age': 28}, '{name: "Vojta", age: 28}'),
    ({1: 'one'}, '{1: "one"}'),
    ({'tags': ['a']}, '{tags: ["a"]}'),
    (Pair(1, 'b'), '{left: 1, right: "b"}'),
    (Point, 'Point'),
    (helper, 'helper'),
    (len, 'len'),
    (string, 'string'),
    (array_of(string), 'array of string'),
])
def test_render_value(value, expected):
    assert render_value(value) == expected

def test_render_value_falls_back_to_repr():
    point = Point()
    assert render_value(point) == repr(point)


# ===== UNDEFINED ===== #
def test_undefined_is_a_falsy_singleton():
    assert undefined is UNDEFINED
    assert type(UNDEFINED)() is UNDEFINED
    assert not UNDEFINED
    assert UNDEFINED is not None


# ===== ORDINALS ===== #
@pytest.mark.parametrize("position, expected", [
    (1, '1st'), (2, '2nd'), (3, '3rd'), (4, '4th'), (10, '10th'),
    (11, '11th'), (12, '12th'), (13, '13th'),
    (21, '21st'), (22, '22nd'), (23, '23rd'), (101, '101st'), (111, '111th'),
])
def test_ordinal(position, expected):
    assert ordinal(position) == expected


# ===== FAILURE TREE ===== #
class TestFailure:

    def test_describe_uses_message_when_present(self):
        assert Failure('1', 'T', message='too small').describe() == 'too small'

    def test_describe_defaults_to_mismatch(self):
        assert Failure('1', 'T').describe() == '1 is not instance of T'

    def test_failure_is_immutable(self):
        failure = Failure('1', 'T')
        with pytest.raises(dataclasses.FrozenInstanceError):
            failure.subject = '2'

    def test_format_reasons_indents_two_spaces_per_level(self):
        tree = (
            Failure('a', 'A', (
                Failure('b', 'B', (Failure('c', 'C'),)),
                Failure('d', 'D', message='plain'),
            )),
            Failure('e', 'E'),
        )
        assert format_reasons(tree) == ('  - a is not instance of A\n'
                                        '    - b is not instance of B\n'
                                        '      - c is not instance of C\n'
                                        '    - plain\n'
                                        '  - e is not instance of E')

    def test_format_failure_without_reasons_is_just_the_headline(self):
        assert format_failure('Headline!', Failure('1', 'T')) == 'Headline!'
        assert format_failure('Headline!', None) == 'Headline!'

    def test_format_failure_appends_reasons(self):
        failure = Failure('1', 'T', (Failure('1', 'T', message='why'),))
        assert format_failure('Headline!', failure) == 'Headline!\n  - why'

    def test_type_assertion_error_defaults(self):
        error = TypeAssertionError('boom')
        assert str(error) == 'boom'
        assert error.failure is None
        assert error.cause == 'unknown'


# ===== LOGGING ===== #
class TestLogging:

    def test_logger_defaults(self):
        assert logger.name == 'typeassert'
        assert logger.handlers

    def test_set_verbosity(self):
        set_verbosity(logging.DEBUG)
        assert logger.level == logging.DEBUG
        set_verbosity(logging.ERROR)
        assert logger.level == logging.ERROR

    def test_set_verbosity_rejects_invalid_levels(self):
        with pytest.raises(ValueError):
            set_verbosity(5)

    def test_debug_tracing_does_not_change_results(self, caplog):
        set_verbosity(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger='typeassert'):
            with pytest.raises(TypeAssertionError):
                assert_type(['x', 1], array_of(string))
        assert any('TRACE type_utils.attempt' in record.getMessage() for record in caplog.records)

    def test_debug_traces_registry_routines_and_raised_errors(self, caplog):
        def routine(value, check):
            raise RuntimeError('nope')

        set_verbosity(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger='typeassert'):
            Broken = define('Broken', routine)
            define(Broken, routine)
            with pytest.raises(TypeAssertionError):
                assert_type(1, Broken)
        messages = [record.getMessage() for record in caplog.records]
        assert any('Registered custom check' in message for message in messages)
        assert any('Replaced custom check' in message for message in messages)
        assert any('TRACE type_utils.run_custom_check' in message and 'nope' in message for message in messages)
        assert any('TRACE assertions._raise_type_error' in message for message in messages)

"""
Tests for negation.core and negation.constraints.
"""

import copy
import pickle

import pytest

from negation import (
    Check,
    NamedCheck,
    NegationError,
    must_not,
    not_duplicate,
    not_empty,
    not_greater_than,
    not_less_than,
    not_longer_than,
    not_negative,
    not_null,
    not_shorter_than,
    to_constraint,
)


def passes(constraint, value) -> bool:
    try:
        constraint.fn(value, ())
    except NegationError:
        return False
    return True


class TestNegationError:
    def test_fields(self):
        err = NegationError(["name"], "String must not be empty", "notEmpty")
        assert err.path == ("name",)
        assert err.message == "String must not be empty"
        assert err.constraint == "notEmpty"
        assert str(err) == "String must not be empty"
        assert err.dotted_path == "name"

    def test_immutable(self):
        err = NegationError((), "msg", "c")
        with pytest.raises(AttributeError):
            err.message = "other"
        with pytest.raises(AttributeError):
            del err.path

    def test_equality(self):
        assert NegationError(("a",), "m", "c") == NegationError(["a"], "m", "c")
        assert NegationError(("a",), "m", "c") != NegationError(("b",), "m", "c")
        assert len({NegationError((), "m", "c"), NegationError((), "m", "c")}) == 1

    def test_pickle_and_deepcopy(self):
        err = NegationError(("id",), "Number must not be negative", "notNegative")
        restored = pickle.loads(pickle.dumps(err))
        assert restored == err
        assert restored.path == ("id",)
        assert restored.constraint == "notNegative"

        errors = (err, NegationError((), "String must not be empty", "notEmpty"))
        assert copy.deepcopy(errors) == errors
        assert copy.copy(err) == err

    def test_to_dict(self):
        err = NegationError(("id",), "Number must not be negative", "notNegative")
        assert err.to_dict() == {
            "path": ["id"],
            "message": "Number must not be negative",
            "constraint": "notNegative",
        }


class TestToConstraint:
    def test_passthrough(self):
        assert to_constraint(not_null) is not_null

    def test_plain_function(self):
        def positive(value, path):
            if value <= 0:
                raise NegationError(path, "Must be positive", "positive")

        c = to_constraint(positive)
        assert isinstance(c, Check)
        assert c.is_async is False
        assert c.identifier == "positive"

    def test_async_function_is_tagged_without_calling(self):
        calls = []

        async def remote(value, path):
            calls.append(value)

        c = to_constraint(remote)
        assert c.is_async is True
        assert calls == []

    def test_invalid(self):
        with pytest.raises(TypeError):
            to_constraint(42)


class TestMustNot:
    def test_sync_predicate(self):
        not_odd = must_not(lambda x: x % 2, "Number must not be odd", "notOdd")
        assert isinstance(not_odd, NamedCheck)
        assert not_odd.identifier == "notOdd"
        assert passes(not_odd, 4)
        assert not passes(not_odd, 3)

    def test_path_is_carried(self):
        not_odd = must_not(lambda x: x % 2, "Number must not be odd", "notOdd")
        with pytest.raises(NegationError) as exc:
            not_odd.fn(3, ("count",))
        assert exc.value.path == ("count",)

    def test_async_predicate(self):
        async def taken(x):
            return x == "admin"

        c = must_not(taken, "taken", "notTaken")
        assert c.is_async is True


class TestBuiltins:
    def test_identifiers(self):
        assert not_null.constraint == "notNull"
        assert not_empty.constraint == "notEmpty"
        assert not_negative.constraint == "notNegative"
        assert not_longer_than(1).constraint == "notLongerThan"
        assert not_shorter_than(1).constraint == "notShorterThan"
        assert not_greater_than(1).constraint == "notGreaterThan"
        assert not_less_than(1).constraint == "notLessThan"
        assert not_duplicate(lambda _: False).constraint == "notDuplicate"

    def test_not_null(self):
        assert passes(not_null, 0)
        assert passes(not_null, "")
        assert not passes(not_null, None)

    def test_not_empty(self):
        assert passes(not_empty, "hello")
        assert not passes(not_empty, "")
        assert not passes(not_empty, "   \t\n")

    def test_not_negative(self):
        assert passes(not_negative, 0)
        assert passes(not_negative, 3.5)
        assert not passes(not_negative, -1)

    def test_not_longer_than_boundary(self):
        assert passes(not_longer_than(0), "")
        assert not passes(not_longer_than(0), "a")
        assert passes(not_longer_than(3), "abc")
        assert not passes(not_longer_than(3), "abcd")

    def test_not_shorter_than(self):
        assert passes(not_shorter_than(2), "ab")
        assert not passes(not_shorter_than(2), "a")

    def test_not_greater_than(self):
        assert passes(not_greater_than(10), 10)
        assert not passes(not_greater_than(10), 11)

    def test_not_less_than(self):
        assert passes(not_less_than(1), 1)
        assert not passes(not_less_than(1), 0)

    def test_messages(self):
        with pytest.raises(NegationError) as exc:
            not_longer_than(5).fn("too long", ())
        assert exc.value.message == "String must not be longer than 5 characters"

        with pytest.raises(NegationError) as exc:
            not_less_than(18).fn(3, ())
        assert exc.value.message == "Number must not be less than 18"

    def test_factories_return_independent_constraints(self):
        short = not_longer_than(2)
        long = not_longer_than(10)
        assert short is not long
        assert not passes(short, "hello")
        assert passes(long, "hello")

    def test_constraints_are_frozen(self):
        with pytest.raises(AttributeError):
            not_null.constraint = "other"

    def test_not_duplicate_is_async(self):
        assert not_duplicate(lambda _: True).is_async is True

"""Tests for the tri-state Optional wrapper."""

import pytest

from discord_core.core.discord.optional import Optional, OptionalField
from discord_core.core.exceptions import UnspecifiedValueError


class TestOptional:
    def test_unspecified(self):
        opt = Optional.UNSPECIFIED
        assert opt.is_specified is False
        assert opt.get_value_or_default() is None
        assert opt.get_value_or_default(5) == 5

    def test_unspecified_value_raises(self):
        with pytest.raises(UnspecifiedValueError, match="no value set"):
            Optional.UNSPECIFIED.value

    def test_specified(self):
        opt = Optional(3)
        assert opt.is_specified is True
        assert opt.value == 3
        assert opt.get_value_or_default(5) == 3

    def test_specified_none_is_distinct_from_unspecified(self):
        opt = Optional(None)
        assert opt.is_specified is True
        assert opt.value is None
        assert opt != Optional.UNSPECIFIED

    def test_equality(self):
        assert Optional(1) == Optional(1)
        assert Optional(1) != Optional(2)
        assert Optional() == Optional.UNSPECIFIED
        assert hash(Optional("a")) == hash(Optional("a"))
        assert hash(Optional()) == hash(Optional.UNSPECIFIED)

    def test_repr(self):
        assert repr(Optional.UNSPECIFIED) == "Optional.UNSPECIFIED"
        assert repr(Optional("x")) == "Optional('x')"


class _Patch:
    flag: OptionalField[bool] = OptionalField()


class TestOptionalField:
    def test_default_unspecified(self):
        assert _Patch().flag is Optional.UNSPECIFIED

    def test_assign_raw_value_wraps(self):
        patch = _Patch()
        patch.flag = True
        assert patch.flag == Optional(True)

    def test_assign_optional_kept(self):
        patch = _Patch()
        patch.flag = Optional.UNSPECIFIED
        assert patch.flag.is_specified is False

    def test_delete_resets(self):
        patch = _Patch()
        patch.flag = False
        del patch.flag
        assert patch.flag.is_specified is False

    def test_instances_independent(self):
        a, b = _Patch(), _Patch()
        a.flag = True
        assert b.flag.is_specified is False

    def test_class_access_returns_descriptor(self):
        assert isinstance(_Patch.flag, OptionalField)


class TestModuleExports:
    def test_does_not_replace_typing_optional(self):
        import typing

        from discord_core.core.discord import optional

        assert optional.__all__ == ("Optional", "OptionalField")
        assert optional.Optional is not typing.Optional

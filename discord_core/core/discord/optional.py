"""Tri-state optional values for partial-update payloads.

A field in a patch request is either *unspecified* (leave unchanged) or
*specified* with a value, and that value may itself be ``None``.  ``None``
alone cannot carry that distinction, so patch structs wrap each field in an
:class:`Optional`.

The name follows the tri-state type of other Discord SDKs and shadows
``typing.Optional``; import it by module path rather than mixing the two.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, overload

from discord_core.core.exceptions import UnspecifiedValueError

__all__ = ("Optional", "OptionalField")

T = TypeVar("T")

_UNSPECIFIED_MARKER: Any = object()


class Optional(Generic[T]):
    """Immutable wrapper recording whether a value was supplied."""

    __slots__ = ("_value", "_is_specified")

    def __init__(self, value: T = _UNSPECIFIED_MARKER) -> None:
        self._is_specified = value is not _UNSPECIFIED_MARKER
        self._value = value if self._is_specified else None

    @property
    def is_specified(self) -> bool:
        return self._is_specified

    @property
    def value(self) -> T:
        if not self._is_specified:
            raise UnspecifiedValueError("This property has no value set.")
        return self._value  # type: ignore[return-value]

    def get_value_or_default(self, default: Any = None) -> Any:
        return self._value if self._is_specified else default

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            if not self._is_specified or not other._is_specified:
                return self._is_specified == other._is_specified
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        if not self._is_specified:
            return hash(Optional)
        return hash((Optional, self._value))

    def __repr__(self) -> str:
        if not self._is_specified:
            return "Optional.UNSPECIFIED"
        return f"Optional({self._value!r})"

    UNSPECIFIED: Optional[Any]


Optional.UNSPECIFIED = Optional()


class OptionalField(Generic[T]):
    """Descriptor declaring a tri-state field on a patch struct.

    Reading yields an :class:`Optional`.  Assigning a plain value wraps it;
    assigning an ``Optional`` stores it unchanged; ``del`` resets the field
    to unspecified.
    """

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._attr = f"_{name}"

    @overload
    def __get__(self, instance: None, owner: type) -> OptionalField[T]: ...

    @overload
    def __get__(self, instance: object, owner: type) -> Optional[T]: ...

    def __get__(self, instance: object | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self._attr, Optional.UNSPECIFIED)

    def __set__(self, instance: object, value: T | Optional[T]) -> None:
        if not isinstance(value, Optional):
            value = Optional(value)
        instance.__dict__[self._attr] = value

    def __delete__(self, instance: object) -> None:
        instance.__dict__.pop(self._attr, None)

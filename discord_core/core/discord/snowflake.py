"""Discord Snowflake type - wraps a 64-bit integer with timestamp extraction."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import total_ordering
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

# Discord epoch: 2015-01-01T00:00:00Z in milliseconds
_DISCORD_EPOCH_MS = 1420070400000


@total_ordering
class Snowflake:
    """Immutable, hashable Discord snowflake ID."""

    __slots__ = ("_value",)

    MAX_VALUE = 2**64 - 1

    def __init__(self, value: int) -> None:
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def to_date(self) -> datetime:
        """Extract the creation timestamp from this snowflake."""
        ms = (self._value >> 22) + _DISCORD_EPOCH_MS
        return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)

    @classmethod
    def from_date(cls, dt: datetime) -> Snowflake:
        """Create a snowflake from a datetime (for range queries)."""
        ms = int(dt.timestamp() * 1000) - _DISCORD_EPOCH_MS
        return cls(ms << 22)

    @classmethod
    def try_parse_digits(cls, value: str | None) -> Snowflake | None:
        """Parse a bare run of ASCII digits that fits in 64 unsigned bits.

        Unlike ``int()``, signs, whitespace, underscores and non-ASCII digits
        are all rejected.
        """
        if not value or not value.isascii() or not value.isdigit():
            return None
        # Leading zeros are allowed; more than 20 significant digits cannot fit.
        digits = value.lstrip("0") or "0"
        if len(digits) > 20:
            return None
        number = int(digits)
        if number > cls.MAX_VALUE:
            return None
        return cls(number)

    @classmethod
    def try_parse(cls, value: str | None) -> Snowflake | None:
        """Try to parse a string as a snowflake (number or ISO date)."""
        if not value or not value.strip():
            return None

        # Try as integer
        result = cls.try_parse_digits(value.strip())
        if result is not None:
            return result

        # Try as ISO date
        try:
            dt = datetime.fromisoformat(value)
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            return cls.from_date(dt)
        except ValueError:
            pass

        return None

    @classmethod
    def parse(cls, value: str) -> Snowflake:
        """Parse a string as a snowflake, raising on failure."""
        result = cls.try_parse(value)
        if result is None:
            raise ValueError(f"Invalid snowflake: {value!r}")
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Snowflake):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Snowflake({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v._value, info_arg=False
            ),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> Snowflake:
        if isinstance(value, Snowflake):
            result = value
        elif isinstance(value, bool):
            raise ValueError("Cannot convert bool to Snowflake")
        elif isinstance(value, int):
            result = cls(value)
        elif isinstance(value, str):
            parsed = cls.try_parse_digits(value)
            if parsed is None:
                raise ValueError(f"Invalid snowflake: {value!r}")
            result = parsed
        else:
            raise ValueError(f"Cannot convert {type(value)} to Snowflake")

        if not 0 <= result._value <= cls.MAX_VALUE:
            raise ValueError(f"Snowflake out of range: {result._value}")
        return result

    ZERO: Snowflake


Snowflake.ZERO = Snowflake(0)

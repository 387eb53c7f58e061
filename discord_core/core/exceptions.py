"""Custom exceptions for discord-core."""

from __future__ import annotations


class DiscordCoreError(Exception):
    """Base exception for all discord-core errors.

    Attributes:
        is_fatal: If True, the error is unrecoverable and the caller should
                  not retry with the same input.
    """

    def __init__(
        self,
        message: str,
        is_fatal: bool = False,
        *args: object,
    ) -> None:
        super().__init__(message, *args)
        self.is_fatal = is_fatal


class InvalidEmoteFormatError(DiscordCoreError, ValueError):
    """Raised when text is not a valid emote token such as ``<:name:id>``."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid emote format: {text!r}")
        self.text = text


class UnspecifiedValueError(DiscordCoreError, ValueError):
    """Raised when reading the value of an unspecified ``Optional``."""


class InvalidArgumentError(DiscordCoreError, ValueError):
    """Raised when a request payload cannot be built from the given properties."""

"""Properties used to modify a guild member."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from discord_core.core.discord.models.channel import Channel
from discord_core.core.discord.models.role import Role
from discord_core.core.discord.optional import OptionalField
from discord_core.core.discord.snowflake import Snowflake
from discord_core.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class GuildMemberProperties:
    """Partial update for a guild member.

    Every field starts unspecified and is left unchanged by the update.
    Assigning a field, even to ``None``, marks it as specified::

        props = GuildMemberProperties(nickname="festive")
        props.mute = True
        props.to_payload()  # {"mute": True, "nick": "festive"}

    ``roles`` takes precedence over ``role_ids`` and ``channel`` over
    ``channel_id`` when both are given.  Setting ``nickname`` to ``None`` or
    ``""`` clears the nickname.  Moving a member with ``channel`` or
    ``channel_id`` only works while the member is already connected to voice.
    """

    mute: OptionalField[bool] = OptionalField()
    deaf: OptionalField[bool] = OptionalField()
    nickname: OptionalField[str | None] = OptionalField()
    roles: OptionalField[Iterable[Role]] = OptionalField()
    role_ids: OptionalField[Iterable[Snowflake]] = OptionalField()
    channel: OptionalField[Channel | None] = OptionalField()
    channel_id: OptionalField[Snowflake | None] = OptionalField()

    _FIELDS = ("mute", "deaf", "nickname", "roles", "role_ids", "channel", "channel_id")

    def __init__(self, **fields: Any) -> None:
        unknown = set(fields) - set(self._FIELDS)
        if unknown:
            raise TypeError(f"Unknown member properties: {', '.join(sorted(unknown))}")
        for name, value in fields.items():
            setattr(self, name, value)

    @classmethod
    def from_builder(
        cls, func: Callable[[GuildMemberProperties], None]
    ) -> GuildMemberProperties:
        """Create an empty instance and let *func* fill it in."""
        props = cls()
        func(props)
        return props

    def specified_fields(self) -> list[str]:
        return [name for name in self._FIELDS if getattr(self, name).is_specified]

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body of a modify-guild-member request."""
        payload: dict[str, Any] = {}

        if self.mute.is_specified:
            payload["mute"] = bool(self.mute.value)
        if self.deaf.is_specified:
            payload["deaf"] = bool(self.deaf.value)
        if self.nickname.is_specified:
            payload["nick"] = self.nickname.value or ""

        if self.roles.is_specified:
            payload["roles"] = [str(role.id) for role in self.roles.value or ()]
        elif self.role_ids.is_specified:
            payload["roles"] = [str(rid) for rid in self.role_ids.value or ()]

        if self.channel.is_specified:
            channel = self.channel.value
            if channel is not None and not channel.is_voice:
                raise InvalidArgumentError(
                    f"Channel {channel.id} ({channel.kind.name}) is not a voice channel."
                )
            payload["channel_id"] = str(channel.id) if channel is not None else None
        elif self.channel_id.is_specified:
            channel_id = self.channel_id.value
            payload["channel_id"] = str(channel_id) if channel_id is not None else None

        logger.debug("Built member payload with fields: %s", ", ".join(payload) or "<none>")
        return payload

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name).value!r}" for name in self.specified_fields())
        return f"GuildMemberProperties({parts})"

"""Channel model and ChannelKind enum."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, model_validator

from discord_core.core.discord.snowflake import Snowflake


class ChannelKind(IntEnum):
    GUILD_TEXT_CHAT = 0
    DIRECT_TEXT_CHAT = 1
    GUILD_VOICE_CHAT = 2
    DIRECT_GROUP_TEXT_CHAT = 3
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_NEWS_THREAD = 10
    GUILD_PUBLIC_THREAD = 11
    GUILD_PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15


class Channel(BaseModel):
    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    id: Snowflake
    kind: ChannelKind
    guild_id: Snowflake = Snowflake.ZERO
    name: str
    position: int | None = None

    @property
    def is_voice(self) -> bool:
        """Whether members can be moved into this channel."""
        return self.kind in (ChannelKind.GUILD_VOICE_CHAT, ChannelKind.GUILD_STAGE_VOICE)

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if "kind" in data:
            return data

        cid = Snowflake.parse(str(data["id"]))
        guild_id = (
            Snowflake.parse(str(data["guild_id"]))
            if data.get("guild_id")
            else Snowflake.ZERO
        )
        return {
            "id": cid,
            "kind": ChannelKind(data["type"]),
            "guild_id": guild_id,
            "name": data.get("name") or str(cid),
            "position": data.get("position"),
        }

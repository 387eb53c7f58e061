"""Custom emote model and its ``<a:name:id>`` token format."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, model_validator

from discord_core.core.discord.models.cdn import ImageCdn
from discord_core.core.discord.snowflake import Snowflake
from discord_core.core.exceptions import InvalidEmoteFormatError


class Emote(BaseModel):
    """A custom image-based emote.

    Two emotes are equal when their ``id`` and ``name`` match.  ``animated``
    only affects rendering and the CDN URL, not equality or hashing.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    id: Snowflake
    name: str
    animated: bool = False

    @property
    def created_at(self) -> datetime:
        return self.id.to_date()

    @property
    def url(self) -> str:
        return ImageCdn.get_custom_emoji_url(self.id, self.animated)

    @classmethod
    def try_parse(cls, text: str | None) -> Emote | None:
        """Parse a raw token such as ``<:dab:277855270321782784>``.

        Returns ``None`` when *text* is not a valid token.  Names may not
        contain ``:``; the first ``:`` after the name start ends the name.
        """
        if not isinstance(text, str) or len(text) < 4:
            return None
        if text[0] != "<" or text[-1] != ">":
            return None

        if text[1] == ":":
            animated = False
        elif text[1] == "a" and text[2] == ":":
            animated = True
        else:
            return None
        start = 3 if animated else 2

        split = text.find(":", start)
        if split == -1:
            return None

        eid = Snowflake.try_parse_digits(text[split + 1 : -1])
        if eid is None:
            return None

        return cls(id=eid, name=text[start:split], animated=animated)

    @classmethod
    def parse(cls, text: str) -> Emote:
        """Parse a raw token, raising ``InvalidEmoteFormatError`` on failure."""
        result = cls.try_parse(text)
        if result is None:
            raise InvalidEmoteFormatError(text)
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Emote):
            return self.name == other.name and self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.name, self.id))

    def __str__(self) -> str:
        prefix = "a" if self.animated else ""
        return f"<{prefix}:{self.name}:{self.id}>"

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if not isinstance(data, dict) or isinstance(data.get("id"), Snowflake):
            return data

        animated = data.get("animated")
        return {
            "id": data.get("id"),
            "name": data.get("name"),
            "animated": False if animated is None else animated,
        }

"""Role model."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from discord_core.core.discord.snowflake import Snowflake


class Role(BaseModel):
    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    id: Snowflake
    name: str
    position: int = 0
    color: str | None = None  # Hex string like "#ff0000" or None

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if not isinstance(data, dict) or isinstance(data.get("id"), Snowflake):
            return data

        # API payloads carry the color as an int, 0 meaning "no color".
        color = data.get("color")
        if isinstance(color, int) and not isinstance(color, bool):
            color = f"#{color:06x}" if color > 0 else None

        return {
            "id": data.get("id"),
            "name": data.get("name"),
            "position": data.get("position", 0),
            "color": color,
        }

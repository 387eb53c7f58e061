"""Discord CDN URL helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discord_core.core.discord.snowflake import Snowflake

CDN_URL = "https://cdn.discordapp.com/"


class ImageCdn:
    """Static helper for building Discord CDN image URLs."""

    @staticmethod
    def get_custom_emoji_url(emoji_id: Snowflake, is_animated: bool = False) -> str:
        ext = "gif" if is_animated else "png"
        return f"{CDN_URL}emojis/{emoji_id}.{ext}"

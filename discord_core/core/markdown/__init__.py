"""Discord markdown helpers."""

from discord_core.core.markdown.parser import extract_emotes

__all__ = ["extract_emotes"]

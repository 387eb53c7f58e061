"""Discord data models."""

from discord_core.core.discord.models.cdn import ImageCdn
from discord_core.core.discord.models.channel import Channel, ChannelKind
from discord_core.core.discord.models.emote import Emote
from discord_core.core.discord.models.guild_member_properties import GuildMemberProperties
from discord_core.core.discord.models.role import Role

__all__ = [
    "Channel",
    "ChannelKind",
    "Emote",
    "GuildMemberProperties",
    "ImageCdn",
    "Role",
]

"""Unit tests for the supporting Discord model classes."""

import pytest
from pydantic import ValidationError

from discord_core.core.discord.models.cdn import ImageCdn
from discord_core.core.discord.models.channel import Channel, ChannelKind
from discord_core.core.discord.models.role import Role
from discord_core.core.discord.snowflake import Snowflake


class TestImageCdn:
    def test_custom_emoji_url_static(self):
        url = ImageCdn.get_custom_emoji_url(Snowflake(999), is_animated=False)
        assert url == "https://cdn.discordapp.com/emojis/999.png"

    def test_custom_emoji_url_animated(self):
        url = ImageCdn.get_custom_emoji_url(Snowflake(999), is_animated=True)
        assert url == "https://cdn.discordapp.com/emojis/999.gif"


class TestRole:
    def test_direct_construction(self):
        role = Role(id=Snowflake(1), name="Admin", position=3, color="#ff0000")
        assert role.name == "Admin"
        assert role.position == 3

    def test_from_api_dict(self):
        role = Role.model_validate({"id": "42", "name": "Mod", "position": 2, "color": 0xFF0000})
        assert role.id == Snowflake(42)
        assert role.color == "#ff0000"

    def test_zero_color_is_none(self):
        role = Role.model_validate({"id": "42", "name": "Mod", "position": 2, "color": 0})
        assert role.color is None

    def test_keyword_construction_with_hex_color(self):
        role = Role(id=1, name="r", color="#ff0000")
        assert role.id == Snowflake(1)
        assert role.color == "#ff0000"

    def test_keyword_construction_without_color(self):
        assert Role(id="7", name="r").color is None

    def test_date_id_rejected(self):
        with pytest.raises(ValidationError):
            Role.model_validate({"id": "2020-01-01", "name": "r"})

    def test_frozen(self):
        role = Role(id=Snowflake(1), name="Admin")
        with pytest.raises(ValidationError):
            role.name = "Other"  # type: ignore[misc]


class TestChannel:
    def test_from_api_dict(self):
        channel = Channel.model_validate({"id": "10", "type": 2, "guild_id": "1", "name": "Lounge"})
        assert channel.kind == ChannelKind.GUILD_VOICE_CHAT
        assert channel.guild_id == Snowflake(1)
        assert channel.is_voice

    def test_from_api_dict_no_name(self):
        channel = Channel.model_validate({"id": "10", "type": 0})
        assert channel.name == "10"
        assert channel.guild_id == Snowflake.ZERO

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (ChannelKind.GUILD_VOICE_CHAT, True),
            (ChannelKind.GUILD_STAGE_VOICE, True),
            (ChannelKind.GUILD_TEXT_CHAT, False),
            (ChannelKind.GUILD_CATEGORY, False),
        ],
    )
    def test_is_voice(self, kind, expected):
        channel = Channel(id=Snowflake(1), kind=kind, name="c")
        assert channel.is_voice is expected

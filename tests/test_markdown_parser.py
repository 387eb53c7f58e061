"""Tests for emote extraction from message text."""

import logging

from discord_core.core.discord.models.emote import Emote
from discord_core.core.discord.snowflake import Snowflake
from discord_core.core.markdown.parser import extract_emotes


class TestExtractEmotes:
    def test_no_emotes(self):
        assert extract_emotes("hello world") == []

    def test_single(self):
        result = extract_emotes("nice <:dab:277855270321782784> move")
        assert result == [Emote(id=Snowflake(277855270321782784), name="dab")]

    def test_order_and_duplicates(self):
        result = extract_emotes("<a:wave:2> then <:dab:1> and <a:wave:2>")
        assert [str(e) for e in result] == ["<a:wave:2>", "<:dab:1>", "<a:wave:2>"]
        assert result[0].animated is True

    def test_adjacent_tokens(self):
        assert len(extract_emotes("<:a:1><:b:2>")) == 2

    def test_ignores_inline_code(self):
        assert extract_emotes("`<:dab:1>` and <:ok:2>") == [Emote(id=2, name="ok")]

    def test_ignores_code_block(self):
        text = "```\n<:dab:1>\n```\n<:ok:2>"
        assert extract_emotes(text) == [Emote(id=2, name="ok")]

    def test_name_with_colon_not_matched(self):
        assert extract_emotes("<:a:b:5>") == []

    def test_overflowing_id_skipped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="discord_core.core.markdown.parser"):
            result = extract_emotes("<:big:18446744073709551616> <:ok:1>")
        assert result == [Emote(id=1, name="ok")]
        assert "Skipping malformed emote token" in caplog.text

    def test_standard_emoji_text_ignored(self):
        assert extract_emotes(":smile: <b:x:1>") == []

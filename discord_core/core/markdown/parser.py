"""Regex-based extraction of custom emote tokens from message markdown.

Discord renders ``<:name:id>`` tokens as images everywhere except inside
inline code and code blocks, where they stay literal text.  Candidates are
found with a loose pattern and then confirmed with the strict
:meth:`Emote.try_parse`, so an id that overflows 64 bits is skipped rather
than mis-read.
"""

from __future__ import annotations

import logging
import re

from discord_core.core.discord.models.emote import Emote

logger = logging.getLogger(__name__)

_CUSTOM_EMOTE_PATTERN = re.compile(r"<a?:[^:<>]*:[0-9]+>")

# Longest fences first so ``` is not consumed as three single backticks.
_CODE_PATTERN = re.compile(r"```.+?```|``.+?``|`[^`]+?`", re.DOTALL)


def _code_spans(markdown: str) -> list[tuple[int, int]]:
    return [(m.start(), m.end()) for m in _CODE_PATTERN.finditer(markdown)]


def _is_in_code(start: int, spans: list[tuple[int, int]]) -> bool:
    return any(s <= start < e for s, e in spans)


def extract_emotes(markdown: str) -> list[Emote]:
    """Extract all custom emotes from message text, in order of appearance."""
    spans = _code_spans(markdown)
    result: list[Emote] = []

    for m in _CUSTOM_EMOTE_PATTERN.finditer(markdown):
        if _is_in_code(m.start(), spans):
            continue
        emote = Emote.try_parse(m.group(0))
        if emote is None:
            logger.debug("Skipping malformed emote token %r at %d", m.group(0), m.start())
            continue
        result.append(emote)

    return result

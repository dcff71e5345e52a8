"""
SRT subtitle parsing.

Example block::

    17
    00:01:02,335 --> 00:01:06,215
    the subtitle text, possibly
    spread over several lines

Parsing is lenient: a block without a numeric index, a valid timestamp line or
any content is dropped without raising.
"""

import logging
import re

from semantic_chunking.segmenters.base import Segmenter, units_from_subtitles
from semantic_chunking.types import SubtitleEntry, TextUnit

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r"(\d{2}:\d{2}:\d{2},\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2},\d{3})")
BLOCK_SEPARATOR = re.compile(r"\n\s*\n")
_LEADING_INT = re.compile(r"[+-]?\d+")


def _parse_index(line: str) -> int | None:
    # Leading integer prefix, so "12 " and "12a" both read as 12
    match = _LEADING_INT.match(line)
    return int(match.group(0)) if match else None


def parse_subtitles(text: str) -> list[SubtitleEntry]:
    """Parse SRT-formatted text into subtitle entries.

    Args:
        text: Raw subtitle text.

    Returns:
        Parsed entries in document order. Malformed blocks are skipped.
    """
    entries: list[SubtitleEntry] = []
    blocks = [block for block in BLOCK_SEPARATOR.split(text.lstrip("\ufeff")) if block.strip()]

    for block in blocks:
        lines = [line.strip() for line in block.split("\n")]
        lines = [line for line in lines if line]

        if len(lines) < 2:
            continue

        timestamp_match = TIMESTAMP_PATTERN.search(lines[1])
        if not timestamp_match:
            continue

        subtitle_index = _parse_index(lines[0])
        content = " ".join(lines[2:]).strip()

        if not content or subtitle_index is None:
            continue

        entries.append(
            SubtitleEntry(
                index=subtitle_index,
                start_time=timestamp_match.group(1),
                end_time=timestamp_match.group(2),
                timestamp=lines[1],
                content=content,
            )
        )

    dropped = len(blocks) - len(entries)
    if dropped:
        logger.debug(f"Dropped {dropped} malformed subtitle blocks out of {len(blocks)}")

    return entries


def is_subtitle_format(text: str) -> bool:
    """Check whether an SRT timestamp line appears anywhere in ``text``."""
    return TIMESTAMP_PATTERN.search(text) is not None


class SubtitleSegmenter(Segmenter):
    """One unit per subtitle block, carrying its index and timing."""

    name = "subtitle"

    def segment(self, text: str) -> list[TextUnit]:
        return units_from_subtitles(parse_subtitles(text))

"""Base class for segmenters that turn raw text into text units."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from semantic_chunking.types import SubtitleEntry, TextUnit


def units_from_sentences(sentences: Sequence[str]) -> list[TextUnit]:
    """Create units from plain sentence strings, indexed by position."""
    return [TextUnit(content=sentence, index=i) for i, sentence in enumerate(sentences)]


def units_from_subtitles(entries: Sequence[SubtitleEntry]) -> list[TextUnit]:
    """Create units from parsed subtitle entries, keeping their timing metadata."""
    return [
        TextUnit(content=entry.content, index=i, source_metadata=entry.to_metadata())
        for i, entry in enumerate(entries)
    ]


class Segmenter(ABC):
    """Splits a text corpus into an ordered list of text units."""

    name: str = "base"

    @abstractmethod
    def segment(self, text: str) -> list[TextUnit]:
        """Segment ``text`` into units.

        Args:
            text: Raw text corpus.

        Returns:
            Units in document order, indexed from 0.
        """
        pass

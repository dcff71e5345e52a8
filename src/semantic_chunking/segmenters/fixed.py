"""Fixed-size segmentation into overlapping, word-aligned windows.

Useful for text without reliable sentence punctuation (transcripts, OCR
output). Each window becomes one unit for the semantic engine.
"""

from semantic_chunking.segmenters.base import Segmenter, units_from_sentences
from semantic_chunking.types import TextUnit


def _validate(chunk_size: int, chunk_overlap: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer.")
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise ValueError("chunk_overlap must be >= 0 and < chunk_size.")


def split_fixed_windows(text: str, chunk_size: int = 200, chunk_overlap: int = 20) -> list[str]:
    """
    Splits text into overlapping windows by word boundaries.

    Args:
        text:          Raw input text.
        chunk_size:    Approximate number of characters per window.
        chunk_overlap: Number of characters to overlap between windows.

    Returns:
        List of window strings.

    Raises:
        ValueError: If chunk_size or chunk_overlap are invalid.
    """
    _validate(chunk_size, chunk_overlap)
    if not text or not text.strip():
        return []

    windows: list[str] = []
    current: list[str] = []
    current_len = 0
    fresh = 0  # words added since the last emitted window

    for word in text.split():
        current.append(word)
        current_len += len(word) + 1  # +1 for space
        fresh += 1

        if current_len >= chunk_size:
            windows.append(" ".join(current))
            # Carry the last `chunk_overlap` characters worth of words forward
            carried: list[str] = []
            carried_len = 0
            if chunk_overlap > 0:
                for w in reversed(current):
                    carried_len += len(w) + 1
                    carried.insert(0, w)
                    if carried_len >= chunk_overlap:
                        break
            current = carried
            current_len = sum(len(w) + 1 for w in current)
            fresh = 0

    # A tail made only of carried-over words is already covered
    if fresh:
        windows.append(" ".join(current))

    return windows


class FixedWindowSegmenter(Segmenter):
    """One unit per fixed-size window."""

    name = "fixed"

    def __init__(self, chunk_size: int = 200, chunk_overlap: int = 20) -> None:
        _validate(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def segment(self, text: str) -> list[TextUnit]:
        return units_from_sentences(split_fixed_windows(text, self.chunk_size, self.chunk_overlap))

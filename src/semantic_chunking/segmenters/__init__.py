"""Segmenters turning raw text into ordered text units.

Components:
    - SubtitleSegmenter: one unit per SRT block, with timing metadata
    - NLPSentenceSegmenter: one unit per sentence (nltk Punkt)
    - FixedWindowSegmenter: one unit per overlapping word-aligned window
    - select_segmenter: picks a variant from the detected text format
"""

from semantic_chunking.segmenters.base import Segmenter, units_from_sentences, units_from_subtitles
from semantic_chunking.segmenters.factory import detect_format, select_segmenter
from semantic_chunking.segmenters.fixed import FixedWindowSegmenter, split_fixed_windows
from semantic_chunking.segmenters.sentence import NLPSentenceSegmenter
from semantic_chunking.segmenters.subtitle import (
    SubtitleSegmenter,
    is_subtitle_format,
    parse_subtitles,
)

__all__ = [
    "FixedWindowSegmenter",
    "NLPSentenceSegmenter",
    "Segmenter",
    "SubtitleSegmenter",
    "detect_format",
    "is_subtitle_format",
    "parse_subtitles",
    "select_segmenter",
    "split_fixed_windows",
    "units_from_sentences",
    "units_from_subtitles",
]

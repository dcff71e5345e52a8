"""Segmenter selection by detected text format."""

import logging

from semantic_chunking.config import ChunkingConfig, SegmenterKind
from semantic_chunking.segmenters.base import Segmenter
from semantic_chunking.segmenters.fixed import FixedWindowSegmenter
from semantic_chunking.segmenters.sentence import NLPSentenceSegmenter
from semantic_chunking.segmenters.subtitle import SubtitleSegmenter, is_subtitle_format

logger = logging.getLogger(__name__)


def detect_format(text: str) -> SegmenterKind:
    """Return ``"subtitle"`` for SRT-formatted text, ``"sentence"`` otherwise."""
    return "subtitle" if is_subtitle_format(text) else "sentence"


def select_segmenter(
    text: str,
    kind: SegmenterKind = "auto",
    config: ChunkingConfig | None = None,
) -> Segmenter:
    """Pick the segmenter for ``text``.

    Args:
        text: The text about to be segmented; only used when ``kind`` is auto.
        kind: Segmenter variant, or ``"auto"`` to detect it from the text.
        config: Supplies the fixed window size and overlap.

    Returns:
        A segmenter instance.
    """
    config = config or ChunkingConfig()
    resolved = detect_format(text) if kind == "auto" else kind

    if resolved == "subtitle":
        segmenter: Segmenter = SubtitleSegmenter()
    elif resolved == "fixed":
        segmenter = FixedWindowSegmenter(config.fixed_chunk_size, config.fixed_chunk_overlap)
    elif resolved == "sentence":
        segmenter = NLPSentenceSegmenter()
    else:
        raise ValueError(f"Unknown segmenter kind: {kind}")

    logger.debug(f"Selected {segmenter.name} segmenter (requested {kind})")
    return segmenter

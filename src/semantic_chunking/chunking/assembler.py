"""Chunk assembly from shift indices, with short-chunk merging."""

import logging
from collections.abc import Sequence

from semantic_chunking.types import Chunk, ChunkMetadata, TextUnit, format_timestamp

logger = logging.getLogger(__name__)


def build_raw_chunks(units: Sequence[TextUnit], shift_indices: Sequence[int]) -> list[Chunk]:
    """Group units into chunks that end at each shift index.

    A final breakpoint at the last unit is always added, so every unit lands in
    exactly one chunk. Subtitle metadata is taken from the first unit (index,
    start time) and the last unit (end time).

    Args:
        units: Units in sequence order.
        shift_indices: Ascending unit positions after which a chunk ends.

    Returns:
        Chunks in sequence order.
    """
    if not units:
        return []

    chunks: list[Chunk] = []
    start_idx = 0

    for end_idx in [*shift_indices, len(units) - 1]:
        group = units[start_idx : end_idx + 1]
        if not group:
            continue

        first, last = group[0], group[-1]
        subtitle_index = start_time = end_time = None

        if first.source_metadata is not None:
            subtitle_index = first.source_metadata.subtitle_index
            start_time = first.source_metadata.start_time
        if last.source_metadata is not None:
            end_time = last.source_metadata.end_time

        chunks.append(
            Chunk(
                content=" ".join(unit.content for unit in group),
                metadata=ChunkMetadata(
                    sentence_count=len(group),
                    start_sentence_index=first.index,
                    end_sentence_index=last.index,
                    subtitle_index=subtitle_index,
                    start_time=start_time,
                    end_time=end_time,
                    timestamp=format_timestamp(start_time, end_time),
                ),
            )
        )
        start_idx = end_idx + 1

    return chunks


def merge_two_chunks(earlier: Chunk, later: Chunk) -> Chunk:
    """Merge two adjacent chunks into one."""
    start_time = earlier.metadata.start_time
    end_time = later.metadata.end_time

    return Chunk(
        content=f"{earlier.content} {later.content}",
        metadata=ChunkMetadata(
            sentence_count=earlier.metadata.sentence_count + later.metadata.sentence_count,
            start_sentence_index=earlier.metadata.start_sentence_index,
            end_sentence_index=later.metadata.end_sentence_index,
            subtitle_index=earlier.metadata.subtitle_index,
            start_time=start_time,
            end_time=end_time,
            timestamp=format_timestamp(start_time, end_time),
        ),
    )


def merge_short_chunks(chunks: Sequence[Chunk], min_sentences: int = 2) -> list[Chunk]:
    """Merge chunks with fewer than ``min_sentences`` units into a neighbor.

    A single left-to-right pass. A short chunk joins the previous output chunk
    when there is one; otherwise it absorbs the next chunk. A lone chunk is
    kept even if short. Merged results are not revisited, so a short chunk
    that absorbs an equally short successor may stay below the minimum.
    """
    merged: list[Chunk] = []
    i = 0

    while i < len(chunks):
        current = chunks[i]

        if current.metadata.sentence_count >= min_sentences:
            merged.append(current)
            i += 1
            continue

        has_previous = len(merged) > 0
        has_next = i + 1 < len(chunks)

        if has_previous:
            merged[-1] = merge_two_chunks(merged[-1], current)
            i += 1
        elif has_next:
            merged.append(merge_two_chunks(current, chunks[i + 1]))
            i += 2
        else:
            merged.append(current)
            i += 1

    return merged


class ChunkAssembler:
    """Turns profiled units and shift indices into the final chunk list."""

    def __init__(self, min_sentences: int = 2) -> None:
        if min_sentences < 1:
            raise ValueError("min_sentences must be >= 1")
        self.min_sentences = min_sentences

    def assemble(self, units: Sequence[TextUnit], shift_indices: Sequence[int]) -> list[Chunk]:
        """Group units between shift indices, then merge undersized chunks.

        Args:
            units: Units in sequence order.
            shift_indices: Ascending unit positions after which a chunk ends.

        Returns:
            Final chunks whose unit ranges partition the input.
        """
        raw = build_raw_chunks(units, shift_indices)
        chunks = merge_short_chunks(raw, self.min_sentences)
        logger.debug(f"Assembled {len(raw)} raw chunks into {len(chunks)} chunks")
        return chunks

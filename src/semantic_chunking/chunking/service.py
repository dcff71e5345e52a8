"""Pipeline orchestrating segmentation, embedding, profiling and assembly."""

import logging
from collections.abc import Sequence
from pathlib import Path

from semantic_chunking.chunking.assembler import ChunkAssembler
from semantic_chunking.chunking.distance import DistanceProfiler
from semantic_chunking.chunking.embedding import EmbeddingProvider, attach_embeddings
from semantic_chunking.chunking.windows import build_context_windows
from semantic_chunking.config import ChunkingConfig
from semantic_chunking.loader import load_text_file
from semantic_chunking.segmenters import (
    select_segmenter,
    units_from_sentences,
    units_from_subtitles,
)
from semantic_chunking.types import Chunk, SubtitleEntry, TextUnit

logger = logging.getLogger(__name__)


class SemanticChunkingService:
    """Splits ordered text units into semantically coherent chunks.

    The pipeline is:
    1. Build a context window around every unit
    2. Embed all windows in one batch call to the embedding provider
    3. Compute cosine distances between consecutive windows
    4. Mark a shift wherever the distance exceeds the configured percentile
    5. Group units between shifts and merge undersized groups

    Every stage returns new units; nothing passed in by the caller is modified,
    so one service instance can serve concurrent calls.

    Example:
        >>> embedder = TextEmbedder()
        >>> service = SemanticChunkingService(embedder)
        >>> chunks = await service.chunk_text(document, ChunkingConfig(percentile_threshold=90))
        >>> for chunk in chunks:
        ...     print(chunk.metadata.timestamp, chunk.content)
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        config: ChunkingConfig | None = None,
        profiler: DistanceProfiler | None = None,
    ) -> None:
        """Initialize the chunking service.

        Args:
            embedder: Embedding provider used for context windows.
            config: Defaults for calls that do not pass their own config.
            profiler: Distance profiler.
        """
        self.embedder = embedder
        self.config = config or ChunkingConfig()
        self.profiler = profiler or DistanceProfiler()

    async def chunk_units(
        self, units: Sequence[TextUnit], config: ChunkingConfig | None = None
    ) -> list[Chunk]:
        """Chunk already-segmented units.

        Args:
            units: Units in sequence order, indexed from 0.
            config: Chunking parameters for this call.

        Returns:
            Chunks whose unit ranges partition the input. Empty for empty input.

        Raises:
            ComputationError: If fewer than two units were given.
        """
        config = config or self.config
        if not units:
            return []

        windowed = build_context_windows(units, config.buffer_size)
        embedded = await attach_embeddings(windowed, self.embedder)
        profile = self.profiler.profile(embedded, config.percentile_threshold)

        assembler = ChunkAssembler(min_sentences=config.min_chunk_sentences)
        chunks = assembler.assemble(profile.units, profile.shift_indices)

        logger.info(
            f"Assembled {len(chunks)} chunks from {len(units)} units "
            f"({len(profile.shift_indices)} shifts, threshold={profile.threshold:.6f})"
        )
        return chunks

    async def chunk_sentences(
        self, sentences: Sequence[str], config: ChunkingConfig | None = None
    ) -> list[Chunk]:
        """Chunk a list of plain sentences."""
        return await self.chunk_units(units_from_sentences(sentences), config)

    async def chunk_subtitles(
        self, entries: Sequence[SubtitleEntry], config: ChunkingConfig | None = None
    ) -> list[Chunk]:
        """Chunk parsed subtitle entries, keeping their timing in chunk metadata."""
        return await self.chunk_units(units_from_subtitles(entries), config)

    async def chunk_text(self, text: str, config: ChunkingConfig | None = None) -> list[Chunk]:
        """Segment raw text with the configured segmenter and chunk the result."""
        config = config or self.config
        segmenter = select_segmenter(text, config.segmenter, config)
        units = segmenter.segment(text)

        logger.debug(f"Segmented text into {len(units)} units ({segmenter.name})")
        return await self.chunk_units(units, config)

    async def process_file(
        self, path: str | Path, config: ChunkingConfig | None = None
    ) -> list[Chunk]:
        """Load a text or subtitle file and chunk its content.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """
        text = load_text_file(path)
        logger.info(f"Loaded document {path} ({len(text)} chars)")
        return await self.chunk_text(text, config)

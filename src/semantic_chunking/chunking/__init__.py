"""Semantic boundary detection and chunk assembly.

Components:
    - build_context_windows: Surrounds each unit with its neighbors for embedding
    - attach_embeddings: Embeds all context windows in one provider call
    - DistanceProfiler: Consecutive cosine distances and percentile shift detection
    - ChunkAssembler: Groups units between shifts and merges undersized chunks
    - SemanticChunkingService: Runs the full pipeline

Usage:
    from semantic_chunking.chunking import SemanticChunkingService

    service = SemanticChunkingService(embedder)
    chunks = await service.chunk_sentences(sentences, ChunkingConfig(buffer_size=2))
"""

from semantic_chunking.chunking.assembler import (
    ChunkAssembler,
    build_raw_chunks,
    merge_short_chunks,
    merge_two_chunks,
)
from semantic_chunking.chunking.distance import (
    DistanceProfile,
    DistanceProfiler,
    cosine_distance,
    cosine_similarity,
    find_shift_indices,
    percentile_threshold,
)
from semantic_chunking.chunking.embedding import EmbeddingProvider, attach_embeddings
from semantic_chunking.chunking.service import SemanticChunkingService
from semantic_chunking.chunking.windows import build_context_window, build_context_windows

__all__ = [
    "ChunkAssembler",
    "DistanceProfile",
    "DistanceProfiler",
    "EmbeddingProvider",
    "SemanticChunkingService",
    "attach_embeddings",
    "build_context_window",
    "build_context_windows",
    "build_raw_chunks",
    "cosine_distance",
    "cosine_similarity",
    "find_shift_indices",
    "merge_short_chunks",
    "merge_two_chunks",
    "percentile_threshold",
]

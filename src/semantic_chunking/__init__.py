"""
Semantic chunking - boundary detection and chunk assembly for retrieval pipelines.

Splits an ordered sequence of sentences or subtitle lines into semantically
coherent chunks by embedding context windows and cutting where the distance
between neighbors spikes.
"""

__version__ = "0.1.0"

from semantic_chunking.chunking import (
    ChunkAssembler,
    DistanceProfiler,
    EmbeddingProvider,
    SemanticChunkingService,
)
from semantic_chunking.config import ChunkingConfig, Settings, get_settings
from semantic_chunking.exceptions import (
    ChunkingError,
    ComputationError,
    EmbeddingCountMismatchError,
)
from semantic_chunking.types import (
    Chunk,
    ChunkMetadata,
    SubtitleEntry,
    SubtitleMetadata,
    TextUnit,
)

__all__ = [
    "Chunk",
    "ChunkAssembler",
    "ChunkMetadata",
    "ChunkingConfig",
    "ChunkingError",
    "ComputationError",
    "DistanceProfiler",
    "EmbeddingCountMismatchError",
    "EmbeddingProvider",
    "SemanticChunkingService",
    "Settings",
    "SubtitleEntry",
    "SubtitleMetadata",
    "TextUnit",
    "get_settings",
]

"""
Pytest configuration and shared fixtures for chunking tests.
"""

import math
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from semantic_chunking.types import SubtitleMetadata, TextUnit

SAMPLE_SRT = (
    "1\n00:00:01,000 --> 00:00:02,000\nHello world\n\n"
    "2\n00:00:02,000 --> 00:00:03,000\nFoo bar"
)


def vectors_for_distances(distances: list[float]) -> list[list[float]]:
    """2-D unit vectors whose consecutive cosine distances equal ``distances``."""
    angle = 0.0
    vectors = [[1.0, 0.0]]
    for distance in distances:
        angle += math.acos(1.0 - distance)
        vectors.append([math.cos(angle), math.sin(angle)])
    return vectors


def make_units(contents: list[str], with_metadata: bool = False) -> list[TextUnit]:
    """Build indexed units, optionally with one-second subtitle timings."""
    units = []
    for i, content in enumerate(contents):
        metadata = None
        if with_metadata:
            metadata = SubtitleMetadata(
                subtitle_index=i + 1,
                start_time=f"00:00:{i:02d},000",
                end_time=f"00:00:{i + 1:02d},000",
            )
        units.append(TextUnit(content=content, index=i, source_metadata=metadata))
    return units


def make_embedder(
    vector_fn: Callable[[list[str]], list[list[float]]],
) -> MagicMock:
    """Mock embedding provider whose embed_batch returns ``vector_fn(texts)``."""
    embedder = MagicMock()
    embedder.load = AsyncMock()

    def embed(texts: list[str], is_query: bool = True) -> list[list[float]]:
        return vector_fn(texts)

    embedder.embed_batch = AsyncMock(side_effect=embed)
    return embedder


@pytest.fixture
def sample_srt() -> str:
    """Two well-formed subtitle blocks."""
    return SAMPLE_SRT


@pytest.fixture
def constant_embedder() -> MagicMock:
    """Embedder returning the same vector for every text."""
    return make_embedder(lambda texts: [[1.0, 0.0, 0.0] for _ in texts])


@pytest.fixture
def alternating_embedder() -> MagicMock:
    """Embedder whose vectors alternate every two texts, giving regular shifts."""

    def vectors(texts: list[str]) -> list[list[float]]:
        return [[1.0, 0.0] if (i // 2) % 2 == 0 else [0.0, 1.0] for i in range(len(texts))]

    return make_embedder(vectors)

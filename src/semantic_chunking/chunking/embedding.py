"""Attach embeddings to context windows through an external provider."""

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from semantic_chunking.exceptions import EmbeddingCountMismatchError
from semantic_chunking.types import TextUnit

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Anything that maps a batch of strings to equal-length vectors, in order."""

    async def embed_batch(self, texts: list[str], is_query: bool = True) -> list[list[float]]:
        ...


async def attach_embeddings(
    units: Sequence[TextUnit], embedder: EmbeddingProvider
) -> list[TextUnit]:
    """Embed every unit's context window in a single batch call.

    Units without a context window are passed through untouched. Provider
    exceptions propagate unchanged.

    Args:
        units: Units with context windows. Not modified.
        embedder: Embedding provider.

    Returns:
        A new list of units with ``embedding`` set where a window exists.

    Raises:
        EmbeddingCountMismatchError: If the provider returns the wrong number of vectors.
    """
    windows = [unit.context_window for unit in units if unit.context_window is not None]
    if not windows:
        return list(units)

    vectors = await embedder.embed_batch(windows, is_query=False)
    if len(vectors) != len(windows):
        raise EmbeddingCountMismatchError(expected=len(windows), received=len(vectors))

    logger.debug(f"Received {len(vectors)} embeddings from provider")

    remaining = iter(vectors)
    embedded: list[TextUnit] = []
    for unit in units:
        if unit.context_window is None:
            embedded.append(unit)
            continue
        vector = tuple(float(x) for x in next(remaining))
        embedded.append(unit.model_copy(update={"embedding": vector}))

    return embedded

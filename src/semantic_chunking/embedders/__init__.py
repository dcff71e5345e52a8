"""Embedding providers for the chunking engine.

``TextEmbedder`` lives in ``semantic_chunking.embedders.text`` and is imported
from there so that loading this package does not pull in sentence-transformers.
"""

from semantic_chunking.embedders.base import BaseEmbedder

__all__ = [
    "BaseEmbedder",
]

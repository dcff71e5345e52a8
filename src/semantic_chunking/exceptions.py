"""Exceptions raised by the chunking engine."""


class ChunkingError(Exception):
    """Base class for chunking engine failures."""

    pass


class ComputationError(ChunkingError):
    """Raised when the breakpoint distance threshold cannot be computed.

    This happens when the distance array is empty, i.e. the input holds fewer
    than two units.
    """

    pass


class EmbeddingCountMismatchError(ChunkingError):
    """Raised when an embedding provider returns the wrong number of vectors."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Embedding provider returned {received} vectors for {expected} context windows"
        )
        self.expected = expected
        self.received = received

"""
Data model for the chunking engine.

Text units flow through three enrichment stages (context window, embedding,
distance). Every model is frozen: a stage returns new instances built with
``model_copy(update=...)`` and never touches the sequence it was given.
"""

from pydantic import BaseModel, ConfigDict, Field


class SubtitleMetadata(BaseModel):
    """Source metadata carried by a unit parsed from a subtitle block."""

    model_config = ConfigDict(frozen=True)

    subtitle_index: int | None = None
    start_time: str | None = None
    end_time: str | None = None
    timestamp: str | None = None


class SubtitleEntry(BaseModel):
    """A parsed SRT block."""

    model_config = ConfigDict(frozen=True)

    index: int
    start_time: str
    end_time: str
    timestamp: str
    content: str

    def to_metadata(self) -> SubtitleMetadata:
        """Project the entry onto the metadata attached to a text unit."""
        return SubtitleMetadata(
            subtitle_index=self.index,
            start_time=self.start_time,
            end_time=self.end_time,
            timestamp=self.timestamp,
        )


class TextUnit(BaseModel):
    """A sentence or subtitle line at a fixed position in the input sequence."""

    model_config = ConfigDict(frozen=True)

    content: str
    index: int = Field(ge=0, description="Position in the original sequence")
    context_window: str | None = None
    embedding: tuple[float, ...] | None = None
    distance_to_next: float | None = None
    source_metadata: SubtitleMetadata | None = None


class ChunkMetadata(BaseModel):
    """Aggregated metadata of a chunk."""

    model_config = ConfigDict(frozen=True)

    sentence_count: int = Field(ge=1)
    start_sentence_index: int = Field(ge=0)
    end_sentence_index: int = Field(ge=0)
    subtitle_index: int | None = None
    start_time: str | None = None
    end_time: str | None = None
    timestamp: str | None = None


class Chunk(BaseModel):
    """A run of consecutive units grouped between two semantic breakpoints."""

    model_config = ConfigDict(frozen=True)

    content: str
    metadata: ChunkMetadata

    @property
    def sentence_range(self) -> tuple[int, int]:
        """Inclusive ``(start, end)`` unit indices covered by this chunk."""
        return self.metadata.start_sentence_index, self.metadata.end_sentence_index


def format_timestamp(start_time: str | None, end_time: str | None) -> str | None:
    """Build the ``start --> end`` timestamp, or None unless both times are set."""
    if start_time and end_time:
        return f"{start_time} --> {end_time}"
    return None

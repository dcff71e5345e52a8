"""
Configuration for the chunking engine.

``ChunkingConfig`` is passed explicitly to every chunking call. ``Settings``
holds process-level concerns (logging, embedding model) loaded from the
environment with Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SegmenterKind = Literal["auto", "sentence", "subtitle", "fixed"]


class ChunkingConfig(BaseModel):
    """Per-call chunking parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    buffer_size: int = Field(
        default=1,
        ge=0,
        description="Neighboring units included on each side of a unit's context window.",
    )
    percentile_threshold: float = Field(
        default=80.0,
        ge=0.0,
        le=100.0,
        description="Distance percentile above which a transition is a semantic shift.",
    )
    min_chunk_sentences: int = Field(
        default=2, ge=1, description="Chunks with fewer units are merged into a neighbor."
    )
    segmenter: SegmenterKind = Field(
        default="auto", description="Segmenter used when chunking raw text."
    )
    fixed_chunk_size: int = Field(
        default=200, gt=0, description="Approximate characters per fixed window."
    )
    fixed_chunk_overlap: int = Field(
        default=20, ge=0, description="Characters of overlap between fixed windows."
    )

    @model_validator(mode="after")
    def check_overlap(self) -> "ChunkingConfig":
        """Reject an overlap that would never let a fixed window advance."""
        if self.fixed_chunk_overlap >= self.fixed_chunk_size:
            raise ValueError("fixed_chunk_overlap must be smaller than fixed_chunk_size")
        return self


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=False, description="Emit JSON logs instead of console output")

    # Embedder
    embedder_model: str = Field(
        default="BAAI/bge-small-en-v1.5", description="Dense text embedding model (384 dims)"
    )
    embedder_device: str = Field(
        default="cpu", description="Device for embedder inference: cpu, cuda, mps, auto"
    )
    embedder_batch_size: int = Field(default=32, ge=1, description="Batch size for embedding")
    embedder_normalize: bool = Field(
        default=True, description="Normalize embeddings to unit length"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()

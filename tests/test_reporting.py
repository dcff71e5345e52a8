"""Tests for chunk reporting."""

import json

from rich.console import Console

from semantic_chunking.types import Chunk, ChunkMetadata
from semantic_chunking.utils.reporting import chunks_to_records, print_chunks, render_json


def sample_chunks() -> list[Chunk]:
    return [
        Chunk(
            content="Hello world Foo bar",
            metadata=ChunkMetadata(
                sentence_count=2,
                start_sentence_index=0,
                end_sentence_index=1,
                subtitle_index=1,
                start_time="00:00:01,000",
                end_time="00:00:03,000",
                timestamp="00:00:01,000 --> 00:00:03,000",
            ),
        ),
        Chunk(
            content="Plain prose here.",
            metadata=ChunkMetadata(sentence_count=2, start_sentence_index=2, end_sentence_index=3),
        ),
    ]


class TestRecords:
    """Tests for JSON output."""

    def test_unset_fields_omitted(self) -> None:
        """Test unset metadata is left out of the records."""
        records = chunks_to_records(sample_chunks())

        assert records[0]["metadata"]["timestamp"] == "00:00:01,000 --> 00:00:03,000"
        assert "timestamp" not in records[1]["metadata"]
        assert records[1]["metadata"]["sentence_count"] == 2

    def test_render_json(self) -> None:
        """Test the JSON array parses back."""
        parsed = json.loads(render_json(sample_chunks()))

        assert len(parsed) == 2
        assert parsed[1]["content"] == "Plain prose here."


class TestPrintChunks:
    """Tests for the console report."""

    def test_print_chunks(self) -> None:
        """Test the report shows the total and per-chunk details."""
        console = Console(record=True, width=120)
        print_chunks(sample_chunks(), console)
        output = console.export_text()

        assert "Total Chunks Processed: 2" in output
        assert "Chunk #1" in output
        assert "Chunk #2" in output
        assert "00:00:01,000 --> 00:00:03,000" in output
        assert "Subtitle Index: 1" in output
        assert "Plain prose here." in output

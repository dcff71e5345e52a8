"""
Chunk rendering for terminals and machine consumers.

Generates:
- A rich console report with a total count header and one panel per chunk
- A JSON array of chunk records
"""

import json
from collections.abc import Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from semantic_chunking.types import Chunk


def chunks_to_records(chunks: Sequence[Chunk]) -> list[dict]:
    """Dump chunks to plain dicts, leaving out unset metadata fields."""
    return [chunk.model_dump(exclude_none=True) for chunk in chunks]


def render_json(chunks: Sequence[Chunk], indent: int | None = 2) -> str:
    """Serialize chunks as a JSON array."""
    return json.dumps(chunks_to_records(chunks), indent=indent, ensure_ascii=False)


def _chunk_panel(position: int, chunk: Chunk) -> Panel:
    meta = chunk.metadata
    details = Text()
    if meta.timestamp:
        details.append("Timestamp: ", style="bold")
        details.append(f"{meta.timestamp}\n")
    if meta.subtitle_index is not None:
        details.append("Subtitle Index: ", style="bold")
        details.append(f"{meta.subtitle_index}\n")
    details.append("Sentences: ", style="bold")
    details.append(
        f"{meta.sentence_count} ({meta.start_sentence_index}-{meta.end_sentence_index})"
    )

    return Panel(
        Group(details, Rule(style="dim"), Text(chunk.content)),
        title=f"Chunk #{position}",
        title_align="left",
        border_style="cyan",
    )


def print_chunks(chunks: Sequence[Chunk], console: Console | None = None) -> None:
    """Print a human-readable report of ``chunks``."""
    console = console or Console()
    console.print(Rule(f"[bold]Total Chunks Processed: {len(chunks)}[/bold]"))
    for position, chunk in enumerate(chunks, start=1):
        console.print(_chunk_panel(position, chunk))

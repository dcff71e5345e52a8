"""
Typer CLI for the semantic chunking engine.

Provides commands for chunking documents and inspecting their detected format.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel

from semantic_chunking.chunking.embedding import EmbeddingProvider
from semantic_chunking.config import ChunkingConfig, SegmenterKind, Settings, get_settings
from semantic_chunking.exceptions import ChunkingError
from semantic_chunking.loader import load_text_file
from semantic_chunking.segmenters import detect_format, select_segmenter
from semantic_chunking.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="semantic-chunking",
    help="Split documents into semantically coherent chunks",
    add_completion=False,
)
console = Console()


def _create_embedder(
    settings: Settings, model: str | None, device: str | None
) -> EmbeddingProvider:
    """Create the sentence-transformers embedder described by settings and overrides."""
    from semantic_chunking.embedders.text import TextEmbedder

    return TextEmbedder(
        model_name=model or settings.embedder_model,
        device=device or settings.embedder_device,
        batch_size=settings.embedder_batch_size,
        normalize_embeddings=settings.embedder_normalize,
    )


PathArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to a text or SRT subtitle file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]


@app.command()
def chunk(
    path: PathArgument,
    buffer_size: Annotated[
        int,
        typer.Option("--buffer-size", "-b", min=0, help="Neighbors on each side of a window"),
    ] = 1,
    percentile_threshold: Annotated[
        float,
        typer.Option(
            "--percentile-threshold",
            "-p",
            min=0.0,
            max=100.0,
            help="Distance percentile above which a transition starts a new chunk",
        ),
    ] = 80.0,
    min_sentences: Annotated[
        int,
        typer.Option("--min-sentences", min=1, help="Smaller chunks are merged into a neighbor"),
    ] = 2,
    segmenter: Annotated[
        str,
        typer.Option("--segmenter", "-s", help="Segmenter: auto, sentence, subtitle, fixed"),
    ] = "auto",
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print chunks as a JSON array"),
    ] = False,
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Embedding model (defaults to settings)"),
    ] = None,
    device: Annotated[
        str | None,
        typer.Option("--device", help="Inference device: cpu, cuda, mps, auto"),
    ] = None,
) -> None:
    """
    Chunk a document at semantic boundaries.

    Subtitle files are detected automatically and keep their timestamps.
    """
    import asyncio

    from semantic_chunking.chunking.service import SemanticChunkingService
    from semantic_chunking.utils.reporting import print_chunks, render_json

    if segmenter not in ("auto", "sentence", "subtitle", "fixed"):
        console.print(f"[bold red]Error:[/bold red] Invalid segmenter: {segmenter}")
        raise typer.Exit(1)

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    config = ChunkingConfig(
        buffer_size=buffer_size,
        percentile_threshold=percentile_threshold,
        min_chunk_sentences=min_sentences,
        segmenter=segmenter,  # type: ignore[arg-type]
    )
    service = SemanticChunkingService(_create_embedder(settings, model, device), config)

    try:
        chunks = asyncio.run(service.process_file(path))
    except ChunkingError as e:
        console.print(f"[bold red]✗ Chunking failed:[/bold red] {e}")
        raise typer.Exit(1) from e

    logger.info("document_chunked", path=str(path), chunks=len(chunks))

    if as_json:
        typer.echo(render_json(chunks))
    else:
        print_chunks(chunks, console)


@app.command()
def detect(
    path: PathArgument,
    segmenter: Annotated[
        str,
        typer.Option("--segmenter", "-s", help="Segmenter: auto, sentence, subtitle, fixed"),
    ] = "auto",
) -> None:
    """
    Show the detected format of a document and how many units it splits into.
    """
    if segmenter not in ("auto", "sentence", "subtitle", "fixed"):
        console.print(f"[bold red]Error:[/bold red] Invalid segmenter: {segmenter}")
        raise typer.Exit(1)

    text = load_text_file(path)
    kind: SegmenterKind = segmenter  # type: ignore[assignment]
    selected = select_segmenter(text, kind)
    units = selected.segment(text)

    console.print(
        Panel.fit(
            f"[bold]Document:[/bold] {path}\n"
            f"[bold]Detected format:[/bold] {detect_format(text)}\n"
            f"[bold]Segmenter:[/bold] {selected.name}\n"
            f"[bold]Units:[/bold] {len(units)}",
            border_style="blue",
        )
    )


@app.command()
def version() -> None:
    """Show version information."""
    from semantic_chunking import __version__

    console.print(f"semantic-chunking version [bold cyan]{__version__}[/bold cyan]")


@app.callback()
def main() -> None:
    """
    Semantic chunking - boundary detection for retrieval pipelines.

    For detailed help on each command, run:
        semantic-chunking COMMAND --help
    """
    pass


if __name__ == "__main__":
    app()

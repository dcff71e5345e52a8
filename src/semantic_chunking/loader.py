"""Loading of text and subtitle documents from disk."""

from pathlib import Path


def load_text_file(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Load a text file and return its content.

    Args:
            path: Path to the text or subtitle file
            encoding: File encoding (default: utf-8)

    Returns:
            The file content as a string

    Raises:
            FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"Document not found: {file_path}")

    return file_path.read_text(encoding=encoding)

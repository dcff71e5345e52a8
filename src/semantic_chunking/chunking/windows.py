"""Context window construction.

Each unit is embedded together with its neighbors so that the distance between
consecutive units reflects local context rather than a single sentence.
"""

import logging
from collections.abc import Sequence

from semantic_chunking.types import TextUnit

logger = logging.getLogger(__name__)


def build_context_window(contents: Sequence[str], position: int, buffer_size: int) -> str:
    """Build the context window of the unit at ``position``.

    Preceding neighbors are each followed by a space and the unit itself is
    followed by a space, but trailing neighbors are concatenated directly
    against each other, so with ``buffer_size > 1`` they run together.

    Args:
        contents: Contents of every unit, in sequence order.
        position: Position of the unit whose window is built.
        buffer_size: Neighbors included on each side.

    Returns:
        The stripped window string.
    """
    if buffer_size < 0:
        raise ValueError("buffer_size must be >= 0")

    window = ""
    for j in range(max(0, position - buffer_size), position):
        window += contents[j] + " "

    window += contents[position] + " "

    for j in range(position + 1, min(len(contents), position + buffer_size + 1)):
        window += contents[j]

    return window.strip()


def build_context_windows(units: Sequence[TextUnit], buffer_size: int = 1) -> list[TextUnit]:
    """Return new units with ``context_window`` populated.

    Args:
        units: Units in sequence order. Not modified.
        buffer_size: Neighbors included on each side of every window.

    Returns:
        A new list of units, one per input unit.
    """
    if buffer_size < 0:
        raise ValueError("buffer_size must be >= 0")

    contents = [unit.content for unit in units]
    windowed = [
        unit.model_copy(update={"context_window": build_context_window(contents, i, buffer_size)})
        for i, unit in enumerate(units)
    ]

    logger.debug(f"Built {len(windowed)} context windows with buffer_size={buffer_size}")
    return windowed

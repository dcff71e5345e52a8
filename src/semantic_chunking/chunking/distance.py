"""Distance profiling between consecutive context windows.

The profiler computes the cosine distance between every pair of neighboring
units, derives a breakpoint threshold from a percentile of those distances
and reports the positions where the distance exceeds it.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from semantic_chunking.exceptions import ComputationError
from semantic_chunking.types import TextUnit

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """Compute cosine similarity between two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        Cosine similarity in range [-1, 1], or 0.0 if either vector has zero norm.
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    dot = np.dot(vec_a, vec_b)
    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(dot / (norm_a * norm_b))


def cosine_distance(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """Cosine distance, ``1 - cosine_similarity(a, b)``."""
    return 1.0 - cosine_similarity(a, b)


def percentile_threshold(distances: Sequence[float], percentile: float) -> float:
    """Linear-interpolation percentile of ``distances``.

    For the sorted distances ``x`` of length ``m`` and ``p = percentile / 100``,
    with ``h = (m - 1) * p`` the result is
    ``x[floor(h)] + (h - floor(h)) * (x[ceil(h)] - x[floor(h)])``.

    Raises:
        ComputationError: If ``distances`` is empty.
        ValueError: If ``percentile`` is outside [0, 100].
    """
    if not 0 <= percentile <= 100:
        raise ValueError(f"percentile must be within [0, 100], got {percentile}")
    if len(distances) == 0:
        raise ComputationError("Failed to calculate breakpoint distance threshold: no distances")

    ordered = np.sort(np.asarray(distances, dtype=np.float64))
    return float(np.percentile(ordered, percentile, method="linear"))


def find_shift_indices(distances: Sequence[float], threshold: float) -> list[int]:
    """Positions whose distance is strictly greater than ``threshold``."""
    return [i for i, distance in enumerate(distances) if distance > threshold]


@dataclass(frozen=True)
class DistanceProfile:
    """Result of profiling a unit sequence."""

    units: list[TextUnit]
    """New units with ``distance_to_next`` set."""

    distances: list[float]
    """Computed distances in unit order."""

    threshold: float
    """Breakpoint distance threshold."""

    shift_indices: list[int]
    """Unit positions followed by a semantic shift, ascending."""


class DistanceProfiler:
    """Finds significant semantic shifts in a sequence of embedded units."""

    def profile(self, units: Sequence[TextUnit], percentile: float) -> DistanceProfile:
        """Compute consecutive distances, the breakpoint threshold and shift indices.

        A pair where either unit lacks an embedding gets no distance. Shift
        indices always name the unit after which the boundary falls.

        Args:
            units: Embedded units in sequence order. Not modified.
            percentile: Percentile threshold in [0, 100].

        Returns:
            DistanceProfile holding the new units and the detected shifts.

        Raises:
            ComputationError: If no distance could be computed.
        """
        positions: list[int] = []
        distances: list[float] = []
        profiled: list[TextUnit] = []

        for i, unit in enumerate(units):
            distance: float | None = None
            if i < len(units) - 1:
                current, following = unit.embedding, units[i + 1].embedding
                if current is not None and following is not None:
                    distance = cosine_distance(current, following)
                    positions.append(i)
                    distances.append(distance)
            profiled.append(unit.model_copy(update={"distance_to_next": distance}))

        threshold = percentile_threshold(distances, percentile)
        shift_indices = [positions[i] for i in find_shift_indices(distances, threshold)]

        logger.debug(
            f"Profiled {len(distances)} distances, threshold={threshold:.4f} "
            f"at p{percentile}, {len(shift_indices)} shifts"
        )

        return DistanceProfile(
            units=profiled,
            distances=distances,
            threshold=threshold,
            shift_indices=shift_indices,
        )

"""Tests for distance profiling and breakpoint detection."""

import numpy as np
import pytest
from conftest import make_units, vectors_for_distances

from semantic_chunking.chunking.distance import (
    DistanceProfiler,
    cosine_distance,
    cosine_similarity,
    find_shift_indices,
    percentile_threshold,
)
from semantic_chunking.exceptions import ChunkingError, ComputationError
from semantic_chunking.types import TextUnit


def embedded_units(vectors: list[list[float]]) -> list[TextUnit]:
    units = make_units([f"unit {i}" for i in range(len(vectors))])
    return [u.model_copy(update={"embedding": tuple(v)}) for u, v in zip(units, vectors)]


class TestCosine:
    """Tests for cosine similarity and distance."""

    def test_identical_vectors(self) -> None:
        """Test a non-zero vector is fully similar to itself."""
        v = [0.3, -1.2, 4.5]
        assert cosine_similarity(v, v) == pytest.approx(1.0)

    def test_orthogonal_and_opposite(self) -> None:
        """Test orthogonal and opposite vectors."""
        a = np.array([1.0, 0.0, 0.0])
        assert cosine_similarity(a, np.array([0.0, 1.0, 0.0])) == pytest.approx(0.0)
        assert cosine_similarity(a, np.array([-1.0, 0.0, 0.0])) == pytest.approx(-1.0)

    def test_zero_vector(self) -> None:
        """Test a zero vector gives similarity 0 rather than an error."""
        a = [1.0, 2.0]
        zero = [0.0, 0.0]
        assert cosine_similarity(a, zero) == 0.0
        assert cosine_similarity(zero, a) == 0.0
        assert cosine_distance(zero, zero) == 1.0

    def test_distance_is_one_minus_similarity(self) -> None:
        """Test distance is derived exactly from similarity."""
        a, b = [0.2, 0.9, -0.4], [0.5, 0.1, 0.3]
        assert cosine_distance(a, b) == 1.0 - cosine_similarity(a, b)

    def test_magnitude_independent(self) -> None:
        """Test scaling a vector does not change similarity."""
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)


class TestPercentileThreshold:
    """Tests for the linear-interpolation percentile."""

    def test_interpolated_value(self) -> None:
        """Test interpolation between the two nearest ranks."""
        threshold = percentile_threshold([0.10, 0.15, 0.20, 0.90], 90)
        assert threshold == pytest.approx(0.69)

    def test_unsorted_input(self) -> None:
        """Test the distances are sorted before interpolation."""
        assert percentile_threshold([0.90, 0.10, 0.20, 0.15], 90) == pytest.approx(0.69)

    def test_extremes(self) -> None:
        """Test the 0th and 100th percentiles are the min and max."""
        distances = [0.4, 0.1, 0.7]
        assert percentile_threshold(distances, 0) == pytest.approx(0.1)
        assert percentile_threshold(distances, 100) == pytest.approx(0.7)

    def test_single_distance(self) -> None:
        """Test one distance is its own percentile."""
        assert percentile_threshold([0.25], 80) == pytest.approx(0.25)

    def test_empty_distances(self) -> None:
        """Test an empty distance array cannot produce a threshold."""
        with pytest.raises(ComputationError):
            percentile_threshold([], 80)

    def test_computation_error_is_chunking_error(self) -> None:
        """Test ComputationError belongs to the package hierarchy."""
        with pytest.raises(ChunkingError):
            percentile_threshold([], 50)

    @pytest.mark.parametrize("percentile", [-1, 100.5])
    def test_out_of_range(self, percentile: float) -> None:
        """Test percentiles outside [0, 100] are rejected."""
        with pytest.raises(ValueError):
            percentile_threshold([0.1, 0.2], percentile)


class TestFindShiftIndices:
    """Tests for shift selection."""

    def test_strictly_greater(self) -> None:
        """Test ties at the threshold are not shifts."""
        assert find_shift_indices([0.1, 0.5, 0.9, 0.5], 0.5) == [2]

    def test_none_above(self) -> None:
        """Test no shift when every distance is at or below the threshold."""
        assert find_shift_indices([0.1, 0.2], 0.2) == []


class TestDistanceProfiler:
    """Tests for DistanceProfiler.profile."""

    def test_scenario_ninetieth_percentile(self) -> None:
        """Test five units with one large jump before the last unit."""
        distances = [0.10, 0.15, 0.20, 0.90]
        units = embedded_units(vectors_for_distances(distances))

        profile = DistanceProfiler().profile(units, 90)

        assert profile.distances == pytest.approx(distances)
        assert profile.threshold == pytest.approx(0.69)
        assert profile.shift_indices == [3]

    def test_distance_to_next(self) -> None:
        """Test every unit but the last records its distance to the next."""
        distances = [0.3, 0.6]
        units = embedded_units(vectors_for_distances(distances))

        profile = DistanceProfiler().profile(units, 50)

        assert profile.units[0].distance_to_next == pytest.approx(0.3)
        assert profile.units[1].distance_to_next == pytest.approx(0.6)
        assert profile.units[2].distance_to_next is None

    def test_distance_matches_similarity(self) -> None:
        """Test each recorded distance equals one minus the pair similarity."""
        vectors = [[1.0, 2.0, 0.5], [0.3, -1.0, 2.0], [2.0, 2.0, 2.0]]
        profile = DistanceProfiler().profile(embedded_units(vectors), 50)

        for i in range(2):
            expected = 1.0 - cosine_similarity(vectors[i], vectors[i + 1])
            assert profile.units[i].distance_to_next == expected

    def test_input_not_mutated(self) -> None:
        """Test the caller's units are left without distances."""
        units = embedded_units(vectors_for_distances([0.2, 0.4]))
        DistanceProfiler().profile(units, 50)
        assert all(unit.distance_to_next is None for unit in units)

    def test_full_percentile_no_shift(self) -> None:
        """Test the 100th percentile never yields a breakpoint."""
        units = embedded_units(vectors_for_distances([0.1, 0.8, 0.3, 0.8]))
        assert DistanceProfiler().profile(units, 100).shift_indices == []

    def test_single_unit_raises(self) -> None:
        """Test one unit gives no distances and no threshold."""
        with pytest.raises(ComputationError):
            DistanceProfiler().profile(embedded_units([[1.0, 0.0]]), 80)

    def test_missing_embedding_skips_pair(self) -> None:
        """Test pairs without embeddings get no distance and keep positions aligned."""
        units = embedded_units([[1.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.0, 1.0]])
        units[1] = units[1].model_copy(update={"embedding": None})

        profile = DistanceProfiler().profile(units, 0)

        assert profile.units[0].distance_to_next is None
        assert profile.units[1].distance_to_next is None
        assert profile.units[2].distance_to_next == pytest.approx(0.0)
        assert profile.distances == pytest.approx([0.0])
        assert profile.shift_indices == []

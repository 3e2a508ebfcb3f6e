"""Tests for the array (batch) transforms."""

from __future__ import annotations

import numpy as np
import pytest

from normal_map.numeric import Precision

NORMALS = [0.0, 0.05, 0.25, 0.5, 0.6, 0.75, 0.999, 1.0, -0.25, 1.25]


def _mappers(width):
    """One of every curve and unified mapper in the given width."""
    unit = width.Unit
    return {
        "linear": width.LinearMap(-50.0, 50.0, unit.generic()),
        "linear_db": width.LinearMap(-60.0, 6.0, unit.decibels(None)),
        "linear_db_clamped": width.LinearMap(-90.0, 0.0, unit.decibels(-80.0)),
        "power": width.PowerMap(-50.0, 50.0, 2.0, unit.generic()),
        "power_db": width.PowerMap(-60.0, 0.0, 0.5, unit.decibels(-70.0)),
        "log2": width.Log2Map(20.0, 20480.0),
        "discrete": width.DiscreteMap(-5, 5),
        "normal_map_log2": width.NormalMap.log2(20.0, 20480.0),
        "normal_map_discrete": width.NormalMap.discrete(0, 7),
    }


MAPPER_NAMES = [
    "linear",
    "linear_db",
    "linear_db_clamped",
    "power",
    "power_db",
    "log2",
    "discrete",
    "normal_map_log2",
    "normal_map_discrete",
]


def _tolerance(precision: Precision) -> dict:
    if precision == Precision.FLOAT32:
        return {"rtol": 1e-5, "atol": 1e-6}
    return {"rtol": 1e-12, "atol": 1e-12}


@pytest.mark.parametrize("name", MAPPER_NAMES)
class TestBatchEquivalence:
    """Test batch results equal element-wise scalar calls."""

    def test_denormalize_array(self, width, precision: Precision, name: str) -> None:
        """Test denormalize_array against scalar denormalize."""
        mapper = _mappers(width)[name]
        in_normals = np.array(NORMALS, dtype=precision.dtype)
        out_values = np.zeros(len(NORMALS), dtype=precision.dtype)

        result = mapper.denormalize_array(in_normals, out_values)

        assert result is out_values
        expected = [mapper.denormalize(t) for t in in_normals]
        np.testing.assert_allclose(out_values, expected, **_tolerance(precision))

    def test_normalize_array(self, width, precision: Precision, name: str) -> None:
        """Test normalize_array against scalar normalize."""
        mapper = _mappers(width)[name]
        values = np.array([mapper.denormalize(t) for t in NORMALS[1:8]], dtype=precision.dtype)
        out_normals = np.zeros(len(values), dtype=precision.dtype)

        mapper.normalize_array(values, out_normals)

        expected = [mapper.normalize(v) for v in values]
        np.testing.assert_allclose(out_normals, expected, **_tolerance(precision))

    def test_in_place(self, width, precision: Precision, name: str) -> None:
        """Test the input buffer can double as the output buffer."""
        mapper = _mappers(width)[name]
        buffer = np.array(NORMALS, dtype=precision.dtype)
        expected = [mapper.denormalize(t) for t in buffer]

        mapper.denormalize_array(buffer, buffer)

        np.testing.assert_allclose(buffer, expected, **_tolerance(precision))


class TestBatchLengths:
    """Test the overlapping-prefix policy for mismatched lengths."""

    def test_longer_input(self, width, precision: Precision) -> None:
        """Test extra inputs are ignored."""
        lin_map = width.LinearMap(-50.0, 50.0)
        out_values = np.zeros(2, dtype=precision.dtype)

        lin_map.denormalize_array([0.0, 1.0, 0.25, -0.25], out_values)

        np.testing.assert_allclose(out_values, [-50.0, 50.0])

    def test_longer_output(self, width, precision: Precision) -> None:
        """Test output elements past the input are left untouched."""
        lin_map = width.LinearMap(-50.0, 50.0)
        out_normals = np.full(4, 7.0, dtype=precision.dtype)

        lin_map.normalize_array([25.0, -25.0], out_normals)

        np.testing.assert_allclose(out_normals, [0.75, 0.25, 7.0, 7.0])

    def test_unified_mapper_prefix(self, width, precision: Precision) -> None:
        """Test the unified mapper applies the same policy."""
        normal_map = width.NormalMap.discrete(-5, 5)
        out_values = np.full(3, 9.0, dtype=precision.dtype)

        normal_map.denormalize_array(np.array([0.2, 0.8], dtype=precision.dtype), out_values)

        np.testing.assert_allclose(out_values, [-3.0, 3.0, 9.0])

    def test_empty(self, width, precision: Precision) -> None:
        """Test empty sequences are a no-op."""
        out_values = np.zeros(0, dtype=precision.dtype)
        width.Log2Map(20.0, 20480.0).denormalize_array([], out_values)
        assert out_values.shape == (0,)

    def test_accepts_lists(self, width, precision: Precision) -> None:
        """Test plain sequences are accepted as input."""
        out_values = np.zeros(4, dtype=precision.dtype)
        width.LinearMap(-50.0, 50.0).denormalize_array([0.0, 1.0, 0.25, -0.25], out_values)
        np.testing.assert_allclose(out_values, [-50.0, 50.0, -25.0, -75.0], rtol=1e-6)

    def test_output_must_be_array(self, width) -> None:
        """Test a non-array output is rejected instead of silently ignored."""
        with pytest.raises(TypeError):
            width.LinearMap(-50.0, 50.0).normalize_array([0.0], [0.0])

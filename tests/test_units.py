"""Tests for units and decibel shaping."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from normal_map import LinearMap, settings
from normal_map.numeric import Precision, get_numeric
from normal_map.units import (
    ClampedDecibelShape,
    DecibelShape,
    GenericShape,
    Unit,
    UnitKind,
    coeff_to_db,
    db_to_coeff,
    make_shape,
)


class TestUnit:
    """Test the Unit model."""

    def test_generic(self) -> None:
        """Test the generic unit carries no clamp."""
        unit = Unit.generic()
        assert unit.kind == UnitKind.GENERIC
        assert not unit.is_decibels
        assert unit.neg_infinity_clamp is None

    def test_decibels_explicit_clamp(self) -> None:
        """Test an explicit clamp, including disabling it."""
        assert Unit.decibels(-90.0).neg_infinity_clamp == -90.0
        assert Unit.decibels(None).neg_infinity_clamp is None
        assert Unit.decibels(None).is_decibels

    def test_decibels_default_clamp_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the omitted clamp comes from the configured floor."""
        monkeypatch.setattr(settings, "decibel_floor_db", -72.0)
        assert Unit.decibels().neg_infinity_clamp == -72.0

        monkeypatch.setattr(settings, "decibel_floor_db", None)
        assert Unit.decibels().neg_infinity_clamp is None

    def test_rejects_non_finite_clamp(self) -> None:
        """Test that an infinite clamp is a validation error."""
        with pytest.raises(ValidationError):
            Unit.decibels(float("-inf"))

    def test_frozen(self) -> None:
        """Test units are immutable and hashable."""
        unit = Unit.decibels(-90.0)
        with pytest.raises(ValidationError):
            unit.neg_infinity_clamp = -60.0
        assert hash(unit) == hash(Unit.decibels(-90.0))


class TestDecibelConversion:
    """Test amplitude/decibel conversion."""

    @pytest.mark.parametrize(
        "db, coeff",
        [
            (0.0, 1.0),
            (-20.0, 0.1),
            (20.0, 10.0),
            (-60.0, 0.001),
            (-6.020599913279624, 0.5),
        ],
    )
    def test_reference_values(self, precision: Precision, approx, db: float, coeff: float) -> None:
        """Test conversions against known reference values."""
        n = get_numeric(precision)
        assert db_to_coeff(n.scalar(db), n) == approx(coeff)
        assert coeff_to_db(n.scalar(coeff), n) == pytest.approx(db, abs=1e-4)

    def test_silence(self, precision: Precision) -> None:
        """Test that zero amplitude is -inf dB."""
        n = get_numeric(precision)
        assert np.isneginf(coeff_to_db(n.scalar(0.0), n))
        assert db_to_coeff(n.scalar(-np.inf), n) == 0.0

    def test_inverse_pair(self, precision: Precision) -> None:
        """Test that the conversions undo each other across the audible range."""
        n = get_numeric(precision)
        dbs = n.array(np.linspace(-120.0, 24.0, 49))
        back = coeff_to_db(db_to_coeff(dbs, n), n)
        np.testing.assert_allclose(back, dbs, atol=1e-3)


class TestShapes:
    """Test the shaping selected for each unit."""

    def test_make_shape(self, precision: Precision) -> None:
        """Test the unit picks the shaping variant."""
        n = get_numeric(precision)
        assert type(make_shape(0.0, 1.0, Unit.generic(), n)) is GenericShape
        assert type(make_shape(-60.0, 0.0, Unit.decibels(None), n)) is DecibelShape
        assert type(make_shape(-60.0, 0.0, Unit.decibels(-90.0), n)) is ClampedDecibelShape

    def test_generic_shape(self, precision: Precision, approx) -> None:
        """Test plain interpolation."""
        shape = GenericShape(10.0, 20.0, get_numeric(precision))
        assert shape.normalize(15.0) == approx(0.5)
        assert shape.denormalize(0.25) == approx(12.5)

    def test_clamped_shape_floor(self, precision: Precision, approx) -> None:
        """Test levels at or below the floor are silence."""
        n = get_numeric(precision)
        shape = ClampedDecibelShape(-90.0, 0.0, -80.0, n)

        assert shape.denormalize(n.scalar(0.0)) == 0.0
        assert shape.denormalize(n.scalar(0.05)) == 0.0
        assert shape.denormalize(n.scalar(1.0)) == approx(1.0)
        # Below-floor amplitudes normalize as the floor itself
        assert shape.normalize(n.scalar(0.0)) == pytest.approx(1.0 / 9.0, abs=1e-4)
        assert shape.normalize(n.scalar(-1.0)) == pytest.approx(1.0 / 9.0, abs=1e-4)

    def test_clamped_shape_array(self, precision: Precision) -> None:
        """Test the array path floors to silence in place."""
        n = get_numeric(precision)
        shape = ClampedDecibelShape(-90.0, 0.0, -80.0, n)
        buffer = n.array([0.0, 0.05, 1.0])

        result = shape.denormalize(buffer, out=buffer)

        assert result is buffer
        assert buffer[0] == 0.0
        assert buffer[1] == 0.0
        assert buffer[2] == pytest.approx(1.0, rel=1e-5)


class TestDecibelFloorDefault:
    """Test the silence floor picked up by Unit.decibels()."""

    def test_no_floor_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test silence normalizes to -inf when no floor is configured."""
        monkeypatch.setattr(settings, "decibel_floor_db", None)
        db_map = LinearMap(-60.0, 0.0, Unit.decibels())
        assert np.isneginf(db_map.normalize(0.0))

    def test_configured_floor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a -90 dB floor turns silence into the floor position."""
        monkeypatch.setattr(settings, "decibel_floor_db", -90.0)
        db_map = LinearMap(-90.0, 0.0, Unit.decibels())
        assert db_map.normalize(0.0) == pytest.approx(0.0, abs=1e-4)
        assert db_map.denormalize(0.0) == 0.0

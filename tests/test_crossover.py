"""Tests for dep_spectrum.crossover."""

import math

import pytest

from dep_spectrum.crossover import estimate_upper_crossover
from dep_spectrum.dielectric.permittivity import EPS_0
from dep_spectrum.types import ParameterSet


class TestEstimateUpperCrossover:
    """Tests for the closed-form upper crossover estimate."""

    def test_reference_value(self, reference_cell):
        num = 0.3**2 - 0.3 * 0.01 - 2 * 0.01**2
        den = (2 * 78**2 - 60 * 78 - 60**2) * EPS_0**2
        expected = math.sqrt(num / den) / (2 * math.pi)
        assert estimate_upper_crossover(reference_cell) == pytest.approx(expected, rel=1e-12)
        assert 1e7 < expected < 1e9

    def test_ignores_membrane_and_geometry(self, reference_cell):
        stripped = ParameterSet(
            media_permittivity=78,
            media_conductivity=0.01,
            cytoplasm_permittivity=60,
            cytoplasm_conductivity=0.3,
        )
        assert estimate_upper_crossover(stripped) == estimate_upper_crossover(reference_cell)

    def test_negative_radicand_is_nan(self):
        """Cytoplasm less conductive than the medium: no real estimate, NaN instead of an error."""
        p = ParameterSet(
            media_permittivity=78,
            media_conductivity=0.3,
            cytoplasm_permittivity=60,
            cytoplasm_conductivity=0.01,
        )
        assert math.isnan(estimate_upper_crossover(p))

    def test_zero_denominator_is_inf(self):
        p = ParameterSet(
            media_permittivity=60,
            media_conductivity=0.01,
            cytoplasm_permittivity=60,
            cytoplasm_conductivity=0.3,
        )
        assert math.isinf(estimate_upper_crossover(p))

    def test_empty_set_is_nan(self):
        assert math.isnan(estimate_upper_crossover(ParameterSet(name="blank")))

import pytest

from dep_spectrum.types import ParameterSet, SweepRange


@pytest.fixture
def reference_cell():
    """Single-shell cell used throughout the DEP literature examples."""
    return ParameterSet(
        name="Reference cell",
        cell_radius=5e-6,
        shell_thickness=7e-9,
        media_permittivity=78,
        media_conductivity=0.01,
        membrane_permittivity=6,
        membrane_conductivity=1e-7,
        cytoplasm_permittivity=60,
        cytoplasm_conductivity=0.3,
    )


@pytest.fixture
def reference_sweep():
    return SweepRange(start_hz=1e3, end_hz=1e7, sample_count=5000)

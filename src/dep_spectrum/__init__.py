"""
dep_spectrum

Dielectrophoresis (DEP) spectra of single-shelled particles.

For a cell modeled as a cytoplasm core wrapped in a thin membrane and suspended
in a medium, computes Re[K(ω)], the real part of the Clausius–Mossotti factor,
across a logarithmic frequency sweep. The sign of Re[K] gives the direction of
the DEP force (positive: toward high field, negative: away).

Example:
    from dep_spectrum import ParameterSet, SweepRange, dep_curves

    cell = ParameterSet(
        name="Cell A",
        cell_radius=5e-6, shell_thickness=7e-9,
        media_permittivity=78, media_conductivity=0.01,
        membrane_permittivity=6, membrane_conductivity=1e-7,
        cytoplasm_permittivity=60, cytoplasm_conductivity=0.3,
    )
    (curve,) = dep_curves([cell], SweepRange(1e3, 1e7))
"""

from __future__ import annotations

from .types import Curve, DomainError, ParameterSet, Point, SweepRange  # noqa: F401
from .sampling import logspace_frequencies  # noqa: F401
from .curves import build_curve, build_curves  # noqa: F401
from .crossover import estimate_upper_crossover  # noqa: F401
from .interface import dep_curves  # noqa: F401

__version__ = "0.1.0"

"""
dep_spectrum.dielectric.clausius_mossotti

Clausius–Mossotti factor of a particle in a medium:

  K(ω) = (ε_p - ε_m) / (ε_p + 2 ε_m)

Re[K] sets the sign of the time-averaged DEP force:
- Re[K] > 0: positive DEP (toward high field)
- Re[K] < 0: negative DEP (away from high field)
For passive materials Re[K] lies in [-0.5, 1.0].
"""

from __future__ import annotations

import numpy as np

from ..types import Array


def cm_factor(effective: Array, medium: Array) -> Array:
    """
    Complex Clausius–Mossotti factor.

    effective and medium are complex permittivities (F/m), broadcastable.
    A vanishing denominator yields non-finite values rather than an exception.
    """
    eps_p = np.asarray(effective, dtype=complex)
    eps_m = np.asarray(medium, dtype=complex)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k = (eps_p - eps_m) / (eps_p + 2.0 * eps_m)
    if k.ndim == 0:
        return complex(k)
    return k


def real_cm_factor(effective: Array, medium: Array) -> Array:
    """Re[K(ω)], the value plotted per frequency."""
    k = np.real(cm_factor(effective, medium))
    return float(k) if np.ndim(k) == 0 else np.asarray(k, dtype=float)

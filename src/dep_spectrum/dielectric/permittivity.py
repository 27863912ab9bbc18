# src/dep_spectrum/dielectric/permittivity.py

from __future__ import annotations

import numpy as np

from ..types import Array

EPS_0 = 8.8542e-12  # vacuum permittivity (F/m)
PI = np.pi


def angular_frequency(f: Array) -> Array:
    """ω = 2π f (rad/s)."""
    f_arr = np.asarray(f, dtype=float)
    w = 2.0 * PI * f_arr
    return float(w) if w.ndim == 0 else w


def complex_permittivity(permittivity: float, conductivity: float, omega: Array) -> Array:
    """
    Lossy dielectric as a complex permittivity.

      ε* = ε_r ε0 - i σ/ω

    permittivity is relative (dimensionless), conductivity in S/m, omega in rad/s.
    Returns F/m; a Python complex for scalar omega, complex ndarray otherwise.

    omega == 0 does not raise: the imaginary part becomes -inf (or NaN when
    σ == 0 as well) and the real part is kept.
    """
    w = np.asarray(omega, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        loss = float(conductivity) / w

    # Assign components separately; multiplying 1j by inf would poison the real part.
    out = np.empty(w.shape, dtype=complex)
    out.real = float(permittivity) * EPS_0
    out.imag = -loss

    if out.ndim == 0:
        return complex(out)
    return out

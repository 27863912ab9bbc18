"""
dep_spectrum.dielectric.single_shell

Single-shell effective permittivity of a shelled sphere (cell = cytoplasm core
of radius R wrapped in a membrane of thickness d).

  γ    = ((R + d) / R)^3
  K_sc = (ε_c - ε_s) / (ε_c + 2 ε_s)
  ε_eff = ε_s (γ + 2 K_sc) / (γ - K_sc)

ε_s, ε_c are the complex permittivities of membrane and cytoplasm.

Singular inputs are part of the model, not errors:
- R = 0            -> γ is inf (or NaN when d = 0 too), ε_eff non-finite
- ε_c + 2 ε_s = 0  -> K_sc infinite, ε_eff = ε_s (γ+∞)/(γ-∞) is NaN
Both propagate as IEEE-754 values; nothing here raises.
"""

from __future__ import annotations

import numpy as np

from ..types import Array


def shell_volume_ratio(radius: float, shell_thickness: float) -> float:
    """γ = ((R + d)/R)^3, outer-to-inner volume ratio of the shelled sphere."""
    R = np.float64(radius)
    d = np.float64(shell_thickness)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        gamma = ((R + d) / R) ** 3
    return float(gamma)


def effective_permittivity(
    eps_membrane: Array,
    eps_cytoplasm: Array,
    radius: float,
    shell_thickness: float,
) -> Array:
    """
    Effective complex permittivity of the shelled particle.

    Parameters
    ----------
    eps_membrane : complex or array-like
        Membrane (shell) complex permittivity ε_s (F/m).
    eps_cytoplasm : complex or array-like
        Cytoplasm (core) complex permittivity ε_c (F/m), broadcastable with ε_s.
    radius : float
        Core radius R (m).
    shell_thickness : float
        Membrane thickness d (m).

    Returns
    -------
    complex or np.ndarray
        ε_eff (F/m); complex for scalar inputs.
    """
    eps_s = np.asarray(eps_membrane, dtype=complex)
    eps_c = np.asarray(eps_cytoplasm, dtype=complex)
    gamma = shell_volume_ratio(radius, shell_thickness)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k_sc = (eps_c - eps_s) / (eps_c + 2.0 * eps_s)
        eps_eff = eps_s * (gamma + 2.0 * k_sc) / (gamma - k_sc)

    if eps_eff.ndim == 0:
        return complex(eps_eff)
    return eps_eff

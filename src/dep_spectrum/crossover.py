# src/dep_spectrum/crossover.py

from __future__ import annotations

import numpy as np

from .types import ParameterSet
from .dielectric.permittivity import EPS_0, PI


def estimate_upper_crossover(parameters: ParameterSet) -> float:
    """
    Closed-form estimate of the upper crossover frequency (Hz).

      f_x2 ≈ (1/2π) sqrt( (σc² - σc σm - 2σm²) / ((2εm² - εc εm - εc²) ε0²) )

    Uses only cytoplasm and medium properties; membrane and geometry are ignored.

    The radicand is negative for many physically plausible inputs. In that case
    the result is NaN; a zero denominator gives inf or NaN. Callers needing a
    usable estimate must check np.isfinite() themselves.
    """
    eps_m = np.float64(parameters.value("media_permittivity"))
    sigma_m = np.float64(parameters.value("media_conductivity"))
    eps_c = np.float64(parameters.value("cytoplasm_permittivity"))
    sigma_c = np.float64(parameters.value("cytoplasm_conductivity"))

    num = sigma_c**2 - sigma_c * sigma_m - 2.0 * sigma_m**2
    den = (2.0 * eps_m**2 - eps_c * eps_m - eps_c**2) * EPS_0**2

    with np.errstate(divide="ignore", invalid="ignore"):
        f_est = (1.0 / (2.0 * PI)) * np.sqrt(num / den)
    return float(f_est)

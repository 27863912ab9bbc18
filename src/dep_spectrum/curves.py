"""
dep_spectrum.curves

Curve builder: one ParameterSet + a frequency grid -> one Curve of Re[K(ω)].

Per frequency f:
  ω     = 2π f
  ε_s*, ε_c*, ε_m*  from (ε_r, σ) of membrane, cytoplasm, medium
  ε_eff = single-shell combination of ε_s*, ε_c* with (R, d)
  value = Re[K(ε_eff, ε_m*)]

The whole grid is evaluated in one vectorised pass.

Failure policy:
- singular points (R = 0, f = 0, vanishing denominators) give NaN/inf for that
  point only; the rest of the curve and all other curves are unaffected
- curves with non-finite points are still returned, and logged at WARNING
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Optional, Sequence

import numpy as np

from .types import Array, Curve, ParameterSet
from .dielectric.permittivity import angular_frequency, complex_permittivity
from .dielectric.single_shell import effective_permittivity
from .dielectric.clausius_mossotti import real_cm_factor

logger = logging.getLogger(__name__)


def re_cm_spectrum(parameters: ParameterSet, frequencies: Array) -> Array:
    """Re[K] of `parameters` at each frequency (Hz)."""
    f = np.asarray(frequencies, dtype=float)
    if f.ndim != 1:
        raise ValueError("frequencies must be a 1D array.")

    w = np.atleast_1d(angular_frequency(f))

    eps_membrane = complex_permittivity(
        parameters.value("membrane_permittivity"),
        parameters.value("membrane_conductivity"),
        w,
    )
    eps_cytoplasm = complex_permittivity(
        parameters.value("cytoplasm_permittivity"),
        parameters.value("cytoplasm_conductivity"),
        w,
    )
    eps_medium = complex_permittivity(
        parameters.value("media_permittivity"),
        parameters.value("media_conductivity"),
        w,
    )

    eps_eff = effective_permittivity(
        eps_membrane,
        eps_cytoplasm,
        parameters.value("cell_radius"),
        parameters.value("shell_thickness"),
    )
    return np.asarray(real_cm_factor(eps_eff, eps_medium), dtype=float).reshape(f.shape)


def build_curve(parameters: ParameterSet, frequencies: Array) -> Curve:
    """
    Build the labeled Re[K] curve for one parameter set.

    Parameters
    ----------
    parameters : ParameterSet
        Particle/medium configuration; absent fields count as 0.0.
    frequencies : array-like
        Frequencies in Hz (1D), typically from logspace_frequencies().

    Returns
    -------
    Curve
        One point per input frequency, in input order.
    """
    f = np.asarray(frequencies, dtype=float)
    values = re_cm_spectrum(parameters, f)

    n_bad = int(np.count_nonzero(~np.isfinite(values)))
    if n_bad:
        logger.warning(
            f"Curve '{parameters.name}': {n_bad} of {values.size} points are non-finite."
        )
    else:
        logger.debug(f"Curve '{parameters.name}': {values.size} points.")

    return Curve(name=parameters.name, frequency=f, value=values)


def build_curves(
    parameter_sets: Sequence[ParameterSet],
    frequencies: Array,
    *,
    max_workers: Optional[int] = None,
) -> list[Curve]:
    """
    Build one curve per parameter set, preserving input order.

    Curves share nothing but the read-only frequency grid. With max_workers > 1
    they are evaluated on a thread pool; the output is identical to the serial
    path.
    """
    f = np.array(frequencies, dtype=float)
    f.setflags(write=False)
    sets = list(parameter_sets)

    if max_workers is not None and max_workers < 1:
        raise ValueError("max_workers must be >= 1.")

    if max_workers is None or max_workers == 1 or len(sets) <= 1:
        return [build_curve(p, f) for p in sets]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda p: build_curve(p, f), sets))

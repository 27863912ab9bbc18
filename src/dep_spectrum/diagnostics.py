"""
dep_spectrum.diagnostics

Comparisons and read-outs on built curves:
- zero crossings of Re[K] (measured crossover frequencies)
- separability of two particle types, Δ = Re[K_a] - Re[K_b]
- DEP regime per point (+1 positive, -1 negative, 0 zero/undefined)
"""

from __future__ import annotations

import numpy as np

from .types import Array, Curve


def zero_crossings(curve: Curve) -> Array:
    """
    Frequencies (Hz) at which Re[K] changes sign.

    Non-finite samples are dropped first, so a crossing is bracketed by the
    nearest finite samples on either side. Between two samples of opposite sign
    the root is located by linear interpolation of Re[K] against log f. Samples
    that are exactly zero are reported at their own frequency.
    """
    mask = curve.finite_mask()
    f = curve.frequency[mask]
    v = curve.value[mask]
    if f.size == 0:
        return np.empty(0, dtype=float)
    if np.any(f <= 0.0):
        raise ValueError("Curve frequencies must be > 0 for log interpolation.")

    x = np.log(f)
    out: list[float] = []
    for i in range(f.size):
        if v[i] == 0.0:
            out.append(float(f[i]))
            continue
        if i + 1 < f.size and v[i + 1] != 0.0 and np.sign(v[i]) != np.sign(v[i + 1]):
            t = v[i] / (v[i] - v[i + 1])
            out.append(float(np.exp(x[i] + t * (x[i + 1] - x[i]))))
    return np.asarray(out, dtype=float)


def separability(curve_a: Curve, curve_b: Curve) -> Array:
    """Δ = Re[K_a] - Re[K_b] (elementwise) on a shared frequency grid."""
    if curve_a.frequency.shape != curve_b.frequency.shape or not np.array_equal(
        curve_a.frequency, curve_b.frequency
    ):
        raise ValueError("Curves must share the same frequency grid.")
    return np.asarray(curve_a.value - curve_b.value, dtype=float)


def dep_regime(values: Array) -> Array:
    """Sign of Re[K] per point as int8. Exact zeros and non-finite values map to 0."""
    v = np.asarray(values, dtype=float)
    regime = np.zeros(v.shape, dtype=np.int8)
    finite = np.isfinite(v)
    regime[finite & (v > 0.0)] = 1
    regime[finite & (v < 0.0)] = -1
    return regime

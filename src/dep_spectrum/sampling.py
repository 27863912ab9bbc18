"""
dep_spectrum.sampling

Logarithmic frequency grid for DEP sweeps.

  f[i] = start * (end/start)^(i/count),   i = 0 .. count-1

Boundary note:
- the grid starts exactly at `start` but never reaches `end`; the last sample is
  start * (end/start)^((count-1)/count). This end-exclusive spacing is kept for
  compatibility with curves produced by earlier versions of this tool.
"""

from __future__ import annotations

import math

import numpy as np

from .types import Array, DomainError, SweepRange


def logspace_frequencies(start: float, end: float, count: int) -> Array:
    """
    Return `count` log-spaced frequencies from `start` (inclusive) toward `end` (exclusive).

    Parameters
    ----------
    start : float
        First frequency (Hz), > 0.
    end : float
        Nominal end frequency (Hz), > start. Not included in the output.
    count : int
        Number of samples, >= 1.

    Returns
    -------
    np.ndarray
        Strictly increasing frequencies in Hz.
    """
    start = float(start)
    end = float(end)
    if not (math.isfinite(start) and math.isfinite(end)):
        raise DomainError("Sweep bounds must be finite.")
    if not (start > 0.0):
        raise DomainError(f"Sweep start must be > 0 Hz (got {start!r}).")
    if not (end > start):
        raise DomainError(f"Sweep end must be > start (start={start:.3e}, end={end:.3e}).")
    if isinstance(count, bool) or int(count) != count or int(count) < 1:
        raise DomainError(f"Sample count must be an integer >= 1 (got {count!r}).")

    n = int(count)
    exponents = np.arange(n, dtype=float) / float(n)
    return start * np.power(end / start, exponents)


def sweep_frequencies(sweep: SweepRange) -> Array:
    """Validate `sweep` and return its frequency grid."""
    sweep.validate()
    return logspace_frequencies(sweep.start_hz, sweep.end_hz, sweep.sample_count)

"""
dep_spectrum.interface

Single entry point for callers (form handlers, scripts, notebooks):

  dep_curves(parameter_sets, sweep=None, max_workers=None) -> list[Curve]

Order of checks:
1) sweep bounds (DomainError, before any computation)
2) parameter sets: non-empty, each with at least one physical field (ValueError)
Then the frequency grid is sampled once and shared by all curves.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .types import Curve, ParameterSet, SweepRange
from .sampling import sweep_frequencies
from .curves import build_curves

NO_PARAMETERS_MESSAGE = "Please fill in at least one set of graph parameters to continue."


def dep_curves(
    parameter_sets: Sequence[ParameterSet],
    sweep: SweepRange | None = None,
    *,
    max_workers: Optional[int] = None,
) -> list[Curve]:
    """
    Compute one Re[K] curve per parameter set over a logarithmic sweep.

    Parameters
    ----------
    parameter_sets : sequence of ParameterSet
        Configurations to plot; each must have at least one physical field.
    sweep : SweepRange, optional
        Frequency range and sample count. Defaults to 1 kHz - 10 MHz, 5000 samples.
    max_workers : int, optional
        Evaluate curves on a thread pool of this size.

    Returns
    -------
    list of Curve
        Same order as parameter_sets.
    """
    sweep = SweepRange() if sweep is None else sweep
    frequencies = sweep_frequencies(sweep)

    sets = list(parameter_sets)
    if not sets:
        raise ValueError(NO_PARAMETERS_MESSAGE)
    empty = [p.name or f"#{i}" for i, p in enumerate(sets) if not p.is_meaningful()]
    if len(empty) == len(sets):
        raise ValueError(NO_PARAMETERS_MESSAGE)
    if empty:
        raise ValueError(f"Parameter sets without any physical field: {', '.join(empty)}")

    return build_curves(sets, frequencies, max_workers=max_workers)

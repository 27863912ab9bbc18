"""
dep_spectrum.dielectric

Frequency-domain dielectric building blocks for the DEP spectrum:
- permittivity:       ε* = ε_r ε0 - iσ/ω
- single_shell:       effective ε* of a membrane-wrapped sphere
- clausius_mossotti:  K(ω) and Re[K]

All functions are pure, NumPy-only and accept scalars or arrays. Division by
zero and indeterminate forms propagate as NaN/inf.
"""

from __future__ import annotations

from .permittivity import EPS_0, angular_frequency, complex_permittivity  # noqa: F401
from .single_shell import effective_permittivity, shell_volume_ratio  # noqa: F401
from .clausius_mossotti import cm_factor, real_cm_factor  # noqa: F401

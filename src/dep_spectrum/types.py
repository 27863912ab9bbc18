# src/dep_spectrum/types.py

from __future__ import annotations

from dataclasses import dataclass, fields
import math
from typing import Iterator, Optional

import numpy as np

Array = np.ndarray

# Default range of the graph parameter form.
DEFAULT_START_HZ: float = 1.0e3
DEFAULT_END_HZ: float = 1.0e7
DEFAULT_SAMPLE_COUNT: int = 5000

PHYSICAL_FIELDS: tuple[str, ...] = (
    "cell_radius",
    "shell_thickness",
    "media_permittivity",
    "media_conductivity",
    "membrane_permittivity",
    "membrane_conductivity",
    "cytoplasm_permittivity",
    "cytoplasm_conductivity",
)


class DomainError(ValueError):
    """Invalid sweep bounds (start <= 0, end <= start, count < 1)."""


@dataclass(frozen=True)
class ParameterSet:
    """
    One physical configuration of a single-shelled particle in a medium.

    Geometry (meters):
      cell_radius:      R, radius of the cytoplasm core
      shell_thickness:  d, membrane thickness

    Dielectric properties (relative permittivity, conductivity in S/m):
      media_*:      suspending medium
      membrane_*:   shell
      cytoplasm_*:  core

    Every physical field is optional. An absent field (None) is treated as 0.0
    wherever the value is used; value() is the only place that substitution
    happens.
    """
    name: str = ""
    cell_radius: Optional[float] = None
    shell_thickness: Optional[float] = None
    media_permittivity: Optional[float] = None
    media_conductivity: Optional[float] = None
    membrane_permittivity: Optional[float] = None
    membrane_conductivity: Optional[float] = None
    cytoplasm_permittivity: Optional[float] = None
    cytoplasm_conductivity: Optional[float] = None

    def value(self, field_name: str) -> float:
        """Return a physical field as float, 0.0 if absent."""
        if field_name not in PHYSICAL_FIELDS:
            raise ValueError(f"Unknown parameter field: {field_name!r}")
        raw = getattr(self, field_name)
        return 0.0 if raw is None else float(raw)

    def is_meaningful(self) -> bool:
        """True when at least one physical field is present."""
        return any(getattr(self, f) is not None for f in PHYSICAL_FIELDS)


@dataclass(frozen=True)
class SweepRange:
    """
    Frequency sweep definition.

    Sampling is logarithmic and end-exclusive; see
    dep_spectrum.sampling.logspace_frequencies.
    """
    start_hz: float = DEFAULT_START_HZ
    end_hz: float = DEFAULT_END_HZ
    sample_count: int = DEFAULT_SAMPLE_COUNT

    def validate(self) -> None:
        """Raise DomainError if the sweep bounds are invalid."""
        start = float(self.start_hz)
        end = float(self.end_hz)
        if not (math.isfinite(start) and math.isfinite(end)):
            raise DomainError("Sweep bounds must be finite.")
        if not (start > 0.0):
            raise DomainError(f"Sweep start must be > 0 Hz (got {start!r}).")
        if not (end > start):
            raise DomainError(f"Sweep end must be > start (start={start:.3e}, end={end:.3e}).")
        if isinstance(self.sample_count, bool) or int(self.sample_count) != self.sample_count:
            raise DomainError(f"Sample count must be an integer (got {self.sample_count!r}).")
        if int(self.sample_count) < 1:
            raise DomainError(f"Sample count must be >= 1 (got {self.sample_count!r}).")

    def frequencies(self) -> Array:
        """Sampled frequencies (Hz) for this sweep."""
        from .sampling import logspace_frequencies

        return logspace_frequencies(self.start_hz, self.end_hz, self.sample_count)


@dataclass(frozen=True)
class Point:
    """Single curve sample: frequency (Hz) and Re[K] (dimensionless)."""
    frequency: float
    value: float


@dataclass(frozen=True)
class Curve:
    """
    Labeled DEP spectrum for one ParameterSet.

    frequency: sampled frequencies (Hz), strictly increasing
    value:     Re[K(ω)] at each frequency; may hold NaN/inf at singular points

    Both arrays are stored read-only.
    """
    name: str
    frequency: Array
    value: Array

    def __post_init__(self) -> None:
        f = np.array(self.frequency, dtype=float)
        v = np.array(self.value, dtype=float)
        if f.ndim != 1 or v.shape != f.shape:
            raise ValueError("Curve frequency and value must be 1D arrays of equal length.")
        f.setflags(write=False)
        v.setflags(write=False)
        object.__setattr__(self, "frequency", f)
        object.__setattr__(self, "value", v)

    def __len__(self) -> int:
        return int(self.frequency.size)

    def __iter__(self) -> Iterator[Point]:
        for f, v in zip(self.frequency, self.value):
            yield Point(frequency=float(f), value=float(v))

    def points(self) -> tuple[Point, ...]:
        return tuple(self)

    def finite_mask(self) -> Array:
        return np.isfinite(self.value)


def parameter_field_names() -> tuple[str, ...]:
    """All ParameterSet field names, label first."""
    return tuple(f.name for f in fields(ParameterSet))

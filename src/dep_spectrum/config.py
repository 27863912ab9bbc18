"""
dep_spectrum.config

YAML run configuration.

Schema:
  sweep:                      # optional; missing keys use the defaults
    start_hz: 1000
    end_hz: 1.0e7
    sample_count: 5000
  parameter_sets:             # list; each entry maps to a ParameterSet
    - name: "Cell A"
      cell_radius: 5.0e-6
      shell_thickness: 7.0e-9
      media_permittivity: 78
      ...

Entries without any physical field are dropped, the same way blank parameter
columns are ignored by the graph form. If nothing is left, loading fails.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    DEFAULT_END_HZ,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_START_HZ,
    PHYSICAL_FIELDS,
    ParameterSet,
    SweepRange,
    parameter_field_names,
)
from .interface import NO_PARAMETERS_MESSAGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    sweep: SweepRange
    parameter_sets: tuple[ParameterSet, ...]


def _optional_float(value: Any, key: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Parameter '{key}' must be a number, got {value!r}.")
    try:
        out = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Parameter '{key}' must be a number, got {value!r}.") from e
    if not math.isfinite(out):
        raise ValueError(f"Parameter '{key}' must be a number, got {value!r}.")
    return out


def parse_sweep(raw: Mapping[str, Any] | None) -> SweepRange:
    """Build and validate a SweepRange from a mapping (missing keys -> defaults)."""
    raw = raw or {}
    if not isinstance(raw, Mapping):
        raise ValueError("'sweep' must be a mapping.")
    unknown = set(raw) - {"start_hz", "end_hz", "sample_count"}
    if unknown:
        raise ValueError(f"Unknown sweep keys: {sorted(unknown)}")

    sweep = SweepRange(
        start_hz=float(raw.get("start_hz", DEFAULT_START_HZ)),
        end_hz=float(raw.get("end_hz", DEFAULT_END_HZ)),
        sample_count=raw.get("sample_count", DEFAULT_SAMPLE_COUNT),
    )
    sweep.validate()
    return sweep


def parse_parameter_set(raw: Mapping[str, Any], index: int = 0) -> ParameterSet:
    """Build a ParameterSet from a mapping; unknown keys are rejected."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"parameter_sets[{index}] must be a mapping.")
    unknown = set(raw) - set(parameter_field_names())
    if unknown:
        raise ValueError(f"parameter_sets[{index}]: unknown keys {sorted(unknown)}")

    name = raw.get("name")
    values = {k: _optional_float(raw.get(k), k) for k in PHYSICAL_FIELDS}
    return ParameterSet(name="" if name is None else str(name), **values)


def parse_run_config(cfg: Mapping[str, Any]) -> RunConfig:
    """Build a RunConfig from an already-loaded mapping."""
    if not isinstance(cfg, Mapping):
        raise ValueError("Run configuration must be a mapping.")

    sweep = parse_sweep(cfg.get("sweep"))

    raw_sets = cfg.get("parameter_sets") or []
    if not isinstance(raw_sets, list):
        raise ValueError("'parameter_sets' must be a list.")

    kept: list[ParameterSet] = []
    for i, raw in enumerate(raw_sets):
        p = parse_parameter_set(raw, i)
        if not p.is_meaningful():
            logger.info(f"Dropping parameter set {i} ('{p.name}'): no physical fields given.")
            continue
        kept.append(p)

    if not kept:
        raise ValueError(NO_PARAMETERS_MESSAGE)

    return RunConfig(sweep=sweep, parameter_sets=tuple(kept))


def load_run_config(path: Path | str) -> RunConfig:
    """Read a YAML run configuration from disk."""
    path = Path(path)
    cfg = yaml.safe_load(path.read_text())
    if cfg is None:
        raise ValueError(f"Empty run configuration: {path}")
    return parse_run_config(cfg)

#!/usr/bin/env python3
"""
experiments/reproduce_reference_cell.py

DEP spectra for the reference cell configuration(s).

Input contract:
- experiments/reference_cell.yaml (or a path given with --config)

Prints, per curve:
- Re[K] at the first and last sampled frequency
- measured zero crossings (log-interpolated)
- closed-form upper crossover estimate (NaN when the estimate is undefined)
and, for the first two curves, the frequency of maximum separability.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from dep_spectrum.config import load_run_config
from dep_spectrum.interface import dep_curves
from dep_spectrum.crossover import estimate_upper_crossover
from dep_spectrum.diagnostics import zero_crossings, separability

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "experiments" / "reference_cell.yaml"


def banner(tag: str, **kv: object) -> None:
    items = " ".join([f"{k}={v}" for k, v in kv.items()])
    print(f"[{tag}] {items}".rstrip())


def main() -> None:
    ap = argparse.ArgumentParser(description="DEP spectra for single-shell cells.")
    ap.add_argument("--config", type=Path, default=DEFAULT_CONFIG)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = load_run_config(args.config)
    banner(
        "sweep",
        start_hz=f"{cfg.sweep.start_hz:.3e}",
        end_hz=f"{cfg.sweep.end_hz:.3e}",
        samples=cfg.sweep.sample_count,
        curves=len(cfg.parameter_sets),
    )

    curves = dep_curves(cfg.parameter_sets, cfg.sweep, max_workers=args.workers)

    for params, curve in zip(cfg.parameter_sets, curves):
        xs = zero_crossings(curve)
        f_est = estimate_upper_crossover(params)
        banner(
            "curve",
            name=repr(curve.name),
            re_k_first=f"{curve.value[0]:+.4f}",
            re_k_last=f"{curve.value[-1]:+.4f}",
            crossovers_hz="[" + ", ".join(f"{x:.3e}" for x in xs) + "]",
            upper_crossover_est_hz=f"{f_est:.3e}",
            non_finite=int(np.count_nonzero(~curve.finite_mask())),
        )

    if len(curves) >= 2:
        delta = separability(curves[0], curves[1])
        finite = np.isfinite(delta)
        if np.any(finite):
            i = int(np.argmax(np.where(finite, np.abs(delta), -np.inf)))
            banner(
                "separability",
                a=repr(curves[0].name),
                b=repr(curves[1].name),
                f_max_hz=f"{curves[0].frequency[i]:.3e}",
                delta=f"{delta[i]:+.4f}",
            )


if __name__ == "__main__":
    main()

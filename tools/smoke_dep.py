# tools/smoke_dep.py
import numpy as np
from dep_spectrum.types import ParameterSet, SweepRange
from dep_spectrum.sampling import logspace_frequencies
from dep_spectrum.dielectric.permittivity import complex_permittivity, angular_frequency
from dep_spectrum.dielectric.single_shell import effective_permittivity
from dep_spectrum.dielectric.clausius_mossotti import real_cm_factor
from dep_spectrum.curves import build_curve
from dep_spectrum.interface import dep_curves

def main() -> None:
    cell = ParameterSet(
        name="smoke",
        cell_radius=5e-6,
        shell_thickness=7e-9,
        media_permittivity=78,
        media_conductivity=0.01,
        membrane_permittivity=6,
        membrane_conductivity=1e-7,
        cytoplasm_permittivity=60,
        cytoplasm_conductivity=0.3,
    )
    f = logspace_frequencies(1e3, 1e7, 200)
    w = angular_frequency(f)

    eps_s = complex_permittivity(6, 1e-7, w)
    eps_c = complex_permittivity(60, 0.3, w)
    eps_m = complex_permittivity(78, 0.01, w)
    re_k = real_cm_factor(effective_permittivity(eps_s, eps_c, 5e-6, 7e-9), eps_m)

    curve = build_curve(cell, f)

    assert np.all(np.diff(f) > 0)
    assert f[-1] < 1e7
    assert np.all(np.isfinite(re_k))
    assert np.all((re_k >= -0.5) & (re_k <= 1.0))
    assert np.allclose(re_k, curve.value)
    assert curve.value[0] < 0 < curve.value[-1]

    (c2,) = dep_curves([cell], SweepRange(1e3, 1e7, 200))
    assert np.array_equal(c2.value, curve.value)

    print("OK: DEP smoke test passed.")

if __name__ == "__main__":
    main()

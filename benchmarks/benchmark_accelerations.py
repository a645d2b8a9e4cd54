import time
import numpy as np

from orbits.forces import compute_accelerations
from orbits.constants import GRAVITY_CONSTANT, MIN_DISTANCE_SQ


def compute_accelerations_python(positions, masses, g_constant=GRAVITY_CONSTANT):
    n = len(masses)
    acc = np.zeros((n, 3), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            r_vec = positions[i] - positions[j]
            dist_sq = float(np.dot(r_vec, r_vec))
            dist = np.sqrt(dist_sq)
            if dist == 0.0:
                continue
            force = g_constant * masses[i] * masses[j] / max(dist_sq, MIN_DISTANCE_SQ)
            force_on_i = -force * r_vec / dist
            acc[i] += force_on_i / masses[i]
            acc[j] -= force_on_i / masses[j]
    return acc


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    N = 200
    positions = rng.normal(scale=1e11, size=(N, 3))
    masses = rng.uniform(1e22, 1e30, size=N)

    t0 = time.time()
    baseline = compute_accelerations_python(positions, masses)
    t1 = time.time()
    vectorised = compute_accelerations(positions, masses)
    t2 = time.time()

    assert np.allclose(baseline, vectorised)
    print(f"Python loop: {t1 - t0:.3f}s")
    print(f"Vectorised : {t2 - t1:.3f}s")
    if t2 - t1 > 0:
        print(f"Speedup    : {(t1 - t0) / (t2 - t1):.1f}x")

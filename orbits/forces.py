"""Pairwise Newtonian gravity.

Every unordered pair of distinct bodies is visited exactly once.  The pair
force is applied with opposite signs to both members and each body's
acceleration is the sum of its contributions over all pairs.  The cost is
O(n^2), which is fine for the handful of bodies this simulator targets.
"""

import numpy as np

from . import constants as C


def pair_forces(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.GRAVITY_CONSTANT,
    min_distance_sq: float = C.MIN_DISTANCE_SQ,
):
    """Return the gravitational force of every unordered pair.

    Parameters
    ----------
    positions : ndarray, shape (n, 3)
        Body positions in metres.
    masses : ndarray, shape (n,)
        Body masses in kilograms.
    g_constant : float, optional
        Gravitational constant.
    min_distance_sq : float, optional
        Squared separations below this value are clamped to it, which bounds
        the force magnitude by ``G m_i m_j / min_distance_sq``.

    Returns
    -------
    i, j : ndarray of int
        Pair indices with ``i < j``.
    force_on_i : ndarray, shape (n_pairs, 3)
        Force exerted on body ``i`` by body ``j``. The force on ``j`` is the
        negation.
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    i, j = np.triu_indices(len(masses), k=1)

    # r points from j to i
    r_vec = positions[i] - positions[j]
    dist_sq = np.einsum("ij,ij->i", r_vec, r_vec)
    clamped_sq = np.maximum(dist_sq, min_distance_sq)

    # coincident bodies have no direction, so they exert no force
    dist = np.sqrt(dist_sq)
    r_hat = np.zeros_like(r_vec)
    nonzero = dist > 0.0
    r_hat[nonzero] = r_vec[nonzero] / dist[nonzero, None]

    magnitude = g_constant * masses[i] * masses[j] / clamped_sq
    # attraction pulls i towards j, against r
    force_on_i = -magnitude[:, None] * r_hat
    return i, j, force_on_i


def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.GRAVITY_CONSTANT,
    min_distance_sq: float = C.MIN_DISTANCE_SQ,
) -> np.ndarray:
    """Compute a fresh acceleration for every body from one position snapshot.

    Contributions from different pairs are summed, never overwritten.
    """
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    acc = np.zeros((len(masses), 3), dtype=np.float64)
    if len(masses) < 2:
        return acc

    i, j, force_on_i = pair_forces(positions, masses, g_constant, min_distance_sq)
    np.add.at(acc, i, force_on_i / masses[i, None])
    np.add.at(acc, j, -force_on_i / masses[j, None])
    return acc


def accumulate_accelerations(
    registry,
    g_constant: float = C.GRAVITY_CONSTANT,
    min_distance_sq: float = C.MIN_DISTANCE_SQ,
) -> np.ndarray:
    """Recompute and store the acceleration of every body in ``registry``."""
    acc = compute_accelerations(
        registry.positions(), registry.masses(), g_constant, min_distance_sq
    )
    for body, a in zip(registry, acc):
        body.set_acceleration(a)
    return acc

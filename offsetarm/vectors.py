"""Small 3D vector helpers used by the closed-form solver."""
from __future__ import annotations

import numpy as np


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))


def norm(v: np.ndarray) -> float:
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def hypot2(a: float, b: float) -> float:
    return float(np.hypot(a, b))


def angle_between(a: np.ndarray, b: np.ndarray, reference: np.ndarray) -> float:
    """Signed angle from ``a`` to ``b``.

    The magnitude is ``atan2(|a x b|, a . b)``. The sign is positive when
    ``reference`` points to the same side as ``a``, so ``reference`` has to be
    chosen transverse to the plane spanned by ``a`` and ``b``. A reference
    exactly orthogonal to ``a`` is read as a rotation axis instead: the angle
    is positive when ``a`` turns onto ``b`` counter-clockwise about it.

    >>> angle_between([1, 0, 0], [0, 1, 0], [1, 0, 1])
    1.5707963267948966
    >>> angle_between([1, 0, 0], [0, 1, 0], [0, 0, 1])
    1.5707963267948966
    """

    axis = cross(a, b)
    angle = float(np.arctan2(norm(axis), dot(a, b)))
    side = dot(reference, a)
    if side == 0.0:
        side = dot(reference, axis)
    sign = 1.0 if side > 0 else -1.0
    return angle * sign

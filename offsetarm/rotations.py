"""Elementary rotations and the (a, b, c) orientation convention."""
from __future__ import annotations

from typing import Tuple

import numpy as np


def rot_x(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rot_y(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rot_z(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def euler_to_rotation(a: float, b: float, c: float) -> np.ndarray:
    """Rotation ``Rz(c) @ Ry(b) @ Rx(a)``.

    Column 0 is the tool approach direction, column 1 the transverse one.
    """

    return rot_z(c) @ rot_y(b) @ rot_x(a)


def rotation_to_euler(R: np.ndarray, singular_tol: float = 1e-12) -> Tuple[float, float, float]:
    """Decompose ``R`` into ``(psi, theta, phi)`` with ``R = Rz(phi) Ry(theta) Rx(psi)``.

    The regular branch picks ``theta = pi + asin(R[2, 0])``. When ``R[2, 0]``
    reaches -1 or +1 the chain is in gimbal lock; ``phi`` is then fixed to 0
    and the remaining freedom is carried by ``psi``.
    """

    r20 = float(R[2, 0])
    if abs(abs(r20) - 1.0) > singular_tol:
        theta = np.pi + np.arcsin(r20)
        ct = np.cos(theta)
        psi = np.arctan2(R[2, 1] / ct, R[2, 2] / ct)
        phi = np.arctan2(R[1, 0] / ct, R[0, 0] / ct)
    else:
        phi = 0.0
        if r20 < 0:
            theta = np.pi / 2
            psi = phi + np.arctan2(R[0, 1], R[0, 2])
        else:
            theta = -np.pi / 2
            psi = -phi + np.arctan2(-R[0, 1], -R[0, 2])
    return float(psi), float(theta), float(phi)

"""Closed-form inverse kinematics of the offset arm.

The wrist center J4 is found by backing off from the TCP along the approach
direction by the length of the last link. That decouples the problem: the
base angle R0 orients a working plane, R1 and R2 follow from a law of cosines
triangle inside it, and the wrist angles R3-R5 are signed angles between the
reconstructed J3-J4-J5 triangle and the requested orientation.

Only one solution branch is produced per call.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .kinematics import chain_points
from .model import OffsetArm
from .rotations import euler_to_rotation, rot_y
from .types import IKOptions, Pose, UnreachablePoseError
from .vectors import angle_between, cross, hypot2

log = logging.getLogger(__name__)


def _acos(num: float, den: float, step: str, tol: float) -> float:
    """``acos(num / den)`` that refuses arguments outside the unit interval."""

    if den == 0.0:
        value = np.inf if num >= 0 else -np.inf
        log.debug("%s: degenerate triangle (zero side)", step)
        raise UnreachablePoseError(step, value)
    value = num / den
    if not -1.0 - tol <= value <= 1.0 + tol:
        log.debug("%s: out of reach (acos argument %.6g)", step, value)
        raise UnreachablePoseError(step, value)
    return float(np.arccos(np.clip(value, -1.0, 1.0)))


def ik(robot: OffsetArm, pose: Pose | Sequence[float], opts: Optional[IKOptions] = None) -> np.ndarray:
    """Joint angles placing the TCP at ``pose``.

    Args:
        robot: Arm model.
        pose: ``Pose`` or ``[x, y, z, a, b, c]``.
        opts: Solver tolerances.

    Returns:
        Array of 6 joint angles in radians.

    Raises:
        UnreachablePoseError: If the pose is outside the reachable envelope.
    """

    if opts is None:
        opts = IKOptions()
    pose = Pose.coerce(pose)
    log.debug("IK target %s", pose)
    tol = opts.domain_tol
    home = robot.home_positions
    R = robot.angle_bias.copy()

    target = euler_to_rotation(pose.a, pose.b, pose.c)
    approach = target[:, 0]
    transverse = target[:, 1]

    j5 = pose.position
    j4 = j5 - robot.v4_length * approach

    # base rotation: turn the working plane through the wrist center
    R[0] += np.pi / 2 - _acos(home[4, 2], hypot2(j4[2], j4[0]), "base", tol)
    R[0] += np.arctan2(-j4[2], j4[0])

    j4_plane = rot_y(R[0]).T @ j4
    dx = j4_plane[0] - home[1, 0]
    dy = j4_plane[1] - home[1, 1]
    dist_sq = dx * dx + dy * dy

    v1 = robot.v1_length_xy
    l23 = robot.l23_length_xy
    R[2] += _acos(-dist_sq + l23**2 + v1**2, 2.0 * l23 * v1, "elbow", tol)
    R[1] += np.arctan2(dy, dx)
    R[1] += _acos(dist_sq - l23**2 + v1**2, 2.0 * np.sqrt(dist_sq) * v1, "shoulder", tol)

    points = chain_points(robot.geometry, R[:3])
    j3 = points[3]
    log.debug("J2 %s J3 %s J4 %s", points[2], j3, j4)

    j4j5 = j5 - j4
    j4j3 = j3 - j4
    normal = cross(j4j5, j4j3)

    # horizontal axis perpendicular to the working plane
    plane_axis = np.array([np.cos(R[0] + np.pi / 2), 0.0, -np.sin(R[0] + np.pi / 2)])
    R[3] = angle_between(normal, plane_axis, cross(plane_axis, j4j3))
    R[4] += angle_between(j4j5, j4j3, cross(j4j3, normal))

    R[5] += np.pi / 2
    R[5] -= angle_between(normal, transverse, cross(transverse, approach))

    log.debug("IK angles %s", R)
    return R

"""Forward kinematics of the offset arm as an ordered fold of joint transforms."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, MutableSequence, Optional, Tuple

import numpy as np

from .rotations import rot_x, rot_y, rot_z, rotation_to_euler
from .types import FKOptions, Pose

if TYPE_CHECKING:
    from .model import OffsetArm

log = logging.getLogger(__name__)

# Rotation axis of joints 0-4; joint i turns the frame that carries link i.
JOINT_AXES: Tuple[Callable[[float], np.ndarray], ...] = (rot_y, rot_z, rot_z, rot_x, rot_z)


def tool_rotation(q5: float) -> np.ndarray:
    """Frame of the TCP relative to the joint 4 frame."""

    return rot_z(-np.pi / 2) @ rot_x(-q5)


def _homogeneous(R: np.ndarray, p: np.ndarray | None = None) -> np.ndarray:
    T = np.eye(4)
    T[:3, :3] = R
    if p is not None:
        T[:3, 3] = p
    return T


def joint_transform(joint: int, q_i: float, link: np.ndarray) -> np.ndarray:
    """Rotate by ``q_i`` about the joint axis, then translate along ``link``."""

    R = JOINT_AXES[joint](q_i)
    return _homogeneous(R, R @ link)


def joint_frames(geometry: np.ndarray, q: np.ndarray) -> List[np.ndarray]:
    """Fold the chain from the base frame.

    With fewer than five angles only that prefix of the chain is composed. A
    sixth angle appends the tool rotation to the last frame.
    """

    T = np.eye(4)
    Ts = [T.copy()]
    for joint, (link, qi) in enumerate(zip(geometry, q)):
        T = T @ joint_transform(joint, float(qi), link)
        Ts.append(T.copy())
    if len(q) > len(geometry):
        Ts[-1] = Ts[-1] @ _homogeneous(tool_rotation(float(q[len(geometry)])))
    return Ts


def chain_points(geometry: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Absolute joint positions reached by the first ``len(q)`` joints."""

    return np.array([T[:3, 3] for T in joint_frames(geometry, q)], dtype=float)


@dataclass
class FKResult:
    Ts: List[np.ndarray]
    points: np.ndarray
    pose: Pose

    @property
    def rotation(self) -> np.ndarray:
        return self.Ts[-1][:3, :3]


def fk(robot: "OffsetArm", q: np.ndarray, opts: Optional[FKOptions] = None) -> FKResult:
    """Joint angles to joint positions plus the TCP pose."""

    if opts is None:
        opts = FKOptions()
    Ts = robot.fk_Ts(q)
    points = np.array([T[:3, 3] for T in Ts], dtype=float)
    a, b, c = rotation_to_euler(Ts[-1][:3, :3], opts.singular_tol)
    tcp = points[-1]
    pose = Pose(float(tcp[0]), float(tcp[1]), float(tcp[2]), a, b, c)
    if log.isEnabledFor(logging.DEBUG):
        for i, p in enumerate(points):
            log.debug("J%d X %.6g Y %.6g Z %.6g", i, p[0], p[1], p[2])
        log.debug("J5 A %.6g B %.6g C %.6g", a, b, c)
    return FKResult(Ts=Ts, points=points, pose=pose)


def compute_tcp(robot: "OffsetArm", q: np.ndarray, out: MutableSequence[float]) -> MutableSequence[float]:
    """Write ``[x, y, z, a, b, c]`` of the TCP into ``out``."""

    if len(out) != 6:
        raise ValueError(f"Expected an output buffer of length 6, got {len(out)}")
    out[:] = fk(robot, q).pose.as_array()
    return out

"""Link geometry model of the 5-offset, 6-axis arm."""
from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from .kinematics import joint_frames
from .types import ArmConfig, GeometryError
from .vectors import hypot2, norm

log = logging.getLogger(__name__)

NUM_LINKS = 5
NUM_JOINTS = 6


def _validate_geometry(geometry) -> np.ndarray:
    try:
        geo = np.array(geometry, dtype=float)
    except (TypeError, ValueError) as exc:
        raise GeometryError("geometry must be a sequence of numeric [x, y, z] offsets") from exc
    if geo.ndim != 2 or geo.shape[0] != NUM_LINKS:
        raise GeometryError(f"geometry must have {NUM_LINKS} entries, got shape {geo.shape}")
    if geo.shape[1] != 3:
        raise GeometryError(f"each geometry entry must have 3 components, got {geo.shape[1]}")
    if not np.all(np.isfinite(geo)):
        raise GeometryError("geometry contains non-finite values")
    if geo[3, 1] != 0 or geo[3, 2] != 0 or geo[4, 0] != 0 or geo[4, 2] != 0:
        raise GeometryError("links 3 and 4 must be one dimensional: geometry[3] = [a, 0, 0], geometry[4] = [0, b, 0]")
    return geo


class OffsetArm:
    """Validated arm geometry plus the constants the solvers derive from it.

    The instance is read-only once built: every array it exposes is flagged
    non-writeable, so one model can serve concurrent solver calls.
    """

    def __init__(self, config: ArmConfig):
        self.config = config
        geo = _validate_geometry(config.geometry)
        self.geometry = geo

        self.v1_length_xy = hypot2(geo[1, 0], geo[1, 1])
        self.v4_length = norm(geo[4])
        self.l23_length_xy = hypot2(geo[2, 0] + geo[3, 0], geo[2, 1] + geo[3, 1])

        # joint positions with every angle at zero
        self.home_positions = np.vstack([np.zeros(3), np.cumsum(geo[:-1], axis=0)])

        link1_offset = np.arctan2(geo[1, 0], geo[1, 1])
        bias = np.zeros(NUM_JOINTS)
        bias[1] = -np.pi / 2 + link1_offset
        bias[2] = -np.pi / 2 - np.arctan2(geo[2, 1] + geo[3, 1], geo[2, 0] + geo[3, 0]) - link1_offset
        bias[4] = np.arctan2(geo[4, 1], geo[4, 0])
        self.angle_bias = bias

        for arr in (self.geometry, self.home_positions, self.angle_bias):
            arr.setflags(write=False)
        log.debug(
            "Built %s: V1=%.6g L23=%.6g V4=%.6g",
            config.name,
            self.v1_length_xy,
            self.l23_length_xy,
            self.v4_length,
        )

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def dof(self) -> int:
        return NUM_JOINTS

    def fk_Ts(self, q: np.ndarray) -> List[np.ndarray]:
        """Return homogeneous frames for the base, joints 1-4 and the TCP."""

        q = np.asarray(q, dtype=float)
        if q.shape != (self.dof,):
            raise ValueError(f"Expected q of shape ({self.dof},), got {q.shape}")
        return joint_frames(self.geometry, q)


def create_model(geometry: Sequence[Sequence[float]], name: str = "offset arm") -> OffsetArm:
    """Validate ``geometry`` and build the arm model."""

    geo = _validate_geometry(geometry)
    return OffsetArm(ArmConfig(geometry=tuple(tuple(link) for link in geo.tolist()), name=name))

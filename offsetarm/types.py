"""Shared dataclasses and errors for the offset-arm kinematics."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


class GeometryError(ValueError):
    """Raised when a link geometry does not describe a valid offset arm."""


class UnreachablePoseError(ValueError):
    """Raised when a requested TCP pose lies outside the reachable envelope."""

    def __init__(self, step: str, value: float):
        super().__init__(f"Pose unreachable: {step} acos argument {value:.6g} outside [-1, 1]")
        self.step = step
        self.value = value


@dataclass(frozen=True)
class Pose:
    """TCP position plus orientation angles applied as ``Rz(c) @ Ry(b) @ Rx(a)``."""

    x: float
    y: float
    z: float
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def coerce(cls, pose: "Pose | Sequence[float]") -> "Pose":
        if isinstance(pose, Pose):
            return pose
        values = np.asarray(pose, dtype=float)
        if values.shape != (6,):
            raise ValueError(f"Expected pose of shape (6,), got {values.shape}")
        return cls(*(float(v) for v in values))

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @property
    def orientation(self) -> np.ndarray:
        return np.array([self.a, self.b, self.c], dtype=float)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.a, self.b, self.c], dtype=float)


@dataclass(frozen=True)
class ArmConfig:
    """Five link offsets, each expressed in its joint's local frame."""

    geometry: tuple[tuple[float, float, float], ...]
    name: str


@dataclass(frozen=True)
class FKOptions:
    singular_tol: float = 1e-12


@dataclass(frozen=True)
class IKOptions:
    domain_tol: float = 1e-12

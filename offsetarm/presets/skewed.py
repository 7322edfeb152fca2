"""Arm with out-of-plane shoulder and upper-arm offsets."""
from __future__ import annotations

from ..model import OffsetArm
from ..types import ArmConfig


def skewed_config() -> ArmConfig:
    geometry = (
        (1.0, 1.0, 1.0),
        (0.0, 8.0, 2.0),
        (0.0, 10.0, 0.0),
        (5.0, 0.0, 0.0),
        (0.0, -6.0, 0.0),
    )
    return ArmConfig(geometry=geometry, name="Skewed offset arm")


def create_robot() -> OffsetArm:
    return OffsetArm(skewed_config())

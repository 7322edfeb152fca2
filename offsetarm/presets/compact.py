"""Compact bench arm preset with a planar shoulder offset."""
from __future__ import annotations

from ..model import OffsetArm
from ..types import ArmConfig


def compact_config() -> ArmConfig:
    geometry = (
        (1.0, 1.0, 0.0),   # base -> shoulder
        (0.0, 10.0, 0.0),  # upper arm
        (5.0, 0.0, 0.0),   # forearm
        (3.0, 0.0, 0.0),   # forearm roll -> wrist
        (0.0, -3.0, 0.0),  # wrist -> TCP
    )
    return ArmConfig(geometry=geometry, name="Compact bench arm")


def create_robot() -> OffsetArm:
    """Instantiate the compact arm from its configuration."""

    return OffsetArm(compact_config())

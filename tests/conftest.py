"""Shared fixtures for the offset-arm tests."""

import pytest

from offsetarm.model import OffsetArm
from offsetarm.presets.compact import compact_config
from offsetarm.presets.skewed import skewed_config


@pytest.fixture
def compact_arm() -> OffsetArm:
    """Arm with offsets [[1,1,0],[0,10,0],[5,0,0],[3,0,0],[0,-3,0]]."""
    return OffsetArm(compact_config())


@pytest.fixture
def skewed_arm() -> OffsetArm:
    """Arm with offsets [[1,1,1],[0,8,2],[0,10,0],[5,0,0],[0,-6,0]]."""
    return OffsetArm(skewed_config())


@pytest.fixture(params=["compact", "skewed"])
def arm(request) -> OffsetArm:
    config = compact_config() if request.param == "compact" else skewed_config()
    return OffsetArm(config)

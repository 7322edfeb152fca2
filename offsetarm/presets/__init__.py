"""Predefined arm configurations and ready-to-run demos."""

from .compact import compact_config
from .compact import create_robot as create_compact
from .demo import ArmDemo
from .skewed import create_robot as create_skewed
from .skewed import skewed_config

__all__ = [
    "compact_config",
    "create_compact",
    "skewed_config",
    "create_skewed",
    "ArmDemo",
]

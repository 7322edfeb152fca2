"""Closed-form kinematics for a 6-axis arm built from five link offsets."""
from .ik import ik
from .kinematics import FKResult, chain_points, compute_tcp, fk
from .logging_config import setup_logging
from .model import OffsetArm, create_model
from .rotations import euler_to_rotation, rotation_to_euler
from .types import ArmConfig, FKOptions, GeometryError, IKOptions, Pose, UnreachablePoseError
from .vectors import angle_between, cross, dot, hypot2, norm

__all__ = [
    "ArmConfig",
    "Pose",
    "FKOptions",
    "IKOptions",
    "GeometryError",
    "UnreachablePoseError",
    "OffsetArm",
    "create_model",
    "FKResult",
    "fk",
    "compute_tcp",
    "chain_points",
    "ik",
    "euler_to_rotation",
    "rotation_to_euler",
    "cross",
    "dot",
    "norm",
    "hypot2",
    "angle_between",
    "setup_logging",
]

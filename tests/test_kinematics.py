"""Tests for the forward kinematics fold."""

import numpy as np
import pytest

from offsetarm.kinematics import FKResult, chain_points, compute_tcp, fk, joint_frames
from offsetarm.model import OffsetArm
from offsetarm.rotations import euler_to_rotation, rot_y, rot_z
from offsetarm.types import Pose


class TestForwardKinematics:
    """Joint positions and TCP pose from joint angles."""

    def test_zero_angles_reproduce_home_table(self, arm: OffsetArm) -> None:
        res = fk(arm, np.zeros(6))
        np.testing.assert_allclose(res.points[:5], arm.home_positions, atol=1e-12)

    def test_zero_angles_tcp(self, compact_arm: OffsetArm) -> None:
        res = fk(compact_arm, np.zeros(6))
        np.testing.assert_allclose(res.points[5], [9.0, 8.0, 0.0], atol=1e-12)

    def test_result_layout(self, compact_arm: OffsetArm) -> None:
        res = fk(compact_arm, np.full(6, 0.3))
        assert isinstance(res, FKResult)
        assert res.points.shape == (6, 3)
        assert len(res.Ts) == 6
        assert isinstance(res.pose, Pose)
        np.testing.assert_allclose(res.pose.position, res.points[5])

    def test_pose_orientation_matches_chain_rotation(self, arm: OffsetArm) -> None:
        q = np.array([0.4, -0.3, 0.9, 1.2, -0.7, 2.1])
        res = fk(arm, q)
        np.testing.assert_allclose(euler_to_rotation(res.pose.a, res.pose.b, res.pose.c), res.rotation, atol=1e-12)

    def test_base_rotation_about_y(self, compact_arm: OffsetArm) -> None:
        res = fk(compact_arm, [np.pi / 2, 0, 0, 0, 0, 0])
        np.testing.assert_allclose(res.points[1], rot_y(np.pi / 2) @ [1.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(res.points[1], [0.0, 1.0, -1.0], atol=1e-12)

    def test_each_link_follows_preceding_rotations(self, compact_arm: OffsetArm) -> None:
        q = np.array([0.2, 0.5, -0.4, 0.0, 0.0, 0.0])
        pts = fk(compact_arm, q).points
        geo = compact_arm.geometry
        R01 = rot_y(q[0]) @ rot_z(q[1])
        np.testing.assert_allclose(pts[2] - pts[1], R01 @ geo[1], atol=1e-12)
        np.testing.assert_allclose(pts[3] - pts[2], R01 @ rot_z(q[2]) @ geo[2], atol=1e-12)

    def test_tool_roll_keeps_tcp_position(self, compact_arm: OffsetArm) -> None:
        q = np.array([0.1, 0.2, 0.3, 0.4, 0.5, 0.0])
        base = fk(compact_arm, q)
        q[5] = 1.3
        rolled = fk(compact_arm, q)
        np.testing.assert_allclose(rolled.points, base.points)
        # roll turns the tool about its approach axis
        np.testing.assert_allclose(rolled.rotation[:, 0], base.rotation[:, 0], atol=1e-12)
        assert not np.allclose(rolled.rotation, base.rotation)

    def test_wrong_angle_count(self, compact_arm: OffsetArm) -> None:
        with pytest.raises(ValueError, match="shape"):
            fk(compact_arm, np.zeros(5))


class TestChainPoints:
    def test_prefix_matches_full_chain(self, skewed_arm: OffsetArm) -> None:
        q = np.array([0.3, -1.1, 0.6, 0.2, 0.9, -0.4])
        full = fk(skewed_arm, q).points
        prefix = chain_points(skewed_arm.geometry, q[:3])
        assert prefix.shape == (4, 3)
        np.testing.assert_allclose(prefix, full[:4])

    def test_frames_without_tool(self, compact_arm: OffsetArm) -> None:
        Ts = joint_frames(compact_arm.geometry, np.zeros(5))
        np.testing.assert_allclose(Ts[-1][:3, :3], np.eye(3))


class TestComputeTcp:
    def test_fills_list_buffer(self, compact_arm: OffsetArm) -> None:
        q = np.array([0.1, -0.2, 0.3, -0.4, 0.5, -0.6])
        out = [0.0] * 6
        returned = compute_tcp(compact_arm, q, out)
        assert returned is out
        np.testing.assert_allclose(out, fk(compact_arm, q).pose.as_array())

    def test_fills_array_buffer(self, compact_arm: OffsetArm) -> None:
        out = np.zeros(6)
        compute_tcp(compact_arm, np.zeros(6), out)
        np.testing.assert_allclose(out[:3], [9.0, 8.0, 0.0], atol=1e-12)

    def test_rejects_short_buffer(self, compact_arm: OffsetArm) -> None:
        with pytest.raises(ValueError, match="length 6"):
            compute_tcp(compact_arm, np.zeros(6), np.zeros(3))

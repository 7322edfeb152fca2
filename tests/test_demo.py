"""Tests for the preset demos and logging setup."""

import logging

import numpy as np
import pytest

from offsetarm.logging_config import setup_logging
from offsetarm.presets import ArmDemo, create_compact, create_skewed, skewed_config


class TestPresets:
    def test_preset_names(self) -> None:
        assert create_compact().name == "Compact bench arm"
        assert create_skewed().name == skewed_config().name

    def test_demo_defaults_to_compact(self) -> None:
        demo = ArmDemo()
        np.testing.assert_array_equal(demo.robot.geometry, create_compact().geometry)


class TestArmDemo:
    @pytest.fixture
    def demo(self) -> ArmDemo:
        return ArmDemo()

    def test_forward_demo_shape(self, demo: ArmDemo) -> None:
        q = demo.forward_demo(T_final=2.0, fps=10)
        assert q.shape == (20, 6)
        assert np.all(np.abs(q) <= 0.4 + 1e-12)

    def test_fk_points(self, demo: ArmDemo) -> None:
        pts = demo.fk_points(np.zeros(6))
        np.testing.assert_allclose(pts[:5], demo.robot.home_positions, atol=1e-12)

    def test_circle_path(self, demo: ArmDemo) -> None:
        path = demo.build_yz_circle(samples=8)
        assert path.shape == (8, 3)
        np.testing.assert_allclose(path[:, 0], 7.0)
        np.testing.assert_allclose(np.hypot(path[:, 1] - 4.0, path[:, 2] - 2.0), 2.0)

    def test_ik_demo_tracks_path(self, demo: ArmDemo) -> None:
        path = demo.build_yz_circle(samples=60)
        q = demo.solve_path_ik(path)
        assert q.shape == (60, 6)
        assert demo.path_error(q, path) < 1e-6

    def test_save_result(self, demo: ArmDemo, tmp_path) -> None:
        q = demo.forward_demo(T_final=1.0, fps=5)
        dest = demo.save_result(tmp_path / "runs" / "fk_demo", q)
        assert dest.suffix == ".npz"
        data = np.load(dest)
        np.testing.assert_array_equal(data["q"], q)
        np.testing.assert_array_equal(data["geometry"], demo.robot.geometry)
        assert data["tgrid"].shape == (q.shape[0],)


class TestLoggingSetup:
    def test_setup_logging_handlers(self, tmp_path) -> None:
        log_file = tmp_path / "offsetarm.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        try:
            assert logger.name == "offsetarm"
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            logger.handlers[1].flush()
            assert "Logging initialized." in log_file.read_text(encoding="utf-8")

            setup_logging(logging.INFO)
            assert len(logger.handlers) == 1
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

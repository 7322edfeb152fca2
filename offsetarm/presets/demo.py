"""Demo utilities for the preset arms: trajectories, path IK and plots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from ..ik import ik
from ..kinematics import fk
from ..model import OffsetArm
from ..types import ArmConfig, Pose
from .compact import compact_config

log = logging.getLogger(__name__)


class ArmDemo:
    """Convenience wrapper exposing FK and IK demos for one preset arm."""

    def __init__(self, config: ArmConfig | None = None) -> None:
        self.config: ArmConfig = config if config is not None else compact_config()
        self.robot = OffsetArm(self.config)

    # ------------------------------------------------------------------
    # Forward kinematics helpers
    # ------------------------------------------------------------------
    def fk_points(self, q: np.ndarray) -> np.ndarray:
        """Return XYZ coordinates for base, joints and TCP."""

        return fk(self.robot, q).points

    def forward_demo(self, T_final: float = 10.0, fps: int = 30, amplitude: float = 0.4) -> np.ndarray:
        """Generate a smooth forward-kinematics joint trajectory around zero."""

        t = np.linspace(0.0, T_final, int(T_final * fps))
        freqs = np.array([0.2, 0.31, 0.17, 0.27, 0.23, 0.29])
        phases = np.linspace(0.0, np.pi, self.robot.dof)
        q_traj = np.zeros((len(t), self.robot.dof))
        for j in range(self.robot.dof):
            q_traj[:, j] = amplitude * np.sin(2.0 * np.pi * freqs[j] * t + phases[j])
        return q_traj

    # ------------------------------------------------------------------
    # Inverse kinematics helpers
    # ------------------------------------------------------------------
    def build_yz_circle(self, center=(7.0, 4.0, 2.0), radius: float = 2.0, samples: int = 240) -> np.ndarray:
        """Circular TCP path in a plane of constant X."""

        t = np.linspace(0.0, 2.0 * np.pi, samples, endpoint=False)
        xs = np.full_like(t, center[0])
        ys = center[1] + radius * np.cos(t)
        zs = center[2] + radius * np.sin(t)
        return np.stack([xs, ys, zs], axis=1)

    def solve_path_ik(self, path: np.ndarray, orientation: Iterable[float] = (0.0, 0.4, 0.5)) -> np.ndarray:
        """Solve every point of ``path`` with a fixed tool orientation."""

        a, b, c = (float(v) for v in orientation)
        qs = [ik(self.robot, Pose(*(float(v) for v in p), a, b, c)) for p in path]
        return np.array(qs)

    def path_error(self, q_traj: np.ndarray, path: np.ndarray) -> float:
        """Largest TCP position deviation of a solved trajectory from its path."""

        tcp = np.array([fk(self.robot, q).points[-1] for q in q_traj])
        return float(np.max(np.linalg.norm(tcp - np.asarray(path, dtype=float), axis=1)))

    def ik_demo(self, samples: int = 240) -> np.ndarray:
        path = self.build_yz_circle(samples=samples)
        q_traj = self.solve_path_ik(path)
        log.info("IK demo on %s: %d samples, max TCP error %.3g", self.config.name, samples, self.path_error(q_traj, path))
        return q_traj

    def save_result(self, path: Path | str, q: np.ndarray, tgrid: np.ndarray | None = None) -> Path:
        """Persist a joint trajectory to an ``.npz`` archive."""

        dest = Path(path)
        if dest.suffix != ".npz":
            dest = dest.with_suffix(".npz")
        dest.parent.mkdir(parents=True, exist_ok=True)
        if tgrid is None:
            tgrid = np.arange(q.shape[0], dtype=float)
        np.savez(dest, q=q, tgrid=tgrid, geometry=self.robot.geometry)
        return dest

    # ------------------------------------------------------------------
    # Visualisation helpers
    # ------------------------------------------------------------------
    def _reach(self) -> float:
        return float(np.sum(np.linalg.norm(self.robot.geometry, axis=1)))

    def animate(self, q_traj: np.ndarray, fps: int = 30, title: str | None = None):
        fig = plt.figure(figsize=(7, 6))
        ax = fig.add_subplot(111, projection="3d")
        reach = self._reach()
        ax.set_xlim([-reach, reach])
        ax.set_ylim([-reach, reach])
        ax.set_zlim([-reach, reach])
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.set_zlabel("Z")
        ax.set_title(title or f"{self.config.name} animation")
        link_lines = []
        joint_scatter = ax.scatter([], [], [], s=20)
        tcp_trail, = ax.plot([], [], [], lw=1, alpha=0.5)
        for _ in range(len(self.robot.geometry)):
            line, = ax.plot([], [], [], lw=3)
            link_lines.append(line)
        trail_pts: list[np.ndarray] = []

        def init():
            for line in link_lines:
                line.set_data([], [])
                line.set_3d_properties([])
            tcp_trail.set_data([], [])
            tcp_trail.set_3d_properties([])
            return link_lines + [tcp_trail, joint_scatter]

        def update(frame):
            q = q_traj[frame % len(q_traj)]
            pts = self.fk_points(q)
            xs, ys, zs = pts[:, 0], pts[:, 1], pts[:, 2]
            for i, line in enumerate(link_lines):
                line.set_data(xs[i : i + 2], ys[i : i + 2])
                line.set_3d_properties(zs[i : i + 2])
            joint_scatter._offsets3d = (xs[:-1], ys[:-1], zs[:-1])
            trail_pts.append(pts[-1])
            tp = np.array(trail_pts[-300:])
            tcp_trail.set_data(tp[:, 0], tp[:, 1])
            tcp_trail.set_3d_properties(tp[:, 2])
            ax.view_init(elev=25, azim=35 + 0.4 * frame)
            return link_lines + [tcp_trail, joint_scatter]

        anim = FuncAnimation(fig, update, frames=len(q_traj), init_func=init, interval=1000 / fps, blit=False)
        plt.show()
        return anim

    def plot_trajectory(self, tgrid: np.ndarray, q: np.ndarray):
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
        ax.plot(tgrid, np.rad2deg(q))
        ax.set_ylabel("q [deg]")
        ax.set_xlabel("t [s]")
        ax.legend([f"J{i}" for i in range(q.shape[1])], loc="upper right")
        ax.grid(True)
        plt.tight_layout()
        plt.show()
        return fig

"""Offset-arm demos executed directly without a command-line parser."""

from __future__ import annotations

import logging

import numpy as np

from offsetarm import UnreachablePoseError, fk, ik, setup_logging
from offsetarm.presets import ArmDemo


def main() -> None:
    setup_logging(logging.INFO)
    log = logging.getLogger("offsetarm.main")
    demo = ArmDemo()

    T_fk = 6.0
    fps = 30
    q_fk = demo.forward_demo(T_final=T_fk, fps=fps)
    t_fk = np.linspace(0.0, T_fk, q_fk.shape[0])
    demo.plot_trajectory(t_fk, q_fk)
    demo.animate(q_fk, title="Forward kinematics demo")

    pose = (1.0, 1.0, 2.0, 1.0, 2.0, 3.0)
    q = ik(demo.robot, pose)
    log.info("IK %s -> %s", pose, np.round(q, 4))
    log.info("FK back -> %s", fk(demo.robot, q).pose)

    try:
        ik(demo.robot, (100.0, 0.0, 0.0, 0.0, 0.0, 0.0))
    except UnreachablePoseError as exc:
        log.info("Rejected far target: %s", exc)

    q_ik = demo.ik_demo(samples=120)
    t_ik = np.linspace(0.0, q_ik.shape[0] / fps, q_ik.shape[0])
    demo.plot_trajectory(t_ik, q_ik)
    demo.animate(q_ik, title="Inverse kinematics demo")


if __name__ == "__main__":
    main()

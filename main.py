#!/usr/bin/env python3
"""
main.py
=======
Entry point: configure logging, build the :class:`~sim.simulation.Simulation`
and either open the Pygame window or run headless.

Environment overrides
---------------------
``DRIVE_TICK_MS``         tick length in milliseconds (default 20)
``DRIVE_TREE_SEED``       seed for tree placement (default 1)
``DRIVE_LOG_LEVEL``       DEBUG / INFO / WARNING … (default INFO)
``DRIVE_HEADLESS_TICKS``  run this many ticks without a window (default 0)
"""

import dataclasses
import logging
import os
from typing import Optional

import config
# Logging
from logging_setup import setup_logging
# Simulation core
from sim.driving_policy import DrivingPolicy
from sim.simulation import Simulation
from sim.vehicle import Intent

log = logging.getLogger("main")


def _env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if minimum is not None and value < minimum:
        log.warning("ignoring %s=%d: must be at least %d, using %d",
                    name, value, minimum, default)
        return default
    return value


def _log_level() -> int:
    name = os.environ.get("DRIVE_LOG_LEVEL", config.DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_simulation() -> Simulation:
    """Create the simulation from config defaults and environment overrides."""
    tick_ms = _env_int("DRIVE_TICK_MS", config.DEFAULT_TICK_MS, minimum=1)
    seed = _env_int("DRIVE_TREE_SEED", config.DEFAULT_TREE_SEED)
    policy = dataclasses.replace(DrivingPolicy(), tick_ms=tick_ms)
    return Simulation(policy=policy, seed=seed)


def run_headless(sim: Simulation, ticks: int) -> None:
    """Hold the accelerator and a gentle left turn for *ticks* ticks."""
    sim.press(Intent.FORWARD)
    sim.press(Intent.TURN_LEFT)
    snapshot = sim.advance(ticks)
    log.info("headless run finished: %s", snapshot.as_dict())


def main():
    setup_logging(_log_level())
    log.info("Starting traffic simulation...")

    sim = build_simulation()

    headless_ticks = _env_int("DRIVE_HEADLESS_TICKS", config.DEFAULT_HEADLESS_TICKS)
    if headless_ticks > 0:
        run_headless(sim, headless_ticks)
        return

    # Pygame is only needed for the window.
    from ui import run_pygame_view

    try:
        run_pygame_view(
            sim,
            width=config.WINDOW_WIDTH,
            height=config.WINDOW_HEIGHT,
            fps=config.TARGET_FPS,
            title=config.WINDOW_TITLE,
        )
    except KeyboardInterrupt:
        log.info("Shutting down...")


if __name__ == "__main__":
    main()

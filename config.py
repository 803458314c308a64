#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf and never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_TICK_MS: int = 20
DEFAULT_TREE_SEED: int = 1

# ── Headless mode ────────────────────────────────────────────────────────────
# 0 opens the Pygame window; any positive value runs that many ticks
# without a display and logs the final snapshot.
DEFAULT_HEADLESS_TICKS: int = 0

# ── Logging ──────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_FILE: str = "drive.log"
SIMULATION_DEBUG_LOG_FILE: str = "simulation_debug.log"

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 1300
WINDOW_HEIGHT: int = 800
TARGET_FPS: int = 60
WINDOW_TITLE: str = "Traffic Simulation"

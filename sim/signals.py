#!/usr/bin/env python3
"""
sim/signals.py
==============
Two-axis traffic-signal timing.

A single millisecond counter walks one full cycle; the current
:class:`SignalPhase` is looked up from the counter and mapped to the
colour pair through :data:`PHASE_COLORS`.  Axis A is the north–south
approach, axis B the west–east approach.

Phase boundaries (defaults in brackets)::

    counter <  green                       A_GREEN   [0, 5000)
    counter <  green + yellow              A_YELLOW  [5000, 6000)
    counter <= cycle - yellow              B_GREEN   [6000, 11000]
    counter >  cycle - yellow              B_YELLOW  (11000, 12000)

The counter is hard-reset to 0 once it reaches the cycle length; any
overshoot past the boundary is discarded, not carried forward.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, Tuple

from sim.driving_policy import DrivingPolicy, cycle_length_ms

log = logging.getLogger("signals")


class SignalColor(enum.Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


class SignalPhase(enum.Enum):
    """Which axis currently has right of way, and whether it is ending."""

    A_GREEN = "A_GREEN"
    A_YELLOW = "A_YELLOW"
    B_GREEN = "B_GREEN"
    B_YELLOW = "B_YELLOW"


# phase → (axis A colour, axis B colour)
PHASE_COLORS: Dict[SignalPhase, Tuple[SignalColor, SignalColor]] = {
    SignalPhase.A_GREEN:  (SignalColor.GREEN,  SignalColor.RED),
    SignalPhase.A_YELLOW: (SignalColor.YELLOW, SignalColor.RED),
    SignalPhase.B_GREEN:  (SignalColor.RED,    SignalColor.GREEN),
    SignalPhase.B_YELLOW: (SignalColor.RED,    SignalColor.YELLOW),
}


def phase_for(counter_ms: int, policy: DrivingPolicy) -> SignalPhase:
    """Phase active at *counter_ms* into the cycle.

    Boundaries mix strict and non-strict comparisons; see the module
    docstring for the exact windows.
    """
    if counter_ms < policy.green_ms:
        return SignalPhase.A_GREEN
    if counter_ms < policy.green_ms + policy.yellow_ms:
        return SignalPhase.A_YELLOW
    if counter_ms > cycle_length_ms(policy) - policy.yellow_ms:
        return SignalPhase.B_YELLOW
    return SignalPhase.B_GREEN


def colors_for(counter_ms: int, policy: DrivingPolicy) -> Tuple[SignalColor, SignalColor]:
    """``(axis_a, axis_b)`` colours at *counter_ms*."""
    return PHASE_COLORS[phase_for(counter_ms, policy)]


class SignalTimer:
    """Cyclic phase counter shared by both signal axes.

    Parameters
    ----------
    policy : DrivingPolicy
        Supplies ``tick_ms`` and the green / yellow / red durations.
    """

    def __init__(self, policy: DrivingPolicy) -> None:
        self.policy = policy
        self.cycle_ms = cycle_length_ms(policy)
        self.counter_ms = 0
        self.phase = phase_for(0, policy)

    def reset(self) -> None:
        self.counter_ms = 0
        self.phase = phase_for(0, self.policy)

    def step(self) -> SignalPhase:
        """Add one tick and return the resulting phase."""
        self.counter_ms += self.policy.tick_ms
        if self.counter_ms >= self.cycle_ms:
            self.counter_ms = 0
        phase = phase_for(self.counter_ms, self.policy)
        if phase is not self.phase:
            log.debug("signal phase %s -> %s at %d ms",
                      self.phase.value, phase.value, self.counter_ms)
            self.phase = phase
        return phase

    @property
    def axis_a(self) -> SignalColor:
        return PHASE_COLORS[self.phase][0]

    @property
    def axis_b(self) -> SignalColor:
        return PHASE_COLORS[self.phase][1]

    def colors(self) -> Tuple[SignalColor, SignalColor]:
        return PHASE_COLORS[self.phase]

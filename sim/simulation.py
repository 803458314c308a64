#!/usr/bin/env python3
"""
sim/simulation.py
=================
The simulation engine for the single-car intersection drive.

:class:`Simulation` owns one :class:`SimulationState` (the car, the
signal timer and the tree list) and is the only writer to it.  The tick
driver calls :meth:`Simulation.advance`, the input collaborator calls
:meth:`Simulation.set_intent` / :meth:`Simulation.reset` /
:meth:`Simulation.brake`, and the renderer reads immutable
:class:`SimulationSnapshot` objects from :meth:`Simulation.snapshot`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from sim.driving_policy import DrivingPolicy
from sim.physics import Vector3
from sim.scenery import TreeInstance, place_trees
from sim.signals import SignalColor, SignalTimer
from sim.vehicle import Intent, VehicleState

log = logging.getLogger("simulation")

# Ticks between periodic debug dumps of the car state.
_DEBUG_EVERY = 50


@dataclass
class SimulationState:
    """Everything that changes while the simulation runs."""

    vehicle: VehicleState
    signals: SignalTimer
    trees: Tuple[TreeInstance, ...] = field(default_factory=tuple)
    tick_count: int = 0


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view handed to the renderer between ticks."""

    position: Vector3
    heading: float
    heading_label: str
    speed: float
    camera_offset: Vector3
    axis_a: SignalColor
    axis_b: SignalColor
    signal_counter_ms: int
    trees: Tuple[TreeInstance, ...]
    tick_count: int = 0

    def as_dict(self) -> Dict[str, Any]:
        """Serialisable mapping without the tree list."""
        return {
            "position": list(self.position),
            "heading": self.heading,
            "heading_label": self.heading_label,
            "speed": self.speed,
            "camera_offset": list(self.camera_offset),
            "axis_a": self.axis_a.value,
            "axis_b": self.axis_b.value,
            "signal_counter_ms": self.signal_counter_ms,
            "tree_count": len(self.trees),
            "tick": self.tick_count,
        }


class Simulation:
    """Single-car intersection simulation.

    Parameters
    ----------
    policy : DrivingPolicy, optional
        Tunable constants; defaults to :class:`DrivingPolicy()`.
    seed : int, optional
        Seed for tree placement when *rng* is not supplied.
    rng : random.Random, optional
        Generator used for tree placement.
    """

    def __init__(
        self,
        policy: Optional[DrivingPolicy] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.policy = policy or DrivingPolicy()
        trees = place_trees(self.policy, rng=rng, seed=seed)
        self.state = SimulationState(
            vehicle=VehicleState(policy=self.policy),
            signals=SignalTimer(self.policy),
            trees=trees,
        )
        log.info(
            "simulation ready: tick=%d ms, cycle=%d ms, trees=%d",
            self.policy.tick_ms, self.state.signals.cycle_ms, len(trees),
        )

    # ── convenience accessors ─────────────────────────────────────────────
    @property
    def vehicle(self) -> VehicleState:
        return self.state.vehicle

    @property
    def signals(self) -> SignalTimer:
        return self.state.signals

    @property
    def trees(self) -> Tuple[TreeInstance, ...]:
        return self.state.trees

    @property
    def tick_count(self) -> int:
        return self.state.tick_count

    # ── input collaborator API ────────────────────────────────────────────
    def set_intent(self, intent: Intent, active: bool) -> None:
        """Latch or release *intent*; visible to the next tick."""
        intent = Intent(intent)
        self.vehicle.intents.set(intent, active)
        if intent.is_turn:
            self.vehicle.update_camera_offset()

    def press(self, intent: Intent) -> None:
        self.set_intent(intent, True)

    def release(self, intent: Intent) -> None:
        self.set_intent(intent, False)

    def reset(self) -> None:
        """Put the car back at its home pose.  The signal cycle keeps running."""
        self.vehicle.reset()
        log.info("vehicle reset to %s heading %.0f",
                 self.vehicle.position, self.vehicle.heading)

    def brake(self) -> None:
        self.vehicle.brake()
        log.info("brake applied at %s", self.vehicle.position)

    # ── tick driver API ───────────────────────────────────────────────────
    def advance(self, ticks: int = 1) -> SimulationSnapshot:
        """Run *ticks* fixed-duration steps and return the settled snapshot."""
        if ticks < 0:
            raise ValueError(f"cannot advance by a negative tick count ({ticks})")
        for _ in range(ticks):
            self._step()
        return self.snapshot()

    def _step(self) -> None:
        self.state.tick_count += 1
        self.vehicle.step()
        self.signals.step()

        if self.state.tick_count % _DEBUG_EVERY == 1:
            log.debug(
                "tick %d  pos=(%.2f,%.2f) hdg=%.1f(%s) spd=%.3f turn=%.2f "
                "intents=%s signal=%d ms A=%s B=%s",
                self.state.tick_count,
                self.vehicle.position[0], self.vehicle.position[2],
                self.vehicle.heading, self.vehicle.heading_label,
                self.vehicle.speed, self.vehicle.turn_interpolation,
                ",".join(self.vehicle.intents.active()) or "-",
                self.signals.counter_ms,
                self.signals.axis_a.value, self.signals.axis_b.value,
            )

    # ── renderer API ──────────────────────────────────────────────────────
    def snapshot(self) -> SimulationSnapshot:
        v = self.vehicle
        axis_a, axis_b = self.signals.colors()
        return SimulationSnapshot(
            position=(v.position[0], v.position[1], v.position[2]),
            heading=v.heading,
            heading_label=v.heading_label,
            speed=v.speed,
            camera_offset=v.camera_offset,
            axis_a=axis_a,
            axis_b=axis_b,
            signal_counter_ms=self.signals.counter_ms,
            trees=self.state.trees,
            tick_count=self.state.tick_count,
        )

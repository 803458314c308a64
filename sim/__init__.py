"""
sim: simulation core
====================

Modules
-------
simulation
    :class:`Simulation` state owner, tick loop and renderer snapshot.
vehicle
    :class:`VehicleState` kinematics and the :class:`Intent` latch.
signals
    :class:`SignalTimer` two-axis traffic-signal state machine.
scenery
    Intersection layout and procedural :func:`place_trees`.
viewpoints
    Eye / target placement for the four viewports.
driving_policy
    :class:`DrivingPolicy` tunable constants.
physics
    Heading, rotation and distance helpers.
"""

from sim.driving_policy import DrivingPolicy
from sim.signals import SignalColor, SignalPhase, SignalTimer
from sim.simulation import Simulation, SimulationSnapshot, SimulationState
from sim.vehicle import Intent, InputLatch, VehicleState

__all__ = [
    "DrivingPolicy",
    "Intent",
    "InputLatch",
    "SignalColor",
    "SignalPhase",
    "SignalTimer",
    "Simulation",
    "SimulationSnapshot",
    "SimulationState",
    "VehicleState",
]

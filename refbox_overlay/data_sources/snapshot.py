"""In-memory tracking source, used by the replay viewer and the tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from refbox_overlay.config.enums import Team
from refbox_overlay.data_sources.base import TrackingSource
from refbox_overlay.entities.data.rules import BrokenRule
from refbox_overlay.entities.data.tracking import (
    BallModel,
    BallPercept,
    BallSample,
    Pose,
    RobotPercept,
    RobotSample,
)
from refbox_overlay.entities.data.vector import Vector3D


@dataclass
class RobotSlot:
    """Everything the tracker knows about one (team, id) roster slot."""

    model: RobotSample
    seen: bool = True
    percepts: List[RobotPercept] = field(default_factory=list)
    samples: List[RobotSample] = field(default_factory=list)


@dataclass
class TrackingSnapshot:
    """Complete tracking and rule engine state at one point in time."""

    timestamp: float
    ball_model: BallModel = field(default_factory=lambda: BallModel(pos=Vector3D(0, 0, 0)))
    ball_percepts: List[BallPercept] = field(default_factory=list)
    ball_samples: List[BallSample] = field(default_factory=list)
    robots: Dict[Tuple[int, int], RobotSlot] = field(default_factory=dict)
    broken_rules: List[BrokenRule] = field(default_factory=list)
    play_states: Tuple[int, int] = (0, 0)


class SnapshotSource(TrackingSource):
    """Serves a ``TrackingSnapshot`` through the ``TrackingSource`` contract.

    Accessors hand out copies so callers cannot alter the snapshot.
    """

    def __init__(self, snapshot: TrackingSnapshot):
        self.snapshot = snapshot

    def update(self, snapshot: TrackingSnapshot) -> None:
        self.snapshot = snapshot

    def get_current_ball_percepts(self) -> list[BallPercept]:
        return list(self.snapshot.ball_percepts)

    def get_ball_samples(self) -> list[BallSample]:
        return list(self.snapshot.ball_samples)

    def get_ball_model(self) -> BallModel:
        return self.snapshot.ball_model

    def _slot(self, team: int, robot_id: int):
        return self.snapshot.robots.get((int(team), int(robot_id)))

    def get_robot_seen(self, team: int, robot_id: int) -> bool:
        slot = self._slot(team, robot_id)
        return slot is not None and slot.seen

    def get_current_robot_percepts(self, team: int, robot_id: int) -> list[RobotPercept]:
        slot = self._slot(team, robot_id)
        return list(slot.percepts) if slot is not None else []

    def get_robot_samples(self, team: int, robot_id: int) -> list[RobotSample]:
        slot = self._slot(team, robot_id)
        return list(slot.samples) if slot is not None else []

    def get_robot_model(self, team: int, robot_id: int) -> RobotSample:
        slot = self._slot(team, robot_id)
        if slot is None:
            # The tracker keeps a model for every slot; an unknown slot sits at the origin.
            return RobotSample(team=Team(team), id=int(robot_id), pos=Pose(0.0, 0.0))
        return slot.model

    def get_broken_rules(self) -> list[BrokenRule]:
        return list(self.snapshot.broken_rules)

    def get_internal_play_states(self) -> tuple[int, int]:
        return self.snapshot.play_states

    def get_timestamp(self) -> float:
        return self.snapshot.timestamp

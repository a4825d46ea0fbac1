"""Contract between the overlay renderer and the tracking / rule collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from refbox_overlay.config.settings import NUMBER_OF_IDS, NUMBER_OF_TEAMS
from refbox_overlay.entities.data.rules import BrokenRule
from refbox_overlay.entities.data.tracking import (
    BallModel,
    BallPercept,
    BallSample,
    RobotPercept,
    RobotSample,
)


class TrackingSource(ABC):
    """Read-only view of the current tracking and rule engine state.

    Every accessor returns a snapshot that the caller may keep for the rest
    of the frame. Implementations must be safe to call from the render
    thread without tearing.
    """

    NUMBER_OF_TEAMS = NUMBER_OF_TEAMS
    NUMBER_OF_IDS = NUMBER_OF_IDS

    @abstractmethod
    def get_current_ball_percepts(self) -> Sequence[BallPercept]: ...

    def get_ball_samples(self) -> Sequence[BallSample]:
        """Filter hypotheses for the ball. Sources without access to them return nothing."""
        return ()

    @abstractmethod
    def get_ball_model(self) -> BallModel: ...

    @abstractmethod
    def get_robot_seen(self, team: int, robot_id: int) -> bool: ...

    @abstractmethod
    def get_current_robot_percepts(self, team: int, robot_id: int) -> Sequence[RobotPercept]: ...

    def get_robot_samples(self, team: int, robot_id: int) -> Sequence[RobotSample]:
        """Filter hypotheses for one robot. Sources without access to them return nothing."""
        return ()

    @abstractmethod
    def get_robot_model(self, team: int, robot_id: int) -> RobotSample: ...

    @abstractmethod
    def get_broken_rules(self) -> Sequence[BrokenRule]:
        """All logged violations, oldest first."""
        ...

    @abstractmethod
    def get_internal_play_states(self) -> tuple[int, int]:
        """The (current, next) internal play state values."""
        ...

    @abstractmethod
    def get_timestamp(self) -> float: ...

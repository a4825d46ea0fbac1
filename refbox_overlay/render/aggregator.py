"""Per-frame collection of drawable object estimates from a ``TrackingSource``."""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from refbox_overlay.config.settings import MAX_ABS_ORIENTATION
from refbox_overlay.data_sources.base import TrackingSource
from refbox_overlay.entities.data.tracking import (
    BallModel,
    BallPercept,
    BallSample,
    RobotPercept,
    RobotSample,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameObjects:
    """Flattened estimates for one frame, in roster order (team, then id)."""

    ball_percepts: Tuple[BallPercept, ...]
    ball_samples: Tuple[BallSample, ...]
    ball_model: BallModel
    robot_percepts: Tuple[RobotPercept, ...]
    robot_samples: Tuple[RobotSample, ...]
    robot_models: Tuple[RobotSample, ...]


def orientation_in_range(rotation: float) -> bool:
    return -MAX_ABS_ORIENTATION < rotation < MAX_ABS_ORIENTATION


class ObjectStateAggregator:
    """Pulls ball and robot estimates out of the fixed team x id roster.

    Only slots the source reports as seen contribute: all of their percepts
    and samples, and exactly one model. Nothing is written back to the source.
    """

    def __init__(self):
        self._robot_percepts: List[RobotPercept] = []
        self._robot_samples: List[RobotSample] = []
        self._robot_models: List[RobotSample] = []

    def aggregate(self, source: TrackingSource) -> FrameObjects:
        self._robot_percepts.clear()
        self._robot_samples.clear()
        self._robot_models.clear()

        ball_percepts = tuple(source.get_current_ball_percepts())
        ball_samples = tuple(source.get_ball_samples())
        ball_model = source.get_ball_model()

        for team in range(source.NUMBER_OF_TEAMS):
            for robot_id in range(source.NUMBER_OF_IDS):
                if not source.get_robot_seen(team, robot_id):
                    continue
                for percept in source.get_current_robot_percepts(team, robot_id):
                    self._check_orientation(percept.orientation, team, robot_id, "percept")
                    self._robot_percepts.append(percept)
                for sample in source.get_robot_samples(team, robot_id):
                    self._check_orientation(sample.pos.rotation, team, robot_id, "sample")
                    self._robot_samples.append(sample)
                model = source.get_robot_model(team, robot_id)
                self._check_orientation(model.pos.rotation, team, robot_id, "model")
                self._robot_models.append(model)

        return FrameObjects(
            ball_percepts=ball_percepts,
            ball_samples=ball_samples,
            ball_model=ball_model,
            robot_percepts=tuple(self._robot_percepts),
            robot_samples=tuple(self._robot_samples),
            robot_models=tuple(self._robot_models),
        )

    @staticmethod
    def _check_orientation(rotation: float, team: int, robot_id: int, kind: str) -> None:
        # Drawn as is; the tracker is expected to keep orientations within a few turns of zero.
        if not orientation_in_range(rotation):
            logger.warning(
                "Robot %s of team %s has %s orientation %s outside (-%s, %s)",
                robot_id,
                team,
                kind,
                rotation,
                MAX_ABS_ORIENTATION,
                MAX_ABS_ORIENTATION,
            )

"""Per-frame snapshots handed over by the tracking collaborator.

position data: millimetres
orientation: radians
"""

import logging
from dataclasses import dataclass
from typing import Optional

from refbox_overlay.config.enums import Team
from refbox_overlay.entities.data.vector import Vector3D

logger = logging.getLogger(__name__)

# Team value the rule engine logs when no robot is to blame
NO_TEAM = -1


@dataclass(frozen=True)
class RobotRef:
    """Identifies one roster slot."""

    team: Team
    id: int

    @classmethod
    def from_raw(cls, team: int, robot_id: int) -> Optional["RobotRef"]:
        """Decode the collaborator's (team, id) pair, where team -1 means "nobody".

        Team values other than 0 and 1 are logged and treated as blue.
        """
        if team == NO_TEAM:
            return None
        if team not in (Team.YELLOW, Team.BLUE):
            logger.warning("Bad team %s for robot %s, treating it as blue", team, robot_id)
            return cls(Team.BLUE, int(robot_id))
        return cls(Team(team), int(robot_id))

    def refers_to(self, robot: "RobotSample") -> bool:
        return self.team == robot.team and self.id == robot.id


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    rotation: float = 0.0


@dataclass(frozen=True)
class BallPercept:
    x: float
    y: float


@dataclass(frozen=True)
class BallSample:
    pos: Vector3D


@dataclass(frozen=True)
class BallModel:
    pos: Vector3D
    last_touched: Optional[RobotRef] = None


@dataclass(frozen=True)
class RobotPercept:
    """A vision detection. ``team`` is None when the detector could not tell the colour."""

    x: float
    y: float
    team: Optional[Team]
    rotation: float = 0.0
    rotation_known: bool = False

    @property
    def orientation(self) -> float:
        return self.rotation if self.rotation_known else 0.0


@dataclass(frozen=True)
class RobotSample:
    """A filter hypothesis for one robot. The fused model uses the same shape."""

    team: Team
    id: int
    pos: Pose

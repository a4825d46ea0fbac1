"""Broken rule events as logged by the rule engine."""

from dataclasses import dataclass
from typing import Optional

from refbox_overlay.config.enums import DefenseSide
from refbox_overlay.entities.data.tracking import RobotRef
from refbox_overlay.entities.data.vector import Vector2D

# The rule engine marks absent coordinates with this value
ABSENT_COORDINATE = -1


@dataclass(frozen=True)
class LineSegment:
    p1: Vector2D
    p2: Vector2D


@dataclass(frozen=True)
class BrokenRule:
    """One logged rule violation plus optional hints for drawing it."""

    rule_number: int
    when_broken: float
    rule_breaker: Optional[RobotRef] = None
    freekick_pos: Optional[Vector2D] = None
    circle_around_ball: bool = False
    defense_area: Optional[DefenseSide] = None
    line: Optional[LineSegment] = None
    standing: tuple[int, int] = (0, 0)

    @classmethod
    def from_raw(
        cls,
        rule_number: int,
        when_broken: float,
        rule_breaker: tuple[int, int] = (-1, -1),
        freekick_pos: tuple[float, float] = (ABSENT_COORDINATE, ABSENT_COORDINATE),
        circle_around_ball: bool = False,
        defense_area: int = -1,
        line_for_smth: tuple[tuple[float, float], tuple[float, float]] = (
            (ABSENT_COORDINATE, ABSENT_COORDINATE),
            (ABSENT_COORDINATE, ABSENT_COORDINATE),
        ),
        standing: tuple[int, int] = (0, 0),
    ) -> "BrokenRule":
        """Build an event from the rule engine's sentinel-coded fields.

        A breaker team of -1, a freekick x of -1, a defense area other than
        0 (left) or 1 (right) and a line whose first x is -1 all mean "absent".
        """
        p1, p2 = line_for_smth
        return cls(
            rule_number=int(rule_number),
            when_broken=when_broken,
            rule_breaker=RobotRef.from_raw(*rule_breaker),
            freekick_pos=None if freekick_pos[0] == ABSENT_COORDINATE else Vector2D.from_array(freekick_pos),
            circle_around_ball=bool(circle_around_ball),
            defense_area=DefenseSide(defense_area) if defense_area in (0, 1) else None,
            line=None if p1[0] == ABSENT_COORDINATE else LineSegment(Vector2D.from_array(p1), Vector2D.from_array(p2)),
            standing=(int(standing[0]), int(standing[1])),
        )

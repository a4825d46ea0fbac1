"""FieldGeometry: immutable field dimensions for the overlay renderer."""

from dataclasses import dataclass

from refbox_overlay.config.enums import DefenseSide


@dataclass(frozen=True)
class FieldGeometry:
    """Dimensions of the small-size field the overlay is drawn on.

    All measurements are in millimetres, origin at the centre mark, +x toward
    the right goal, +y toward the top of the field. "Width" runs along x and
    "height" along y, as in the tracking coordinate system.
    """

    half_field_width: float  # centre to goal line
    half_field_height: float  # centre to touch line
    half_width: float  # centre to outer boundary along x
    half_height: float  # centre to outer boundary along y
    goal_width: float
    goal_depth: float
    defense_radius: float
    defense_line: float
    penalty_mark_distance: float
    center_radius: float
    robot_radius: float
    ball_radius: float

    def __post_init__(self):
        for name, value in self.__dict__.items():
            if value <= 0:
                raise ValueError(f"FieldGeometry.{name} must be positive, got {value}")
        if self.half_width < self.half_field_width or self.half_height < self.half_field_height:
            raise ValueError("Outer boundary must enclose the playing field")

    @classmethod
    def standard(cls) -> "FieldGeometry":
        """Return the 6050 x 4050 field used by the autonomous refbox."""
        return cls(
            half_field_width=3025,
            half_field_height=2025,
            half_width=3700,
            half_height=2700,
            goal_width=700,
            goal_depth=180,
            defense_radius=500,
            defense_line=350,
            penalty_mark_distance=750,
            center_radius=500,
            robot_radius=90,
            ball_radius=21.5,
        )

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def half_goal_width(self) -> float:
        return self.goal_width / 2

    @property
    def goal_back(self) -> float:
        """x of the back of the right goal."""
        return self.half_field_width + self.goal_depth

    @property
    def half_defense_line(self) -> float:
        return self.defense_line / 2

    @property
    def penalty_mark_x(self) -> float:
        """x of the right penalty mark."""
        return self.half_field_width - self.penalty_mark_distance

    @staticmethod
    def mirror_sign(side: DefenseSide) -> int:
        """Sign flip applied to left-side geometry to obtain ``side``."""
        return 1 if side == DefenseSide.LEFT else -1

from enum import Enum, IntEnum, IntFlag


class Team(IntEnum):
    """
    Team colours, numbered the way the tracking collaborator numbers them.
    """

    YELLOW = 0
    BLUE = 1


class ObjectClass(Enum):
    """Where a drawn object estimate comes from."""

    PERCEPT = "percept"
    SAMPLE = "sample"
    MODEL = "model"
    SHADOW = "shadow"  # ball only, display helper


class DefenseSide(IntEnum):
    LEFT = 0
    RIGHT = 1


class Quadrant(IntFlag):
    Q_I = 1
    Q_II = 2
    Q_III = 4
    Q_IV = 8
    ALL = Q_I | Q_II | Q_III | Q_IV

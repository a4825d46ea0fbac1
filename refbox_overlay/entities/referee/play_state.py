import logging
from enum import Enum

logger = logging.getLogger(__name__)


class PlayState(Enum):
    """
    Internal phase of the game flow as tracked by the rule engine.
    """

    HALTED = 0
    STOPPED = 1
    RUNNING = 2
    PREPARE_KICKOFF_YELLOW = 3
    PREPARE_KICKOFF_BLUE = 4
    KICKOFF_YELLOW = 5
    KICKOFF_BLUE = 6
    PREPARE_PENALTY_YELLOW = 7
    PREPARE_PENALTY_BLUE = 8
    PENALTY_YELLOW = 9
    PENALTY_BLUE = 10
    DIRECT_FREEKICK_YELLOW = 11
    DIRECT_FREEKICK_BLUE = 12
    INDIRECT_FREEKICK_YELLOW = 13
    INDIRECT_FREEKICK_BLUE = 14
    TIMEOUT_YELLOW = 15
    TIMEOUT_BLUE = 16
    BEFORE_GAME = 17

    @staticmethod
    def from_id(state_id: int):
        for state in PlayState:
            if state.value == state_id:
                return state
        raise ValueError(f"Invalid play state ID: {state_id}")


UNKNOWN_PLAY_STATE = "UNKNOWN"


def play_state_string(state) -> str:
    """Display string for a play state given as a ``PlayState`` or its raw value."""
    if not isinstance(state, PlayState):
        try:
            state = PlayState.from_id(state)
        except ValueError:
            logger.warning("Unknown play state value: %s", state)
            return UNKNOWN_PLAY_STATE
    return state.name

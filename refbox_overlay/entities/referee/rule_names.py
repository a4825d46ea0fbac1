import logging

logger = logging.getLogger(__name__)

UNKNOWN_RULE_NAME = "unknown"

# Indexed by rule number - 1, in the order the rule engine numbers its rules.
RULE_NAMES = (
    "Ball out over touch line",
    "Ball out over goal line",
    "Ball not in play before kickoff",
    "Kickoff taken too early",
    "Robot in opponent half during kickoff",
    "Robot too close to ball during kickoff",
    "Kicker touched ball twice",
    "Robot too close to ball during stop",
    "Robot too fast during stop",
    "Robot too close to ball during freekick",
    "Freekick not taken in time",
    "Indirect freekick scored directly",
    "Penalty taken too early",
    "Robot too close to penalty mark",
    "Goalkeeper left goal line during penalty",
    "Attacker in defense area",
    "Attacker touched goalkeeper",
    "Defender partially in defense area",
    "Multiple defenders in defense area",
    "Goalkeeper changed without permission",
    "Robot pushing",
    "Robot collision",
    "Robot holding ball",
    "Dribbling too far",
    "Ball kicked too fast",
    "Ball chipped into goal",
    "Robot outside field",
    "Too many robots on field",
    "Goal",
    "Goal from own half",
    "Goal after dribbling",
    "Ball entered goal from behind",
    "Robot entered field during play",
    "Timeout requested",
    "Ball placement failed",
    "Robot not moving",
    "Defender touched ball in defense area",
    "Robot kicked during stop",
    "Double touch after freekick",
    "Unsporting behaviour",
    "No progress in game",
    "Ball left field after defender touch",
)


def rule_name(rule_number: int) -> str:
    """Name of a 1-based rule number, or ``"unknown"`` for numbers outside the table."""
    if rule_number < 1 or rule_number > len(RULE_NAMES):
        logger.warning("Bad index for rule: %s", rule_number)
        return UNKNOWN_RULE_NAME
    return RULE_NAMES[rule_number - 1]

COLORS = {
    "BLACK": (0, 0, 0),
    "WHITE": (255, 255, 255),
    "RED": (255, 0, 0),
    "YELLOW": (255, 255, 0),
    "BLUE": (0, 0, 255),
    "LIGHT_BLUE": (0, 77, 255),
    "GREY": (153, 153, 153),
    "ORANGE": (247, 140, 25),
    "MAGENTA": (255, 64, 255),
    "FIELD_GREEN": (20, 90, 40),
}

FALLBACK_COLOR = COLORS["BLACK"]

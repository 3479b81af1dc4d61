from enum import IntEnum


class BasicPalette(IntEnum):
    """The eight basic terminal colors; the value is the SGR offset."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

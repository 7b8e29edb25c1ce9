# catfetch/ui/palette.py
from enum import Enum
from typing import List

from rich.style import Style

LABEL_COLOR = "bright_blue"
IDENTITY_COLOR = "bright_green"
BLOCK = "███"

BRIGHT_PALETTE = [
    "bright_red", "bright_yellow", "bright_green", "bright_cyan",
    "bright_blue", "bright_magenta", "bright_black", "bright_white",
]
NORMAL_PALETTE = [
    "red", "yellow", "green", "cyan",
    "blue", "magenta", "black", "white",
]


class Emphasis(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


EMPHASIS_COLORS = {
    Emphasis.LOW: "green",
    Emphasis.MEDIUM: "yellow",
    Emphasis.HIGH: "red",
}


def colorize(text: str, color: str) -> str:
    """Wrap text in the ANSI start/reset sequences for a rich color name."""
    return Style(color=color).render(text)


def emphasis_for(percentage: float) -> Emphasis:
    if percentage < 50.0:
        return Emphasis.LOW
    if percentage < 90.0:
        return Emphasis.MEDIUM
    return Emphasis.HIGH


def colorize_percentage(percentage: float) -> str:
    return colorize(f"({percentage:.1f}%)", EMPHASIS_COLORS[emphasis_for(percentage)])


def color_rows() -> List[str]:
    """The two footer rows of color blocks, bright palette first."""
    return [
        "".join(colorize(BLOCK, color) for color in BRIGHT_PALETTE),
        "".join(colorize(BLOCK, color) for color in NORMAL_PALETTE),
    ]

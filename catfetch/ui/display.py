# catfetch/ui/display.py

from typing import List, Optional

from rich.console import Console
from rich.text import Text

from catfetch.models.models import split_lines


def visible_width(line: str) -> int:
    """Terminal columns the line occupies once ANSI escape sequences are decoded away."""
    if not line:
        return 0
    return Text.from_ansi(line).cell_len


def render_rows(logo: str, info: str, gap: int = 0) -> List[str]:
    """Lay the logo and info blocks side by side, vertically centering the logo."""
    logo_lines = split_lines(logo)
    info_lines = split_lines(info)

    max_lines = max(len(logo_lines), len(info_lines))
    logo_width = max((visible_width(line) for line in logo_lines), default=0)
    padding = (max_lines - len(logo_lines)) // 2

    rows = []
    for i in range(max_lines):
        logo_index = i - padding
        logo_cell = logo_lines[logo_index] if 0 <= logo_index < len(logo_lines) else ""
        info_cell = info_lines[i] if i < len(info_lines) else ""
        fill = max(logo_width - visible_width(logo_cell), 0) + gap
        rows.append(f"{logo_cell}{' ' * fill}{info_cell}")
    return rows


def print_side_by_side(logo: str, info: str, console: Optional[Console] = None, gap: int = 0) -> None:
    """Write the rows with their escape sequences untouched; rich only measures them."""
    console = console or Console()
    for row in render_rows(logo, info, gap=gap):
        console.file.write(f"{row}\n")
    console.file.flush()

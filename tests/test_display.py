# tests/test_display.py
import io

from rich.console import Console

from catfetch.ui.display import print_side_by_side, render_rows, visible_width

RED = "\x1b[31m"
RESET = "\x1b[0m"


def test_visible_width_skips_escape_sequences():
    assert visible_width(f"\x1b[38;2;0;0;0m▄{RESET}") == 1
    assert visible_width(f"\x1b[48;2;0;0;0m\x1b[38;2;47;29;12m▄{RESET}  ") == 3
    assert visible_width("") == 0
    assert visible_width("  ▀▀ ") == 5


def test_row_count_is_the_taller_block():
    cases = [
        ("", ""),
        ("", "a\nb\nc"),
        ("x\ny", ""),
        ("x\ny\nz\nw", "a"),
        ("x", "a\nb\nc\nd\ne"),
    ]
    for logo, info in cases:
        expected = max(len(logo.splitlines()), len(info.splitlines()))
        assert len(render_rows(logo, info)) == expected


def test_short_logo_is_vertically_centered():
    rows = render_rows("A\nB", "1\n2\n3\n4\n5\n6")

    assert rows == [" 1", " 2", "A3", "B4", " 5", " 6"]


def test_centering_truncates_odd_padding():
    rows = render_rows("A", "1\n2")

    assert rows == ["A1", " 2"]


def test_tall_logo_has_no_padding_rows():
    rows = render_rows("AA\nB\nCC", "1")

    assert rows == ["AA1", "B ", "CC"]


def test_empty_logo_prints_info_unpadded():
    assert render_rows("", "a\nb") == ["a", "b"]


def test_empty_info_prints_logo_only():
    assert render_rows("AB\nC", "") == ["AB", "C "]


def test_alignment_uses_visible_width():
    logo = f"{RED}▄{RESET}\n▄▄"
    rows = render_rows(logo, "a\nb")

    assert rows[0] == f"{RED}▄{RESET} a"
    assert rows[1] == "▄▄b"


def test_gap_adds_separation():
    assert render_rows("A\nBB", "x\ny", gap=2) == ["A   x", "BB  y"]


def test_carriage_return_is_not_a_line_break():
    rows = render_rows("A\rB\nC", "1\n2")

    assert len(rows) == 2
    assert rows[0].startswith("A\rB") and rows[0].endswith("1")
    assert rows[1].startswith("C") and rows[1].endswith("2")


def test_trailing_carriage_return_is_dropped():
    assert render_rows("AB\r\nCD\r\n", "1\n2\n") == ["AB1", "CD2"]


def test_print_side_by_side_keeps_escape_sequences():
    truecolor = "\x1b[38;2;1;2;3m\u2584\x1b[0m"
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=True, color_system="256")

    print_side_by_side(f"{truecolor}\n\x1b[1m\u2580", "x\ny", console=console)

    assert buffer.getvalue() == f"{truecolor}x\n\x1b[1m\u2580y\n"


def test_print_side_by_side_writes_raw_rows_when_piped():
    buffer = io.StringIO()
    logo = f"{RED}A{RESET}\nB"

    print_side_by_side(logo, "1\n2", console=Console(file=buffer))

    assert buffer.getvalue() == "".join(f"{row}\n" for row in render_rows(logo, "1\n2"))
    assert buffer.getvalue().startswith(RED)

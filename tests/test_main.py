# tests/test_main.py
import io

from rich.console import Console
from rich.text import Text

from catfetch import main as catfetch_main
from catfetch.assets.logos import TINY_CAT
from catfetch.config import Config


def test_parse_type_flags():
    assert catfetch_main.parse_args(["-t", "2"]).logo_type == 2
    assert catfetch_main.parse_args(["--type", "3"]).logo_type == 3
    assert catfetch_main.parse_args([]).logo_type is None


def test_bad_or_partial_flags_are_ignored():
    assert catfetch_main.parse_args(["-t"]).logo_type is None
    assert catfetch_main.parse_args(["-t", "big"]).logo_type is None
    assert catfetch_main.parse_args(["--verbose", "extra"]).logo_type is None


def test_run_prints_logo_beside_info(fake_query):
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)

    catfetch_main.run(Config(logo_type=3), query=fake_query, console=console)

    rows = [Text.from_ansi(row).plain for row in buffer.getvalue().split("\n")[:-1]]
    assert len(rows) == 11
    assert any("alice@box" in row for row in rows)
    assert any("mem : 8.00 >> 16.00 GB (50.0%)" in row for row in rows)
    # five logo lines centered against eleven info lines
    assert rows[3].startswith(" /\\_/\\  ")
    assert buffer.getvalue().split("\n")[3].startswith("\x1b[33m")
    assert not rows[2].startswith(" /\\_/\\")
    assert len(TINY_CAT.splitlines()) == 5


def test_main_uses_type_flag(monkeypatch):
    seen = {}

    def fake_run(config):
        seen["config"] = config

    monkeypatch.setattr(catfetch_main, "run", fake_run)

    assert catfetch_main.main(["-t", "2"]) == 0
    assert seen["config"].logo_type == 2


def test_main_reports_failure_as_exit_code(monkeypatch):
    def broken_run(config):
        raise RuntimeError("terminal went away")

    monkeypatch.setattr(catfetch_main, "run", broken_run)

    assert catfetch_main.main([]) == 1


def test_help_flag_is_ignored():
    assert catfetch_main.parse_args(["-h"]).logo_type is None
    assert catfetch_main.parse_args(["--help", "-t", "2"]).logo_type == 2


def test_unwritable_log_file_still_prints_fetch(monkeypatch, capsys, tmp_path, make_query):
    monkeypatch.setenv("CATFETCH_LOG_FILE", str(tmp_path / "no" / "such" / "dir" / "catfetch.log"))
    monkeypatch.setattr(catfetch_main, "PsutilSystemQuery", make_query)

    assert catfetch_main.main([]) == 0

    captured = capsys.readouterr()
    assert "alice@box" in captured.out
    assert "Cannot write log file" in captured.err

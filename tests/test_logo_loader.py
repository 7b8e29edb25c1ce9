# tests/test_logo_loader.py
import pytest

from catfetch.assets.logos import BIG_CAT, SMALL_CAT, TINY_CAT
from catfetch.collector.logo_loader import builtin_logo, load_logo, read_logo_file, unescape
from catfetch.config import Config


def test_unescape_replaces_each_token():
    raw = r'\x1b[31m▄\x1b[0m\nA\tB\rC \"q\" \'s\' back\\slash'

    assert unescape(raw) == '\x1b[31m▄\x1b[0m\nA\tB\rC "q" \'s\' back\\slash'


def test_unescape_leaves_other_text_alone():
    raw = r"plain \a \x1c é text"

    assert unescape(raw) == raw


def test_unescape_is_a_single_pass():
    # an escaped backslash followed by n is not a newline
    assert unescape(r"\\n") == "\\n"
    assert unescape(r"\\\n") == "\\\n"


@pytest.mark.parametrize("logo_type, text", [
    (1, BIG_CAT),
    (2, SMALL_CAT),
    (3, TINY_CAT),
    (0, BIG_CAT),
    (42, BIG_CAT),
    (None, BIG_CAT),
])
def test_builtin_selection(logo_type, text):
    logo = builtin_logo(logo_type)

    assert logo.text == text
    assert logo.source == "builtin"


def test_logo_file_wins_over_builtin(tmp_path):
    logo_file = tmp_path / "logo.txt"
    logo_file.write_text(r"\x1b[32m/\\_/\\\x1b[0m\n( o.o )", encoding="utf-8")

    logo = load_logo(Config(logo_type=2, logo_file=logo_file))

    assert logo.source == "file"
    assert logo.lines == ["\x1b[32m/\\_/\\\x1b[0m", "( o.o )"]


def test_default_logo_path_under_home(tmp_path):
    logo_dir = tmp_path / "home" / ".config" / "catfetch"
    logo_dir.mkdir(parents=True)
    (logo_dir / "logo.txt").write_text("=^.^=", encoding="utf-8")

    logo = load_logo(Config())

    assert logo.text == "=^.^="


def test_empty_logo_file_falls_through(tmp_path):
    logo_file = tmp_path / "logo.txt"
    logo_file.write_text("  \n\n", encoding="utf-8")

    assert read_logo_file(logo_file) is None
    assert load_logo(Config(logo_type=2, logo_file=logo_file)).text == SMALL_CAT


def test_missing_or_unreadable_logo_file_falls_through(tmp_path):
    assert read_logo_file(tmp_path / "missing.txt") is None
    assert read_logo_file(tmp_path) is None
    assert read_logo_file(None) is None

    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\xfa")
    assert read_logo_file(bad) is None


def test_unresolvable_home_falls_back_to_builtin(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr("catfetch.config.Path.home", no_home)

    assert load_logo(Config()).text == BIG_CAT

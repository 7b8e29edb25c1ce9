# catfetch/collector/logo_loader.py

import logging
import re
from pathlib import Path
from typing import Optional

from catfetch.assets.logos import BUILTIN_LOGOS
from catfetch.config import DEFAULT_LOGO_TYPE, Config
from catfetch.models.models import LogoBlock

logger = logging.getLogger(__name__)

# Textual escape tokens allowed in a user logo file.
ESCAPES = {
    "\\x1b": "\x1b",
    "\\n": "\n",
    "\\t": "\t",
    "\\r": "\r",
    '\\"': '"',
    "\\'": "'",
    "\\\\": "\\",
}
_ESCAPE_PATTERN = re.compile("|".join(re.escape(token) for token in ESCAPES))


def unescape(text: str) -> str:
    """Replace textual escape tokens with the characters they name, in one left-to-right pass."""
    return _ESCAPE_PATTERN.sub(lambda match: ESCAPES[match.group(0)], text)


def builtin_logo(logo_type: Optional[int] = None) -> LogoBlock:
    if logo_type not in BUILTIN_LOGOS:
        if logo_type is not None:
            logger.debug(f"No built-in logo {logo_type}, using {DEFAULT_LOGO_TYPE}")
        logo_type = DEFAULT_LOGO_TYPE
    name, text = BUILTIN_LOGOS[logo_type]
    return LogoBlock(name=name, text=text, source="builtin")


def read_logo_file(path: Optional[Path]) -> Optional[str]:
    """Raw contents of the logo file, or None when it is missing, empty or unreadable."""
    if path is None:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read logo file {path}: {e}")
        return None
    if not content.strip():
        return None
    return content


def load_logo(config: Config) -> LogoBlock:
    """The user's logo file wins; otherwise the built-in selected by config.logo_type."""
    path = config.resolve_logo_file()
    content = read_logo_file(path)
    if content is not None:
        logger.debug(f"Using logo from {path}")
        return LogoBlock(name=path.name, text=unescape(content), source="file")
    return builtin_logo(config.logo_type)

# catfetch/main.py
import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console

from catfetch.collector.logo_loader import load_logo
from catfetch.collector.system_info import get_system_info
from catfetch.config import Config, load_config
from catfetch.services.system_query import PsutilSystemQuery, SystemQuery
from catfetch.ui.display import print_side_by_side

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse --type/-t. Unknown flags are ignored, a missing or bad value means the default logo."""
    parser = argparse.ArgumentParser(
        prog="catfetch",
        description="Print system information next to an ASCII-art cat",
        add_help=False,
    )
    parser.add_argument(
        "-t", "--type",
        dest="logo_type",
        nargs="?",
        default=None,
        help="Built-in logo to show: 1 (big cat), 2 (small cat), 3 (tiny cat)",
    )
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        logger.debug(f"Ignoring unrecognized arguments: {unknown}")
    try:
        args.logo_type = int(args.logo_type) if args.logo_type is not None else None
    except ValueError:
        logger.debug(f"Ignoring non-numeric logo type: {args.logo_type}")
        args.logo_type = None
    return args


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    # stdout carries the fetch output, so logs go to stderr
    handlers = [logging.StreamHandler(sys.stderr)]
    file_error = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as e:
            file_error = e
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    if file_error is not None:
        logger.warning(f"Cannot write log file {log_file} ({file_error}). Logging to stderr only.")


def run(config: Config, query: Optional[SystemQuery] = None, console: Optional[Console] = None) -> None:
    query = query or PsutilSystemQuery()
    logo = load_logo(config)
    logger.debug(f"Logo '{logo.name}' from {logo.source}")
    info = get_system_info(query, config)
    print_side_by_side(logo.text, info, console=console, gap=config.gap)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    try:
        configure_logging()
        args = parse_args(argv)
        config = load_config()
        if args.logo_type is not None:
            config = config.model_copy(update={"logo_type": args.logo_type})
        configure_logging(config.log_level, str(config.log_file) if config.log_file else None)
        run(config)
    except Exception as e:
        logger.error(f"Fatal error in main: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

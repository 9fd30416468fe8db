"""
scrbrd - a minimal terminal sports scoreboard using the ESPN API.
Usage: scrbrd --league LEAGUE [--team TEAM]
"""

import argparse
import logging
from typing import Optional

from rich.console import Console
from textual.logging import TextualHandler

from . import __version__
from .app import ScoreboardApp
from .board import Scoreboard
from .config import load_config
from .sports import SUPPORTED_LEAGUES, UnsupportedLeagueError, sport_for_league

console = Console()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Route scrbrd logs to the textual devtools console and, optionally, a file."""
    logger = logging.getLogger("scrbrd")
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    logger.handlers.clear()
    logger.addHandler(TextualHandler())

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrbrd",
        description="A minimal terminal sports scoreboard using the ESPN API",
    )
    parser.add_argument(
        "--league",
        "-l",
        help=f"League: {', '.join(SUPPORTED_LEAGUES)}",
    )
    parser.add_argument(
        "--team",
        "-t",
        help="Filter by team name",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()

    league = args.league or config.get("league")
    team = args.team or config.get("team")

    if not league:
        console.print("[red]No league given. Use --league or set \"league\" in the config file.[/red]")
        return 2

    try:
        sport = sport_for_league(league)
    except UnsupportedLeagueError as e:
        console.print(f"[red]{e}[/red]")
        console.print(f"Supported leagues: [cyan]{', '.join(SUPPORTED_LEAGUES)}[/cyan]")
        return 2

    setup_logging("DEBUG" if args.debug else config.get("log_level"), args.log_file or config.get("log_file"))

    board = Scoreboard(sport, team=team)

    with console.status("Fetching games..."):
        board.refresh()

    ScoreboardApp(board, light=config.get("theme") == "light").run()
    return 0

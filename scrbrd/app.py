"""Textual scoreboard UI."""

import logging
from typing import Sequence

from rich.console import Group
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from .board import GameCard, Scoreboard
from .status import FINAL, LIVE_MARKER

logger = logging.getLogger(__name__)

# Upper bound on how long an idle screen waits before re-checking the refresh clock.
POLL_INTERVAL = 0.5

APP_CSS = """
#header {
    height: 3;
    border: solid gray;
    content-align: center middle;
    color: yellow;
    text-style: bold;
}
#body { height: 1fr; border: solid gray; }
.column { width: 1fr; height: 1fr; }
#left.split { border-right: solid gray; }
#footer {
    height: 3;
    border: solid gray;
    content-align: center middle;
    color: gray;
}
Screen.light { background: white; color: black; }
"""


def line_style(line: str) -> str:
    if line.startswith(LIVE_MARKER):
        return "bold red"
    if line == FINAL:
        return "green"
    return ""


def render_cards(cards: Sequence[GameCard]) -> Group:
    lines = [Text(line, style=line_style(line), justify="center") for card in cards for line in card.lines]
    return Group(*lines)


def render_message(message: str, style: str) -> Text:
    return Text(message, style=style, justify="center")


class ScoreboardApp(App):
    CSS = APP_CSS

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "refresh_scores", "Refresh"),
        ("up", "previous_game", "Scroll up"),
        ("down", "next_game", "Scroll down"),
    ]

    def __init__(self, board: Scoreboard, light: bool = False):
        super().__init__()
        self.board = board
        self.light = light

    def compose(self) -> ComposeResult:
        yield Static("", id="header")
        with Horizontal(id="body"):
            yield Static("", id="left", classes="column")
            yield Static("", id="right", classes="column")
        yield Static("", id="footer")

    def on_mount(self) -> None:
        if self.light:
            self.screen.add_class("light")
        self.render_board()
        self.set_interval(POLL_INTERVAL, self.tick)

    def on_resize(self, event) -> None:
        self.call_after_refresh(self.render_board)

    def tick(self) -> None:
        self.board.poll()
        self.render_board()

    def body_size(self):
        """Width and height available for game slots inside the body border."""
        size = self.query_one("#body").content_size
        return size.width, size.height

    def render_board(self) -> None:
        width, height = self.body_size()
        view = self.board.view(width, height)

        body = self.query_one("#body")
        left = self.query_one("#left", Static)
        right = self.query_one("#right", Static)

        self.query_one("#header", Static).update(Text(self.board.title))
        self.query_one("#footer", Static).update(Text(self.board.footer(view)))
        body.border_title = f" games ({view.indicator}) " if view.scrollable else " games "

        if view.error:
            message = render_message(f"error: {view.error}", "red")
        elif not view.loaded:
            message = render_message("loading...", "dim")
        elif not view.cards:
            message = render_message("no games found :c", "dim")
        else:
            message = None

        left.set_class(message is None and view.columns == 2, "split")
        if message is not None:
            left.update(message)
            right.display = False
            return

        left.update(render_cards(view.left))
        right.update(render_cards(view.right))
        right.display = view.columns == 2

    def action_refresh_scores(self) -> None:
        logger.debug("Manual refresh requested")
        self.board.refresh()
        self.render_board()

    def action_previous_game(self) -> None:
        self.board.scroll_up()
        self.render_board()

    def action_next_game(self) -> None:
        width, height = self.body_size()
        self.board.scroll_down(width, height)
        self.render_board()

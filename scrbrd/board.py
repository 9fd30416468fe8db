"""
Scoreboard state and the per-render view model.

`Scoreboard` is the one object that changes over the life of the app: it
holds the latest game list, the team filter, the last error, the scroll
offset and the refresh clock. Everything shown on screen is derived from it
in `view()`, recomputed on every render so nothing stale survives a refresh.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from . import filters, layout, status
from .espn import FetchError, fetch_games
from .layout import GAME_SLOT_ROWS, ScrollState
from .models import Competition, Game
from .refresh import RefreshClock
from .sports import Sport

logger = logging.getLogger(__name__)

Fetcher = Callable[[Sport], List[Game]]


def score_line(competition: Competition) -> str:
    away, home = competition.away, competition.home
    return f"{away.team.abbreviation} {away.score} - {home.score} {home.team.abbreviation}"


def records_line(competition: Competition) -> str:
    away, home = competition.away.record, competition.home.record
    if not away and not home:
        return ""
    return f"({away}) vs ({home})"


def game_lines(game: Game, labels: Sequence[str]) -> List[str]:
    """The fixed-height text block for one game slot."""
    lines: List[str] = []
    for competition, text in zip(game.competitions, labels):
        if competition.is_matchup:
            lines = [score_line(competition), "", text, records_line(competition)]
            break
    else:
        lines = [game.short_name or game.name]

    lines = lines[:GAME_SLOT_ROWS]
    return lines + [""] * (GAME_SLOT_ROWS - len(lines))


@dataclass(frozen=True)
class GameCard:
    game: Game
    labels: Tuple[str, ...]
    lines: Tuple[str, ...]

    @property
    def label(self) -> str:
        return self.labels[0] if self.labels else ""


@dataclass(frozen=True)
class BoardView:
    """Everything the presentation layer needs for one paint."""
    cards: Tuple[GameCard, ...]
    columns: int
    page_size: int
    total: int
    offset: int
    indicator: str
    error: Optional[str]
    loaded: bool
    seconds_remaining: int

    @property
    def scrollable(self) -> bool:
        return self.total > self.page_size

    @property
    def left(self) -> List[GameCard]:
        if self.columns == 1:
            return list(self.cards)
        return layout.interleave(self.cards)[0]

    @property
    def right(self) -> List[GameCard]:
        if self.columns == 1:
            return []
        return layout.interleave(self.cards)[1]


class Scoreboard:
    def __init__(self, sport: Sport, team: Optional[str] = None, fetcher: Fetcher = fetch_games):
        self.sport = sport
        self.team = team
        self.fetcher = fetcher
        self.games: List[Game] = []
        self.loaded = False
        self.error_message: Optional[str] = None
        self.scroll = ScrollState()
        self.clock = RefreshClock()

    def refresh(self) -> bool:
        """Fetch now unless a fetch is already running. Returns True on success."""
        if self.clock.in_flight:
            logger.debug("Refresh skipped, fetch already in flight")
            return False

        with self.clock.fetching():
            try:
                games = self.fetcher(self.sport)
            except FetchError as e:
                self.error_message = f"refresh failed: {e}"
                return False

        self.games = list(games)
        self.loaded = True
        self.error_message = None
        return True

    def poll(self) -> bool:
        """Refresh if the 30 second period has run out."""
        if self.clock.should_refresh():
            return self.refresh()
        return False

    def filtered(self) -> List[Game]:
        return filters.filter_games(self.games, self.team)

    def scroll_up(self) -> None:
        self.scroll.scroll_up()

    def scroll_down(self, width: int, height: int) -> None:
        games = self.filtered()
        page_size = layout.plan(width, height, len(games)).page_size
        self.scroll.clamp(len(games), page_size)
        self.scroll.scroll_down(len(games), page_size)

    def card(self, game: Game) -> GameCard:
        labels = tuple(status.label(self.sport, c.status) for c in game.competitions)
        return GameCard(game=game, labels=labels, lines=tuple(game_lines(game, labels)))

    def view(self, width: int, height: int) -> BoardView:
        games = self.filtered()
        plan = layout.plan(width, height, len(games))
        visible = self.scroll.window(games, plan.page_size)

        return BoardView(
            cards=tuple(self.card(g) for g in visible),
            columns=plan.columns,
            page_size=plan.page_size,
            total=len(games),
            offset=self.scroll.offset,
            indicator=self.scroll.indicator(len(games)),
            error=self.error_message,
            loaded=self.loaded,
            seconds_remaining=self.clock.seconds_remaining(),
        )

    @property
    def title(self) -> str:
        league = self.sport.league
        if self.team:
            return f"{league.upper()} - {self.team.upper()}"
        return f"{league} scrbrd"

    def footer(self, view: BoardView) -> str:
        scroll_text = " | ↑/↓ - scroll" if view.scrollable else ""
        return f"q - quit | r - refresh{scroll_text} | next: {view.seconds_remaining}s"


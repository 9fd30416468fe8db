"""Team filtering for the game list."""

from typing import Iterable, List, Optional

from .models import Game


def _team_names(game: Game):
    for competition in game.competitions:
        for participant in competition.participants:
            team = participant.team
            yield team.display_name
            yield team.short_display_name
            yield team.abbreviation


def matches_team(game: Game, team: str) -> bool:
    needle = team.lower()
    return any(needle in (name or "").lower() for name in _team_names(game))


def filter_games(games: Iterable[Game], team: Optional[str] = None) -> List[Game]:
    """
    Keep games where any participant's name, short name or abbreviation
    contains `team` (case-insensitive). No filter returns every game.

    An empty result only means nothing matched; whether data has been
    fetched at all is tracked separately by the caller.
    """
    if not team:
        return list(games)
    return [g for g in games if matches_team(g, team)]

"""Supported sports and the league tokens that select them."""

from enum import Enum


class UnsupportedLeagueError(ValueError):
    """Raised when a league token does not map to a known sport."""


class Sport(Enum):
    """A sport/league pair, valued by its ESPN path segment."""

    AMERICAN_FOOTBALL = "football/nfl"
    BASKETBALL_MEN = "basketball/nba"
    BASKETBALL_WOMEN = "basketball/wnba"
    BASEBALL = "baseball/mlb"
    ICE_HOCKEY = "hockey/nhl"
    SOCCER_MLS = "soccer/usa.1"
    SOCCER_NWSL = "soccer/usa.nwsl"
    SOCCER_PREMIER = "soccer/eng.1"

    @property
    def path(self) -> str:
        return self.value

    @property
    def league(self) -> str:
        """Primary league token, e.g. "mlb"."""
        return next(token for token, sport in LEAGUES.items() if sport is self)


LEAGUES = {
    "mlb": Sport.BASEBALL,
    "nba": Sport.BASKETBALL_MEN,
    "wnba": Sport.BASKETBALL_WOMEN,
    "nfl": Sport.AMERICAN_FOOTBALL,
    "nhl": Sport.ICE_HOCKEY,
    "mls": Sport.SOCCER_MLS,
    "nwsl": Sport.SOCCER_NWSL,
    "premier": Sport.SOCCER_PREMIER,
    "epl": Sport.SOCCER_PREMIER,
    "prem": Sport.SOCCER_PREMIER,
    "premier-league": Sport.SOCCER_PREMIER,
}

SUPPORTED_LEAGUES = ["mlb", "nba", "wnba", "nfl", "nhl", "mls", "nwsl", "premier"]


def sport_for_league(token: str) -> Sport:
    """Resolve a user-supplied league token (e.g. "MLB", "epl") to a Sport."""
    key = (token or "").strip().lower()
    try:
        return LEAGUES[key]
    except KeyError:
        raise UnsupportedLeagueError(f"Unsupported league: {token}") from None

"""
Domain models for a day's scoreboard and normalization of the ESPN payload.

The ESPN "site" scoreboard returns loosely structured JSON; everything here
reads it with `.get()` defaults so a missing optional field never breaks a
refresh. Only a payload without an `events` list is rejected outright.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence


class StatusState(Enum):
    PRE = "pre"
    IN = "in"
    POST = "post"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> "StatusState":
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Team:
    display_name: str
    short_display_name: str
    abbreviation: str
    color: Optional[str] = None


@dataclass(frozen=True)
class Record:
    name: str
    summary: str


@dataclass(frozen=True)
class Participant:
    """One side of a competition. `score` is display text, not a number."""
    team: Team
    score: str
    home_away: str = ""
    records: Sequence[Record] = ()

    @property
    def record(self) -> str:
        """First record summary (overall W-L), or "" when none is published."""
        return self.records[0].summary if self.records else ""


@dataclass(frozen=True)
class GameStatus:
    state: StatusState
    period: int = 0
    display_clock: str = ""
    completed: bool = False
    description: str = ""
    detail: str = ""
    short_detail: str = ""
    name: str = ""


@dataclass(frozen=True)
class Competition:
    id: str
    participants: Sequence[Participant]
    status: GameStatus
    date: str = ""
    broadcasts: Sequence[str] = ()

    @property
    def away(self) -> Participant:
        return self.participants[0]

    @property
    def home(self) -> Participant:
        return self.participants[1]

    @property
    def is_matchup(self) -> bool:
        return len(self.participants) >= 2


@dataclass(frozen=True)
class Game:
    id: str
    name: str
    competitions: Sequence[Competition] = field(default_factory=tuple)
    short_name: str = ""
    date: str = ""


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _list(value) -> list:
    return value if isinstance(value, list) else []


def _team(raw: dict) -> Team:
    return Team(
        display_name=_text(raw.get("displayName")),
        short_display_name=_text(raw.get("shortDisplayName")),
        abbreviation=_text(raw.get("abbreviation")),
        color=_text(raw.get("color")) or None,
    )


def _participant(raw: dict) -> Participant:
    records = tuple(
        Record(name=_text(r.get("name")), summary=_text(r.get("summary")))
        for r in _list(raw.get("records"))
        if isinstance(r, dict)
    )
    return Participant(
        team=_team(_dict(raw.get("team"))),
        score=_text(raw.get("score")),
        home_away=_text(raw.get("homeAway")).lower(),
        records=records,
    )


def _ordered(participants: List[Participant]) -> List[Participant]:
    """Put the away side first when the payload tags home/away."""
    away = [p for p in participants if p.home_away == "away"]
    home = [p for p in participants if p.home_away == "home"]
    if len(away) == 1 and len(home) == 1:
        rest = [p for p in participants if p.home_away not in ("away", "home")]
        return away + home + rest
    return participants


def status_from_payload(raw: dict) -> GameStatus:
    status_type = _dict(raw.get("type"))
    return GameStatus(
        state=StatusState.parse(_text(status_type.get("state"))),
        period=_int(raw.get("period")),
        display_clock=_text(raw.get("displayClock")),
        completed=bool(status_type.get("completed", False)),
        description=_text(status_type.get("description")),
        detail=_text(status_type.get("detail")),
        short_detail=_text(status_type.get("shortDetail")),
        name=_text(status_type.get("name")),
    )


def _competition(raw: dict, event_status: dict) -> Competition:
    participants = [_participant(c) for c in _list(raw.get("competitors")) if isinstance(c, dict)]
    broadcasts = []
    for b in _list(raw.get("broadcasts")):
        if not isinstance(b, dict):
            continue
        broadcasts.extend(_text(n) for n in _list(b.get("names")))

    return Competition(
        id=_text(raw.get("id")),
        participants=tuple(_ordered(participants)),
        status=status_from_payload(_dict(raw.get("status")) or event_status),
        date=_text(raw.get("date")),
        broadcasts=tuple(broadcasts),
    )


def games_from_payload(data) -> List[Game]:
    """Normalize an ESPN scoreboard payload into Game records."""
    if not isinstance(data, dict) or not isinstance(data.get("events"), list):
        raise ValueError("scoreboard payload has no events list")

    games = []
    for event in data["events"]:
        if not isinstance(event, dict):
            continue
        event_status = _dict(event.get("status"))
        competitions = tuple(
            _competition(c, event_status)
            for c in _list(event.get("competitions"))
            if isinstance(c, dict)
        )
        games.append(Game(
            id=_text(event.get("id")),
            name=_text(event.get("name")),
            competitions=competitions,
            short_name=_text(event.get("shortName")),
            date=_text(event.get("date")),
        ))

    return games

"""
Turn a game's status block into a short display label.

ESPN describes game state differently per sport: football and basketball
count quarters, hockey periods, soccer halves with an elapsed-minutes clock,
and baseball only reveals the half-inning in free text ("Top 7th",
"Bottom of the 9th", "Mid 3rd", "End 5th"). `label()` hides all of that
behind one call.
"""

from typing import Callable, Dict, Optional

from .models import GameStatus, StatusState
from .sports import Sport

LIVE_MARKER = "LIVE"
FINAL = "FINAL"

INNING_ORDINALS = [
    ("1st", 1), ("2nd", 2), ("3rd", 3), ("4th", 4), ("5th", 5),
    ("6th", 6), ("7th", 7), ("8th", 8), ("9th", 9), ("10th", 10),
    ("11th", 11), ("12th", 12), ("13th", 13), ("14th", 14), ("15th", 15),
]

# Checked in order, first hit wins.
INNING_HALVES = [
    (("top",), "T"),
    (("bot", "bottom"), "B"),
    (("mid", "middle"), "M"),
    (("end",), "E"),
]


def extract_inning(text: str) -> Optional[int]:
    """Recover an inning number from free text ("Top 3rd", "inning 12")."""
    if not text:
        return None

    for ordinal, number in INNING_ORDINALS:
        if ordinal in text:
            return number

    words = text.split()
    for i, word in enumerate(words):
        if not (word.isascii() and word.isdigit()):
            continue
        neighbours = words[i + 1:i + 2] + words[max(i - 1, 0):i]
        if any("inn" in w.lower() for w in neighbours):
            return int(word)

    return None


def _status_texts(status: GameStatus):
    return [status.short_detail, status.detail, status.description, status.display_clock]


def inning_half(status: GameStatus) -> Optional[str]:
    """One-letter half-inning prefix (T/B/M/E) from the status text, if any."""
    for text in _status_texts(status):
        lowered = (text or "").lower()
        for needles, prefix in INNING_HALVES:
            if any(n in lowered for n in needles):
                return prefix
    return None


def _inning_number(status: GameStatus) -> int:
    if status.period > 0:
        return status.period

    # No structured period; fall back to whatever the text says.
    for text in _status_texts(status):
        inning = extract_inning(text)
        if inning is not None:
            return inning
    return status.period


def _baseball(status: GameStatus) -> str:
    inning = _inning_number(status)
    prefix = inning_half(status)
    if prefix is None:
        return str(inning)
    return f"{prefix}{inning}"


def _quarters(status: GameStatus) -> str:
    return "OT" if status.period >= 5 else f"Q{status.period}"


def _hockey(status: GameStatus) -> str:
    return "OT" if status.period >= 4 else f"P{status.period}"


def _soccer(status: GameStatus) -> str:
    if status.period == 1:
        half = "1H"
    elif status.period == 2:
        half = "2H"
    else:
        half = "ET"
    return f"{status.display_clock}' {half}"


PERIOD_LABELERS: Dict[Sport, Callable[[GameStatus], str]] = {
    Sport.AMERICAN_FOOTBALL: _quarters,
    Sport.BASKETBALL_MEN: _quarters,
    Sport.BASKETBALL_WOMEN: _quarters,
    Sport.BASEBALL: _baseball,
    Sport.ICE_HOCKEY: _hockey,
    Sport.SOCCER_MLS: _soccer,
    Sport.SOCCER_NWSL: _soccer,
    Sport.SOCCER_PREMIER: _soccer,
}


def period_label(sport, status: GameStatus) -> str:
    """Sport-specific period text for a live game ("Q3", "P2", "B7", "45' 1H")."""
    labeler = PERIOD_LABELERS.get(sport) if isinstance(sport, Sport) else None
    if labeler is None:
        return f"{status.period} - {status.display_clock}"
    return labeler(status)


def label(sport, status: GameStatus) -> str:
    """Display label for a game status: start time, live period or FINAL."""
    if status.state is StatusState.PRE:
        return status.short_detail
    if status.state is StatusState.IN:
        return f"{LIVE_MARKER} | {period_label(sport, status)}"
    if status.state is StatusState.POST:
        return FINAL if status.completed else status.short_detail
    return status.short_detail

"""Tests for status labels and inning parsing."""

import pytest

from scrbrd.sports import Sport
from scrbrd.status import FINAL, PERIOD_LABELERS, extract_inning, inning_half, label, period_label

from conftest import make_status


def test_every_sport_has_a_period_labeler():
    assert set(PERIOD_LABELERS) == set(Sport)


def test_pre_game_uses_short_detail_verbatim():
    status = make_status(state="pre", short_detail="7:05 PM ET")
    assert label(Sport.BASEBALL, status) == "7:05 PM ET"


def test_completed_post_game_is_final():
    status = make_status(state="post", completed=True, short_detail="Final/10")
    assert label(Sport.ICE_HOCKEY, status) == FINAL


def test_post_game_not_completed_falls_back_to_short_detail():
    status = make_status(state="post", completed=False, short_detail="Postponed")
    assert label(Sport.SOCCER_MLS, status) == "Postponed"


def test_unknown_state_uses_short_detail():
    status = make_status(state="delayed", short_detail="Rain Delay")
    assert label(Sport.BASEBALL, status) == "Rain Delay"


def test_live_label_carries_marker():
    status = make_status(state="in", period=3)
    assert label(Sport.BASKETBALL_MEN, status) == "LIVE | Q3"


@pytest.mark.parametrize("sport", [Sport.AMERICAN_FOOTBALL, Sport.BASKETBALL_MEN, Sport.BASKETBALL_WOMEN])
@pytest.mark.parametrize("period,expected", [(1, "Q1"), (4, "Q4"), (5, "OT"), (6, "OT")])
def test_quarter_sports(sport, period, expected):
    assert period_label(sport, make_status(period=period)) == expected


@pytest.mark.parametrize("period,expected", [(1, "P1"), (3, "P3"), (4, "OT"), (5, "OT")])
def test_hockey_periods(period, expected):
    assert period_label(Sport.ICE_HOCKEY, make_status(period=period)) == expected


@pytest.mark.parametrize("sport", [Sport.SOCCER_MLS, Sport.SOCCER_NWSL, Sport.SOCCER_PREMIER])
def test_soccer_halves(sport):
    assert period_label(sport, make_status(period=1, clock="45")) == "45' 1H"
    assert period_label(sport, make_status(period=2, clock="67")) == "67' 2H"
    assert period_label(sport, make_status(period=3, clock="95")) == "95' ET"


def test_unknown_sport_shows_period_and_clock():
    assert period_label("cricket", make_status(period=2, clock="12:00")) == "2 - 12:00"


def test_baseball_top_from_short_detail():
    status = make_status(period=7, short_detail="Top 7th")
    assert period_label(Sport.BASEBALL, status) == "T7"
    assert label(Sport.BASEBALL, status) == "LIVE | T7"


def test_baseball_bottom_from_detail_when_short_detail_empty():
    status = make_status(period=9, detail="Bottom of the 9th", short_detail="")
    assert period_label(Sport.BASEBALL, status) == "B9"


def test_baseball_without_half_falls_back_to_period():
    status = make_status(period=3, description="In Progress", detail="In Progress", short_detail="", clock="0:00")
    assert period_label(Sport.BASEBALL, status) == "3"


def test_baseball_middle_and_end():
    assert period_label(Sport.BASEBALL, make_status(period=5, short_detail="Middle 5th")) == "M5"
    assert period_label(Sport.BASEBALL, make_status(period=3, short_detail="End of 3rd")) == "E3"


def test_baseball_first_field_with_a_match_wins():
    status = make_status(period=4, short_detail="Mid 4th", detail="Top 4th")
    assert inning_half(status) == "M"


def test_baseball_ambiguous_text_resolves_in_check_order():
    assert inning_half(make_status(short_detail="bot top")) == "T"


def test_baseball_missing_period_recovered_from_text():
    status = make_status(period=0, short_detail="Top 6th")
    assert period_label(Sport.BASEBALL, status) == "T6"


def test_extract_inning_ordinal():
    assert extract_inning("Top 3rd") == 3
    assert extract_inning("Bottom 12th") == 12


def test_extract_inning_number_next_to_inning_word():
    assert extract_inning("inning 12") == 12
    assert extract_inning("8 Inn") == 8


def test_extract_inning_no_match():
    assert extract_inning("no info here") is None
    assert extract_inning("") is None
    assert extract_inning("score 3 to 2") is None

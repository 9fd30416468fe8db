from scrbrd.models import Competition, Game, GameStatus, Participant, Record, StatusState, Team


def make_status(state="in", period=1, clock="", completed=False, description="", detail="", short_detail=""):
    return GameStatus(
        state=StatusState.parse(state),
        period=period,
        display_clock=clock,
        completed=completed,
        description=description,
        detail=detail,
        short_detail=short_detail,
    )


def make_team(name, short=None, abbr=None):
    return Team(display_name=name, short_display_name=short or name.split()[-1], abbreviation=abbr or name[:3].upper())


def make_game(game_id, away, home, status=None, away_score="0", home_score="0", away_record="", home_record=""):
    """Build a one-competition game from (display name, short name, abbreviation) tuples."""
    def side(team, score, record, home_away):
        records = (Record(name="overall", summary=record),) if record else ()
        return Participant(team=make_team(*team), score=score, home_away=home_away, records=records)

    competition = Competition(
        id=game_id,
        participants=(side(away, away_score, away_record, "away"), side(home, home_score, home_record, "home")),
        status=status or make_status(state="pre", short_detail="7:05 PM ET"),
    )
    return Game(id=game_id, name=f"{away[0]} at {home[0]}", competitions=(competition,))


GUARDIANS = ("Cleveland Guardians", "Guardians", "CLE")
TIGERS = ("Detroit Tigers", "Tigers", "DET")
TWINS = ("Minnesota Twins", "Twins", "MIN")
ROYALS = ("Kansas City Royals", "Royals", "KC")

"""ESPN scoreboard client."""

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import List

from . import __version__
from .models import Game, games_from_payload
from .sports import Sport

logger = logging.getLogger(__name__)

SCOREBOARD_URL = "https://site.api.espn.com/apis/site/v2/sports/{path}/scoreboard"
USER_AGENT = f"scrbrd/{__version__}"


class FetchError(Exception):
    """A scoreboard fetch failed (network, HTTP status or payload)."""


class MalformedPayloadError(FetchError):
    """The response was not a usable scoreboard payload."""


def scoreboard_url(sport: Sport) -> str:
    return SCOREBOARD_URL.format(path=sport.path)


def fetch_json(url: str, timeout: int = 10) -> dict:
    """Fetch JSON from URL, raising FetchError on any failure."""
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        logger.warning("ESPN returned %s for %s", e.code, url)
        raise FetchError(f"ESPN API error: {e.code} {e.reason}") from e
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        reason = getattr(e, "reason", e)
        logger.warning("Error fetching %s: %s", url, reason)
        raise FetchError(f"network error: {reason}") from e

    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        logger.warning("Undecodable response from %s: %s", url, e)
        raise MalformedPayloadError(f"invalid JSON from ESPN: {e}") from e


def fetch_games(sport: Sport, timeout: int = 10) -> List[Game]:
    """Fetch today's games for the sport."""
    url = scoreboard_url(sport)
    logger.debug("Fetching %s", url)
    data = fetch_json(url, timeout=timeout)

    try:
        games = games_from_payload(data)
    except ValueError as e:
        logger.warning("Unexpected scoreboard payload from %s: %s", url, e)
        raise MalformedPayloadError(str(e)) from e

    logger.debug("Fetched %d %s games", len(games), sport.name)
    return games

"""scrbrd - a minimal terminal sports scoreboard using the ESPN API."""

__version__ = "0.1.0"

"""Optional user configuration."""

import json
import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

DEFAULTS = {
    "league": None,
    "team": None,
    "theme": "dark",
    "log_file": None,
    "log_level": "WARNING",
}


def config_paths() -> List[Path]:
    return [
        Path.cwd() / "scrbrd_config.json",
        Path(os.path.expanduser("~/.config/scrbrd/config.json")),
    ]


def load_config(paths=None) -> dict:
    """Load optional config from ./scrbrd_config.json or ~/.config/scrbrd/config.json."""
    config = dict(DEFAULTS)

    for p in paths if paths is not None else config_paths():
        try:
            if not p.is_file():
                continue
            data = json.loads(p.read_text(encoding="utf-8")) or {}
        except (OSError, ValueError) as e:
            logger.warning("Skipping unreadable config %s: %s", p, e)
            continue

        if not isinstance(data, dict):
            logger.warning("Skipping config %s: expected a JSON object", p)
            continue

        config.update({k: v for k, v in data.items() if k in DEFAULTS})
        return config

    return config

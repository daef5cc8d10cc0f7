"""Lightweight on-disk persistence for the best and last score.

The simulation never touches this module: the pygame front end reads the
state once at startup and writes it back whenever a life ends, keeping the
best score monotonic. Functions are tiny and pure apart from file I/O so they
are easy to test with a temporary path.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

STATE_PATH = Path.home() / ".street_striker.json"


@dataclass
class PersistedState:
    best_score: int = 0
    last_score: int = 0


def _decode_state(data: Dict[str, Any]) -> PersistedState:
    best_score = int(data.get("best_score", 0))
    last_score = int(data.get("last_score", 0))
    return PersistedState(best_score=max(0, best_score), last_score=max(0, last_score))


def _encode_state(state: PersistedState) -> Dict[str, Any]:
    return {"best_score": int(state.best_score), "last_score": int(state.last_score)}


def load_state(path: Path = STATE_PATH) -> PersistedState:
    """Load persisted values from disk; missing or broken files fall back to defaults."""

    if not path.exists():
        return PersistedState()

    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError):
        logger.warning("Could not read score file %s; starting from zero", path)
        return PersistedState()

    if not isinstance(data, dict):
        return PersistedState()

    try:
        return _decode_state(data)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed score file %s", path)
        return PersistedState()


def persist_state(
    *,
    best_score: Optional[int] = None,
    last_score: Optional[int] = None,
    path: Path = STATE_PATH,
) -> PersistedState:
    """Merge incoming values with the existing file and write it back.

    ``best_score`` only ever raises the stored value, so callers can pass the
    latest score without comparing first.
    """

    current = load_state(path)
    if best_score is not None:
        current.best_score = max(current.best_score, int(best_score))
    if last_score is not None:
        current.last_score = int(last_score)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(_encode_state(current), indent=2))
    return current

# aistudy/state/hydrate.py
"""Pure conversions between the state tree and its persisted text.

Nothing here touches storage; the store feeds raw text in and writes
``serialize`` output back through the persistence adapter.
"""
from __future__ import annotations
import copy
import json
import logging

from .model import INITIAL_STATE, NESTED_DEFAULTS

logger = logging.getLogger(__name__)


class HydrationError(ValueError):
    """Raised by ``parse_blob`` when the persisted text is not a JSON object."""


def parse_blob(raw: str | bytes) -> dict:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise HydrationError(f"persisted state is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise HydrationError(f"persisted state is a {type(parsed).__name__}, expected an object")
    return parsed


def merge_persisted(parsed: dict) -> dict:
    """Overlay ``parsed`` on the initial state, field by field.

    Profile and stats are merged one level deeper so a blob written before a
    sub-field existed still yields the full record. Extra keys pass through.
    """
    state = copy.deepcopy(INITIAL_STATE)
    state.update(copy.deepcopy(parsed))
    for key, defaults in NESTED_DEFAULTS.items():
        sub = parsed.get(key)
        merged = dict(defaults)
        if isinstance(sub, dict):
            merged.update(copy.deepcopy(sub))
        state[key] = merged
    return state


def hydrate(prev: dict, raw: str | bytes | None) -> dict:
    """Return the state to use after reading ``raw``; ``prev`` when unusable."""
    if raw is None or raw == "" or raw == b"":
        return prev
    try:
        parsed = parse_blob(raw)
    except HydrationError as e:
        logger.error("LocalStorage parse error: %s", e)
        return prev
    return merge_persisted(parsed)


def serialize(state: dict) -> str:
    return json.dumps(state, ensure_ascii=False, default=str)

# aistudy/state/store.py
from __future__ import annotations
import copy
import json
import logging
from typing import Callable

from . import hydrate as _hydrate
from .model import initial_state
from .persistence import PersistenceAdapter, SaveResult

logger = logging.getLogger(__name__)

Updater = Callable[[dict], dict]


class AppState:
    """Owner of the application state tree.

    Every change goes through ``commit``, which replaces the whole tree and
    writes the whole tree to storage. Callers get copies from ``get_state``
    and should re-read rather than hold on to a snapshot.
    """

    def __init__(self, persistence: PersistenceAdapter | None = None, state: dict | None = None):
        self.persistence = persistence
        self._state = copy.deepcopy(state) if state is not None else initial_state()
        self._listeners: list[Callable[[dict], None]] = []
        self._save_listeners: list[Callable[[SaveResult], None]] = []
        self.last_save: SaveResult | None = None

    def get_state(self) -> dict:
        return copy.deepcopy(self._state)

    def select(self, key: str, default=None):
        return copy.deepcopy(self._state.get(key, default))

    def subscribe(self, fn: Callable[[dict], None]) -> Callable[[], None]:
        self._listeners.append(fn)
        return lambda: self._listeners.remove(fn) if fn in self._listeners else None

    def on_save(self, fn: Callable[[SaveResult], None]) -> Callable[[], None]:
        self._save_listeners.append(fn)
        return lambda: self._save_listeners.remove(fn) if fn in self._save_listeners else None

    # --- hydration ---

    def hydrate(self, raw: str | bytes | None) -> bool:
        """Overlay a persisted blob; returns False when it was unusable."""
        prev = self._state
        nxt = _hydrate.hydrate(prev, raw)
        if nxt is prev:
            return False
        self._state = nxt
        self._notify()
        return True

    def hydrate_from_storage(self) -> bool:
        if self.persistence is None:
            return False
        return self.hydrate(self.persistence.load())

    # --- updates ---

    def commit(self, updater: Updater) -> SaveResult | None:
        """Replace the tree with ``updater(prev)`` and save it.

        The committed tree is read back from its encoded text, so memory holds
        what a reload would give: non-string mapping keys such as ``1`` become
        ``"1"``. A tree that cannot be encoded at all (tuple keys, cycles) is
        still committed as given; only the save fails.
        """
        nxt = updater(copy.deepcopy(self._state))
        if not isinstance(nxt, dict):
            raise TypeError(f"state updater returned {type(nxt).__name__}, expected dict")
        try:
            raw = _hydrate.serialize(nxt)
        except (TypeError, ValueError) as e:
            logger.warning("state cannot be serialized: %s", e)
            raw, failure = None, SaveResult(False, error=f"{type(e).__name__}: {e}")
            self._state = copy.deepcopy(nxt)
        else:
            failure = None
            self._state = json.loads(raw)
        result = self._persist(raw, failure)
        self._notify()
        return result

    def patch(self, **fields) -> SaveResult | None:
        return self.commit(lambda prev: {**prev, **fields})

    def _persist(self, raw: str | None, failure: SaveResult | None) -> SaveResult | None:
        if self.persistence is None:
            return None
        result = failure if raw is None else self.persistence.save(raw)
        self.last_save = result
        for fn in list(self._save_listeners):
            try:
                fn(result)
            except Exception:
                logger.exception("save listener %r failed", fn)
        return result

    def _notify(self):
        for fn in list(self._listeners):
            try:
                fn(self.get_state())
            except Exception:
                logger.exception("state listener %r failed", fn)

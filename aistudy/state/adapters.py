# aistudy/state/adapters.py
"""Scoped mutation entry points handed to the feature views.

Each adapter touches one slice of the tree and makes exactly one commit per
call. Input is not validated; the views own that.
"""
from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Callable
from uuid import uuid4

from .model import DEFAULT_PROFILE, DEFAULT_STATS
from .store import AppState

NEW_SESSION_TITLE = "Chat mới"
DATE_FMT = "%d/%m/%Y"


class ListHandle:
    """Replace or transform one list slice (flashcards, tasks, reminders)."""

    def __init__(self, store: AppState, key: str):
        self.store = store
        self.key = key

    def items(self) -> list:
        return self.store.select(self.key, [])

    def replace(self, items: list):
        return self.store.commit(lambda prev: {**prev, self.key: list(items)})

    def transform(self, fn: Callable[[list], list]):
        # runs against the slice inside the commit, never a cached copy
        return self.store.commit(lambda prev: {**prev, self.key: list(fn(prev.get(self.key) or []))})


class TaskList(ListHandle):
    def today(self, n: int = 2) -> list:
        return self.items()[:n]


class Lessons:
    def __init__(self, store: AppState):
        self.store = store

    def add_lesson(self, lesson: dict):
        return self.store.commit(
            lambda prev: {**prev, "savedLessons": [lesson, *(prev.get("savedLessons") or [])]}
        )

    def all(self) -> list:
        return self.store.select("savedLessons", [])

    def recent(self, n: int = 3) -> list:
        return self.all()[:n]


class ChatSessions:
    def __init__(self, store: AppState, id_factory: Callable[[], str] | None = None):
        self.store = store
        self._new_id = id_factory or (lambda: uuid4().hex)

    def sessions(self) -> list:
        return self.store.select("chatSessions", [])

    def active_id(self) -> str | None:
        return self.store.select("activeChatSessionId")

    def active_session(self) -> dict | None:
        sid = self.active_id()
        if sid is None:
            return None
        return next((s for s in self.sessions() if s.get("id") == sid), None)

    def new_session(self) -> str:
        sid = self._new_id()
        session = {"id": sid, "title": NEW_SESSION_TITLE, "messages": [],
                   "date": datetime.now().strftime(DATE_FMT)}
        self.store.commit(lambda prev: {
            **prev,
            "chatSessions": [session, *(prev.get("chatSessions") or [])],
            "activeChatSessionId": sid,
        })
        return sid

    def delete_session(self, session_id: str):
        def _apply(prev):
            active = prev.get("activeChatSessionId")
            return {
                **prev,
                "chatSessions": [s for s in prev.get("chatSessions") or [] if s.get("id") != session_id],
                "activeChatSessionId": None if active == session_id else active,
            }
        return self.store.commit(_apply)

    def _update_match(self, session_id: str, **fields):
        return self.store.commit(lambda prev: {
            **prev,
            "chatSessions": [{**s, **fields} if s.get("id") == session_id else s
                             for s in prev.get("chatSessions") or []],
        })

    def update_session(self, session_id: str, messages: list):
        return self._update_match(session_id, messages=list(messages))

    def rename_session(self, session_id: str, title: str):
        return self._update_match(session_id, title=title)

    def select_session(self, session_id: str | None):
        return self.store.patch(activeChatSessionId=session_id)


class Grades:
    def __init__(self, store: AppState):
        self.store = store

    def record(self) -> dict:
        return self.store.select("gradeRecord", {})

    def set_grades(self, record: dict):
        return self.store.patch(gradeRecord=dict(record))


class Profile:
    def __init__(self, store: AppState):
        self.store = store

    def get(self) -> dict:
        return {**DEFAULT_PROFILE, **(self.store.select("studentProfile") or {})}

    def set_profile(self, profile: dict):
        return self.store.patch(studentProfile={**DEFAULT_PROFILE, **profile})


class StudyStats:
    def __init__(self, store: AppState):
        self.store = store

    def get(self) -> dict:
        return {**DEFAULT_STATS, **(self.store.select("studyStats") or {})}

    def record_login(self, today: date | None = None):
        today = today or date.today()
        def _apply(prev):
            stats = {**DEFAULT_STATS, **(prev.get("studyStats") or {})}
            last = _parse_date(stats.get("lastLoginDate"))
            if last == today:
                return prev
            if last is not None and today - last == timedelta(days=1):
                stats["streakDays"] = _as_int(stats.get("streakDays")) + 1
            else:
                stats["streakDays"] = 1
            stats["lastLoginDate"] = today.isoformat()
            return {**prev, "studyStats": stats}
        return self.store.commit(_apply)

    def add_study_minutes(self, minutes: int):
        minutes = max(0, _as_int(minutes))
        def _apply(prev):
            stats = {**DEFAULT_STATS, **(prev.get("studyStats") or {})}
            stats["totalStudyMinutes"] = _as_int(stats.get("totalStudyMinutes")) + minutes
            return {**prev, "studyStats": stats}
        return self.store.commit(_apply)


def _as_int(value, default: int = 0) -> int:
    # stats come straight from the persisted blob, unchecked
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _parse_date(s) -> date | None:
    if not s:
        return None
    try:
        return date.fromisoformat(str(s))
    except ValueError:
        return None


class Features:
    """All feature adapters bound to one store."""

    def __init__(self, store: AppState):
        self.store = store
        self.lessons = Lessons(store)
        self.flashcards = ListHandle(store, "flashcards")
        self.tasks = TaskList(store, "tasks")
        self.reminders = ListHandle(store, "reminders")
        self.chat = ChatSessions(store)
        self.grades = Grades(store)
        self.profile = Profile(store)
        self.stats = StudyStats(store)

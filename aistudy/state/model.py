# aistudy/state/model.py
from __future__ import annotations
import copy
from enum import Enum


class View(str, Enum):
    DASHBOARD = "dashboard"
    SUBJECT = "subject"
    FLASHCARDS = "flashcards"
    PLANNER = "planner"
    CHATBOT = "chatbot"
    EXAM_PREP = "exam_prep"
    GRADE_TRACKER = "grade_tracker"

    @classmethod
    def parse(cls, value) -> "View":
        """Unknown or corrupt values read as the dashboard."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.DASHBOARD


class Subject(str, Enum):
    MATH = "Toán"
    LITERATURE = "Ngữ Văn"
    ENGLISH = "Tiếng Anh"
    INFORMATICS = "Tin học"

    @classmethod
    def parse(cls, value) -> "Subject | None":
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[str(value).upper()]
        except KeyError:
            return None


DEFAULT_PROFILE = {
    "name": "",
    "targetUniversity": "",
    "targetMajor": "",
    "targetScore": "",
    "strengths": "",
    "weaknesses": "",
    "learningStyle": "",
}

DEFAULT_STATS = {
    "streakDays": 0,
    "lastLoginDate": "",
    "totalStudyMinutes": 0,
}

INITIAL_STATE = {
    "currentView": View.DASHBOARD.value,
    "activeSubject": None,
    "savedLessons": [],
    "flashcards": [],
    "tasks": [],
    "reminders": [],
    "chatSessions": [],
    "activeChatSessionId": None,
    "studentProfile": DEFAULT_PROFILE,
    "gradeRecord": {},
    "studyStats": DEFAULT_STATS,
}

# slices the merge overlays key-by-key instead of replacing
NESTED_DEFAULTS = {
    "studentProfile": DEFAULT_PROFILE,
    "studyStats": DEFAULT_STATS,
}


def initial_state() -> dict:
    return copy.deepcopy(INITIAL_STATE)

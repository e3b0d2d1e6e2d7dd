# aistudy/router.py
"""Maps navigation state to the view to render and the props it receives.

Kept free of Tk so the wiring can be checked without a display. Each feature
gets its own slice and its own adapter callbacks, nothing else.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .state.adapters import Features
from .state.model import Subject, View
from .state.navigation import Navigator

TITLES = {
    View.DASHBOARD: "Trang chủ",
    View.SUBJECT: "Môn học",
    View.FLASHCARDS: "Ghi nhớ",
    View.PLANNER: "Lộ trình",
    View.CHATBOT: "Hỏi đáp AI",
    View.EXAM_PREP: "Luyện thi",
    View.GRADE_TRACKER: "Điểm số",
}


@dataclass
class Route:
    view: View
    title: str
    props: dict = field(default_factory=dict)


def route(state: dict, nav: Navigator, features: Features) -> Route:
    view = View.parse(state.get("currentView"))
    subject = Subject.parse(state.get("activeSubject")) if view is View.SUBJECT else None
    profile = {**features.profile.get()}

    if view is View.SUBJECT and subject is not None:
        return Route(view, subject.value, {
            "subject": subject,
            "profile": profile,
            "saved_lessons": state.get("savedLessons") or [],
            "on_back": nav.go_home,
            "on_save_lesson": features.lessons.add_lesson,
        })
    if view is View.FLASHCARDS:
        return Route(view, TITLES[view], {
            "cards": state.get("flashcards") or [],
            "replace_cards": features.flashcards.replace,
            "transform_cards": features.flashcards.transform,
        })
    if view is View.PLANNER:
        return Route(view, TITLES[view], {
            "tasks": state.get("tasks") or [],
            "replace_tasks": features.tasks.replace,
            "transform_tasks": features.tasks.transform,
            "reminders": state.get("reminders") or [],
            "replace_reminders": features.reminders.replace,
            "transform_reminders": features.reminders.transform,
        })
    if view is View.CHATBOT:
        return Route(view, TITLES[view], {
            "sessions": state.get("chatSessions") or [],
            "active_session_id": state.get("activeChatSessionId"),
            "profile": profile,
            "on_session_change": features.chat.select_session,
            "on_new_session": features.chat.new_session,
            "on_delete_session": features.chat.delete_session,
            "on_update_session": features.chat.update_session,
            "on_rename_session": features.chat.rename_session,
        })
    if view is View.EXAM_PREP:
        return Route(view, TITLES[view], {"profile": profile})
    if view is View.GRADE_TRACKER:
        return Route(view, TITLES[view], {
            "grades": state.get("gradeRecord") or {},
            "profile": profile,
            "on_update_grades": features.grades.set_grades,
        })
    # dashboard, and a subject view whose payload is missing
    return Route(View.DASHBOARD, TITLES[View.DASHBOARD], {
        "state": state,
        "on_navigate": nav.navigate_to,
    })

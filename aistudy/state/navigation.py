# aistudy/state/navigation.py
from __future__ import annotations
import logging

from .model import Subject, View
from .store import AppState

logger = logging.getLogger(__name__)

# sidebar order: (view, label, icon)
NAV_ITEMS = [
    (View.DASHBOARD, "Trang chủ", "🏠"),
    (View.PLANNER, "Lộ trình", "🗓"),
    (View.EXAM_PREP, "Luyện thi", "📝"),
    (View.FLASHCARDS, "Ghi nhớ", "🧠"),
    (View.CHATBOT, "Hỏi đáp AI", "💬"),
    (View.GRADE_TRACKER, "Điểm số", "📊"),
]


class Navigator:
    """Selects the active view and its optional subject payload."""

    def __init__(self, store: AppState):
        self.store = store

    def navigate_to(self, view: View | str, subject: Subject | str | None = None):
        view_value = view.value if isinstance(view, View) else view
        if view_value != View.SUBJECT.value:
            subject = None
        subject_value = subject.value if isinstance(subject, Subject) else subject
        logger.debug("navigate %s subject=%s", view_value, subject_value)
        return self.store.patch(currentView=view_value, activeSubject=subject_value)

    def go_home(self):
        return self.navigate_to(View.DASHBOARD)

    def current(self) -> tuple[View, Subject | None]:
        s = self.store.get_state()
        view = View.parse(s.get("currentView"))
        if view is not View.SUBJECT:
            return view, None
        return view, Subject.parse(s.get("activeSubject"))

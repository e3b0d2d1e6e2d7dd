"""Routing navigation state to feature views and their props."""

from __future__ import annotations

from aistudy.router import route
from aistudy.state import Subject, View


def _route(store, nav, features):
    return route(store.get_state(), nav, features)


class TestRoute:
    def test_dashboard_default(self, store, nav, features):
        r = _route(store, nav, features)
        assert r.view is View.DASHBOARD
        assert r.props["state"]["currentView"] == "dashboard"
        assert r.props["on_navigate"] == nav.navigate_to

    def test_subject_props(self, store, nav, features):
        nav.navigate_to(View.SUBJECT, Subject.MATH)
        r = _route(store, nav, features)
        assert r.view is View.SUBJECT
        assert r.props["subject"] is Subject.MATH
        assert r.title == "Toán"
        assert set(r.props) == {"subject", "profile", "saved_lessons", "on_back", "on_save_lesson"}

    def test_subject_back_returns_home(self, store, nav, features):
        nav.navigate_to(View.SUBJECT, Subject.MATH)
        _route(store, nav, features).props["on_back"]()
        assert nav.current() == (View.DASHBOARD, None)

    def test_subject_without_payload_falls_back(self, store, nav, features):
        nav.navigate_to(View.SUBJECT)
        assert _route(store, nav, features).view is View.DASHBOARD

    def test_unknown_view_falls_back(self, store, nav, features):
        nav.navigate_to("wat")
        assert _route(store, nav, features).view is View.DASHBOARD

    def test_feature_gets_only_its_slice(self, store, nav, features):
        features.tasks.replace([{"id": "t"}])
        nav.navigate_to(View.FLASHCARDS)
        r = _route(store, nav, features)
        assert set(r.props) == {"cards", "replace_cards", "transform_cards"}

    def test_planner_callbacks_commit(self, store, nav, features):
        nav.navigate_to(View.PLANNER)
        r = _route(store, nav, features)
        r.props["transform_tasks"](lambda ts: [*ts, {"id": "t1", "text": "Học", "completed": False}])
        r.props["replace_reminders"]([{"id": "r1"}])
        state = store.get_state()
        assert state["tasks"][0]["id"] == "t1"
        assert state["reminders"] == [{"id": "r1"}]

    def test_chat_props(self, store, nav, features):
        nav.navigate_to(View.CHATBOT)
        sid = _route(store, nav, features).props["on_new_session"]()
        r = _route(store, nav, features)
        assert r.props["active_session_id"] == sid
        assert r.props["sessions"][0]["id"] == sid

    def test_grade_tracker_props(self, store, nav, features):
        nav.navigate_to(View.GRADE_TRACKER)
        _route(store, nav, features).props["on_update_grades"]({"Toán": [9]})
        assert _route(store, nav, features).props["grades"] == {"Toán": [9]}

    def test_exam_prep_gets_profile_only(self, store, nav, features):
        features.profile.set_profile({"name": "Hà"})
        nav.navigate_to(View.EXAM_PREP)
        r = _route(store, nav, features)
        assert list(r.props) == ["profile"]
        assert r.props["profile"]["name"] == "Hà"

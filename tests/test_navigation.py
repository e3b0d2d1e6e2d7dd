"""View selection and subject payload scoping."""

from __future__ import annotations

from aistudy.state import NAV_ITEMS, Subject, View


class TestNavigateTo:
    def test_initial_view_is_dashboard(self, nav):
        assert nav.current() == (View.DASHBOARD, None)

    def test_subject_view_carries_payload(self, nav, store):
        nav.navigate_to(View.SUBJECT, Subject.MATH)
        assert nav.current() == (View.SUBJECT, Subject.MATH)
        assert store.get_state()["activeSubject"] == "Toán"

    def test_other_views_clear_subject(self, nav, store):
        nav.navigate_to(View.SUBJECT, Subject.ENGLISH)
        nav.navigate_to(View.FLASHCARDS)
        state = store.get_state()
        assert state["currentView"] == "flashcards"
        assert state["activeSubject"] is None
        assert nav.current() == (View.FLASHCARDS, None)

    def test_subject_ignored_outside_subject_view(self, nav, store):
        nav.navigate_to(View.PLANNER, Subject.MATH)
        assert store.get_state()["activeSubject"] is None

    def test_accepts_plain_strings(self, nav):
        nav.navigate_to("grade_tracker")
        assert nav.current()[0] is View.GRADE_TRACKER

    def test_single_commit_per_navigation(self, nav, store):
        writes = []
        store.on_save(writes.append)
        nav.navigate_to(View.SUBJECT, Subject.INFORMATICS)
        assert len(writes) == 1

    def test_go_home(self, nav):
        nav.navigate_to(View.CHATBOT)
        nav.go_home()
        assert nav.current() == (View.DASHBOARD, None)

    def test_navigation_persisted(self, nav, restart):
        nav.navigate_to(View.SUBJECT, Subject.LITERATURE)
        assert restart().get_state()["activeSubject"] == "Ngữ Văn"


class TestCorruptView:
    def test_unknown_view_stored_but_read_as_dashboard(self, nav, store):
        nav.navigate_to("settings")
        assert store.get_state()["currentView"] == "settings"
        assert nav.current() == (View.DASHBOARD, None)

    def test_hydrated_garbage_view(self, nav, store):
        store.hydrate('{"currentView": 17, "activeSubject": "Toán"}')
        assert nav.current() == (View.DASHBOARD, None)

    def test_stale_subject_outside_subject_view_is_not_read(self, nav, store):
        store.hydrate('{"currentView": "flashcards", "activeSubject": "Toán"}')
        assert nav.current() == (View.FLASHCARDS, None)


class TestParsing:
    def test_subject_parse_by_value_and_name(self):
        assert Subject.parse("Tiếng Anh") is Subject.ENGLISH
        assert Subject.parse("informatics") is Subject.INFORMATICS
        assert Subject.parse("Physics") is None
        assert Subject.parse(None) is None

    def test_nav_items_order(self):
        assert [v for v, _label, _icon in NAV_ITEMS] == [
            View.DASHBOARD, View.PLANNER, View.EXAM_PREP,
            View.FLASHCARDS, View.CHATBOT, View.GRADE_TRACKER,
        ]

"""Hydration of persisted blobs into the state tree."""

from __future__ import annotations

import json

import pytest

from aistudy.state import INITIAL_STATE, AppState, initial_state
from aistudy.state.hydrate import HydrationError, hydrate, merge_persisted, parse_blob, serialize


class TestParseBlob:
    def test_parses_object(self):
        assert parse_blob('{"a": 1}') == {"a": 1}

    def test_accepts_bytes(self):
        assert parse_blob('{"name": "Ân"}'.encode("utf-8")) == {"name": "Ân"}

    @pytest.mark.parametrize("raw", ["not json", "{broken", "[1, 2]", "null", "42"])
    def test_rejects_non_objects(self, raw):
        with pytest.raises(HydrationError):
            parse_blob(raw)


class TestMergePersisted:
    def test_partial_profile_filled_from_defaults(self):
        state = merge_persisted({"studentProfile": {"name": "An"}})
        assert state["studentProfile"]["name"] == "An"
        assert state["studentProfile"]["targetUniversity"] == ""
        assert set(state["studentProfile"]) == set(INITIAL_STATE["studentProfile"])

    def test_partial_stats_filled_from_defaults(self):
        state = merge_persisted({"studyStats": {"streakDays": 4}})
        assert state["studyStats"] == {"streakDays": 4, "lastLoginDate": "", "totalStudyMinutes": 0}

    def test_null_sub_record_falls_back_to_defaults(self):
        state = merge_persisted({"studentProfile": None, "studyStats": "garbage"})
        assert state["studentProfile"] == INITIAL_STATE["studentProfile"]
        assert state["studyStats"] == INITIAL_STATE["studyStats"]

    def test_missing_top_level_fields_use_defaults(self):
        state = merge_persisted({"tasks": [{"id": "t1", "text": "Ôn tập", "completed": False}]})
        assert state["tasks"][0]["id"] == "t1"
        assert state["chatSessions"] == []
        assert state["currentView"] == "dashboard"
        assert state["activeChatSessionId"] is None

    def test_extra_fields_preserved(self):
        state = merge_persisted({"futureField": {"x": 1}})
        assert state["futureField"] == {"x": 1}

    def test_does_not_alias_defaults(self):
        state = merge_persisted({})
        state["studentProfile"]["name"] = "mutated"
        state["savedLessons"].append({"id": "x"})
        assert INITIAL_STATE["studentProfile"]["name"] == ""
        assert INITIAL_STATE["savedLessons"] == []


class TestHydrateFunction:
    def test_invalid_blob_returns_prev_identity(self):
        prev = initial_state()
        assert hydrate(prev, "%%%") is prev

    def test_empty_blob_returns_prev(self):
        prev = initial_state()
        assert hydrate(prev, None) is prev
        assert hydrate(prev, "") is prev

    def test_serialize_keeps_unicode(self):
        text = serialize({"studentProfile": {"name": "Nguyễn"}})
        assert "Nguyễn" in text


class TestStoreHydrate:
    def test_hydrate_idempotent(self):
        blob = json.dumps({"studentProfile": {"name": "An"}, "savedLessons": [{"id": "l1", "topic": "Đạo hàm"}]})
        once = AppState()
        once.hydrate(blob)
        twice = AppState()
        twice.hydrate(blob)
        twice.hydrate(blob)
        assert once.get_state() == twice.get_state()

    def test_malformed_storage_leaves_state_unchanged(self):
        s = AppState()
        s.patch(currentView="planner")
        before = s.get_state()
        assert s.hydrate("definitely { not json") is False
        assert s.get_state() == before

    def test_hydrate_does_not_write_storage(self, store, memory_storage):
        store.hydrate('{"tasks": []}')
        assert memory_storage.get_item("glassy_v3_data") is None

    def test_hydrate_from_storage_absent_is_noop(self, store):
        assert store.hydrate_from_storage() is False
        assert store.get_state() == INITIAL_STATE

    def test_hydrate_notifies_listeners(self, store):
        seen = []
        store.subscribe(seen.append)
        store.hydrate('{"currentView": "chatbot"}')
        assert seen and seen[-1]["currentView"] == "chatbot"

    def test_old_schema_blob_example(self):
        s = AppState()
        s.hydrate(json.dumps({"studentProfile": {"name": "An"}}))
        profile = s.get_state()["studentProfile"]
        assert profile["targetUniversity"] == ""
        assert profile["name"] == "An"

"""
Test suite for InMemorySessionStore.

Covers session lifecycle, message ordering, NotFound signalling, expiry
sweeps, statistics and concurrent access.

System role: Verification of session persistence boundary
"""

import threading
from datetime import timedelta

import pytest

from talkthrough.boundary.session_store.memory_store import InMemorySessionStore
from talkthrough.core.exceptions import DuplicateSessionError
from talkthrough.models.relationship import RelationshipCategory
from talkthrough.models.session import MessageRole, NewMessage


def _user(content: str) -> NewMessage:
    return NewMessage(role=MessageRole.USER, content=content)


def _create(store: InMemorySessionStore, session_id: str = "s1") -> None:
    store.create(session_id, RelationshipCategory.PERSONAL, {"duration": "1-3 years"}, "PROMPT")


class TestCreateAndGet:
    """Test suite for create/get."""

    def test_create_should_initialize_empty_session(self, store: InMemorySessionStore, clock) -> None:
        session = store.create("s1", RelationshipCategory.CASUAL, {"frequency": "Weekly"}, "PROMPT")

        assert session.id == "s1"
        assert session.messages == []
        assert session.created_at == session.last_activity == clock.now
        assert session.prompt_template == "PROMPT"

    def test_create_should_reject_duplicate_id(self, store: InMemorySessionStore) -> None:
        _create(store)

        with pytest.raises(DuplicateSessionError):
            _create(store)

    def test_get_should_return_none_for_unknown_id(self, store: InMemorySessionStore) -> None:
        assert store.get("missing") is None

    def test_get_should_return_copy(self, store: InMemorySessionStore) -> None:
        _create(store)

        copy = store.get("s1")
        copy.messages.append(None)
        copy.survey_answers["injected"] = True

        fresh = store.get("s1")
        assert fresh.messages == []
        assert "injected" not in fresh.survey_answers


class TestAppendMessage:
    """Test suite for append_message/list_messages."""

    def test_append_should_return_none_for_unknown_session(self, store: InMemorySessionStore) -> None:
        assert store.append_message("missing", _user("hi")) is None
        assert store.get("missing") is None

    def test_append_should_keep_order_with_increasing_ids(self, store: InMemorySessionStore, clock) -> None:
        # Arrange
        _create(store)

        # Act
        for index in range(5):
            store.append_message("s1", _user(f"m{index}"))
            clock.advance(seconds=1)

        # Assert
        messages = store.list_messages("s1")
        assert [m.content for m in messages] == [f"m{i}" for i in range(5)]
        ids = [m.id for m in messages]
        assert ids == sorted(set(ids))
        assert all(a.timestamp <= b.timestamp for a, b in zip(messages, messages[1:]))

    def test_append_should_refresh_last_activity(self, store: InMemorySessionStore, clock) -> None:
        _create(store)
        clock.advance(minutes=5)

        store.append_message("s1", _user("hi"))

        assert store.get("s1").last_activity == clock.now

    def test_last_activity_should_not_move_backwards(self, store: InMemorySessionStore, clock) -> None:
        _create(store)
        created = clock.now
        clock.advance(minutes=-10)

        store.append_message("s1", _user("hi"))

        assert store.get("s1").last_activity == created

    def test_list_messages_should_be_empty_for_unknown_session(self, store: InMemorySessionStore) -> None:
        assert store.list_messages("missing") == []

    def test_append_should_store_assistant_suggestions(self, store: InMemorySessionStore) -> None:
        _create(store)

        stored = store.append_message(
            "s1",
            NewMessage(role=MessageRole.ASSISTANT, content="reply", suggested_replies=["a", "b"]),
        )

        assert stored.id == 1
        assert store.list_messages("s1")[0].suggested_replies == ["a", "b"]


class TestUpdateAndDelete:
    """Test suite for update/delete."""

    def test_update_should_change_fields_and_keep_prompt(self, store: InMemorySessionStore, clock) -> None:
        _create(store)
        store.append_message("s1", _user("hi"))
        clock.advance(minutes=1)

        updated = store.update(
            "s1",
            relationship_type=RelationshipCategory.PROFESSIONAL,
            survey_answers={"duration": "2+ years"},
        )

        session = store.get("s1")
        assert updated is True
        assert session.relationship_type is RelationshipCategory.PROFESSIONAL
        assert session.survey_answers == {"duration": "2+ years"}
        assert session.prompt_template == "PROMPT"
        assert len(session.messages) == 1
        assert session.last_activity == clock.now

    def test_update_should_return_false_for_unknown_session(self, store: InMemorySessionStore) -> None:
        assert store.update("missing", survey_answers={}) is False

    def test_delete_should_report_presence(self, store: InMemorySessionStore) -> None:
        _create(store)

        assert store.delete("s1") is True
        assert store.delete("s1") is False
        assert store.get("s1") is None


class TestSweepExpired:
    """Test suite for sweep_expired."""

    def test_sweep_should_remove_only_sessions_older_than_cutoff(self, store: InMemorySessionStore, clock) -> None:
        # Arrange
        _create(store, "old")
        clock.advance(hours=1)
        _create(store, "boundary")
        clock.advance(hours=1)
        _create(store, "fresh")
        store.append_message("fresh", _user("keep me"))
        clock.advance(hours=1)

        # Act: cutoff = now - 2h, which equals "boundary" last activity
        removed = store.sweep_expired(timedelta(hours=2))

        # Assert
        assert removed == 1
        assert store.get("old") is None
        assert store.get("boundary") is not None
        assert [m.content for m in store.list_messages("fresh")] == ["keep me"]

    def test_sweep_should_return_zero_when_nothing_expired(self, store: InMemorySessionStore) -> None:
        _create(store)

        assert store.sweep_expired(timedelta(hours=24)) == 0


class TestStats:
    """Test suite for stats/clear."""

    def test_stats_should_be_zero_for_empty_store(self, store: InMemorySessionStore) -> None:
        stats = store.stats()

        assert (stats.session_count, stats.total_messages, stats.mean_messages_per_session) == (0, 0, 0.0)

    def test_stats_should_aggregate_messages(self, store: InMemorySessionStore) -> None:
        _create(store, "a")
        _create(store, "b")
        for _ in range(3):
            store.append_message("a", _user("x"))

        stats = store.stats()

        assert stats.session_count == 2
        assert stats.total_messages == 3
        assert stats.mean_messages_per_session == 1.5

    def test_clear_should_drop_all_sessions(self, store: InMemorySessionStore) -> None:
        _create(store, "a")

        store.clear()

        assert store.stats().session_count == 0


def test_concurrent_appends_should_produce_unique_ids() -> None:
    # Arrange
    store = InMemorySessionStore()
    _create(store)

    def worker() -> None:
        for _ in range(50):
            store.append_message("s1", _user("x"))

    # Act
    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # Assert
    ids = [m.id for m in store.list_messages("s1")]
    assert ids == list(range(1, 401))

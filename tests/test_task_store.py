"""Tests for the in-memory TaskStore."""

import pytest

from todo_mcp.models.task import TaskStatus
from todo_mcp.schemas.task import TaskUpdate
from todo_mcp.services.task_service import TaskInputError, TaskStore


class TestCreate:
    """Creating todos."""

    def test_create_assigns_id_order_and_pending_status(self, store):
        todo = store.create("Buy milk")

        assert todo.id == "todo-1"
        assert todo.order == 1
        assert todo.title == "Buy milk"
        assert todo.description is None
        assert todo.status == TaskStatus.PENDING
        assert todo.created_at == todo.updated_at

    def test_create_sequential_ids_and_orders(self, store):
        todos = [store.create(f"Task {i}") for i in range(1, 4)]

        assert [t.id for t in todos] == ["todo-1", "todo-2", "todo-3"]
        assert [t.order for t in todos] == [1, 2, 3]

    def test_create_with_description(self, store):
        todo = store.create("Pay bills", "electricity and water")
        assert todo.description == "electricity and water"

    def test_create_trims_title(self, store):
        assert store.create("  Buy milk  ").title == "Buy milk"

    @pytest.mark.parametrize("title", ["", "   ", "\n\t", None, 42])
    def test_create_rejects_blank_title(self, store, title):
        with pytest.raises(TaskInputError):
            store.create(title)
        assert store.count() == 0

    def test_rejected_create_does_not_consume_an_id(self, store):
        with pytest.raises(TaskInputError):
            store.create(" ")
        assert store.create("Real").id == "todo-1"

    def test_ids_are_never_reused_after_delete(self, store):
        first = store.create("One")
        store.delete(first.id)
        second = store.create("Two")

        assert second.id == "todo-2"
        assert second.order == 2

    def test_custom_id_prefix(self, clock):
        store = TaskStore(id_prefix="task_", clock=clock)
        assert store.create("Anything").id == "task_1"


class TestGetAndList:
    """Lookups, listing and filtering."""

    def test_get_existing(self, store):
        todo = store.create("Buy milk")
        assert store.get(todo.id) == todo

    def test_get_missing_returns_none(self, store):
        assert store.get("missing-id") is None

    def test_list_empty(self, store):
        assert store.list() == []

    def test_list_sorted_by_order(self, store):
        for title in ["a", "b", "c", "d"]:
            store.create(title)
        store.delete("todo-2")
        store.update("todo-1", {"title": "a2"})

        assert [t.order for t in store.list()] == [1, 3, 4]

    def test_filter_preserves_relative_order(self, store):
        for title in ["a", "b", "c", "d", "e"]:
            store.create(title)
        store.complete("todo-4")
        store.complete("todo-2")

        everything = store.list()
        for status in TaskStatus:
            expected = [t for t in everything if t.status == status]
            assert store.list(status) == expected

        assert [t.id for t in store.list(TaskStatus.COMPLETED)] == ["todo-2", "todo-4"]
        assert [t.id for t in store.list("pending")] == ["todo-1", "todo-3", "todo-5"]

    def test_list_rejects_unknown_status(self, store):
        with pytest.raises(TaskInputError):
            store.list("archived")


class TestNext:
    """Next todo selection."""

    def test_next_empty_store(self, store):
        assert store.next() is None

    def test_next_is_earliest_pending(self, store):
        store.create("Buy milk")
        store.create("Pay bills")
        assert store.next().id == "todo-1"

        store.complete("todo-1")
        assert store.next().id == "todo-2"

    def test_next_none_when_everything_completed(self, store):
        store.create("Only")
        store.complete("todo-1")
        assert store.next() is None

    def test_reopened_todo_becomes_next_again(self, store):
        store.create("First")
        store.create("Second")
        store.complete("todo-1")
        store.update("todo-1", {"status": "pending"})

        assert store.next().id == "todo-1"


class TestUpdate:
    """Merging updates into existing todos."""

    def test_update_missing_returns_none(self, store):
        assert store.update("todo-99", {"title": "x"}) is None

    def test_update_merges_only_present_fields(self, store):
        original = store.create("Buy milk", "2 litres")
        updated = store.update(original.id, {"title": "Buy oat milk"})

        assert updated.title == "Buy oat milk"
        assert updated.description == "2 litres"
        assert updated.status == TaskStatus.PENDING

    def test_update_always_refreshes_updated_at(self, store):
        original = store.create("Buy milk")
        updated = store.update(original.id, {})

        assert updated.updated_at > original.updated_at
        assert updated.title == original.title

    def test_update_ignores_immutable_fields(self, store):
        original = store.create("Buy milk")
        updated = store.update(original.id, {
            "id": "hijacked",
            "order": 999,
            "createdAt": "1999-01-01T00:00:00Z",
            "created_at": "1999-01-01T00:00:00Z",
        })

        assert updated.id == original.id
        assert updated.order == 1
        assert updated.created_at == original.created_at
        assert store.get("hijacked") is None

    def test_update_none_values_are_ignored(self, store):
        original = store.create("Buy milk", "2 litres")
        updated = store.update(original.id, {"title": None, "description": None, "status": None})

        assert updated.title == "Buy milk"
        assert updated.description == "2 litres"

    def test_update_accepts_schema(self, store):
        store.create("Buy milk")
        command = TaskUpdate.model_validate({"id": "todo-1", "status": "completed"})
        updated = store.update(command.id, command)

        assert updated.status == TaskStatus.COMPLETED
        assert updated.title == "Buy milk"

    def test_update_rejects_blank_title_without_change(self, store):
        original = store.create("Buy milk")
        with pytest.raises(TaskInputError):
            store.update(original.id, {"title": "  ", "description": "changed"})
        assert store.get(original.id) == original

    def test_update_rejects_unknown_status(self, store):
        original = store.create("Buy milk")
        with pytest.raises(TaskInputError):
            store.update(original.id, {"status": "done"})
        assert store.get(original.id) == original

    def test_status_can_flip_back_and_forth(self, store):
        store.create("Buy milk")
        for status in ["completed", "pending", "completed"]:
            assert store.update("todo-1", {"status": status}).status == TaskStatus(status)

    def test_update_returns_new_record_and_keeps_old_unchanged(self, store):
        original = store.create("Buy milk")
        store.update(original.id, {"title": "Buy bread"})
        assert original.title == "Buy milk"


class TestCompleteDelete:
    """Completion and deletion."""

    def test_complete(self, store):
        original = store.create("Buy milk")
        completed = store.complete(original.id)

        assert completed.status == TaskStatus.COMPLETED
        assert completed.order == original.order
        assert completed.updated_at > original.updated_at

    def test_complete_missing_returns_none(self, store):
        assert store.complete("nope") is None

    def test_delete_twice(self, store):
        store.create("Buy milk")
        assert store.delete("todo-1") is True
        assert store.delete("todo-1") is False
        assert store.count() == 0

    def test_delete_missing_changes_nothing(self, store):
        store.create("Buy milk")
        assert store.delete("todo-42") is False
        assert store.count() == 1


class TestStatsAndClear:
    """Counts and clearing."""

    def test_counts(self, store):
        store.create("Buy milk")
        store.create("Pay bills")
        store.complete("todo-1")

        assert store.count() == 2
        assert store.count_by_status(TaskStatus.COMPLETED) == 1
        assert store.count_by_status("pending") == 1
        assert store.stats() == {"total": 2, "pending": 1, "completed": 1}

    def test_clear_all_resets_counters(self, store):
        store.create("Buy milk")
        store.create("Pay bills")
        store.clear_all()

        assert store.count() == 0
        assert store.list() == []
        todo = store.create("Fresh start")
        assert todo.id == "todo-1"
        assert todo.order == 1


def test_documented_walkthrough(store):
    """Create two todos, complete the first, and check what comes next."""
    milk = store.create("Buy milk")
    bills = store.create("Pay bills")
    assert (milk.id, milk.order, milk.status) == ("todo-1", 1, TaskStatus.PENDING)
    assert (bills.id, bills.order) == ("todo-2", 2)

    completed = store.complete("todo-1")
    assert completed.status == TaskStatus.COMPLETED
    assert completed.updated_at != milk.updated_at
    assert completed.order == 1

    assert store.next().title == "Pay bills"
    assert store.count_by_status(TaskStatus.COMPLETED) == 1
    assert store.count() == 2

    assert store.update("todo-1", {"order": 999}).order == 1
    assert store.get("missing-id") is None

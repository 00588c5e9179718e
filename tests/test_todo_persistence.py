"""
Tests for local storage, the persistence bridge and the task list owner.

The seed feed is replaced by plain async functions here; the real httpx
client is covered in test_todo_seed.py.
"""

import json
from unittest.mock import patch

import pytest

from todo.bridge import TaskListStore
from todo.exceptions import SeedFetchError, StorageError
from todo.models import Task
from todo.state import AddTask, DeleteTask, ToggleTask
from todo.storage import LocalStorage

SEED_TASKS = [
    Task(id=1, title="delectus aut autem", completed=False, userId=1),
    Task(id=2, title="quis ut nam facilis", completed=True, userId=1),
]


def seed_returning(tasks):
    calls = []

    async def seed():
        calls.append(True)
        return list(tasks)

    seed.calls = calls
    return seed


async def failing_seed():
    raise SeedFetchError("Seed request failed: connection refused")


def stored_tasks(storage: LocalStorage) -> list[Task]:
    return [Task.model_validate(item) for item in json.loads(storage.get_item("todos"))]


class TestLocalStorage:
    def test_missing_file_is_empty(self, storage):
        assert storage.get_item("todos") is None

    def test_set_and_get(self, storage):
        storage.set_item("todos", "[]")
        storage.set_item("theme", "dark")

        assert storage.get_item("todos") == "[]"
        assert LocalStorage(storage.path).get_item("theme") == "dark"

    def test_set_overwrites(self, storage):
        storage.set_item("todos", "[1]")
        storage.set_item("todos", "[2]")

        assert storage.get_item("todos") == "[2]"

    def test_remove_item(self, storage):
        storage.set_item("todos", "[]")
        storage.remove_item("todos")

        assert storage.get_item("todos") is None

    def test_corrupt_file_raises(self, storage):
        storage.path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError):
            storage.get_item("todos")

    def test_invalid_utf8_raises(self, storage):
        storage.path.write_bytes(b'{"todos": "\xff\xfe"}')

        with pytest.raises(StorageError):
            storage.get_item("todos")

    def test_non_string_value_raises(self, storage):
        storage.path.write_text(json.dumps({"todos": [{"id": 1, "title": "x"}]}), encoding="utf-8")

        with pytest.raises(StorageError, match="todos"):
            storage.get_item("todos")

    def test_failed_write_keeps_previous_file(self, storage):
        storage.set_item("todos", "[1]")

        with patch("todo.storage.json.dump", side_effect=OSError("No space left on device")):
            with pytest.raises(StorageError, match="No space left"):
                storage.set_item("todos", "[2]")

        assert storage.get_item("todos") == "[1]"
        assert list(storage.path.parent.iterdir()) == [storage.path]

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        storage = LocalStorage(blocker / "local_storage.json")

        with pytest.raises(StorageError):
            storage.set_item("todos", "[]")


class TestPersistenceBridge:
    def test_load_nothing_stored(self, make_bridge):
        assert make_bridge().load() is None

    def test_save_then_load(self, make_bridge):
        bridge = make_bridge()

        bridge.save(SEED_TASKS)

        assert bridge.load() == SEED_TASKS

    def test_save_uses_feed_key_names(self, make_bridge, storage):
        make_bridge().save([SEED_TASKS[0], Task(id=5, title="local")])

        raw = json.loads(storage.get_item("todos"))
        assert raw[0] == {"id": 1, "title": "delectus aut autem", "completed": False, "userId": 1}
        assert raw[1] == {"id": 5, "title": "local", "completed": False}

    def test_load_rejects_non_list(self, make_bridge, storage):
        storage.set_item("todos", '{"id": 1}')

        with pytest.raises(StorageError):
            make_bridge().load()

    def test_load_rejects_malformed_tasks(self, make_bridge, storage):
        storage.set_item("todos", '[{"title": "no id"}]')

        with pytest.raises(StorageError):
            make_bridge().load()

    def test_load_list_stored_without_encoding(self, make_bridge, storage):
        storage.path.write_text(json.dumps({"todos": [{"id": 1, "title": "x"}]}), encoding="utf-8")

        with pytest.raises(StorageError):
            make_bridge().load()

    @pytest.mark.asyncio
    async def test_initialize_prefers_storage(self, make_bridge, storage):
        storage.set_item("todos", json.dumps([{"id": 9, "title": "stored", "completed": True}]))
        seed = seed_returning(SEED_TASKS)

        tasks = await make_bridge(seed=seed).initialize()

        assert tasks == [Task(id=9, title="stored", completed=True)]
        assert seed.calls == []

    @pytest.mark.asyncio
    async def test_initialize_empty_stored_list_is_kept(self, make_bridge, storage):
        storage.set_item("todos", "[]")
        seed = seed_returning(SEED_TASKS)

        tasks = await make_bridge(seed=seed).initialize()

        assert tasks == []
        assert seed.calls == []

    @pytest.mark.asyncio
    async def test_initialize_seeds_and_persists(self, make_bridge, storage):
        tasks = await make_bridge(seed=seed_returning(SEED_TASKS)).initialize()

        assert tasks == SEED_TASKS
        assert stored_tasks(storage) == SEED_TASKS

    @pytest.mark.asyncio
    async def test_initialize_seed_failure(self, make_bridge, storage, caplog):
        tasks = await make_bridge(seed=failing_seed).initialize()

        assert tasks == []
        assert storage.get_item("todos") is None
        assert "Could not seed task list" in caplog.text


class TestTaskListStore:
    @pytest.mark.asyncio
    async def test_initialize_runs_once(self, make_bridge):
        seed = seed_returning(SEED_TASKS)
        store = TaskListStore(make_bridge(seed=seed))

        await store.initialize()
        await store.initialize()

        assert list(store.tasks) == SEED_TASKS
        assert len(seed.calls) == 1

    @pytest.mark.asyncio
    async def test_storage_matches_memory_after_every_change(self, make_bridge, storage):
        store = TaskListStore(make_bridge(seed=seed_returning(SEED_TASKS)))
        await store.initialize()

        actions = [
            AddTask("Buy milk", now_ms=10_000),
            AddTask("Walk dog", now_ms=10_000),
            ToggleTask(1),
            DeleteTask(2),
            ToggleTask(10_000),
            AddTask("   "),
            DeleteTask(424242),
        ]
        for action in actions:
            store.dispatch(action)
            assert stored_tasks(storage) == list(store.tasks)

        assert [task.title for task in store.tasks] == ["Walk dog", "Buy milk", "delectus aut autem"]

    @pytest.mark.asyncio
    async def test_blank_add_does_not_write(self, make_bridge, storage):
        store = TaskListStore(make_bridge(seed=failing_seed))
        await store.initialize()

        store.dispatch(AddTask(" "))

        assert storage.get_item("todos") is None
        assert store.tasks == ()
        assert store.state.version == 0

    @pytest.mark.asyncio
    async def test_first_change_after_failed_seed_persists(self, make_bridge, storage):
        store = TaskListStore(make_bridge(seed=failing_seed))
        await store.initialize()

        store.dispatch(AddTask("Buy milk"))

        assert [task.title for task in stored_tasks(storage)] == ["Buy milk"]

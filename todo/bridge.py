"""
Persistence Bridge

Keeps a copy of the task list in local storage and decides where the list
comes from on first load:

    stored list present  → adopt it
    nothing stored       → fetch the seed feed, persist it, adopt it
    seed fetch fails     → log it, start empty, persist nothing

TaskListStore is the single owner of the in-memory list. Every effective
change goes through dispatch(), which runs the update function and then
writes the full list back to storage (no batching, no partial writes).
The storage copy is never read again after initialization.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from functools import partial

from pydantic import ValidationError

from todo.config import TodoSettings, get_settings
from todo.exceptions import SeedFetchError, StorageError
from todo.models import Task
from todo.seed import fetch_seed_tasks
from todo.state import Action, TaskListState, reduce
from todo.storage import LocalStorage

logger = logging.getLogger(__name__)

SeedSource = Callable[[], Awaitable[list[Task]]]


class PersistenceBridge:
    """
    Reads and writes the serialized task list under one storage key.

    Args:
        storage: Local storage backend
        key: Storage key holding the task list
        seed: Async callable returning seed tasks
    """

    def __init__(
        self,
        storage: LocalStorage,
        key: str = "todos",
        seed: SeedSource | None = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self.seed = seed

    def load(self) -> list[Task] | None:
        """
        Read the stored task list.

        Returns:
            The stored tasks, or None when nothing is stored

        Raises:
            StorageError: stored value is not a JSON list of tasks
        """
        raw = self.storage.get_item(self.key)
        if raw is None:
            return None

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Stored task list is not valid JSON: {e}") from e
        if not isinstance(items, list):
            raise StorageError("Stored task list is not a JSON array")

        try:
            return [Task.model_validate(item) for item in items]
        except ValidationError as e:
            raise StorageError(f"Stored task list is malformed: {e}") from e

    def save(self, tasks: list[Task] | tuple[Task, ...]) -> None:
        """Overwrite the stored list with the full collection."""
        payload = json.dumps([task.to_json() for task in tasks])
        self.storage.set_item(self.key, payload)

    async def initialize(self) -> list[Task]:
        """
        Produce the initial task list.

        Stored data wins. Otherwise the seed feed is fetched and the result
        persisted right away. A failed fetch is logged and yields an empty
        list without touching storage, so the next start tries again.
        """
        stored = self.load()
        if stored is not None:
            logger.info(f"Loaded {len(stored)} tasks from local storage")
            return stored

        if self.seed is None:
            return []

        try:
            tasks = await self.seed()
        except SeedFetchError as e:
            logger.warning(f"Could not seed task list: {e.message}")
            return []

        self.save(tasks)
        logger.info(f"Seeded task list with {len(tasks)} tasks")
        return tasks


class TaskListStore:
    """
    Owner of the task list.

    Usage:
        store = TaskListStore(bridge)
        await store.initialize()
        store.dispatch(AddTask("Buy milk"))
    """

    def __init__(self, bridge: PersistenceBridge) -> None:
        self.bridge = bridge
        self._state = TaskListState()
        self._initialized = False

    @property
    def state(self) -> TaskListState:
        return self._state

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    async def initialize(self) -> TaskListState:
        """Load or seed the list. Runs once; later calls return the current state."""
        if self._initialized:
            return self._state
        tasks = await self.bridge.initialize()
        self._state = TaskListState.from_tasks(tasks)
        self._initialized = True
        return self._state

    def dispatch(self, action: Action) -> TaskListState:
        """
        Apply an action and persist the result when it changed anything.

        Raises:
            StorageError: the new list could not be written
        """
        new_state = reduce(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            self.bridge.save(new_state.tasks)
        return self._state


def create_store(settings: TodoSettings | None = None) -> TaskListStore:
    """Wire storage, seed feed and bridge from settings."""
    settings = settings or get_settings()
    seed = partial(
        fetch_seed_tasks,
        settings.seed_url,
        limit=settings.seed_limit,
        timeout=settings.seed_timeout,
    )
    bridge = PersistenceBridge(
        LocalStorage(settings.storage_path),
        key=settings.storage_key,
        seed=seed,
    )
    return TaskListStore(bridge)

"""
Task List State

The task collection is an immutable, versioned snapshot. The only way to
change it is reduce(state, action), which returns a new snapshot (or the
same one when the action changes nothing).

    state = TaskListState()
    state = reduce(state, AddTask("Buy milk"))
    state = reduce(state, ToggleTask(state.tasks[0].id))

New tasks are inserted at the front, so tasks are ordered newest first.
Filtering is a read-only view over the snapshot; it never changes it.
"""

import time
from dataclasses import dataclass, field
from typing import Iterable, Union

from todo.models import FilterMode, Task


@dataclass(frozen=True)
class TaskListState:
    """
    One version of the task collection.

    Attributes:
        version: Incremented by one on every effective change
        tasks: Tasks in display order (newest first)
    """

    version: int = 0
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskListState":
        return cls(version=0, tasks=tuple(tasks))

    def find(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self.tasks)


# =============================================================================
# Actions
# =============================================================================
@dataclass(frozen=True)
class AddTask:
    """Add a task. now_ms overrides the clock (used by tests)."""

    title: str
    now_ms: int | None = None


@dataclass(frozen=True)
class ToggleTask:
    task_id: int


@dataclass(frozen=True)
class DeleteTask:
    task_id: int


Action = Union[AddTask, ToggleTask, DeleteTask]


# =============================================================================
# Update Function
# =============================================================================
def current_time_ms() -> int:
    return time.time_ns() // 1_000_000


def next_task_id(tasks: Iterable[Task], now_ms: int | None = None) -> int:
    """
    Generate an id for a new task.

    Ids are based on the current time in milliseconds, bumped past the
    largest existing id so two adds within the same millisecond still get
    distinct ids.
    """
    candidate = current_time_ms() if now_ms is None else now_ms
    highest = max((task.id for task in tasks), default=None)
    if highest is not None and candidate <= highest:
        candidate = highest + 1
    return candidate


def reduce(state: TaskListState, action: Action) -> TaskListState:
    """
    Apply one action to a snapshot.

    Returns the same snapshot object when nothing changes:
    - AddTask with a blank or whitespace-only title
    - ToggleTask / DeleteTask with an id that is not in the list

    Raises:
        TypeError: for an unknown action type
    """
    if isinstance(action, AddTask):
        if not action.title.strip():
            return state
        task = Task(
            id=next_task_id(state.tasks, action.now_ms),
            title=action.title,
            completed=False,
        )
        return TaskListState(version=state.version + 1, tasks=(task, *state.tasks))

    if isinstance(action, ToggleTask):
        if state.find(action.task_id) is None:
            return state
        tasks = tuple(
            task.model_copy(update={"completed": not task.completed})
            if task.id == action.task_id
            else task
            for task in state.tasks
        )
        return TaskListState(version=state.version + 1, tasks=tasks)

    if isinstance(action, DeleteTask):
        tasks = tuple(task for task in state.tasks if task.id != action.task_id)
        if len(tasks) == len(state.tasks):
            return state
        return TaskListState(version=state.version + 1, tasks=tasks)

    raise TypeError(f"Unknown action: {action!r}")


def visible_tasks(tasks: Iterable[Task], mode: FilterMode | str = FilterMode.ALL) -> list[Task]:
    """
    Derive the filtered view of a task collection.

    Args:
        tasks: The collection (not modified)
        mode: all, completed or pending

    Returns:
        A new list in the collection's order
    """
    mode = FilterMode(mode)
    if mode is FilterMode.COMPLETED:
        return [task for task in tasks if task.completed]
    if mode is FilterMode.PENDING:
        return [task for task in tasks if not task.completed]
    return list(tasks)

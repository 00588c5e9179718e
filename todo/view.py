"""
Task List View

Renders the (filtered) task list as text and forwards user intents to the
TaskListStore. The view's own state is limited to the text being typed and
the selected filter.
"""

from todo.bridge import TaskListStore
from todo.models import FilterMode, Task
from todo.state import AddTask, DeleteTask, ToggleTask, visible_tasks

TITLE = "To-Do List"
EMPTY_MESSAGE = "  (no tasks)"


class TaskListView:
    """
    Text front end for a TaskListStore.

    Attributes:
        store: The task list owner
        input_text: Pending text of the "new task" input
        filter_mode: Selected filter
    """

    def __init__(self, store: TaskListStore) -> None:
        self.store = store
        self.input_text = ""
        self.filter_mode = FilterMode.ALL

    # -------------------------------------------------------------------------
    # Intents
    # -------------------------------------------------------------------------
    def type_text(self, text: str) -> None:
        self.input_text = text

    def submit(self) -> bool:
        """
        Add the pending text as a new task.

        Blank input is ignored and left in place. Returns True if a task
        was added (the input is then cleared).
        """
        if not self.input_text.strip():
            return False
        self.store.dispatch(AddTask(self.input_text))
        self.input_text = ""
        return True

    def toggle(self, task_id: int) -> None:
        self.store.dispatch(ToggleTask(task_id))

    def delete(self, task_id: int) -> None:
        self.store.dispatch(DeleteTask(task_id))

    def set_filter(self, mode: FilterMode | str) -> None:
        """Select a filter. Raises ValueError for an unknown mode."""
        self.filter_mode = FilterMode(mode)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def visible(self) -> list[Task]:
        return visible_tasks(self.store.tasks, self.filter_mode)

    def render(self) -> str:
        """Render the title, filter bar and visible tasks."""
        filters = "  ".join(
            f"[{mode.value}]" if mode is self.filter_mode else mode.value
            for mode in FilterMode
        )
        lines = [TITLE, f"Filter: {filters}", ""]

        tasks = self.visible()
        if not tasks:
            lines.append(EMPTY_MESSAGE)
        for task in tasks:
            lines.append(render_task(task))
        return "\n".join(lines)


def render_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"  [{mark}] {task.id:>13}  {task.title}"

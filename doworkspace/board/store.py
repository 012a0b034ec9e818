"""In-memory task board for a single session.

Holds the submitted task cards (newest first), the grouping toggle and
the board settings. Nothing is persisted; export_json() is the only way
data leaves the process.
"""

import json
import logging
import os
import threading
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from doworkspace.engine.categorizer import categorize
from doworkspace.engine.display import group_by_label, stack_order
from doworkspace.models.constants import GROUP_COMMANDS, SETTINGS_COMMANDS
from doworkspace.models.task import BoardSettings, Task
from doworkspace.models.task_factory import create_task, unlabeled_classification

load_dotenv()

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def default_settings() -> BoardSettings:
    """Board settings seeded from DO_* environment variables."""
    return BoardSettings(
        notifications=_env_flag("DO_NOTIFICATIONS", False),
        dark_cards=_env_flag("DO_DARK_CARDS", True),
        auto_label=_env_flag("DO_AUTO_LABEL", True),
    )


class SubmitResult(BaseModel):
    """Outcome of submitting input text to the board."""
    task: Optional[Task] = None
    command: Optional[str] = None  # "group" | "settings" when the text was a command
    grouping: bool = False


class TaskBoard:
    """Session store for task cards.

    All reads and read-modify-writes hold one lock; API handlers run
    concurrently in FastAPI's threadpool.
    """

    def __init__(self, settings: Optional[BoardSettings] = None):
        self._tasks: List[Task] = []
        self._lock = threading.Lock()
        self.grouping = False
        self.settings = settings or default_settings()

    def submit(self, text: str) -> SubmitResult:
        """Handle a line from the input box: a command or a new task."""
        trimmed = (text or "").strip()
        if not trimmed:
            raise ValueError("Task text is required")

        command = trimmed.lower()
        with self._lock:
            if command in GROUP_COMMANDS:
                self.grouping = not self.grouping
                logger.debug(f"Grouping toggled to {self.grouping}")
                return SubmitResult(command="group", grouping=self.grouping)
            if command in SETTINGS_COMMANDS:
                return SubmitResult(command="settings", grouping=self.grouping)
            auto_label = self.settings.auto_label

        if auto_label:
            classification = categorize(trimmed)
        else:
            classification = unlabeled_classification()

        task = create_task(trimmed, classification)
        with self._lock:
            self._tasks.insert(0, task)
            grouping = self.grouping
        logger.info(f"Added task {task.id} ({task.label}, {task.priority})")
        return SubmitResult(task=task, grouping=grouping)

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
        return None

    def get_all(self) -> List[Task]:
        """All tasks, newest first."""
        with self._lock:
            return stack_order(self._tasks)

    def grouped(self) -> Dict[str, List[Task]]:
        with self._lock:
            return group_by_label(self._tasks)

    def update(self, task_id: str, text: str, notes: str) -> Task:
        """Replace a task's text and notes.

        Type, priority and label are kept as assigned at creation.
        """
        with self._lock:
            index = self._index_of(task_id)
            updated = self._tasks[index].model_copy(update={"text": text, "notes": notes})
            self._tasks[index] = updated
        logger.info(f"Updated task {task_id}")
        return updated

    def delete(self, task_id: str) -> None:
        with self._lock:
            del self._tasks[self._index_of(task_id)]
        logger.info(f"Deleted task {task_id}")

    def clear(self) -> int:
        """Remove every task. Returns how many were removed."""
        with self._lock:
            count = len(self._tasks)
            self._tasks = []
        logger.info(f"Cleared {count} tasks")
        return count

    def update_settings(self, **changes) -> BoardSettings:
        unknown = set(changes) - set(BoardSettings.model_fields)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        with self._lock:
            self.settings = self.settings.model_copy(update=changes)
            settings = self.settings
        logger.debug(f"Settings updated: {changes}")
        return settings

    def export_json(self) -> str:
        """Pretty-printed JSON array of all tasks, newest first."""
        return json.dumps([task.model_dump(mode="json") for task in self.get_all()], indent=2)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: str) -> int:
        # Caller holds self._lock
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise ValueError(f"Task {task_id} not found")

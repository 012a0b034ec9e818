"""Display lookups and card stack ordering.

Total lookups over Priority / TaskType for the UI, plus the ordering the
card stack renders in (newest first, optionally grouped by label).
"""

from collections import OrderedDict
from typing import Dict, List, Union

from doworkspace.models.constants import PRIORITY_COLORS, TYPE_COLORS, TYPE_LABELS
from doworkspace.models.task import Priority, Task, TaskType


_PRIORITY_ORDER = list(Priority)


def type_label(task_type: Union[TaskType, str]) -> str:
    return TYPE_LABELS[TaskType(task_type)]


def type_color(task_type: Union[TaskType, str]) -> str:
    return TYPE_COLORS[TaskType(task_type)]


def priority_color(priority: Union[Priority, str]) -> str:
    return PRIORITY_COLORS[Priority(priority)]


def priority_rank(priority: Union[Priority, str]) -> int:
    """Rank by urgency: 0 for urgent through 3 for low."""
    return _PRIORITY_ORDER.index(Priority(priority))


def stack_order(tasks: List[Task]) -> List[Task]:
    """Newest task first.

    Ties on created_at keep their incoming order, so repeated calls are stable.
    """
    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


def group_by_label(tasks: List[Task]) -> Dict[str, List[Task]]:
    """Group tasks by label in stack order; groups appear in first-seen order."""
    groups: Dict[str, List[Task]] = OrderedDict()
    for task in stack_order(tasks):
        groups.setdefault(task.label, []).append(task)
    return groups

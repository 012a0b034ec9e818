"""Data models for do-workspace."""

from doworkspace.models.task import (
    BoardSettings,
    CardColor,
    Classification,
    Priority,
    Task,
    TaskTemporal,
    TaskType,
)

__all__ = [
    "BoardSettings",
    "CardColor",
    "Classification",
    "Priority",
    "Task",
    "TaskTemporal",
    "TaskType",
]

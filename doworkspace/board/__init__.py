"""Session task board for do-workspace."""

from doworkspace.board.store import SubmitResult, TaskBoard, default_settings

__all__ = ["SubmitResult", "TaskBoard", "default_settings"]

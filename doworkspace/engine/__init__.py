"""Categorization engine for do-workspace."""

from doworkspace.engine.categorizer import categorize, priority_of, score_text
from doworkspace.engine.temporal import extract_date, extract_time, extract_temporal
from doworkspace.engine.display import (
    group_by_label,
    priority_color,
    priority_rank,
    stack_order,
    type_color,
    type_label,
)

__all__ = [
    "categorize",
    "priority_of",
    "score_text",
    "extract_date",
    "extract_time",
    "extract_temporal",
    "group_by_label",
    "priority_color",
    "priority_rank",
    "stack_order",
    "type_color",
    "type_label",
]

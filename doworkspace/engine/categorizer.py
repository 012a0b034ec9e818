"""Rule-based task categorization engine.

Maps free text to a priority, a task type and a display label, and pulls
out a relative date/time mention for task types that use one.

The engine is a pure function of its input: no I/O, no shared mutable
state, same text -> same Classification. Scoring runs in a fixed order:

1. Intent patterns (start-anchored phrases, long-text heuristic, "!!!")
2. Keyword clusters (start / whole-word / substring weighting)
3. Priority phrases (authoritative when they match)
4. Boosted winner selection over the fixed type order
5. Temporal extraction for a subset of winning types
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from doworkspace.engine.temporal import extract_date, extract_time
from doworkspace.engine.vocabulary import (
    INTENT_RULES,
    KEYWORD_CLUSTERS,
    KEYWORD_WORD_PATTERNS,
    PRIORITY_PHRASES,
    URGENT_MARKER,
)
from doworkspace.models.constants import (
    GENERAL_BASELINE_SCORE,
    JOURNAL_WORD_COUNT_THRESHOLD,
    KEYWORD_START_WEIGHT,
    KEYWORD_SUBSTRING_WEIGHT,
    KEYWORD_WORD_WEIGHT,
    TEMPORAL_TYPES,
    TYPE_BOOSTS,
    TYPE_LABELS,
    WINNER_THRESHOLD,
)
from doworkspace.models.task import Classification, Priority, TaskType

logger = logging.getLogger(__name__)


def categorize(text: str) -> Classification:
    """
    Main entrypoint for categorization.
    Never raises; empty or whitespace-only text yields the default
    general/medium classification with no temporal fields.
    """
    normalized = _normalize(text)
    if not normalized:
        return Classification()

    scores = _initial_scores()
    intent_priority = _apply_intent_patterns(normalized, scores)
    _apply_keyword_clusters(normalized, scores)

    priority = _detect_priority(normalized) or intent_priority or Priority.MEDIUM
    winner = _select_winner(scores)

    extracted_date: Optional[str] = None
    extracted_time: Optional[str] = None
    if winner in TEMPORAL_TYPES:
        extracted_date = extract_date(normalized)
        extracted_time = extract_time(normalized)

    boosted = {t.value: round(s * TYPE_BOOSTS.get(t, 1), 2) for t, s in scores.items() if s}
    logger.debug(f"Categorized {normalized[:50]!r} as {winner.value}/{priority.value} (scores: {boosted})")
    return Classification(
        priority=priority,
        type=winner,
        label=TYPE_LABELS[winner],
        extracted_date=extracted_date,
        extracted_time=extracted_time,
    )


def priority_of(text: str) -> Priority:
    """Return only the priority component of categorize()."""
    if not (text or "").strip():
        return Priority.MEDIUM
    return Priority(categorize(text).priority)


def score_text(text: str) -> Dict[TaskType, float]:
    """Raw (unboosted) per-type scores after the intent and keyword stages.

    Useful for inspecting why a type won; categorize() uses the same stages.
    """
    normalized = _normalize(text)
    scores = _initial_scores()
    if normalized:
        _apply_intent_patterns(normalized, scores)
        _apply_keyword_clusters(normalized, scores)
    return scores


def _normalize(text: str) -> str:
    return (text or "").lower().strip()


def _initial_scores() -> Dict[TaskType, float]:
    scores: Dict[TaskType, float] = {task_type: 0.0 for task_type in TaskType}
    scores[TaskType.GENERAL] = GENERAL_BASELINE_SCORE
    return scores


def _apply_intent_patterns(text: str, scores: Dict[TaskType, float]) -> Optional[Priority]:
    """Add intent bonuses in place. Returns URGENT if the urgent rule fired."""
    priority: Optional[Priority] = None

    for rule in INTENT_RULES:
        fired = bool(rule.pattern.match(text))
        if rule.task_type == TaskType.JOURNAL and not fired:
            fired = len(text.split(" ")) > JOURNAL_WORD_COUNT_THRESHOLD
        if rule.marks_urgent and not fired:
            fired = URGENT_MARKER in text
        if fired:
            scores[rule.task_type] += rule.bonus
            if rule.marks_urgent:
                priority = Priority.URGENT

    return priority


def _apply_keyword_clusters(text: str, scores: Dict[TaskType, float]) -> None:
    for task_type, keywords in KEYWORD_CLUSTERS.items():
        for keyword in keywords:
            if keyword not in text:
                continue
            if text.startswith(keyword):
                scores[task_type] += KEYWORD_START_WEIGHT
            elif KEYWORD_WORD_PATTERNS[keyword].search(text):
                scores[task_type] += KEYWORD_WORD_WEIGHT
            else:
                scores[task_type] += KEYWORD_SUBSTRING_WEIGHT


def _detect_priority(text: str) -> Optional[Priority]:
    """First priority group with a phrase present in the text, or None."""
    for priority, phrases in PRIORITY_PHRASES:
        if any(p in text for p in phrases):
            return priority
    return None


def _select_winner(scores: Dict[TaskType, float]) -> TaskType:
    """Highest boosted score wins; earlier types win ties.

    A type must strictly beat WINNER_THRESHOLD (and every earlier type)
    to replace the general fallback.
    """
    winner = TaskType.GENERAL
    max_score = WINNER_THRESHOLD
    for task_type in TaskType:
        boosted = scores[task_type] * TYPE_BOOSTS.get(task_type, 1)
        if boosted > max_score:
            max_score = boosted
            winner = task_type
    return winner

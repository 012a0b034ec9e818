"""Static vocabulary tables for the categorization engine.

Everything here is read-only configuration: intent patterns, keyword
clusters, priority phrase groups and relative date patterns. Ordered
tables are tuples and are scanned top to bottom.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Dict, Tuple

from doworkspace.models.constants import (
    IDEA_INTENT_BONUS,
    JOURNAL_INTENT_BONUS,
    REMINDER_INTENT_BONUS,
    URGENT_INTENT_BONUS,
)
from doworkspace.models.task import Priority, TaskType


@dataclass(frozen=True)
class IntentRule:
    pattern: re.Pattern  # start-anchored
    task_type: TaskType
    bonus: int
    marks_urgent: bool = False


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        re.compile(r"^(today|i feel|i'm feeling|reflect|thought|journal|dear diary|meditation|gratitude)"),
        TaskType.JOURNAL,
        JOURNAL_INTENT_BONUS,
    ),
    IntentRule(
        re.compile(r"^(remind|don't forget|reminder|alarm|check on|verify|notify|call)"),
        TaskType.REMINDER,
        REMINDER_INTENT_BONUS,
    ),
    IntentRule(
        re.compile(r"^(idea|concept|what if|imagine|maybe|could we|dream|blueprint|prototype)"),
        TaskType.IDEA,
        IDEA_INTENT_BONUS,
    ),
    IntentRule(
        re.compile(r"^(urgent|asap|critical|emergency|now!|immediately|deadline|high priority)"),
        TaskType.URGENT,
        URGENT_INTENT_BONUS,
        marks_urgent=True,
    ),
)

# Substring that fires the urgent rule anywhere in the text
URGENT_MARKER = "!!!"


KEYWORD_CLUSTERS: Dict[TaskType, Tuple[str, ...]] = {
    TaskType.WORK: (
        "meeting", "email", "project", "client", "boss", "office", "report", "presentation",
        "slack", "zoom", "huddle", "standup", "sprint", "code", "debug", "deployment", "jira",
        "proposal", "contract", "agenda", "sync",
    ),
    TaskType.FINANCE: (
        "pay", "bill", "bank", "money", "budget", "invest", "tax", "save", "expense", "invoice",
        "crypto", "stock", "portfolio", "dividend", "wallet", "rent", "mortgage", "subscription",
        "price", "transfer",
    ),
    TaskType.LEARNING: (
        "learn", "study", "read", "course", "book", "research", "practice", "tutorial", "class",
        "lecture", "university", "assignment", "language", "skill", "podcast", "masterclass",
        "exam", "quiz",
    ),
    TaskType.SOCIAL: (
        "call", "meet", "friend", "family", "party", "birthday", "gift", "visit", "dinner",
        "lunch", "date", "hangout", "wedding", "anniversary", "invite", "drinks", "coffee",
    ),
    TaskType.HEALTH: (
        "doctor", "medicine", "pill", "appointment", "dentist", "therapy", "psychologist",
        "clinic", "hospital", "sick", "pain", "sleep", "water", "meditation", "checkup",
    ),
    TaskType.FITNESS: (
        "gym", "exercise", "run", "workout", "yoga", "training", "cardio", "weights", "protein",
        "tracking", "calories", "marathon", "cycle", "swim", "athlete", "stretch", "lift",
    ),
    TaskType.SHOPPING: (
        "buy", "shop", "groceries", "order", "amazon", "market", "store", "purchase", "item",
        "stock up", "restock", "cart",
    ),
    TaskType.CREATIVE: (
        "draw", "paint", "write", "music", "song", "design", "ui", "ux", "art", "photography",
        "video", "edit", "build", "craft", "woodworking", "garden", "sketch", "canvas", "lens",
        "creative",
    ),
    TaskType.PERSONAL: (
        "home", "clean", "organize", "laundry", "cook", "fix", "repair", "house", "apartment",
        "mail", "box", "package", "trash", "maintenance", "chores",
    ),
    TaskType.NOTE: (
        "note:", "memo:", "remember:", "context:", "info:", "details:", "fact:", "reference",
    ),
}


def _word_pattern(keyword: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(keyword) + r"\b", re.ASCII)


# keyword -> whole-word pattern, compiled once
KEYWORD_WORD_PATTERNS: Dict[str, re.Pattern] = {
    keyword: _word_pattern(keyword)
    for keywords in KEYWORD_CLUSTERS.values()
    for keyword in keywords
}


# Most urgent group first; first group with any substring hit decides
PRIORITY_PHRASES: Tuple[Tuple[Priority, Tuple[str, ...]], ...] = (
    (Priority.URGENT, ("asap", "urgent", "immediately", "today", "now", "deadline", "critical")),
    (Priority.HIGH, ("important", "must", "required", "high priority", "needed")),
    (Priority.LOW, ("later", "someday", "optional", "maybe", "could", "whenever")),
)


DATE_PATTERNS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"\btomorrow\b", re.I | re.ASCII), "Tomorrow"),
    (re.compile(r"\btoday\b", re.I | re.ASCII), "Today"),
    (re.compile(r"\bnext week\b", re.I | re.ASCII), "Next Week"),
    (re.compile(r"\bmonday\b", re.I | re.ASCII), "Mon"),
    (re.compile(r"\btuesday\b", re.I | re.ASCII), "Tue"),
    (re.compile(r"\bwednesday\b", re.I | re.ASCII), "Wed"),
    (re.compile(r"\bthursday\b", re.I | re.ASCII), "Thu"),
    (re.compile(r"\bfriday\b", re.I | re.ASCII), "Fri"),
    (re.compile(r"\bsaturday\b", re.I | re.ASCII), "Sat"),
    (re.compile(r"\bsunday\b", re.I | re.ASCII), "Sun"),
)

AT_TIME_RE = re.compile(r"\bat\s+(\d{1,2}(?::\d{2})?\s*(?:am|pm)?|noon|midnight)\b", re.I | re.ASCII)
BARE_TIME_RE = re.compile(r"\b(\d{1,2}(?::\d{2})?\s*(?:am|pm))\b", re.I | re.ASCII)

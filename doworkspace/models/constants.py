"""Constants for do-workspace.

This module centralizes the classifier's tunable numbers and the display
lookup tables consumed by the UI.
"""

from typing import Dict, FrozenSet, Tuple

from doworkspace.models.task import Priority, TaskType


# Score initialization
GENERAL_BASELINE_SCORE = 1.0

# Intent pattern bonuses
JOURNAL_INTENT_BONUS = 12
REMINDER_INTENT_BONUS = 10
IDEA_INTENT_BONUS = 10
URGENT_INTENT_BONUS = 15
JOURNAL_WORD_COUNT_THRESHOLD = 12  # More words than this reads as reflective writing

# Keyword cluster weights
KEYWORD_START_WEIGHT = 6
KEYWORD_WORD_WEIGHT = 3
KEYWORD_SUBSTRING_WEIGHT = 1

# Winner selection
WINNER_THRESHOLD = 0.5
TYPE_BOOSTS: Dict[TaskType, float] = {
    TaskType.CREATIVE: 1.2,
    TaskType.FINANCE: 1.2,
    TaskType.JOURNAL: 1.5,
    TaskType.URGENT: 1.5,
    TaskType.IDEA: 1.3,
}

# Only these winning types get date/time extraction
TEMPORAL_TYPES: FrozenSet[TaskType] = frozenset({
    TaskType.REMINDER,
    TaskType.GENERAL,
    TaskType.WORK,
    TaskType.FITNESS,
    TaskType.SOCIAL,
})

TYPE_LABELS: Dict[TaskType, str] = {
    TaskType.WORK: "Work",
    TaskType.PERSONAL: "Personal",
    TaskType.HEALTH: "Health",
    TaskType.FINANCE: "Finance",
    TaskType.LEARNING: "Learning",
    TaskType.SOCIAL: "Social",
    TaskType.NOTE: "Note",
    TaskType.JOURNAL: "Journal",
    TaskType.IDEA: "Idea",
    TaskType.REMINDER: "Reminder",
    TaskType.FITNESS: "Fitness",
    TaskType.SHOPPING: "Shopping",
    TaskType.URGENT: "Urgent",
    TaskType.CREATIVE: "Creative",
    TaskType.GENERAL: "Task",
}

TYPE_COLORS: Dict[TaskType, str] = {
    TaskType.WORK: "text-blue-400",
    TaskType.PERSONAL: "text-purple-400",
    TaskType.HEALTH: "text-emerald-400",
    TaskType.FINANCE: "text-amber-400",
    TaskType.LEARNING: "text-sky-400",
    TaskType.SOCIAL: "text-pink-400",
    TaskType.NOTE: "text-gray-400",
    TaskType.JOURNAL: "text-indigo-400",
    TaskType.IDEA: "text-yellow-400",
    TaskType.REMINDER: "text-blue-400",
    TaskType.FITNESS: "text-lime-400",
    TaskType.SHOPPING: "text-rose-400",
    TaskType.URGENT: "text-red-400",
    TaskType.CREATIVE: "text-fuchsia-400",
    TaskType.GENERAL: "text-white/70",
}

PRIORITY_COLORS: Dict[Priority, str] = {
    Priority.URGENT: "bg-red-500",
    Priority.HIGH: "bg-orange-500",
    Priority.MEDIUM: "bg-yellow-500",
    Priority.LOW: "bg-green-500",
}

# (bg, border, name)
CARD_PALETTE: Tuple[Tuple[str, str, str], ...] = (
    ("#e11d48", "#fb7185", "rose"),
    ("#ea580c", "#fb923c", "orange"),
    ("#d97706", "#fbbf24", "amber"),
    ("#ca8a04", "#facc15", "yellow"),
    ("#65a30d", "#a3e635", "lime"),
    ("#059669", "#34d399", "emerald"),
    ("#0d9488", "#2dd4bf", "teal"),
    ("#0891b2", "#22d3ee", "cyan"),
    ("#0284c7", "#38bdf8", "sky"),
    ("#2563eb", "#60a5fa", "blue"),
    ("#4f46e5", "#818cf8", "indigo"),
    ("#7c3aed", "#a78bfa", "violet"),
    ("#9333ea", "#c084fc", "purple"),
    ("#c026d3", "#e879f9", "fuchsia"),
    ("#db2777", "#f472b6", "pink"),
)

# Board
GROUP_COMMANDS = ("/group", "/g")
SETTINGS_COMMANDS = ("/settings", "/s")
EXPORT_FILENAME = "do-workspace-backup.json"

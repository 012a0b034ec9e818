"""Task creation factory for do-workspace.

This module centralizes how a submitted text and its classification turn
into a board Task, so the board and the API build cards the same way.
"""

import random
import uuid
from datetime import datetime, timezone
from typing import Optional

from doworkspace.models.constants import CARD_PALETTE
from doworkspace.models.task import CardColor, Classification, Task, TaskTemporal


def pick_card_color(rng: Optional[random.Random] = None) -> CardColor:
    """Pick a card color uniformly from the palette.

    Args:
        rng: Optional random source (inject a seeded Random for determinism)

    Returns:
        CardColor from CARD_PALETTE
    """
    bg, border, name = (rng or random).choice(CARD_PALETTE)
    return CardColor(bg=bg, border=border, name=name)


def unlabeled_classification() -> Classification:
    """Classification used when auto-labelling is switched off."""
    return Classification()


def create_task(
    text: str,
    classification: Classification,
    *,
    color: Optional[CardColor] = None,
    notes: str = "",
    now: Optional[datetime] = None,
) -> Task:
    """Create a board Task from text and its classification.

    Args:
        text: Task text as entered
        classification: Result of categorize() (or the unlabeled default)
        color: Card color (random palette pick if omitted)
        notes: Initial notes
        now: Creation timestamp (defaults to current UTC time)

    Returns:
        New Task with a fresh UUID
    """
    temporal = None
    if classification.extracted_date or classification.extracted_time:
        temporal = TaskTemporal(
            date=classification.extracted_date,
            time=classification.extracted_time,
        )

    return Task(
        id=str(uuid.uuid4()),
        text=text,
        notes=notes,
        color=color or pick_card_color(),
        priority=classification.priority,
        type=classification.type,
        label=classification.label,
        created_at=now or datetime.now(timezone.utc),
        temporal=temporal,
    )

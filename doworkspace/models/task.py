"""Task and classification data models for do-workspace."""

from datetime import datetime
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class Priority(str, Enum):
    """Priority enumeration, declared from most to least urgent."""
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskType(str, Enum):
    """Task type enumeration.

    Declaration order is significant: winner selection breaks ties in
    favour of the type declared first.
    """
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    FINANCE = "finance"
    LEARNING = "learning"
    SOCIAL = "social"
    NOTE = "note"
    JOURNAL = "journal"
    IDEA = "idea"
    REMINDER = "reminder"
    FITNESS = "fitness"
    SHOPPING = "shopping"
    URGENT = "urgent"
    CREATIVE = "creative"
    GENERAL = "general"  # Fallback, always present


class Classification(BaseModel):
    """Result of categorizing a piece of free text."""

    priority: Priority = Field(Priority.MEDIUM, description="Detected priority")
    type: TaskType = Field(TaskType.GENERAL, description="Winning task type")
    label: str = Field("Task", description="Display label derived from type")
    extracted_date: Optional[str] = Field(None, description="Relative date label, e.g. 'Tomorrow' or 'Mon'")
    extracted_time: Optional[str] = Field(None, description="Time mention, uppercased, e.g. '5PM'")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        frozen = True


class CardColor(BaseModel):
    """Card background/border pair from the fixed palette."""
    bg: str
    border: str
    name: str


class TaskTemporal(BaseModel):
    """Date/time mention carried over from classification."""
    date: Optional[str] = None
    time: Optional[str] = None


class Task(BaseModel):
    """A card on the task board."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    text: str = Field(..., description="Task text as entered")
    notes: str = Field("", description="Free-form notes")
    color: CardColor = Field(..., description="Card color")
    priority: Priority = Field(Priority.MEDIUM, description="Task priority")
    type: TaskType = Field(TaskType.GENERAL, description="Task type")
    label: str = Field("Task", description="Display label")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    due_at: Optional[str] = Field(None, description="Optional due marker")
    temporal: Optional[TaskTemporal] = Field(None, description="Extracted date/time, if any")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class BoardSettings(BaseModel):
    """User-toggleable board settings."""
    notifications: bool = Field(False, description="Notify on due tasks")
    dark_cards: bool = Field(True, description="Render cards with dark styling")
    auto_label: bool = Field(True, description="Classify tasks automatically on submit")

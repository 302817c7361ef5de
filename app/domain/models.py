"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Pydantic validates the task list when it is loaded back from the JSON file,
so a hand-edited or truncated file is rejected as a whole instead of leaking
half-valid records into the UI.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, PositiveInt


class Urgency(str, Enum):
    """Presentation hint derived from a due date and the current time."""
    NEUTRAL = "neutral"
    URGENT = "urgent"
    OVERDUE = "overdue"


class TodoItem(BaseModel):
    """
    A single entry of the to-do list.

    There is no id: a task is addressed by its position in the sorted list.
    """
    model_config = ConfigDict(from_attributes=True)

    text: str
    completed: bool = False
    due_date: Optional[int] = None  # Unix timestamp (seconds)


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    # UI settings
    theme: str = Field(default="auto", description="Theme: 'light', 'dark', or 'auto' (follows system)")
    language: str = Field(default="auto", description="UI language: 'en', 'ja', or 'auto' (detect from system)")
    window_width: int = Field(default=480, ge=200)
    window_height: int = Field(default=640, ge=200)
    frame_interval_ms: int = Field(default=200, ge=16, le=1000, description="UI refresh interval")

    # Timer
    timer_presets: List[PositiveInt] = Field(
        default_factory=lambda: [15, 30, 60],
        description="Countdown presets in minutes"
    )

    # Calendar
    show_holidays: bool = Field(default=True, description="Highlight public holidays in the date picker")
    holiday_country: str = Field(default="JP", description="ISO country code for public holidays")
    holiday_subdivision: Optional[str] = Field(default=None, description="Optional state/prefecture code")

"""Services layer - Business logic"""

from .calendar_service import CalendarCursor, CalendarService, InvalidDateError
from .task_store import TaskStore, classify_urgency
from .timer_service import CountdownTimer, format_countdown
from .app_state import AppState

__all__ = [
    "CalendarCursor", "CalendarService", "InvalidDateError",
    "TaskStore", "classify_urgency",
    "CountdownTimer", "format_countdown",
    "AppState",
]

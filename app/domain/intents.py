"""
UI intents.

Every user action in the window is turned into one of these messages and
handed to AppState.dispatch, so the widgets never mutate state directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SetPendingText:
    text: str


@dataclass(frozen=True)
class AddTask:
    """Submit the pending text (and pending due date) as a new task."""


@dataclass(frozen=True)
class ToggleTask:
    index: int


@dataclass(frozen=True)
class DeleteTask:
    index: int


@dataclass(frozen=True)
class SetAllCompleted:
    value: bool


@dataclass(frozen=True)
class ClearCompleted:
    pass


@dataclass(frozen=True)
class StartTimer:
    minutes: int


@dataclass(frozen=True)
class StopTimer:
    pass


@dataclass(frozen=True)
class ToggleDatePicker:
    pass


@dataclass(frozen=True)
class NavigateMonth:
    delta: int  # +1 or -1


@dataclass(frozen=True)
class ConfirmDay:
    day: int


@dataclass(frozen=True)
class CancelDatePicker:
    pass


@dataclass(frozen=True)
class ClearPendingDueDate:
    pass

"""
Application State - The single owner of everything the window shows.

Architecture Decision: Intents instead of widget callbacks
The window never touches the store, timer or calendar directly. Each click
becomes an intent message consumed here exactly once, which keeps the whole
update path testable without a QApplication.
"""

import datetime
import logging
import time
from typing import Callable, Optional

from app.domain import intents
from app.services.calendar_service import CalendarCursor
from app.services.task_store import TaskStore
from app.services.timer_service import CountdownTimer

logger = logging.getLogger(__name__)


class AppState:
    """
    Owned application state: tasks, countdown, date picker and the
    pending (not yet submitted) task.
    """

    def __init__(self, store: TaskStore, timer: Optional[CountdownTimer] = None,
                 clock: Callable[[], float] = time.time):
        self.clock = clock
        self.store = store
        self.timer = timer or CountdownTimer(clock=clock)
        self.cursor = CalendarCursor.for_timestamp(clock())

        self.pending_text: str = ""
        self.pending_due_date: Optional[int] = None
        self.show_date_picker: bool = False

    def dispatch(self, intent, now: Optional[float] = None) -> bool:
        """
        Apply one intent.

        Returns:
            True if any state changed
        """
        now = self.clock() if now is None else now
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unknown intent: {intent!r}")
        return handler(self, intent, now)

    def poll(self, now: Optional[float] = None) -> bool:
        """
        Per-frame pass.

        Returns:
            True on the frame the countdown expired (the timer is stopped)
        """
        if self.timer.is_expired(now):
            self.timer.stop()
            logger.info("Timer finished")
            return True
        return False

    # Task intents

    def _set_pending_text(self, intent: intents.SetPendingText, now: float) -> bool:
        if self.pending_text == intent.text:
            return False
        self.pending_text = intent.text
        return True

    def _add_task(self, intent: intents.AddTask, now: float) -> bool:
        if not self.store.add(self.pending_text, self.pending_due_date):
            return False
        self.pending_text = ""
        self.pending_due_date = None
        return True

    def _toggle_task(self, intent: intents.ToggleTask, now: float) -> bool:
        return self.store.toggle(intent.index)

    def _delete_task(self, intent: intents.DeleteTask, now: float) -> bool:
        return self.store.remove(intent.index)

    def _set_all_completed(self, intent: intents.SetAllCompleted, now: float) -> bool:
        return self.store.set_all_completed(intent.value)

    def _clear_completed(self, intent: intents.ClearCompleted, now: float) -> bool:
        return self.store.remove_completed()

    # Timer intents

    def _start_timer(self, intent: intents.StartTimer, now: float) -> bool:
        self.timer.start(intent.minutes, now=now)
        return True

    def _stop_timer(self, intent: intents.StopTimer, now: float) -> bool:
        was_running = self.timer.running
        self.timer.stop()
        return was_running

    # Date picker intents

    def _toggle_date_picker(self, intent: intents.ToggleDatePicker, now: float) -> bool:
        self.show_date_picker = not self.show_date_picker
        if self.show_date_picker:
            # Open on the month of the chosen date, else the current month
            anchor = self.pending_due_date if self.pending_due_date is not None else now
            self.cursor = CalendarCursor.for_timestamp(anchor)
        return True

    def _navigate_month(self, intent: intents.NavigateMonth, now: float) -> bool:
        self.cursor.advance_month(intent.delta)
        return True

    def _confirm_day(self, intent: intents.ConfirmDay, now: float) -> bool:
        self.pending_due_date = self.cursor.confirm_day(intent.day)
        self.show_date_picker = False
        return True

    def _cancel_date_picker(self, intent: intents.CancelDatePicker, now: float) -> bool:
        if not self.show_date_picker:
            return False
        self.show_date_picker = False
        return True

    def _clear_pending_due_date(self, intent: intents.ClearPendingDueDate, now: float) -> bool:
        if self.pending_due_date is None:
            return False
        self.pending_due_date = None
        return True

    _handlers = {
        intents.SetPendingText: _set_pending_text,
        intents.AddTask: _add_task,
        intents.ToggleTask: _toggle_task,
        intents.DeleteTask: _delete_task,
        intents.SetAllCompleted: _set_all_completed,
        intents.ClearCompleted: _clear_completed,
        intents.StartTimer: _start_timer,
        intents.StopTimer: _stop_timer,
        intents.ToggleDatePicker: _toggle_date_picker,
        intents.NavigateMonth: _navigate_month,
        intents.ConfirmDay: _confirm_day,
        intents.CancelDatePicker: _cancel_date_picker,
        intents.ClearPendingDueDate: _clear_pending_due_date,
    }

    @property
    def today(self) -> datetime.date:
        return datetime.date.fromtimestamp(self.clock())

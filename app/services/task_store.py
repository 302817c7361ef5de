"""
Task Store - Owns the ordered to-do list.

Architecture Decision: Position-addressed tasks
Tasks carry no id. The list is kept sorted after every mutation and the UI
addresses rows by their current index, which is only valid until the next
mutation. Mutators return True when the list changed; only then is the
repository asked to persist it.
"""

import logging
from typing import Iterator, List, Optional, Protocol

from app.domain.models import TodoItem, Urgency

logger = logging.getLogger(__name__)

URGENT_WINDOW_SECONDS = 24 * 60 * 60


class TaskSink(Protocol):
    def save(self, items: List[TodoItem]) -> bool: ...


def sort_key(item: TodoItem):
    """
    Ordering key for tasks.

    Open tasks first, then tasks with a due date (earliest first), then
    undated tasks. Used with a stable sort so equal keys keep their order.
    """
    if item.due_date is None:
        return (item.completed, True, 0)
    return (item.completed, False, item.due_date)


def classify_urgency(due_date: Optional[float], now: float) -> Urgency:
    """
    Classify a due date relative to now.

    Args:
        due_date: Unix timestamp or None
        now: Current Unix timestamp

    Returns:
        OVERDUE if the due date has passed, URGENT if it falls within the
        next 24 hours, NEUTRAL otherwise (including no due date).
    """
    if due_date is None:
        return Urgency.NEUTRAL
    if due_date < now:
        return Urgency.OVERDUE
    if due_date - now < URGENT_WINDOW_SECONDS:
        return Urgency.URGENT
    return Urgency.NEUTRAL


class TaskStore:
    """
    In-memory ordered task list with persistence on change.
    """

    def __init__(self, items: Optional[List[TodoItem]] = None, repository: Optional[TaskSink] = None):
        self._items: List[TodoItem] = list(items or [])
        self.repository = repository
        self.sort()

    @property
    def items(self) -> List[TodoItem]:
        """Snapshot of the current list"""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> TodoItem:
        return self._items[index]

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _commit(self):
        """Re-sort and persist after a successful mutation"""
        self.sort()
        if self.repository is not None:
            # Best-effort: a failed write is logged by the repository and
            # the in-memory list stays authoritative.
            self.repository.save(self._items)

    def sort(self):
        """Stable sort by completion, presence of due date, then due date"""
        self._items.sort(key=sort_key)

    def add(self, text: str, due_date: Optional[int] = None) -> bool:
        """Append a new open task. Blank text is ignored."""
        text = (text or "").strip()
        if not text:
            return False
        self._items.append(TodoItem(text=text, completed=False, due_date=due_date))
        logger.debug("Added task %r (due %s)", text, due_date)
        self._commit()
        return True

    def set_completed(self, index: int, value: bool) -> bool:
        if not self._in_bounds(index):
            return False
        item = self._items[index]
        if item.completed == value:
            return False
        item.completed = value
        self._commit()
        return True

    def toggle(self, index: int) -> bool:
        """Flip the completed flag of the task at index"""
        if not self._in_bounds(index):
            return False
        return self.set_completed(index, not self._items[index].completed)

    def remove(self, index: int) -> bool:
        if not self._in_bounds(index):
            return False
        removed = self._items.pop(index)
        logger.debug("Removed task %r", removed.text)
        self._commit()
        return True

    def set_all_completed(self, value: bool) -> bool:
        changed = False
        for item in self._items:
            if item.completed != value:
                item.completed = value
                changed = True
        if changed:
            self._commit()
        return changed

    def remove_completed(self) -> bool:
        remaining = [item for item in self._items if not item.completed]
        if len(remaining) == len(self._items):
            return False
        logger.debug("Cleared %d completed tasks", len(self._items) - len(remaining))
        self._items = remaining
        self._commit()
        return True

    def counts(self) -> dict:
        """Totals for status display"""
        done = sum(1 for item in self._items if item.completed)
        return {
            "total": len(self._items),
            "completed": done,
            "open": len(self._items) - done,
        }

"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. The task store only knows
"load" and "save"; the JSON file, its location and its failure policy live
here and can be swapped for a fake in tests.

Persistence is best-effort: a missing or corrupt file loads as an empty list
and a failed write is logged and dropped. Neither case is reported to the user.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from app.domain.models import TodoItem

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "todos.json"

_items_adapter = TypeAdapter(List[TodoItem])


class TodoRepository:
    """
    Handles task list persistence (JSON file based).

    File layout: a JSON array of {"text", "completed", "due_date"} objects,
    due_date being Unix epoch seconds or null.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_FILENAME):
        self.path = Path(path)

    def load(self) -> List[TodoItem]:
        """Load all tasks, falling back to an empty list on any failure"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            items = _items_adapter.validate_python(data)
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty", self.path)
            return []
        except (OSError, ValueError, ValidationError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.warning("Could not load tasks from %s: %s", self.path, e)
            return []

        logger.debug("Loaded %d tasks from %s", len(items), self.path)
        return items

    def save(self, items: List[TodoItem]) -> bool:
        """
        Overwrite the task file with the given list.

        Returns:
            True if the file was written. Callers are free to ignore the
            result: a failed save leaves the in-memory list authoritative.
        """
        payload = [item.model_dump() for item in items]
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not save tasks to %s: %s", self.path, e)
            return False
        return True

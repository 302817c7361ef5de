"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infra.repository import TodoRepository
from app.i18n import set_language


class FakeClock:
    """Manually advanced clock for timer and state tests"""

    def __init__(self, start: float):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingRepository:
    """Repository double that remembers every save"""

    def __init__(self):
        self.saves = []

    def save(self, items):
        self.saves.append([item.model_copy() for item in items])
        return True


@pytest.fixture
def repository(tmp_path):
    """JSON repository writing into a temporary directory"""
    return TodoRepository(tmp_path / "todos.json")


@pytest.fixture
def recorder():
    return RecordingRepository()


@pytest.fixture
def english():
    """Force English UI strings for the duration of a test"""
    set_language("en")
    yield
    set_language("en")

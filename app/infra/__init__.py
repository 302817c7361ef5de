"""Infrastructure layer - Configuration and persistence"""

from .config import Settings, get_settings
from .repository import TodoRepository

__all__ = ["Settings", "get_settings", "TodoRepository"]

"""Domain layer - Pure business entities and logic"""

from .models import TodoItem, Urgency, UserPreferences

__all__ = ["TodoItem", "Urgency", "UserPreferences"]

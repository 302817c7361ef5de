"""
Application bootstrap - Wires settings, persistence, services and the window.

Architecture Decision: Presentation Layer
This layer only handles UI logic. Business logic is delegated to Services.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QLocale
import qdarktheme

from app.infra.config import get_settings
from app.infra.repository import TodoRepository
from app.services import AppState, CalendarService, TaskStore
from app.i18n import set_language, get_language, tr
from .main_window import MainWindow

logger = logging.getLogger(__name__)


class TodoApplication:
    """
    Main application class: owns the QApplication and the single window.
    """

    def __init__(self):
        self.app = QApplication(sys.argv)
        self.app.setApplicationName("TodoApp")

        # Settings
        self.settings = get_settings()
        self.preferences = self.settings.preferences

        self._apply_language(self.preferences.language)
        self._apply_theme(self.preferences.theme)

        # Persistence and services
        self.repository = TodoRepository(self.settings.data_file)
        self.store = TaskStore(self.repository.load(), repository=self.repository)
        self.state = AppState(self.store)
        self.calendar = CalendarService(
            country=self.preferences.holiday_country,
            subdivision=self.preferences.holiday_subdivision,
            show_holidays=self.preferences.show_holidays,
        )
        logger.info("Loaded %d tasks from %s", len(self.store), self.repository.path)

        self.main_window = MainWindow(self.state, self.calendar, self.preferences)
        self.main_window.resize(self.preferences.window_width, self.preferences.window_height)

    def _apply_language(self, language: str):
        set_language(language)
        # Qt locale for standard dialogs
        if get_language() == 'ja':
            QLocale.setDefault(QLocale(QLocale.Japanese))
        else:
            QLocale.setDefault(QLocale(QLocale.English))
        self.app.setApplicationDisplayName(tr("app.name"))

    def _apply_theme(self, theme: str):
        """Apply the specified theme using qdarktheme.

        Args:
            theme: 'light', 'dark', or 'auto' (follows system)
        """
        if theme == "auto":
            qdarktheme.setup_theme("auto")
        elif theme == "dark":
            qdarktheme.setup_theme("dark")
        else:
            qdarktheme.setup_theme("light")

    def run(self) -> int:
        """Show the window and enter the Qt event loop"""
        self.main_window.show()
        return self.app.exec()

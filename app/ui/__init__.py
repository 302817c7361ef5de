"""UI layer - PySide6 GUI components"""

from .application import TodoApplication
from .date_picker import DatePickerDialog
from .main_window import MainWindow

__all__ = ["TodoApplication", "DatePickerDialog", "MainWindow"]

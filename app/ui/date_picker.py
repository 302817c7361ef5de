"""
Date picker dialog - Month grid of day buttons.

The dialog holds no date state of its own: it draws whatever CalendarCursor
it is given and reports clicks back through signals.
"""

import datetime
from typing import List, Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton, QWidget
)
from PySide6.QtCore import Qt, Signal

from app.services.calendar_service import CalendarCursor, CalendarService, DayCell
from app.i18n import tr

CELL_WIDTH = 35
CELL_HEIGHT = 30

SUNDAY_COLOR = "#e57373"
SATURDAY_COLOR = "#64b5f6"


class DatePickerDialog(QDialog):
    """
    Non-modal date picker.

    Signals:
        day_chosen(int): a day button was clicked
        month_step(int): +1 or -1 navigation
    Escape and the close button reject the dialog (cancel).
    """

    day_chosen = Signal(int)
    month_step = Signal(int)

    def __init__(self, calendar: CalendarService, parent=None):
        super().__init__(parent)
        self.calendar = calendar
        self.setWindowTitle(tr("picker.title"))
        self.setModal(False)
        self.setFixedSize(280, 300)

        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        # Close button top right
        close_row = QHBoxLayout()
        close_row.addStretch()
        close_btn = QPushButton("×")
        close_btn.setFixedSize(24, 24)
        close_btn.clicked.connect(self.reject)
        close_row.addWidget(close_btn)
        layout.addLayout(close_row)

        # Month navigation
        nav_row = QHBoxLayout()
        self.prev_btn = QPushButton("◀")
        self.prev_btn.setFixedWidth(CELL_WIDTH)
        self.prev_btn.clicked.connect(lambda: self.month_step.emit(-1))
        self.month_label = QLabel()
        self.month_label.setAlignment(Qt.AlignCenter)
        self.next_btn = QPushButton("▶")
        self.next_btn.setFixedWidth(CELL_WIDTH)
        self.next_btn.clicked.connect(lambda: self.month_step.emit(1))
        nav_row.addWidget(self.prev_btn)
        nav_row.addWidget(self.month_label, stretch=1)
        nav_row.addWidget(self.next_btn)
        layout.addLayout(nav_row)

        layout.addSpacing(8)

        self.grid_host = QWidget()
        self.grid = QGridLayout(self.grid_host)
        self.grid.setSpacing(2)
        self.grid.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.grid_host)
        layout.addStretch()

    def _clear_grid(self):
        while self.grid.count():
            child = self.grid.takeAt(0)
            if child.widget():
                child.widget().deleteLater()

    def _weekday_style(self, weekday: int, is_holiday: bool) -> Optional[str]:
        if weekday == 0 or is_holiday:
            return SUNDAY_COLOR
        if weekday == 6:
            return SATURDAY_COLOR
        return None

    def refresh(self, cursor: CalendarCursor, today: Optional[datetime.date] = None):
        """Redraw header and grid for the cursor's month"""
        self.month_label.setText(tr("picker.month", year=cursor.year, month=cursor.month))
        self._clear_grid()

        # Weekday header, Sunday first
        for col, name in enumerate(tr("picker.weekdays").split(",")):
            label = QLabel(name)
            label.setAlignment(Qt.AlignCenter)
            label.setFixedSize(CELL_WIDTH, 20)
            color = self._weekday_style(col, False)
            if color:
                label.setStyleSheet(f"color: {color};")
            self.grid.addWidget(label, 0, col)

        weeks: List[List[Optional[DayCell]]] = self.calendar.decorate(cursor, today=today)
        for row, week in enumerate(weeks, start=1):
            for col, cell in enumerate(week):
                if cell is None:
                    spacer = QLabel(" ")
                    spacer.setFixedSize(CELL_WIDTH, CELL_HEIGHT)
                    self.grid.addWidget(spacer, row, col)
                    continue
                self.grid.addWidget(self._make_day_button(cell), row, col)

    def _make_day_button(self, cell: DayCell) -> QPushButton:
        btn = QPushButton(f"{cell.day:2d}")
        btn.setFixedSize(CELL_WIDTH, CELL_HEIGHT)
        btn.setCursor(Qt.PointingHandCursor)
        styles = []
        color = self._weekday_style(cell.weekday, cell.is_holiday)
        if color:
            styles.append(f"color: {color};")
        if cell.is_today:
            styles.append("font-weight: bold;")
        if styles:
            btn.setStyleSheet("QPushButton { " + " ".join(styles) + " }")
        if cell.holiday_name:
            btn.setToolTip(cell.holiday_name)
        btn.clicked.connect(lambda checked=False, day=cell.day: self.day_chosen.emit(day))
        return btn

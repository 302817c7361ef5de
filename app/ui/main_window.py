"""
Main Window - To-do list, countdown timer and date picker.

Architecture Decision: Frame-driven rendering
A QTimer drives one update pass per frame: read the clock once, refresh the
clock/countdown labels and task colours, stop an expired countdown. Every
button click is turned into an intent for AppState; when the intent changed
something, the affected widgets are redrawn from state.
"""

import logging
import time
from typing import List, Optional, Tuple

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QLabel,
    QPushButton, QCheckBox, QScrollArea, QMessageBox, QApplication
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QShortcut, QKeySequence

from app.domain import intents
from app.domain.models import TodoItem, Urgency, UserPreferences
from app.services import AppState, CalendarService, InvalidDateError, classify_urgency, format_countdown
from app.i18n import tr
from app.utils import format_date, format_clock
from .date_picker import DatePickerDialog

logger = logging.getLogger(__name__)

URGENCY_COLORS = {
    Urgency.OVERDUE: "rgb(255, 100, 100)",
    Urgency.URGENT: "rgb(255, 200, 0)",
    Urgency.NEUTRAL: "rgb(160, 160, 160)",
}


class MainWindow(QMainWindow):
    """
    Single window of the application.

    Features:
    - Live clock and preset countdown timer
    - Bulk check/uncheck/clear actions
    - Task input with optional due date from the date picker
    - Task rows coloured by urgency, completed rows struck through
    """

    def __init__(self, state: AppState, calendar: CalendarService,
                 preferences: Optional[UserPreferences] = None, parent=None):
        super().__init__(parent)
        self.state = state
        self.calendar = calendar
        self.preferences = preferences or UserPreferences()

        # (text label, due label, item) per visible row, for per-frame recolouring
        self._task_rows: List[Tuple[QLabel, Optional[QLabel], TodoItem]] = []

        self.date_picker = DatePickerDialog(calendar, self)
        self.date_picker.day_chosen.connect(self._on_day_chosen)
        self.date_picker.month_step.connect(self._on_month_step)
        self.date_picker.rejected.connect(lambda: self._send(intents.CancelDatePicker()))

        self._setup_ui()
        self._render()

        self.frame_timer = QTimer(self)
        self.frame_timer.timeout.connect(self._on_frame)
        self.frame_timer.start(self.preferences.frame_interval_ms)
        self._on_frame()

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(12, 12, 12, 12)

        # Heading
        self.heading = QLabel(tr("main.heading"))
        heading_font = QFont()
        heading_font.setPointSize(16)
        heading_font.setBold(True)
        self.heading.setFont(heading_font)
        layout.addWidget(self.heading)

        # Clock and timer
        timer_row = QHBoxLayout()
        self.clock_label = QLabel()
        timer_row.addWidget(self.clock_label)
        timer_row.addSpacing(20)

        self.timer_label = QLabel(tr("timer.label"))
        timer_row.addWidget(self.timer_label)

        self.preset_buttons: List[QPushButton] = []
        for minutes in self.preferences.timer_presets:
            btn = QPushButton(self._preset_text(minutes))
            btn.clicked.connect(lambda checked=False, m=minutes: self._send(intents.StartTimer(m)))
            timer_row.addWidget(btn)
            self.preset_buttons.append(btn)

        self.stop_timer_btn = QPushButton(tr("timer.stop"))
        self.stop_timer_btn.clicked.connect(lambda: self._send(intents.StopTimer()))
        timer_row.addWidget(self.stop_timer_btn)
        timer_row.addStretch()
        layout.addLayout(timer_row)
        layout.addSpacing(8)

        # Bulk actions
        bulk_row = QHBoxLayout()
        self.check_all_btn = QPushButton(tr("main.check_all"))
        self.check_all_btn.clicked.connect(lambda: self._send(intents.SetAllCompleted(True)))
        self.uncheck_all_btn = QPushButton(tr("main.uncheck_all"))
        self.uncheck_all_btn.clicked.connect(lambda: self._send(intents.SetAllCompleted(False)))
        self.clear_completed_btn = QPushButton(tr("main.clear_completed"))
        self.clear_completed_btn.clicked.connect(lambda: self._send(intents.ClearCompleted()))
        for btn in (self.check_all_btn, self.uncheck_all_btn, self.clear_completed_btn):
            btn.setFixedSize(120, 24)
            bulk_row.addWidget(btn)
        bulk_row.addStretch()
        layout.addLayout(bulk_row)
        layout.addSpacing(8)

        # New task input
        input_row = QHBoxLayout()
        self.task_input = QLineEdit()
        self.task_input.setPlaceholderText(tr("main.task_placeholder"))
        self.task_input.textChanged.connect(lambda text: self.state.dispatch(intents.SetPendingText(text)))
        self.task_input.returnPressed.connect(lambda: self._send(intents.AddTask()))
        input_row.addWidget(self.task_input, stretch=1)

        self.date_btn = QPushButton("📅")
        self.date_btn.setFixedWidth(32)
        self.date_btn.setToolTip(tr("main.pick_date"))
        self.date_btn.clicked.connect(lambda: self._send(intents.ToggleDatePicker()))
        input_row.addWidget(self.date_btn)

        self.pending_due_label = QLabel()
        input_row.addWidget(self.pending_due_label)

        self.clear_date_btn = QPushButton("×")
        self.clear_date_btn.setFixedWidth(24)
        self.clear_date_btn.setToolTip(tr("main.clear_date"))
        self.clear_date_btn.clicked.connect(lambda: self._send(intents.ClearPendingDueDate()))
        input_row.addWidget(self.clear_date_btn)

        self.add_btn = QPushButton(tr("main.add"))
        self.add_btn.clicked.connect(lambda: self._send(intents.AddTask()))
        input_row.addWidget(self.add_btn)
        layout.addLayout(input_row)
        layout.addSpacing(8)

        # Task list
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.list_host = QWidget()
        self.list_layout = QVBoxLayout(self.list_host)
        self.list_layout.setAlignment(Qt.AlignTop)
        self.list_layout.setSpacing(2)
        self.scroll_area.setWidget(self.list_host)
        layout.addWidget(self.scroll_area, stretch=1)

        # Escape closes the date picker from the main window too
        cancel_shortcut = QShortcut(QKeySequence(Qt.Key_Escape), self)
        cancel_shortcut.activated.connect(lambda: self._send(intents.CancelDatePicker()))

    def _preset_text(self, minutes: int) -> str:
        if minutes % 60 == 0:
            return tr("timer.preset_hours", hours=minutes // 60)
        return tr("timer.preset_minutes", minutes=minutes)

    # Intent routing

    def _send(self, intent) -> bool:
        """Dispatch an intent and redraw if it changed anything"""
        changed = self.state.dispatch(intent)
        if changed:
            self._render()
        return changed

    def _on_day_chosen(self, day: int):
        try:
            self._send(intents.ConfirmDay(day))
        except InvalidDateError as e:
            logger.error("Day button produced an invalid date: %s", e)
            QMessageBox.warning(self, tr("error"), tr("picker.invalid_day"))

    def _on_month_step(self, delta: int):
        self._send(intents.NavigateMonth(delta))

    # Rendering

    def _render(self):
        """Redraw everything that depends on state (not on the clock)"""
        if self.task_input.text() != self.state.pending_text:
            self.task_input.setText(self.state.pending_text)

        due = self.state.pending_due_date
        self.pending_due_label.setVisible(due is not None)
        self.clear_date_btn.setVisible(due is not None)
        if due is not None:
            self.pending_due_label.setText(tr("main.due", date=format_date(due)))

        running = self.state.timer.running
        for btn in self.preset_buttons:
            btn.setVisible(not running)
        self.stop_timer_btn.setVisible(running)

        self._rebuild_task_rows()
        self._sync_date_picker()

        counts = self.state.store.counts()
        self.setWindowTitle(tr("main.title", open=counts["open"]))
        self.statusBar().showMessage(tr("main.status", completed=counts["completed"], total=counts["total"]))

    def _sync_date_picker(self):
        if self.state.show_date_picker:
            self.date_picker.refresh(self.state.cursor, today=self.state.today)
            if not self.date_picker.isVisible():
                self.date_picker.show()
        elif self.date_picker.isVisible():
            # hide() does not emit rejected, so no CancelDatePicker loop
            self.date_picker.hide()

    def _clear_task_rows(self):
        while self.list_layout.count():
            child = self.list_layout.takeAt(0)
            if child.widget():
                child.widget().deleteLater()
        self._task_rows = []

    def _rebuild_task_rows(self):
        self._clear_task_rows()
        for index, item in enumerate(self.state.store):
            self.list_layout.addWidget(self._make_task_row(index, item))
        self._recolor_tasks(time.time())

    def _make_task_row(self, index: int, item: TodoItem) -> QWidget:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)

        checkbox = QCheckBox()
        checkbox.setChecked(item.completed)
        checkbox.clicked.connect(lambda checked=False, i=index: self._send(intents.ToggleTask(i)))
        row_layout.addWidget(checkbox)

        text_label = QLabel(item.text)
        text_label.setMinimumWidth(200)
        if item.completed:
            font = text_label.font()
            font.setStrikeOut(True)
            text_label.setFont(font)
        row_layout.addWidget(text_label, stretch=1)

        due_label = None
        if item.due_date is not None:
            due_label = QLabel(tr("main.due", date=format_date(item.due_date)))
            row_layout.addWidget(due_label)

        delete_btn = QPushButton(tr("main.delete"))
        delete_btn.setFixedSize(50, 24)
        delete_btn.clicked.connect(lambda checked=False, i=index: self._send(intents.DeleteTask(i)))
        row_layout.addWidget(delete_btn)

        self._task_rows.append((text_label, due_label, item))
        return row

    def _recolor_tasks(self, now: float):
        for text_label, due_label, item in self._task_rows:
            color = URGENCY_COLORS[classify_urgency(item.due_date, now)]
            style = f"color: {color};"
            if text_label.styleSheet() != style:
                text_label.setStyleSheet(style)
                if due_label is not None:
                    due_label.setStyleSheet(style)

    # Frame pass

    def _on_frame(self):
        """Per-frame update: clock, countdown, expiry, urgency colours"""
        now = time.time()
        self.clock_label.setText(tr("main.clock", time=format_clock(now)))

        if self.state.poll(now):
            self._render()
            self.statusBar().showMessage(tr("timer.finished"), 10000)
            QApplication.beep()

        if self.state.timer.running:
            self.timer_label.setText(tr("timer.remaining", time=format_countdown(self.state.timer.remaining(now))))
        else:
            self.timer_label.setText(tr("timer.label"))

        self._recolor_tasks(now)

    def closeEvent(self, event):
        self.frame_timer.stop()
        self.date_picker.close()
        super().closeEvent(event)

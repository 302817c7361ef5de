# -*- coding: utf-8 -*-
"""
Translation dictionaries for English and Japanese.

This module contains all translatable strings for the Todo application.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "Todo App",

        # Main window
        "main.title": "Todo App ({open} open)",
        "main.heading": "Todo List",
        "main.clock": "Now: {time}",
        "main.task_placeholder": "New task...",
        "main.add": "Add",
        "main.pick_date": "Choose a due date",
        "main.clear_date": "Remove due date",
        "main.due": "Due: {date}",
        "main.delete": "Delete",
        "main.check_all": "Check all",
        "main.uncheck_all": "Uncheck all",
        "main.clear_completed": "Clear completed",
        "main.status": "{completed} of {total} done",

        # Timer
        "timer.label": "Timer:",
        "timer.remaining": "Remaining: {time}",
        "timer.stop": "⏹ Stop",
        "timer.preset_minutes": "{minutes} min",
        "timer.preset_hours": "{hours} h",
        "timer.finished": "Time's up!",

        # Date picker
        "picker.title": "Choose date",
        "picker.month": "{year:04d}-{month:02d}",
        "picker.weekdays": "Sun,Mon,Tue,Wed,Thu,Fri,Sat",
        "picker.invalid_day": "That day does not exist in this month.",

        # Generic
        "error": "Error",
    },
    "ja": {
        # Application
        "app.name": "Todoアプリ",

        # Main window
        "main.title": "Todoアプリ（未完了 {open} 件）",
        "main.heading": "Todoリスト",
        "main.clock": "現在時刻: {time}",
        "main.task_placeholder": "新しいタスク...",
        "main.add": "追加",
        "main.pick_date": "期限を選択",
        "main.clear_date": "期限を解除",
        "main.due": "期限: {date}",
        "main.delete": "削除",
        "main.check_all": "すべてチェック",
        "main.uncheck_all": "すべて未チェック",
        "main.clear_completed": "完了済みを削除",
        "main.status": "{total} 件中 {completed} 件完了",

        # Timer
        "timer.label": "タイマー:",
        "timer.remaining": "残り時間: {time}",
        "timer.stop": "⏹ 停止",
        "timer.preset_minutes": "{minutes}分",
        "timer.preset_hours": "{hours}時間",
        "timer.finished": "時間終了！",

        # Date picker
        "picker.title": "日付選択",
        "picker.month": "{year:04d}年{month:02d}月",
        "picker.weekdays": "日,月,火,水,木,金,土",
        "picker.invalid_day": "この月には存在しない日付です。",

        # Generic
        "error": "エラー",
    },
}

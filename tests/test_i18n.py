"""
Tests for translation lookup and language switching.
"""

from app import i18n
from app.i18n import tr, set_language, get_language
from app.i18n.translations import TRANSLATIONS


def test_every_key_is_translated():
    """Japanese and English carry the same keys."""
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["ja"])


def test_english_lookup(english):
    assert tr("main.add") == "Add"
    assert tr("main.due", date="2024-12-31") == "Due: 2024-12-31"


def test_japanese_lookup(english):
    set_language("ja")
    assert get_language() == "ja"
    assert tr("main.delete") == "削除"
    assert tr("picker.month", year=2024, month=2) == "2024年02月"


def test_unknown_language_falls_back_to_english(english):
    set_language("fr")
    assert get_language() == "en"


def test_auto_uses_system_language(english, monkeypatch):
    monkeypatch.setattr(i18n, "detect_system_language", lambda: "ja")
    set_language("auto")
    assert get_language() == "ja"


def test_missing_key_returns_key(english):
    assert tr("no.such.key") == "no.such.key"


def test_missing_translation_falls_back_to_english(english, monkeypatch):
    set_language("ja")
    monkeypatch.delitem(TRANSLATIONS["ja"], "main.add")
    assert tr("main.add") == "Add"


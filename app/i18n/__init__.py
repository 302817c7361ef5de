# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for the Todo app.

This module provides translation functions and language management.
Supports English and Japanese with automatic system locale detection.
"""

import locale

from app.i18n.translations import TRANSLATIONS

# Supported languages
SUPPORTED_LANGUAGES = ["en", "ja"]

# Current language (default to English)
_current_language = "en"


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'ja' if Japanese is detected, 'en' otherwise.
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        return 'en'
    if system_locale and system_locale.lower().startswith(('ja', 'japanese')):
        return 'ja'
    return 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current UI language.

    Args:
        lang: Language code ('en', 'ja' or 'auto')
    """
    global _current_language
    if lang == 'auto':
        lang = detect_system_language()
    if lang not in SUPPORTED_LANGUAGES:
        lang = 'en'
    _current_language = lang


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'main.add')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, falling back to English and then to the key itself.
    """
    translations = TRANSLATIONS.get(_current_language, {})
    text = translations.get(key)
    if text is None:
        text = TRANSLATIONS['en'].get(key, key)

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


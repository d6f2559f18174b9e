# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for Timekeep.

Display labels (weekday names, relative day labels, dialog titles) are
looked up here so the date helpers stay language-agnostic.
English is the default; German is detected from the system locale.
"""

import locale
import logging
from typing import Callable, List, Tuple

from PySide6.QtCore import QLocale

from timekeep.i18n.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ["en", "de"]
DEFAULT_LANGUAGE = "en"

_current_language = DEFAULT_LANGUAGE

_language_changed_callbacks: List[Callable[[str], None]] = []


def detect_system_language() -> str:
    """Return 'de' for a German system locale, 'en' otherwise."""
    system_locale = locale.getlocale()[0] or ""
    if system_locale.lower().startswith(("de", "german")):
        return "de"
    return DEFAULT_LANGUAGE


def resolve_language(preference: str) -> str:
    """
    Turn a language preference into a supported language code.

    Args:
        preference: 'en', 'de' or 'auto'

    Returns:
        A code from SUPPORTED_LANGUAGES.
    """
    if preference == "auto":
        return detect_system_language()
    if preference in SUPPORTED_LANGUAGES:
        return preference
    return DEFAULT_LANGUAGE


def get_language() -> str:
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current UI language and notify listeners.

    Unknown codes fall back to English.
    """
    global _current_language
    if lang not in SUPPORTED_LANGUAGES:
        lang = DEFAULT_LANGUAGE
    _current_language = lang

    # Qt widgets format dates with the default locale
    if lang == "de":
        QLocale.setDefault(QLocale(QLocale.German))
    else:
        QLocale.setDefault(QLocale(QLocale.English))

    for callback in list(_language_changed_callbacks):
        try:
            callback(lang)
        except Exception:
            logger.exception("Language change callback %r failed", callback)


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'weekday.monday')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, falling back to English and then to the key itself.
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS[DEFAULT_LANGUAGE])
    text = translations.get(key) or TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)

    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            logger.warning("Could not format translation %r with %r", key, kwargs)

    return text


def on_language_changed(callback: Callable[[str], None]) -> None:
    if callback not in _language_changed_callbacks:
        _language_changed_callbacks.append(callback)


def remove_language_callback(callback: Callable[[str], None]) -> None:
    if callback in _language_changed_callbacks:
        _language_changed_callbacks.remove(callback)


def get_available_languages() -> List[Tuple[str, str]]:
    """List of (code, display_name) tuples for language pickers."""
    return [
        ("en", "English"),
        ("de", "Deutsch"),
    ]

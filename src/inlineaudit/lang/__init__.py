"""Language module for inlineaudit."""

from inlineaudit.lang.base import (
    LANGUAGE_KEYS,
    LANGUAGES,
    Language,
    detect_language,
    get_language,
)

__all__ = [
    "Language",
    "LANGUAGES",
    "LANGUAGE_KEYS",
    "get_language",
    "detect_language",
]

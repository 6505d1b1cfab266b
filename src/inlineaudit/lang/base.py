"""Supported languages for inlineaudit."""

import os
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Language:
    """A language whose files are audited for suppressions."""

    key: str  # e.g. "java", "cs", "py"
    name: str
    extensions: frozenset[str]

    def supports_file(self, path: str, extra_extensions: Iterable[str] = ()) -> bool:
        """Check if this language handles the given file.

        Args:
            path: File path.
            extra_extensions: Additional suffixes from configuration.

        Returns:
            True if the file extension belongs to this language.
        """
        ext = os.path.splitext(path)[1].lower()
        if not ext:
            return False
        return ext in self.extensions or ext in {e.lower() for e in extra_extensions}


def _language(key: str, name: str, *extensions: str) -> Language:
    return Language(key=key, name=name, extensions=frozenset(extensions))


LANGUAGES: tuple[Language, ...] = (
    _language("java", "Java", ".java", ".jav"),
    _language("cs", "C#", ".cs", ".razor"),
    _language("py", "Python", ".py", ".pyi"),
    _language("js", "JavaScript", ".js", ".jsx", ".mjs", ".cjs", ".vue"),
    _language("ts", "TypeScript", ".ts", ".tsx", ".mts", ".cts"),
    _language("kotlin", "Kotlin", ".kt", ".kts"),
    _language("go", "Go", ".go"),
    _language("php", "PHP", ".php", ".php3", ".php4", ".php5", ".phtml", ".inc"),
    _language("ruby", "Ruby", ".rb"),
    _language("scala", "Scala", ".scala"),
    _language("vbnet", "VB.NET", ".vb"),
    _language("xml", "XML", ".xml", ".xsd", ".xsl"),
    _language("css", "CSS", ".css", ".less", ".scss"),
    _language(
        "web",
        "HTML",
        ".html",
        ".htm",
        ".xhtml",
        ".cshtml",
        ".vbhtml",
        ".aspx",
        ".ascx",
        ".rhtml",
        ".erb",
        ".jsp",
        ".shtm",
        ".shtml",
    ),
    _language("c", "C", ".c", ".h"),
    _language("cpp", "C++", ".cc", ".cpp", ".cxx", ".c++", ".hh", ".hpp", ".hxx", ".h++", ".ipp"),
)

LANGUAGE_KEYS: tuple[str, ...] = tuple(language.key for language in LANGUAGES)


def get_language(key: str) -> Optional[Language]:
    """Get a language by key, or None if unsupported."""
    for language in LANGUAGES:
        if language.key == key:
            return language
    return None


def detect_language(
    path: str,
    enabled: Optional[Iterable[str]] = None,
    extra_extensions: Optional[dict[str, list[str]]] = None,
) -> Optional[str]:
    """Map a file path to a supported language key.

    Args:
        path: File path.
        enabled: Language keys to consider (defaults to all).
        extra_extensions: Additional suffixes per language key.

    Returns:
        The first matching language key, or None.
    """
    keys = set(enabled) if enabled is not None else set(LANGUAGE_KEYS)
    extra_extensions = extra_extensions or {}

    for language in LANGUAGES:
        if language.key not in keys:
            continue
        if language.supports_file(path, extra_extensions.get(language.key, ())):
            return language.key

    return None

"""Output formatters for inlineaudit."""

from inlineaudit.output.base import Formatter
from inlineaudit.output.json import JSONFormatter
from inlineaudit.output.sarif import SARIFFormatter
from inlineaudit.output.text import TextFormatter

_FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
    "sarif": SARIFFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Get a formatter by name.

    Args:
        name: Formatter name (text, json, sarif).

    Returns:
        Formatter instance.

    Raises:
        ValueError: If formatter name is unknown.
    """
    if name not in _FORMATTERS:
        raise ValueError(f"Unknown formatter: {name}")
    return _FORMATTERS[name]()


__all__ = [
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
    "SARIFFormatter",
    "get_formatter",
]

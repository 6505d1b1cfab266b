"""inlineaudit - Audit source code for inline static-analysis suppressions."""

__version__ = "0.1.0"

"""Command-line interface for inlineaudit."""

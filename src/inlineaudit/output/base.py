"""Base formatter interface for inlineaudit."""

from abc import ABC, abstractmethod

from inlineaudit.core.types import AnalysisResult


class Formatter(ABC):
    """Abstract base class for output formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this formatter."""
        pass

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Format audit results.

        Args:
            result: The analysis result to format.

        Returns:
            Formatted output as a string.
        """
        pass

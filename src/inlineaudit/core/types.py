"""Core data types for inlineaudit."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from inlineaudit.core.suppression import SuppressionCategory


class Severity(Enum):
    """Severity levels for issues."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        order = [Severity.INFO, Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]
        return order.index(self) < order.index(other)

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self < other


@dataclass(frozen=True)
class Location:
    """Location of an issue in source code."""

    file: str
    start_line: int
    end_line: int
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    def __str__(self) -> str:
        if self.start_column is not None:
            return f"{self.file}:{self.start_line}:{self.start_column}"
        return f"{self.file}:{self.start_line}"


@dataclass(frozen=True)
class Issue:
    """A reported suppression, routed to a language rule repository."""

    repository: str
    rule: str
    language: str
    location: Location
    evidence_line: int
    category: SuppressionCategory
    severity: Severity
    message: str

    def __post_init__(self) -> None:
        if self.evidence_line < 1:
            raise ValueError(f"evidence_line must be 1 or greater, got {self.evidence_line}")

    @property
    def rule_id(self) -> str:
        """Fully qualified rule key, e.g. ``suppression-audit-java:InlineSuppression``."""
        return f"{self.repository}:{self.rule}"

    def to_dict(self) -> dict:
        """Convert issue to dictionary."""
        return {
            "repository": self.repository,
            "rule": self.rule,
            "language": self.language,
            "location": {
                "file": self.location.file,
                "start_line": self.location.start_line,
                "end_line": self.location.end_line,
                "start_column": self.location.start_column,
                "end_column": self.location.end_column,
            },
            "evidence_line": self.evidence_line,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class AnalysisResult:
    """Result of auditing a file or directory."""

    target: str
    issues: list[Issue] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def summary(self) -> dict:
        """Generate summary statistics."""
        by_category: dict[str, int] = {}
        by_language: dict[str, int] = {}

        for issue in self.issues:
            category = issue.category.value
            by_category[category] = by_category.get(category, 0) + 1

            language = issue.language
            by_language[language] = by_language.get(language, 0) + 1

        return {
            "total": len(self.issues),
            "files_scanned": self.files_scanned,
            "by_category": by_category,
            "by_language": by_language,
        }

"""Text output formatter for inlineaudit."""

from inlineaudit.core.types import AnalysisResult, Issue, Severity
from inlineaudit.output.base import Formatter


# ANSI color codes
COLORS = {
    Severity.CRITICAL: "\033[91m",  # Red
    Severity.HIGH: "\033[91m",  # Red
    Severity.MEDIUM: "\033[93m",  # Yellow
    Severity.LOW: "\033[94m",  # Blue
    Severity.INFO: "\033[90m",  # Gray
}
RESET = "\033[0m"
BOLD = "\033[1m"


class TextFormatter(Formatter):
    """Human-readable text formatter for terminal output."""

    @property
    def name(self) -> str:
        return "text"

    def format(self, result: AnalysisResult) -> str:
        """Format audit results as human-readable text.

        Args:
            result: The analysis result to format.

        Returns:
            Formatted text output.
        """
        lines: list[str] = []

        # Header
        lines.append(f"{BOLD}Inline Suppression Audit{RESET}")
        lines.append(f"Target: {result.target}")
        lines.append(f"Files scanned: {result.files_scanned}")
        lines.append("")

        if not result.issues:
            lines.append("No suppressions found.")
        else:
            summary = result.summary
            lines.append(f"Found {summary['total']} suppression(s):")
            parts = [
                f"{count} {category}"
                for category, count in sorted(summary["by_category"].items())
            ]
            lines.append("  " + ", ".join(parts))
            lines.append("")

            # Group by file
            by_file: dict[str, list[Issue]] = {}
            for issue in result.issues:
                by_file.setdefault(issue.location.file, []).append(issue)

            for path in sorted(by_file.keys()):
                lines.append(f"{BOLD}{path}{RESET}")
                for issue in sorted(by_file[path], key=lambda i: i.evidence_line):
                    lines.append(self._format_issue(issue))
                    lines.append("")

        if result.errors:
            lines.append(f"{COLORS[Severity.HIGH]}Errors:{RESET}")
            for error in result.errors:
                lines.append(f"  - {error}")

        return "\n".join(lines)

    def _format_issue(self, issue: Issue) -> str:
        """Format a single issue."""
        color = COLORS.get(issue.severity, "")
        location_str = f"line {issue.location.start_line}"
        if issue.evidence_line != issue.location.start_line:
            location_str += f" (found on line {issue.evidence_line})"

        return "\n".join(
            [
                f"  {issue.rule_id} {color}[{issue.severity.value.upper()}]{RESET} "
                f"{location_str}",
                f"    {issue.message}",
            ]
        )

"""SARIF output formatter for inlineaudit.

SARIF (Static Analysis Results Interchange Format) is a standard format
for the output of static analysis tools, designed for CI/CD integration.
"""

import json
from typing import Any

from inlineaudit import __version__
from inlineaudit.core.types import AnalysisResult, Issue, Severity
from inlineaudit.output.base import Formatter
from inlineaudit.rules.definition import RULE_NAME

# Map severity to SARIF level
SARIF_LEVELS = {
    Severity.CRITICAL: "error",
    Severity.HIGH: "error",
    Severity.MEDIUM: "warning",
    Severity.LOW: "note",
    Severity.INFO: "note",
}


class SARIFFormatter(Formatter):
    """SARIF v2.1.0 formatter for CI integration."""

    @property
    def name(self) -> str:
        return "sarif"

    def format(self, result: AnalysisResult) -> str:
        """Format audit results as SARIF.

        Args:
            result: The analysis result to format.

        Returns:
            Formatted SARIF JSON string.
        """
        sarif: dict[str, Any] = {
            "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json",
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "inlineaudit",
                            "version": __version__,
                            "rules": self._build_rules(result.issues),
                        }
                    },
                    "results": self._build_results(result.issues),
                }
            ],
        }

        return json.dumps(sarif, indent=2)

    def _build_rules(self, issues: list[Issue]) -> list[dict[str, Any]]:
        """Build SARIF rules array, one entry per repository present."""
        seen_rules: dict[str, dict[str, Any]] = {}

        for issue in issues:
            if issue.rule_id in seen_rules:
                continue

            seen_rules[issue.rule_id] = {
                "id": issue.rule_id,
                "name": issue.rule,
                "shortDescription": {"text": RULE_NAME},
                "defaultConfiguration": {
                    "level": SARIF_LEVELS.get(issue.severity, "warning")
                },
                "properties": {"language": issue.language},
            }

        return list(seen_rules.values())

    def _build_results(self, issues: list[Issue]) -> list[dict[str, Any]]:
        """Build SARIF results array from issues."""
        results = []

        for issue in issues:
            loc = issue.location
            results.append(
                {
                    "ruleId": issue.rule_id,
                    "level": SARIF_LEVELS.get(issue.severity, "warning"),
                    "message": {"text": issue.message},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": loc.file},
                                "region": {
                                    "startLine": loc.start_line,
                                    "endLine": loc.end_line,
                                },
                            }
                        }
                    ],
                    "properties": {
                        "category": issue.category.value,
                        "evidenceLine": issue.evidence_line,
                    },
                }
            )

        return results

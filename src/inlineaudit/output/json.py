"""JSON output formatter for inlineaudit."""

import json

from inlineaudit import __version__
from inlineaudit.core.types import AnalysisResult
from inlineaudit.output.base import Formatter


class JSONFormatter(Formatter):
    """JSON formatter for machine-readable output."""

    @property
    def name(self) -> str:
        return "json"

    def format(self, result: AnalysisResult) -> str:
        """Format audit results as JSON."""
        output = {
            "version": __version__,
            "target": result.target,
            "summary": result.summary,
            "issues": [issue.to_dict() for issue in result.issues],
            "errors": result.errors,
        }

        return json.dumps(output, indent=2)

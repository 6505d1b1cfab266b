"""Core module for inlineaudit."""

from inlineaudit.core.config import (
    Config,
    ConfigError,
    LanguageConfig,
    find_config_file,
    load_config,
    merge_cli_args,
)
from inlineaudit.core.suppression import (
    Finding,
    SuppressionCategory,
    extract_rule_references,
    find_suppressions,
    get_line_number,
)
from inlineaudit.core.types import AnalysisResult, Issue, Location, Severity

__all__ = [
    "Severity",
    "Location",
    "Issue",
    "AnalysisResult",
    "Finding",
    "SuppressionCategory",
    "find_suppressions",
    "extract_rule_references",
    "get_line_number",
    "Config",
    "ConfigError",
    "LanguageConfig",
    "load_config",
    "find_config_file",
    "merge_cli_args",
]

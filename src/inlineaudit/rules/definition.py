"""Rule repository definitions for inlineaudit.

Each supported language gets its own repository holding the same single
rule, so issues can be routed to a language-specific reporting channel.
"""

from dataclasses import dataclass, field
from importlib import resources

from inlineaudit.core.types import Severity
from inlineaudit.lang.base import LANGUAGE_KEYS

RULE_KEY = "InlineSuppression"
RULE_NAME = "Inline suppression of static analysis findings is not allowed"
RULE_TYPE = "vulnerability"
RULE_TAGS = ("security", "suppression", "audit", "compliance")
RULE_REMEDIATION = "30min"

REPOSITORY_PREFIX = "suppression-audit-"

DESCRIPTION_RESOURCE = "InlineSuppression.md"

DEFAULT_DESCRIPTION = (
    "Inline suppression of static analysis findings is not allowed. "
    "Remove NOSONAR comments, @SuppressWarnings/@Suppress annotations and "
    "SuppressMessage attributes to ensure all code is scanned by SonarQube."
)


@dataclass(frozen=True)
class Rule:
    """The audit rule as published in one repository."""

    key: str
    name: str
    description: str
    severity: Severity = Severity.CRITICAL
    type: str = RULE_TYPE
    tags: tuple[str, ...] = RULE_TAGS
    remediation: str = RULE_REMEDIATION


@dataclass(frozen=True)
class RuleRepository:
    """A language-bound collection of rules."""

    key: str
    name: str
    language: str
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def rule(self, key: str) -> Rule | None:
        """Get a rule by key, or None if not defined here."""
        for rule in self.rules:
            if rule.key == key:
                return rule
        return None


def repository_key(language: str) -> str:
    """Repository key for a language, e.g. ``suppression-audit-java``."""
    return REPOSITORY_PREFIX + language


def repository_name(language: str) -> str:
    """Human-readable repository name for a language."""
    return f"Inline Suppression Audit ({language})"


def load_rule_description() -> str:
    """Load the packaged rule description, falling back to a built-in text."""
    try:
        return (
            resources.files("inlineaudit.rules")
            .joinpath(DESCRIPTION_RESOURCE)
            .read_text(encoding="utf-8")
        )
    except (FileNotFoundError, OSError):
        return DEFAULT_DESCRIPTION


def define_repositories(severity: Severity = Severity.CRITICAL) -> list[RuleRepository]:
    """Create one repository per supported language.

    Args:
        severity: Severity to publish the rule with.

    Returns:
        Repositories in language order.
    """
    rule = Rule(
        key=RULE_KEY,
        name=RULE_NAME,
        description=load_rule_description(),
        severity=severity,
    )
    return [
        RuleRepository(
            key=repository_key(language),
            name=repository_name(language),
            language=language,
            rules=(rule,),
        )
        for language in LANGUAGE_KEYS
    ]

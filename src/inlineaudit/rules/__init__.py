"""Rules module for inlineaudit."""

from inlineaudit.rules.definition import (
    RULE_KEY,
    RULE_NAME,
    Rule,
    RuleRepository,
    define_repositories,
    load_rule_description,
    repository_key,
    repository_name,
)

__all__ = [
    "RULE_KEY",
    "RULE_NAME",
    "Rule",
    "RuleRepository",
    "define_repositories",
    "load_rule_description",
    "repository_key",
    "repository_name",
]

"""Inline suppression detection for inlineaudit.

Detects five families of "silence the analyzer" directives:
- NOSONAR comments  - any comment style, any language
- @SuppressWarnings(...)  - Java/Kotlin annotations naming rules or "all"
- @Suppress(...)  - Kotlin annotations naming rules or "all"
- [SuppressMessage(...)]  - C# attributes naming rules or the platform
- <SuppressMessage(...)>  - VB.NET attributes naming rules or the platform
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class SuppressionCategory(Enum):
    """Directive families recognized by the scanner."""

    BARE_MARKER = "bare_marker"
    ANNOTATION_GENERIC = "annotation_generic"
    ANNOTATION_VARIANT = "annotation_variant"
    BRACKET_ATTRIBUTE = "bracket_attribute"
    ANGLE_ATTRIBUTE = "angle_attribute"


@dataclass(frozen=True)
class Finding:
    """A suppression directive found in source text."""

    report_line: int  # line the issue is attached to
    evidence_line: int  # line the directive was found on
    category: SuppressionCategory
    message: str


MARKER = "NOSONAR"

MARKER_PATTERN = re.compile(r"\bNOSONAR\b", re.IGNORECASE)

STRING_LITERAL_PATTERN = re.compile(r'"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'')

SUPPRESS_WARNINGS_PATTERN = re.compile(r"@SuppressWarnings\s*\(([\s\S]*?)\)")

# Lookahead keeps @SuppressWarnings and Android's @SuppressLint out of this family
SUPPRESS_PATTERN = re.compile(r"@Suppress(?!Warnings|Lint)\s*\(([\s\S]*?)\)")

SUPPRESS_MESSAGE_PATTERN = re.compile(
    r"\[\s*(?:(?:assembly|module|type|method|return|param)\s*:\s*)?"
    r"(?:System\.Diagnostics\.CodeAnalysis\.)?SuppressMessage\s*\("
    r"([\s\S]*?)\)\s*\]"
)

VB_SUPPRESS_MESSAGE_PATTERN = re.compile(
    r"<\s*(?:(?:Assembly|Module|Type|Method|Return|Param)\s*:\s*)?"
    r"(?:System\.Diagnostics\.CodeAnalysis\.)?SuppressMessage\s*\("
    r"([\s\S]*?)\)\s*>",
    re.IGNORECASE,
)

RULE_PREFIXES = (
    "java",
    "squid",
    "csharpsquid",
    "javascript",
    "typescript",
    "python",
    "kotlin",
    "php",
    "ruby",
    "go",
    "scala",
    "vbnet",
    "xml",
    "css",
    "web",
    "plsql",
    "tsql",
    "c",
    "cpp",
    "objc",
    "swift",
    "abap",
    "cobol",
    "flex",
)

PREFIXED_RULE_PATTERN = re.compile(
    r"(?:" + "|".join(RULE_PREFIXES) + r")\s*:\s*S\d{3,}"
)

BARE_RULE_PATTERN = re.compile(r"\bS\d{3,}\b")

ALL_SUPPRESS_PATTERN = re.compile(r'"all"', re.IGNORECASE)

# Anchored at the word start so "SonarAnalyzer" counts but "comparisonArgs" does not
PLATFORM_PATTERN = re.compile(r"\bsonar", re.IGNORECASE)


def _annotation_message(label: str, rule_refs: list[str], flagged: bool) -> str:
    if flagged:
        return (
            f'Remove this {label}("all") annotation. '
            "Blanket suppression of all warnings is not permitted."
        )
    return (
        f"Remove this {label} annotation suppressing rule(s): {', '.join(rule_refs)}. "
        "Suppressing SonarQube rules is not permitted."
    )


def _attribute_message(label: str, rule_refs: list[str], flagged: bool) -> str:
    if rule_refs:
        detail = f"rule(s): {', '.join(rule_refs)}"
    else:
        detail = "SonarQube rules"
    return (
        f"Remove this {label} attribute suppressing {detail}. "
        "Suppressing SonarQube rules is not permitted."
    )


@dataclass(frozen=True)
class DirectiveMatcher:
    """Declarative description of one annotation/attribute family.

    The payload captured by ``pattern`` group 1 is accepted when it holds a
    rule reference or when ``flag_pattern`` matches it.
    """

    category: SuppressionCategory
    label: str
    pattern: re.Pattern
    flag_pattern: re.Pattern
    render: Callable[[str, list[str], bool], str]


DIRECTIVE_MATCHERS = (
    DirectiveMatcher(
        category=SuppressionCategory.ANNOTATION_GENERIC,
        label="@SuppressWarnings",
        pattern=SUPPRESS_WARNINGS_PATTERN,
        flag_pattern=ALL_SUPPRESS_PATTERN,
        render=_annotation_message,
    ),
    DirectiveMatcher(
        category=SuppressionCategory.ANNOTATION_VARIANT,
        label="@Suppress",
        pattern=SUPPRESS_PATTERN,
        flag_pattern=ALL_SUPPRESS_PATTERN,
        render=_annotation_message,
    ),
    DirectiveMatcher(
        category=SuppressionCategory.BRACKET_ATTRIBUTE,
        label="[SuppressMessage]",
        pattern=SUPPRESS_MESSAGE_PATTERN,
        flag_pattern=PLATFORM_PATTERN,
        render=_attribute_message,
    ),
    DirectiveMatcher(
        category=SuppressionCategory.ANGLE_ATTRIBUTE,
        label="<SuppressMessage>",
        pattern=VB_SUPPRESS_MESSAGE_PATTERN,
        flag_pattern=PLATFORM_PATTERN,
        render=_attribute_message,
    ),
)


def find_suppressions(content: str) -> list[Finding]:
    """Scan file content for every supported suppression directive.

    Args:
        content: Full source file content.

    Returns:
        Findings ordered by evidence line, at most one per line.
    """
    findings: list[Finding] = []
    claimed: set[int] = set()

    _find_marker_matches(content, claimed, findings)
    for matcher in DIRECTIVE_MATCHERS:
        _find_directive_matches(content, matcher, claimed, findings)

    # Each pass emits in line order; sorting interleaves the families.
    findings.sort(key=lambda f: f.evidence_line)
    return findings


def _find_marker_matches(
    content: str, claimed: set[int], findings: list[Finding]
) -> None:
    """Line-by-line scan for the NOSONAR marker."""
    lines = content.split("\n")
    total_lines = len(lines)

    for i, line in enumerate(lines):
        if not MARKER_PATTERN.search(strip_string_literals(line)):
            continue

        evidence_line = i + 1  # 1-indexed

        # The platform silences everything on a NOSONAR line, including the
        # issue flagging it, so report on a neighbouring line instead.
        if evidence_line > 1:
            report_line = evidence_line - 1
        elif total_lines > 1:
            report_line = evidence_line + 1
        else:
            report_line = evidence_line

        if evidence_line in claimed:
            continue
        claimed.add(evidence_line)

        findings.append(
            Finding(
                report_line=report_line,
                evidence_line=evidence_line,
                category=SuppressionCategory.BARE_MARKER,
                message=(
                    f'Remove this use of "{MARKER}" (line {evidence_line}). '
                    "Suppressing SonarQube issues inline is not permitted."
                ),
            )
        )


def _find_directive_matches(
    content: str,
    matcher: DirectiveMatcher,
    claimed: set[int],
    findings: list[Finding],
) -> None:
    """Run one annotation/attribute family over the whole content."""
    for match in matcher.pattern.finditer(content):
        payload = match.group(1)
        rule_refs = extract_rule_references(payload)
        flagged = matcher.flag_pattern.search(payload) is not None

        if not rule_refs and not flagged:
            continue

        line = get_line_number(content, match.start())
        if line in claimed:
            continue
        claimed.add(line)

        findings.append(
            Finding(
                report_line=line,
                evidence_line=line,
                category=matcher.category,
                message=matcher.render(matcher.label, rule_refs, flagged),
            )
        )


def extract_rule_references(payload: str) -> list[str]:
    """Extract rule references from annotation or attribute content.

    Language-prefixed references (``java:S106``) win; bare references
    (``S1234``) are only collected when no prefixed one is present.

    Args:
        payload: Text between the directive's parentheses.

    Returns:
        Unique references in order of first appearance.
    """
    refs: list[str] = []

    for match in PREFIXED_RULE_PATTERN.finditer(payload):
        ref = re.sub(r"\s+", "", match.group())
        if ref not in refs:
            refs.append(ref)

    if refs:
        return refs

    for match in BARE_RULE_PATTERN.finditer(payload):
        ref = match.group()
        if ref not in refs:
            refs.append(ref)

    return refs


def strip_string_literals(line: str) -> str:
    """Blank the contents of quoted string literals, keeping line length.

    Args:
        line: A single physical line.

    Returns:
        The line with every character between matching quotes replaced by a space.
    """
    return STRING_LITERAL_PATTERN.sub(
        lambda m: m.group()[0] + " " * (len(m.group()) - 2) + m.group()[-1],
        line,
    )


def get_line_number(content: str, offset: int) -> int:
    """Convert a character offset into a 1-indexed line number.

    Args:
        content: Full text.
        offset: Character offset into ``content``.

    Returns:
        Line number containing the offset.
    """
    offset = max(0, min(offset, len(content)))
    return content.count("\n", 0, offset) + 1

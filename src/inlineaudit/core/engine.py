"""Audit engine for inlineaudit."""

import fnmatch
import sys
from pathlib import Path
from typing import Iterator, Optional

from inlineaudit.core.config import Config
from inlineaudit.core.suppression import Finding, find_suppressions
from inlineaudit.core.types import AnalysisResult, Issue, Location
from inlineaudit.lang.base import detect_language
from inlineaudit.rules.definition import RULE_KEY, repository_key


class EngineError(Exception):
    """Error during analysis."""

    pass


class AuditEngine:
    """Discovers source files and reports the suppressions found in them."""

    def __init__(
        self,
        config: Config,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        """Initialize the audit engine.

        Args:
            config: Application configuration.
            verbose: Enable verbose output.
            quiet: Suppress progress output.
        """
        self.config = config
        self.verbose = verbose
        self.quiet = quiet

    def analyze(self, target: str) -> AnalysisResult:
        """Audit a target file or directory.

        Args:
            target: Path to a source file or a directory to walk.

        Returns:
            AnalysisResult with issues and errors.

        Raises:
            EngineError: If the target does not exist.
        """
        target_path = Path(target)

        if target_path.is_dir():
            files = list(self._iter_source_files(target_path))
        elif target_path.is_file():
            files = [(target_path, target_path.name)]
        else:
            raise EngineError(f"Target not found: {target}")

        result = AnalysisResult(target=target)

        if self.verbose:
            self._log(f"Found {len(files)} candidate file(s)")

        for path, display_path in files:
            language = self._detect_language(display_path)
            if language is None:
                continue

            issues = self._scan_file(path, display_path, language, result)
            result.issues.extend(issues)

        return result

    def scan_source(self, content: str, path: str, language: str) -> list[Issue]:
        """Convert the suppressions in already-read content into issues.

        Args:
            content: File content.
            path: Path to report issues against.
            language: Supported language key.

        Returns:
            One issue per suppression, ordered by line.
        """
        return [
            self._to_issue(finding, path, language)
            for finding in find_suppressions(content)
        ]

    def _scan_file(
        self,
        path: Path,
        display_path: str,
        language: str,
        result: AnalysisResult,
    ) -> list[Issue]:
        """Read one file and scan it, recording unreadable files as errors."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            message = f"Unable to read {display_path}, skipping suppression audit: {e}"
            result.errors.append(message)
            self._log(f"Warning: {message}")
            return []

        result.files_scanned += 1
        issues = self.scan_source(content, display_path, language)

        if issues and self.verbose:
            self._log(f"  Found {len(issues)} suppression(s) in {display_path}")

        return issues

    def _to_issue(self, finding: Finding, path: str, language: str) -> Issue:
        return Issue(
            repository=repository_key(language),
            rule=RULE_KEY,
            language=language,
            location=Location(
                file=path,
                start_line=finding.report_line,
                end_line=finding.report_line,
            ),
            evidence_line=finding.evidence_line,
            category=finding.category,
            severity=self.config.severity,
            message=finding.message,
        )

    def _iter_source_files(self, root: Path) -> Iterator[tuple[Path, str]]:
        """Walk a directory in sorted order, yielding (path, relative path)."""
        for path in sorted(root.rglob("*")):
            relative = path.relative_to(root)

            # Skip hidden directories such as .git and .venv
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue

            if not path.is_file():
                continue

            display_path = relative.as_posix()
            if self._is_ignored(display_path):
                if self.verbose:
                    self._log(f"  Skipping {display_path} (ignored)")
                continue

            yield path, display_path

    def _is_ignored(self, path: str) -> bool:
        """Check a relative POSIX path against the ignore globs."""
        name = path.rsplit("/", 1)[-1]
        for pattern in self.config.ignore_paths:
            if fnmatch.fnmatch(path, pattern) or fnmatch.fnmatch(name, pattern):
                return True
        return False

    def _detect_language(self, path: str) -> Optional[str]:
        return detect_language(
            path,
            enabled=self.config.enabled_languages,
            extra_extensions=self.config.extra_extensions,
        )

    def _log(self, message: str) -> None:
        """Log a message if not in quiet mode."""
        if not self.quiet:
            print(message, file=sys.stderr)

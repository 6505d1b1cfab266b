"""Configuration loading and validation for inlineaudit."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from inlineaudit.core.types import Severity
from inlineaudit.lang.base import LANGUAGE_KEYS

CONFIG_FILENAMES = (".inlineaudit.yaml", ".inlineaudit.yml")

OUTPUT_FORMATS = {"text", "json", "sarif"}


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass
class LanguageConfig:
    """Configuration for a single language."""

    enabled: bool = True
    extensions: list[str] = field(default_factory=list)


@dataclass
class Config:
    """Full application configuration."""

    languages: dict[str, LanguageConfig] = field(default_factory=dict)
    output_format: str = "text"
    fail_on: Optional[Severity] = None
    severity: Severity = Severity.CRITICAL
    ignore_paths: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_config(self)

    def get_language_config(self, language: str) -> LanguageConfig:
        """Get config for a language, returning defaults if not specified."""
        return self.languages.get(language, LanguageConfig())

    def is_language_enabled(self, language: str) -> bool:
        """Check if a language is enabled."""
        return self.get_language_config(language).enabled

    @property
    def enabled_languages(self) -> list[str]:
        """Enabled language keys in their canonical order."""
        return [key for key in LANGUAGE_KEYS if self.is_language_enabled(key)]

    @property
    def extra_extensions(self) -> dict[str, list[str]]:
        """Configured additional extensions per language."""
        return {
            key: lang.extensions
            for key, lang in self.languages.items()
            if lang.extensions
        }


def validate_config(config: Config) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If any values are invalid.
    """
    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {sorted(OUTPUT_FORMATS)}, got {config.output_format}"
        )

    unknown = [key for key in config.languages if key not in LANGUAGE_KEYS]
    if unknown:
        raise ConfigError(f"Unknown language(s): {', '.join(sorted(unknown))}")


def find_config_file(start_path: Optional[str] = None) -> Optional[str]:
    """Find .inlineaudit.yaml in current directory or parents.

    Args:
        start_path: Starting directory (defaults to cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path:
        current = Path(start_path).resolve()
    else:
        current = Path.cwd()

    while True:
        for name in CONFIG_FILENAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)

        # Stop at git root
        if (current / ".git").exists():
            break

        # Stop at filesystem root
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, searches for .inlineaudit.yaml.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    if raw is None:
        return Config()

    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a mapping")

    return _parse_config(raw)


def _parse_config(raw: dict) -> Config:
    """Parse raw YAML dict into Config object."""
    languages: dict[str, LanguageConfig] = {}

    if "languages" in raw and isinstance(raw["languages"], dict):
        for key, lang_raw in raw["languages"].items():
            if lang_raw is None:
                lang_raw = {}
            if not isinstance(lang_raw, dict):
                raise ConfigError(
                    f"Language '{key}' must be a mapping, got: {lang_raw!r}"
                )
            languages[str(key)] = _parse_language_config(str(key), lang_raw)

    settings = raw.get("settings", {})
    if settings is None:
        settings = {}

    output_format = settings.get("output_format", "text")

    fail_on = None
    if settings.get("fail_on") is not None:
        fail_on = _parse_severity(settings["fail_on"], "fail_on")

    severity = Severity.CRITICAL
    if settings.get("severity") is not None:
        severity = _parse_severity(settings["severity"], "severity")

    ignore = raw.get("ignore", {})
    if ignore is None:
        ignore = {}

    ignore_paths = ignore.get("paths", [])
    if ignore_paths is None:
        ignore_paths = []

    return Config(
        languages=languages,
        output_format=output_format,
        fail_on=fail_on,
        severity=severity,
        ignore_paths=[str(p) for p in ignore_paths],
    )


def _parse_severity(value: Any, setting: str) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        raise ConfigError(f"Invalid severity for {setting}: {value}")


def _parse_language_config(key: str, raw: dict) -> LanguageConfig:
    """Parse language configuration.

    ``extensions`` may be a single string or a list of strings.
    """
    enabled = raw.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError(f"Language '{key}': enabled must be true or false")

    extensions = raw.get("extensions", [])
    if extensions is None:
        extensions = []
    elif isinstance(extensions, str):
        extensions = [extensions]
    elif not isinstance(extensions, list):
        raise ConfigError(f"Language '{key}': extensions must be a list")

    normalized = []
    for ext in extensions:
        ext = str(ext).lower()
        if not ext.startswith("."):
            ext = "." + ext
        normalized.append(ext)

    return LanguageConfig(enabled=enabled, extensions=normalized)


def merge_cli_args(config: Config, **kwargs: Any) -> Config:
    """Merge CLI arguments into configuration.

    CLI args take precedence over config file values.

    Args:
        config: Base configuration.
        **kwargs: CLI arguments (output_format, fail_on, languages, etc.)

    Returns:
        New Config with merged values.
    """
    languages = dict(config.languages)
    output_format = config.output_format
    fail_on = config.fail_on
    severity = config.severity
    ignore_paths = list(config.ignore_paths)

    if kwargs.get("output_format") is not None:
        output_format = kwargs["output_format"]

    if kwargs.get("fail_on") is not None:
        fail_on = kwargs["fail_on"]

    if kwargs.get("severity") is not None:
        severity = kwargs["severity"]

    if kwargs.get("ignore_paths"):
        ignore_paths.extend(kwargs["ignore_paths"])

    # Explicit languages on the command line restrict the run to those
    if kwargs.get("enable_languages"):
        selected = set(kwargs["enable_languages"])
        for key in LANGUAGE_KEYS:
            current = languages.get(key, LanguageConfig())
            languages[key] = LanguageConfig(
                enabled=key in selected,
                extensions=current.extensions,
            )

    if kwargs.get("disable_languages"):
        for key in kwargs["disable_languages"]:
            current = languages.get(key, LanguageConfig())
            languages[key] = LanguageConfig(enabled=False, extensions=current.extensions)

    return Config(
        languages=languages,
        output_format=output_format,
        fail_on=fail_on,
        severity=severity,
        ignore_paths=ignore_paths,
    )

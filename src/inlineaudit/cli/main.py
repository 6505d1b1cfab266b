"""inlineaudit CLI entry point."""

import sys
from pathlib import Path

import click

from inlineaudit import __version__
from inlineaudit.core.config import ConfigError, load_config, merge_cli_args
from inlineaudit.core.engine import AuditEngine, EngineError
from inlineaudit.core.types import Severity
from inlineaudit.lang.base import LANGUAGE_KEYS, LANGUAGES
from inlineaudit.output import get_formatter
from inlineaudit.rules.definition import define_repositories

SEVERITY_CHOICES = ["critical", "high", "medium", "low", "info"]


@click.group()
@click.version_option(version=__version__, prog_name="inlineaudit")
def cli() -> None:
    """inlineaudit - Find inline static-analysis suppressions.

    Reports NOSONAR comments, @SuppressWarnings/@Suppress annotations and
    SuppressMessage attributes that silence SonarQube rules.
    """
    pass


@cli.command()
@click.argument("target", type=click.Path(exists=True), required=False, default=".")
@click.option(
    "-l",
    "--language",
    "languages",
    multiple=True,
    type=click.Choice(LANGUAGE_KEYS),
    help="Only scan this language (repeatable).",
)
@click.option(
    "-L",
    "--exclude-language",
    "exclude_languages",
    multiple=True,
    type=click.Choice(LANGUAGE_KEYS),
    help="Skip this language (repeatable).",
)
@click.option(
    "-x",
    "--exclude",
    "exclude_paths",
    multiple=True,
    help="Glob of paths to skip (repeatable).",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["text", "json", "sarif"]),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "-f",
    "--output-file",
    type=click.Path(),
    default=None,
    help="Write output to file (default: stdout).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Config file path (default: .inlineaudit.yaml).",
)
@click.option(
    "--severity",
    type=click.Choice(SEVERITY_CHOICES),
    default=None,
    help="Severity assigned to reported suppressions (default: critical).",
)
@click.option(
    "--fail-on",
    type=click.Choice(SEVERITY_CHOICES),
    default=None,
    help="Exit non-zero if suppressions at this severity or above are found.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output.")
def scan(
    target: str,
    languages: tuple[str, ...],
    exclude_languages: tuple[str, ...],
    exclude_paths: tuple[str, ...],
    output_format: str | None,
    output_file: str | None,
    config_path: str | None,
    severity: str | None,
    fail_on: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Scan a file or directory for inline suppressions.

    TARGET is a source file or a directory (default: current directory).
    """
    try:
        config = load_config(config_path)

        cli_args = {
            "output_format": output_format,
            "fail_on": Severity(fail_on) if fail_on else None,
            "severity": Severity(severity) if severity else None,
            "enable_languages": list(languages) if languages else None,
            "disable_languages": list(exclude_languages) if exclude_languages else None,
            "ignore_paths": list(exclude_paths) if exclude_paths else None,
        }
        config = merge_cli_args(config, **cli_args)

        engine = AuditEngine(config, verbose=verbose, quiet=quiet)
        result = engine.analyze(target)

        formatter = get_formatter(config.output_format)
        output = formatter.format(result)

        if output_file:
            Path(output_file).write_text(output)
            if not quiet:
                click.echo(f"Output written to {output_file}")
        else:
            click.echo(output)

        if config.fail_on:
            failing = [i for i in result.issues if i.severity >= config.fail_on]
            if failing:
                sys.exit(1)

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except EngineError as e:
        click.echo(f"Analysis error: {e}", err=True)
        sys.exit(3)


@cli.command("rules")
def list_rules() -> None:
    """List the rule repository published for each language."""
    click.echo("Rule repositories:\n")
    for repository in define_repositories():
        for rule in repository.rules:
            click.echo(f"  {repository.key}:{rule.key}")
            click.echo(f"    {repository.name} - {rule.name} [{rule.severity.value}]\n")


@cli.command("languages")
def list_languages() -> None:
    """List supported languages and their file extensions."""
    click.echo("Supported languages:\n")
    for language in LANGUAGES:
        extensions = " ".join(sorted(language.extensions))
        click.echo(f"  {language.key:<8} {language.name:<12} {extensions}")


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing config file.",
)
def init(force: bool) -> None:
    """Create .inlineaudit.yaml config file."""
    config_path = Path(".inlineaudit.yaml")

    if config_path.exists() and not force:
        click.echo(
            "Config file already exists. Use --force to overwrite.", err=True
        )
        sys.exit(1)

    default_config = """\
# inlineaudit configuration

languages:
  java:
    enabled: true
  cs:
    enabled: true
  # py:
  #   enabled: false
  #   extensions: [".pyw"]

settings:
  output_format: text
  severity: critical
  # fail_on: critical  # Uncomment to fail CI when suppressions are found

ignore:
  paths:
    - "**/generated/**"
    - "**/node_modules/**"
"""
    config_path.write_text(default_config)
    click.echo(f"Created {config_path}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

"""
Command-line interface for building translation templates.

Scans the configured source directories for nuggets, writes the PO
template(s) and merges them into every available language.

Usage:
    pot --project-dir ./site
    pot --env-file ./site/.env --show-source-context --verbose
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n import TemplateBuildService
from infrastructure.logging import configure_logging

app = typer.Typer(
    name="pot",
    help="Build PO templates from nuggets and merge them into translations",
    add_completion=False,
)


def innermost_cause(exc: BaseException) -> BaseException:
    """Follow the ``__cause__``/``__context__`` chain to its end."""
    seen = {id(exc)}
    current = exc
    while True:
        nested = current.__cause__ or current.__context__
        if nested is None or id(nested) in seen:
            return current
        seen.add(id(nested))
        current = nested


def load_settings(
    project_dir: Optional[Path] = None,
    env_file: Optional[Path] = None,
    show_source_context: bool = False,
) -> Settings:
    """Build the settings for one run.

    Args:
        project_dir: Overrides ``I18N_PROJECT_DIRECTORY``.
        env_file: Environment file loaded before the settings are read.
        show_source_context: Append the source line to references.

    Returns:
        Settings with the command-line overrides applied.
    """
    if env_file is not None:
        if not env_file.is_file():
            raise FileNotFoundError(f"Environment file not found: {env_file}")
        load_dotenv(env_file, override=True)

    overrides = {}
    if project_dir is not None:
        overrides["project_directory"] = str(project_dir)
    if show_source_context:
        overrides["show_source_context"] = True

    return Settings(i18n=I18nSettings(**overrides))


@app.command()
def build(
    project_dir: Optional[Path] = typer.Option(
        None, "--project-dir", "-p",
        help="Project root used to resolve relative paths",
    ),
    env_file: Optional[Path] = typer.Option(
        None, "--env-file", "-e",
        help="Environment file with I18N_* settings",
    ),
    show_source_context: bool = typer.Option(
        False, "--show-source-context",
        help="Append the source line to every reference",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log every scanned file",
    ),
):
    """Scan sources, save the template(s) and merge every language."""
    try:
        settings = load_settings(project_dir, env_file, show_source_context)
        configure_logging(
            log_level="DEBUG" if verbose else settings.LOG_LEVEL,
            is_production=False,
        )
        result = TemplateBuildService(settings).build()
    except Exception as exc:  # pylint: disable=broad-except
        typer.echo(f"ERROR: {exc}", err=True)
        cause = innermost_cause(exc)
        if cause is not exc:
            typer.echo(f"ERROR: {cause}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"{result.item_count} strings, {result.languages_merged} languages merged "
        f"in {result.elapsed_seconds:.2f}s"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()

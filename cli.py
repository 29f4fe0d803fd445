"""Command line interface for generating release notes from git history."""

from enum import Enum

import typer
import logging
import sys
from pathlib import Path

import structlog

from summit import (
    GitRepository,
    ReleaseNoteGenerator,
    ReleaseOptions,
    ReleaseType,
    SummitError,
    configure_logging,
)
from summit.config import load_settings
from summit.http_utils import close_client

logger = structlog.get_logger(__name__)


class Verbosity(str, Enum):
    """Logging verbosity levels."""

    QUIET = "quiet"
    INFO = "info"
    DEBUG = "debug"


LOG_LEVELS = {
    Verbosity.QUIET: logging.WARNING,
    Verbosity.INFO: logging.INFO,
    Verbosity.DEBUG: logging.DEBUG,
}

app = typer.Typer(help="Update the changelog and create release notes using OpenAI")


@app.command()
def release(
    bump: ReleaseType = typer.Option(..., help="The type of version bump"),
    changelog: str | None = typer.Option(None, help="Path to the CHANGELOG.md file"),
    output: str | None = typer.Option(
        None, help="Path to the output file where the release notes will be written"
    ),
    context: str | None = typer.Option(None, help="Additional context for the OpenAI API"),
    since_tag: str | None = typer.Option(
        None, help="The tag to start from when generating release notes"
    ),
    summary: bool = typer.Option(False, help="Generate a summary at the top of the release notes"),
    fun: bool = typer.Option(False, help="Make the content fun!"),
    emoji: bool = typer.Option(False, help="Include emojis in the content"),
    dry_run: bool = typer.Option(False, help="Run the script without making any changes"),
    model: str | None = typer.Option(None, help="OpenAI model name"),
    config: str | None = typer.Option(None, help="YAML settings file"),
    repo: str | None = typer.Option(None, help="Path to the git repository"),
    verbosity: Verbosity = typer.Option(Verbosity.INFO, help="Logging verbosity"),
) -> None:
    """Summarize the commits since the latest tag into versioned release notes."""

    configure_logging(LOG_LEVELS[verbosity])
    try:
        cfg = load_settings(config)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"❌ {exc}") from exc

    changelog = changelog or cfg.changelog
    output = output or cfg.output
    options = ReleaseOptions(
        bump=bump,
        changelog=Path(changelog) if changelog else None,
        output=Path(output) if output else None,
        context=context,
        since_tag=since_tag,
        summary=summary,
        fun=fun,
        emoji=emoji,
        dry_run=dry_run,
    )
    generator = ReleaseNoteGenerator(
        GitRepository(repo),
        settings=cfg,
        model=model,
    )

    try:
        result = generator.run(options)
    except SummitError as exc:
        logger.error("release_failed", error=str(exc), kind=type(exc).__name__)
        raise SystemExit(f"❌ Error updating changelog: {exc}") from exc
    finally:
        close_client()

    for path in result.written:
        print(f"📝 Wrote {path}")
    print(f"✅ All done! Release {result.version} prepared.")


def main(argv: list[str] | None = None) -> None:
    """Entry point for programmatic invocation."""

    from typer.main import get_command

    get_command(app).main(args=argv or sys.argv[1:], standalone_mode=False)


if __name__ == "__main__":
    from typer.main import get_command

    get_command(app).main(args=sys.argv[1:])

"""Release note generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List

import structlog

from . import config
from .changelog import update_changelog, write_release_notes
from .config import Settings
from .exceptions import MissingCredentialError
from .git import GitRepository
from .llm_client import LLMClient, OpenAIClient
from .prompt import build_messages, build_prompt
from .version import ReleaseType, bump_version

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReleaseOptions:
    """Options for a single release note run.

    Attributes
    ----------
    bump:
        Version component to increment.
    changelog:
        Changelog to splice the notes into. ``None`` skips the update.
    output:
        File overwritten with the notes. ``None`` skips the write.
    context:
        Extra instructions passed verbatim to the model.
    since_tag:
        Tag bounding the commit log. Defaults to the latest tag.
    summary, fun, emoji:
        Content style toggles.
    dry_run:
        Print the notes instead of writing any file.
    """

    bump: ReleaseType
    changelog: Path | None = None
    output: Path | None = None
    context: str | None = None
    since_tag: str | None = None
    summary: bool = False
    fun: bool = False
    emoji: bool = False
    dry_run: bool = False


@dataclass
class ReleaseResult:
    """Outcome of a release note run."""

    latest_tag: str
    since_tag: str
    version: str
    commits: List[str]
    notes: str
    written: List[Path] = field(default_factory=list)


class ReleaseNoteGenerator:
    """Turn the commits since a tag into versioned release notes."""

    def __init__(
        self,
        repo: GitRepository | None = None,
        client: LLMClient | None = None,
        *,
        settings: Settings | None = None,
        model: str | None = None,
        today: date | None = None,
    ) -> None:
        """Create a generator.

        Parameters
        ----------
        repo:
            Repository queried for tags and commits. Defaults to the
            repository in the current directory.
        client:
            Language model client. Defaults to :class:`OpenAIClient` built
            from ``settings``.
        settings:
            Configuration holding the API key and model.
        model:
            Model name overriding ``settings.openai_model``.
        today:
            Release date used in the version heading.
        """
        self.settings = settings or config.settings
        self.repo = repo
        self.client = client
        self.model = model or self.settings.openai_model
        self.today = today

    def _check_credentials(self) -> None:
        if not self.settings.openai_api_key:
            raise MissingCredentialError(
                "Please set the OPENAI_API_KEY environment variable to use this script."
            )

    def summarize(self, commits: List[str], version: str, options: ReleaseOptions) -> str:
        """Ask the language model for release notes covering ``commits``."""

        prompt = build_prompt(
            commits,
            version,
            summary=options.summary,
            fun=options.fun,
            emoji=options.emoji,
            context=options.context,
            today=self.today,
        )
        client = self.client or OpenAIClient(
            api_key=self.settings.openai_api_key,
            base_url=self.settings.openai_base_url,
            timeout=self.settings.request_timeout,
        )
        return client.chat(build_messages(prompt), self.model)

    def run(self, options: ReleaseOptions) -> ReleaseResult:
        """Resolve tags, summarize the commits and write the outputs."""

        self._check_credentials()
        repo = self.repo or GitRepository()

        latest = repo.latest_tag()
        since = repo.resolve_since_tag(options.since_tag) if options.since_tag else latest
        commits = repo.commit_messages(since)
        version = bump_version(latest, options.bump)
        logger.info(
            "version_bumped",
            latest=latest,
            since=since,
            version=version,
            bump=ReleaseType(options.bump).value,
        )

        print(f"⬆️ Bumping version: {since} => {version}")
        print(f'📋 Commits since tag "{since}":')
        for message in commits:
            print(f"  - {message}")

        print("🤖 Waiting for OpenAI to summarize the commits...")
        notes = self.summarize(commits, version, options)

        result = ReleaseResult(
            latest_tag=latest,
            since_tag=since,
            version=version,
            commits=commits,
            notes=notes,
        )
        if options.dry_run:
            print("🔍 Dry run enabled. Skipping file writes.")
            print(f"📝 Current release notes:\n\n{notes}\n")
            return result

        # release notes first, then the changelog
        if write_release_notes(options.output, notes):
            result.written.append(Path(options.output))
        if update_changelog(options.changelog, notes):
            result.written.append(Path(options.changelog))
        return result

"""Read-only access to the tags and commit log of a git repository."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

import structlog

from .exceptions import GitCommandError, NoTagsFoundError, TagNotFoundError

logger = structlog.get_logger(__name__)


class GitRepository:
    """Query tags and commit messages by shelling out to ``git``."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None

    def git(self, *args: str) -> str:
        """Run a git command and return its output."""
        try:
            result = subprocess.run(
                ["git", *args],
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                cwd=self.path,
            )
        except FileNotFoundError as exc:
            raise GitCommandError("git executable not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise GitCommandError(f"git {' '.join(args)} failed: {detail}") from exc
        return result.stdout.rstrip("\n")

    def list_tags(self) -> List[str]:
        """Return all tags sorted in ascending version order."""
        output = self.git("tag", "--list", "--sort=version:refname")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def latest_tag(self) -> str:
        """Return the most recent version-like tag."""
        tags = self.list_tags()
        if not tags:
            raise NoTagsFoundError("No tags found in the repository.")
        dotted = [tag for tag in tags if "." in tag]
        latest = dotted[-1] if dotted else tags[-1]
        logger.debug("tags_resolved", count=len(tags), latest=latest)
        return latest

    def resolve_since_tag(self, tag: str) -> str:
        """Return ``tag`` if it exists in the repository."""
        tags = self.list_tags()
        if not tags:
            raise NoTagsFoundError("No tags found in the repository.")
        if tag not in tags:
            raise TagNotFoundError(f"Tag not found: {tag}")
        return tag

    def commit_messages(self, since: str, until: str = "HEAD") -> List[str]:
        """Return commit subjects in ``since..until`` in git log order."""
        output = self.git("log", f"{since}..{until}", "--pretty=format:%s")
        messages = output.splitlines() if output else []
        logger.info("commits_collected", since=since, until=until, count=len(messages))
        return messages

"""Release notes and changelog entries generated from git history."""

from .changelog import splice_changelog, update_changelog, write_release_notes
from .exceptions import (
    FileIOError,
    GitCommandError,
    InvalidVersionError,
    MissingCredentialError,
    NoTagsFoundError,
    SummarizationError,
    SummitError,
    TagNotFoundError,
)
from .git import GitRepository
from .llm_client import LLMClient, OpenAIClient
from .logging_config import configure_logging
from .prompt import build_prompt
from .release import ReleaseNoteGenerator, ReleaseOptions, ReleaseResult
from .version import ReleaseType, SemVer, bump_version, parse_version

__all__ = [
    "splice_changelog",
    "update_changelog",
    "write_release_notes",
    "SummitError",
    "MissingCredentialError",
    "GitCommandError",
    "NoTagsFoundError",
    "TagNotFoundError",
    "InvalidVersionError",
    "SummarizationError",
    "FileIOError",
    "GitRepository",
    "LLMClient",
    "OpenAIClient",
    "configure_logging",
    "build_prompt",
    "ReleaseNoteGenerator",
    "ReleaseOptions",
    "ReleaseResult",
    "ReleaseType",
    "SemVer",
    "bump_version",
    "parse_version",
]

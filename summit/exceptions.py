"""Custom exception classes for git-summit."""


class SummitError(Exception):
    """Base class for git-summit exceptions."""


class MissingCredentialError(SummitError):
    """Raised when the OpenAI API key is not configured."""


class GitCommandError(SummitError):
    """Raised when a git invocation fails."""


class NoTagsFoundError(SummitError):
    """Raised when the repository has no tags."""


class TagNotFoundError(SummitError):
    """Raised when the requested starting tag does not exist."""


class InvalidVersionError(SummitError):
    """Raised when a tag cannot be parsed as a semantic version."""


class SummarizationError(SummitError):
    """Raised when the text generation request fails."""


class FileIOError(SummitError):
    """Raised when reading or writing an output file fails."""

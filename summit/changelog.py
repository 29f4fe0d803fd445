"""Write release notes and splice new entries into a changelog."""

from __future__ import annotations

from pathlib import Path

import structlog

from .exceptions import FileIOError

logger = structlog.get_logger(__name__)

UNRELEASED_MARKER = "## [Unreleased]"


def splice_changelog(content: str, entry: str) -> str:
    """Insert ``entry`` directly below the first ``## [Unreleased]`` line.

    Everything before and after the marker is kept verbatim. When the marker
    is missing it is appended, followed by the entry.
    """

    before, _, after = content.partition(UNRELEASED_MARKER)
    return f"{before}{UNRELEASED_MARKER}\n\n{entry}{after}"


def update_changelog(path: str | Path | None, entry: str) -> bool:
    """Splice ``entry`` into the changelog at ``path``.

    A missing file is treated as empty. Returns ``False`` without touching
    the filesystem when ``path`` is ``None``.
    """

    if path is None:
        return False
    path = Path(path)
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        path.write_text(splice_changelog(existing, entry), encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise FileIOError(f"Could not update changelog {path}: {exc}") from exc
    logger.info("file_written", path=str(path), kind="changelog")
    return True


def write_release_notes(path: str | Path | None, notes: str) -> bool:
    """Overwrite ``path`` with ``notes``; no-op when ``path`` is ``None``."""

    if path is None:
        return False
    path = Path(path)
    try:
        path.write_text(notes, encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise FileIOError(f"Could not write release notes {path}: {exc}") from exc
    logger.info("file_written", path=str(path), kind="release_notes")
    return True

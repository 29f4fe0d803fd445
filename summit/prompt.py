"""Build the summarization request sent to the language model."""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

from .prompt_loader import load_prompt

SECTIONS = ("New Features", "Improvements", "Bug Fixes", "Additional Notes")

SUMMARY_INSTRUCTION = "Add a short summary paragraph of the changes at the top, above the sections."
FUN_INSTRUCTION = (
    "Make it fun and engaging, you can include jokes, but don't make it too long."
)
EMOJI_INSTRUCTION = "You can use emojis if you like, but don't use them in headings."


def build_prompt(
    commits: Sequence[str],
    version: str,
    *,
    summary: bool = False,
    fun: bool = False,
    emoji: bool = False,
    context: str | None = None,
    today: date | None = None,
) -> str:
    """Return the instruction asking the model to summarize ``commits``.

    Parameters
    ----------
    commits:
        Commit messages in the order returned by git. May be empty.
    version:
        Version the notes are written for, used in the heading.
    summary, fun, emoji:
        Style toggles adding the matching instruction.
    context:
        Free text appended verbatim after the style instructions.
    today:
        Release date for the heading. Defaults to the current date.
    """

    options: List[str] = []
    if summary:
        options.append(SUMMARY_INSTRUCTION)
    if fun:
        options.append(FUN_INSTRUCTION)
    if emoji:
        options.append(EMOJI_INSTRUCTION)
    if context:
        options.append(context)

    template = load_prompt("release_notes")
    quoted = [f'"{name}"' for name in SECTIONS]
    return template.format(
        version=version,
        sections=", ".join(quoted[:-1]) + " and " + quoted[-1],
        today=(today or date.today()).isoformat(),
        options="".join(f"{line}\n" for line in options),
        commits="\n".join(commits),
    )


def build_messages(prompt: str) -> list[dict]:
    """Wrap ``prompt`` in the chat message list expected by :class:`LLMClient`."""

    return [{"role": "user", "content": prompt}]

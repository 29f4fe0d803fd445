"""Semantic version parsing and increment rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

from .exceptions import InvalidVersionError


class ReleaseType(str, Enum):
    """Which version component a release increments."""

    MAJOR = "major"
    PREMAJOR = "premajor"
    MINOR = "minor"
    PREMINOR = "preminor"
    PATCH = "patch"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"


Identifier = Union[int, str]

_NUM = r"0|[1-9]\d*"
_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
VERSION_RE = re.compile(
    rf"^(?P<prefix>[vV]?)=?"
    rf"(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>{_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


def _identifier(part: str) -> Identifier:
    return int(part) if part.isdigit() else part


@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version, keeping the tag's ``v`` prefix."""

    major: int
    minor: int
    patch: int
    prerelease: Tuple[Identifier, ...] = ()
    build: Tuple[str, ...] = ()
    prefix: str = ""

    def __str__(self) -> str:
        text = f"{self.prefix}{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(p) for p in self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def bump(self, release_type: ReleaseType | str) -> "SemVer":
        """Return the next version for ``release_type``.

        Major, minor and patch always increment and drop any prerelease.
        The ``pre*`` variants apply the same increment and start a ``0``
        prerelease. ``prerelease`` only advances the prerelease identifier,
        bumping the patch first when the version is not a prerelease yet.
        Build metadata never carries over.
        """

        kind = ReleaseType(release_type)
        base = replace(self, build=())
        if kind is ReleaseType.MAJOR:
            return replace(base, major=self.major + 1, minor=0, patch=0, prerelease=())
        if kind is ReleaseType.MINOR:
            return replace(base, minor=self.minor + 1, patch=0, prerelease=())
        if kind is ReleaseType.PATCH:
            return replace(base, patch=self.patch + 1, prerelease=())
        if kind is ReleaseType.PREMAJOR:
            return replace(base, major=self.major + 1, minor=0, patch=0, prerelease=(0,))
        if kind is ReleaseType.PREMINOR:
            return replace(base, minor=self.minor + 1, patch=0, prerelease=(0,))
        if kind is ReleaseType.PREPATCH:
            return replace(base, patch=self.patch + 1, prerelease=(0,))

        # prerelease
        if not self.prerelease:
            return replace(base, patch=self.patch + 1, prerelease=(0,))
        parts = list(self.prerelease)
        for idx in range(len(parts) - 1, -1, -1):
            if isinstance(parts[idx], int):
                parts[idx] += 1
                break
        else:
            parts.append(0)
        return replace(base, prerelease=tuple(parts))


def parse_version(text: str) -> SemVer:
    """Parse ``text`` as a semantic version, optionally prefixed with ``v``."""

    m = VERSION_RE.match(text.strip())
    if not m:
        raise InvalidVersionError(f"Invalid semver version: {text}")
    prerelease = m.group("prerelease")
    build = m.group("build")
    return SemVer(
        major=int(m.group("major")),
        minor=int(m.group("minor")),
        patch=int(m.group("patch")),
        prerelease=tuple(_identifier(p) for p in prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
        prefix=m.group("prefix"),
    )


def bump_version(tag: str, release_type: ReleaseType | str) -> str:
    """Return the version following ``tag`` for ``release_type``."""

    return str(parse_version(tag).bump(release_type))

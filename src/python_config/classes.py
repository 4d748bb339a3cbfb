import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions.exceptions import ParseFailure

semver_pattern = re.compile(
    r"""
    ^(?P<major>0|[1-9]\d*)
    \.(?P<minor>0|[1-9]\d*)
    \.(?P<patch>0|[1-9]\d*)
    (?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$
    """,
    re.VERBOSE,
)


class Version(Enum):
    """Selectable Python major version."""

    Two = 2
    Three = 3


@dataclass(frozen=True)
class Interpreter:
    program: str
    version: Version = Version.Three


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    pre: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        match = semver_pattern.match(text)
        if match is None:
            raise ParseFailure(reason=f"'{text}' is not a semantic version")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre=match.group("pre"),
            build=match.group("build"),
        )

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            out += f"-{self.pre}"
        if self.build:
            out += f"+{self.build}"
        return out

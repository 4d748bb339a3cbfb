"""Inline Python scripts evaluated by the target interpreter.

A script is a prelude followed by caller-supplied statements, one per line.
Lines that only make sense on one host platform are wrapped in a
`TargetLine`; they render as empty statements everywhere else.
"""

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

PRELUDE = [
    "from __future__ import print_function",
    "import sysconfig",
    "pyver = sysconfig.get_config_var('VERSION')",
    "getvar = sysconfig.get_config_var",
]


class Target(Enum):
    LINUX = "linux"
    MACOS = "darwin"

    def matches(self, platform: str) -> bool:
        return platform.startswith(self.value)


@dataclass(frozen=True)
class TargetLine:
    target: Target
    line: str

    def render(self, platform: str) -> str:
        return self.line if self.target.matches(platform) else ""


Line = str | TargetLine


def tab(line: str) -> str:
    return "\t" + line


def linux_line(line: str) -> TargetLine:
    return TargetLine(Target.LINUX, line)


def macos_line(line: str) -> TargetLine:
    return TargetLine(Target.MACOS, line)


def build_script(lines: Iterable[Line], platform: str | None = None) -> str:
    platform = platform or sys.platform
    rendered = [
        line.render(platform) if isinstance(line, TargetLine) else line
        for line in lines
    ]
    return "\n".join(PRELUDE + rendered)

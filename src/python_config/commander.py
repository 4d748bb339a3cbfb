"""Terminal-like input/output interface to an interpreter binary.

A commander runs the program with some arguments and hands back whatever it
printed on standard output. Exit statuses are not interpreted here.
"""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .exceptions.exceptions import DecodeFailure, ProcessLaunchFailure


class Commander(ABC):
    @abstractmethod
    def commands(self, args: Sequence[str]) -> str: ...

    def command(self, arg: str) -> str:
        return self.commands([arg])


class SysCommand(Commander):
    """Spawns a fresh `program` process for every command."""

    def __init__(self, program: str):
        self.program = program

    def commands(self, args: Sequence[str]) -> str:
        if not self.program:
            raise ProcessLaunchFailure(program=self.program, reason="empty program name")

        try:
            proc = subprocess.run(
                [self.program, *args],
                check=False,
                capture_output=True,
            )
        except OSError as e:
            raise ProcessLaunchFailure(
                program=self.program, reason=e.strerror or str(e)
            ) from e

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailure(program=self.program, reason=str(e)) from e

    def __repr__(self) -> str:
        return f"SysCommand({self.program!r})"


class StaticCommand(Commander):
    """Answers from a fixed table keyed by the exact command string.

    `command(arg)` looks up `arg`; `commands(args)` looks up the arguments
    joined by a single space. Every lookup is recorded in `calls`.
    """

    def __init__(self, responses: dict[str, str], program: str = "<static>"):
        self.responses = dict(responses)
        self.program = program
        self.calls: list[str] = []

    def commands(self, args: Sequence[str]) -> str:
        key = " ".join(args)
        self.calls.append(key)
        try:
            return self.responses[key]
        except KeyError:
            raise ProcessLaunchFailure(
                program=self.program, reason="no response recorded for command"
            )

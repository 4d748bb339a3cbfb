"""Error types and formatted error reporting."""

from functools import lru_cache
from importlib import resources
from typing import Optional

import rich.console
import rich.markup

from . import msgparser


@lru_cache(maxsize=None)
def _catalog() -> dict[str, msgparser.ErrorMessage]:
    with resources.as_file(
        resources.files("python_config.exceptions") / "messages.txt"
    ) as messages_path:
        return msgparser.parse(str(messages_path))


class PythonConfigError(Exception):
    """Base class for every failure raised by python_config."""

    code: int = 0

    def __init__(self, **kwargs):
        try:
            entry = _catalog()[f"E{self.code:03d}"]
        except KeyError:
            raise ValueError(f"Unknown error code: {self.code}")

        self.type = entry.type
        self.message = entry.message.format(**kwargs)
        self.help = entry.help.format(**kwargs) if entry.help else None
        self.details = kwargs
        super().__init__(self.message)


class ProcessLaunchFailure(PythonConfigError):
    code = 1


class DecodeFailure(PythonConfigError):
    code = 2


class ParseFailure(PythonConfigError):
    code = 3


class VersionMismatch(PythonConfigError):
    code = 4


class PathEncodingFailure(PythonConfigError):
    code = 5


class InvalidSetting(PythonConfigError, ValueError):
    code = 6


def report(error: PythonConfigError, console: Optional[rich.console.Console] = None):
    console = console or rich.console.Console(stderr=True)

    console.print(
        f"[bold red]{error.type}[/bold red] [dim][E{error.code:03d}][/dim] "
        f"{rich.markup.escape(error.message)}",
        highlight=False,
        emoji=False,
    )
    if error.help:
        console.print(
            f"  [dim]{rich.markup.escape(error.help)}[/dim]",
            highlight=False,
            emoji=False,
        )

import os
from collections.abc import Callable

from .classes import Interpreter, SemanticVersion, Version
from .commander import Commander, SysCommand
from .exceptions.exceptions import ParseFailure, PathEncodingFailure

DEFAULT_PROGRAMS = {
    Version.Three: "python3",
    Version.Two: "python2",
}

CommanderFactory = Callable[[str], Commander]


def parse_version(raw: str) -> SemanticVersion:
    """Parse `--version` output such as 'Python 3.7.2'."""
    words = raw.split()
    if len(words) < 2:
        raise ParseFailure(reason=f"expected 'Python X.Y.Z', got {raw!r}")
    return SemanticVersion.parse(words[1])


def program_text(path: str | bytes | os.PathLike) -> str:
    raw = os.fspath(path)
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        # undecodable filenames come back as lone surrogates
        text.encode("utf-8")
    except UnicodeError as e:
        raise PathEncodingFailure(path=raw) from e
    return text


def from_version(version: Version) -> Interpreter:
    return Interpreter(DEFAULT_PROGRAMS[version], version)


def from_path(
    path: str | bytes | os.PathLike,
    commander_factory: CommanderFactory = SysCommand,
) -> Interpreter:
    """Resolve an explicit interpreter, asking it for its major version.

    The handle starts out as Python 3 and is demoted when the interpreter
    reports a 2.x version.
    """
    program = program_text(path)
    version = parse_version(commander_factory(program).command("--version").strip())
    if version.major == 2:
        return Interpreter(program, Version.Two)
    return Interpreter(program, Version.Three)

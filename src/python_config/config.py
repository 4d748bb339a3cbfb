"""Python distribution information, answered by the interpreter itself.

Every query runs the interpreter once with a generated script (see
`python_config.script`) and post-processes what it prints. Nothing is
cached; each call spawns a fresh process.
"""

import os
from functools import wraps
from pathlib import Path

from . import resolver
from .classes import Interpreter, SemanticVersion, Version
from .commander import Commander, SysCommand
from .exceptions.exceptions import VersionMismatch
from .script import Line, build_script, linux_line, macos_line, tab

INCLUDE_FLAGS = [
    "flags = ['-I' + sysconfig.get_path('include'), '-I' + sysconfig.get_path('platinclude')]",
]

LIBS = [
    "import sys",
    "libs = ['-lpython' + pyver + getattr(sys, 'abiflags', '')]",
    "libs += getvar('LIBS').split()",
    "libs += getvar('SYSLIBS').split()",
]


def python3_only(method):
    @wraps(method)
    def wrapper(self: "PythonConfig", *args, **kwargs):
        if not self.is_py3():
            raise VersionMismatch(
                operation=method.__name__, version=self.interpreter_info.version.value
            )
        return method(self, *args, **kwargs)

    return wrapper


class PythonConfig:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        cmdr: Commander | None = None,
    ):
        self.interpreter_info = interpreter or resolver.from_version(Version.Three)
        self.cmdr = cmdr or SysCommand(self.interpreter_info.program)

    @classmethod
    def version(cls, version: Version) -> "PythonConfig":
        return cls(resolver.from_version(version))

    @classmethod
    def interpreter(
        cls,
        path: str | bytes | os.PathLike,
        commander_factory: resolver.CommanderFactory = SysCommand,
    ) -> "PythonConfig":
        info = resolver.from_path(path, commander_factory)
        return cls(info, commander_factory(info.program))

    @classmethod
    def with_commander(cls, version: Version, cmdr: Commander) -> "PythonConfig":
        program = getattr(cmdr, "program", resolver.DEFAULT_PROGRAMS[version])
        return cls(Interpreter(program, version), cmdr)

    def __repr__(self) -> str:
        return f"PythonConfig({self.interpreter_info!r})"

    def is_py3(self) -> bool:
        return self.interpreter_info.version is Version.Three

    def _script(self, lines: list[Line]) -> str:
        return self.cmdr.commands(["-c", build_script(lines)]).strip()

    def version_raw(self) -> str:
        return self.cmdr.command("--version").strip()

    def semantic_version(self) -> SemanticVersion:
        return resolver.parse_version(self.version_raw())

    def prefix(self) -> str:
        return self._script(["print(getvar('prefix'))"])

    def prefix_path(self) -> Path:
        return Path(self.prefix())

    def exec_prefix(self) -> str:
        return self._script(["print(getvar('exec_prefix'))"])

    def exec_prefix_path(self) -> Path:
        return Path(self.exec_prefix())

    @python3_only
    def abi_flags(self) -> str:
        return self._script(["import sys", "print(sys.abiflags)"])

    def includes(self) -> str:
        """Include directories, each prefixed with `-I`, on one line."""
        return self._script(INCLUDE_FLAGS + ["print(' '.join(flags))"])

    def include_paths(self) -> list[Path]:
        """The general and platform-specific include directories, in that order."""
        out = self._script(
            [
                "print(sysconfig.get_path('include'))",
                "print(sysconfig.get_path('platinclude'))",
            ]
        )
        return [Path(line) for line in out.splitlines()]

    def cflags(self) -> str:
        return self._script(
            INCLUDE_FLAGS
            + [
                linux_line("flags.extend(getvar('BASECFLAGS').split())"),
                linux_line("flags.extend(getvar('CONFIGURE_CFLAGS').split())"),
                macos_line("flags.extend(getvar('CFLAGS').split())"),
                "print(' '.join(flags))",
            ]
        )

    def libs(self) -> str:
        return self._script(LIBS + ["print(' '.join(libs))"])

    def ldflags(self) -> str:
        """Linker flags, in the same order `python3-config --ldflags` prints them.

        The library directory is only prepended on Linux; `LIBPL` is
        prepended for static builds and `LINKFORSHARED` is appended unless the
        interpreter is a framework build.
        """
        return self._script(
            LIBS
            + [
                linux_line("libs.insert(0, '-L' + getvar('exec_prefix') + '/lib')"),
                "if not getvar('Py_ENABLE_SHARED'):",
                tab("libs.insert(0, '-L' + getvar('LIBPL'))"),
                "if not getvar('PYTHONFRAMEWORK'):",
                tab("libs.extend(getvar('LINKFORSHARED').split())"),
                "print(' '.join(libs))",
            ]
        )

    @python3_only
    def extension_suffix(self) -> str:
        return self._script(["print(getvar('EXT_SUFFIX'))"])

    @python3_only
    def config_dir(self) -> str:
        return self._script(["print(getvar('LIBPL'))"])

    @python3_only
    def config_dir_path(self) -> Path:
        return Path(self.config_dir())

"""Shared fixtures for python_config tests.

`FakeInterpreter` stands in for a real Python binary: it answers
`--version` from a string and executes `-c` scripts in-process against fake
`sysconfig` and `sys` modules, so the generated scripts themselves are
exercised.
"""

import builtins
import contextlib
import io
import sys
import types
from collections.abc import Sequence

import pytest

from python_config import PythonConfig, Version
from python_config.commander import Commander

LINUX_VARS = {
    "prefix": "/usr/local",
    "exec_prefix": "/usr/local",
    "VERSION": "3.7",
    "LIBS": "-lcrypt -lpthread -ldl  -lutil",
    "SYSLIBS": "-lm",
    "Py_ENABLE_SHARED": 0,
    "PYTHONFRAMEWORK": "",
    "LINKFORSHARED": "-Xlinker -export-dynamic",
    "LIBPL": "/usr/local/lib/python3.7/config-3.7m-x86_64-linux-gnu",
    "EXT_SUFFIX": ".cpython-37m-x86_64-linux-gnu.so",
    "BASECFLAGS": "-Wno-unused-result -Wsign-compare",
    "CONFIGURE_CFLAGS": "",
    "CFLAGS": "-Wno-unused-result -Wsign-compare -g -O3 -Wall",
}

LINUX_PATHS = {
    "include": "/usr/local/include/python3.7m",
    "platinclude": "/usr/local/include/python3.7m",
}


class FakeInterpreter(Commander):
    def __init__(
        self,
        config_vars: dict | None = None,
        paths: dict | None = None,
        abiflags: str | None = "m",
        version: str = "Python 3.7.2",
        program: str = "fake-python",
    ):
        self.config_vars = dict(LINUX_VARS if config_vars is None else config_vars)
        self.paths = dict(LINUX_PATHS if paths is None else paths)
        self.abiflags = abiflags
        self.version = version
        self.program = program
        self.calls: list[list[str]] = []

    def _modules(self) -> dict[str, types.SimpleNamespace]:
        fake_sys = types.SimpleNamespace()
        if self.abiflags is not None:
            fake_sys.abiflags = self.abiflags
        return {
            "sysconfig": types.SimpleNamespace(
                get_config_var=self.config_vars.get,
                get_path=self.paths.__getitem__,
            ),
            "sys": fake_sys,
        }

    def commands(self, args: Sequence[str]) -> str:
        self.calls.append(list(args))
        if list(args) == ["--version"]:
            return self.version + "\n"

        assert args[0] == "-c", f"unexpected arguments: {args}"
        modules = self._modules()

        def _import(name, globals=None, locals=None, fromlist=(), level=0):
            if name in modules:
                return modules[name]
            return builtins.__import__(name, globals, locals, fromlist, level)

        namespace = {"__builtins__": {**vars(builtins), "__import__": _import}}
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            exec(compile(args[1], "<fake-python>", "exec"), namespace)
        return out.getvalue()


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


@pytest.fixture
def macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")


@pytest.fixture
def fake():
    return FakeInterpreter()


@pytest.fixture
def py(fake):
    return PythonConfig.with_commander(Version.Three, fake)

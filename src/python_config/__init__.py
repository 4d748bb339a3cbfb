from . import classes, cli, commander, config, exceptions, resolver, script, settings
from ._version import __author__, __version__
from .classes import Interpreter, SemanticVersion, Version
from .commander import Commander, StaticCommand, SysCommand
from .config import PythonConfig
from .exceptions import (
    DecodeFailure,
    ParseFailure,
    PathEncodingFailure,
    ProcessLaunchFailure,
    PythonConfigError,
    VersionMismatch,
)

__all__ = [
    "classes",
    "cli",
    "commander",
    "config",
    "exceptions",
    "resolver",
    "script",
    "settings",
    "Interpreter",
    "SemanticVersion",
    "Version",
    "Commander",
    "StaticCommand",
    "SysCommand",
    "PythonConfig",
    "PythonConfigError",
    "ProcessLaunchFailure",
    "DecodeFailure",
    "ParseFailure",
    "VersionMismatch",
    "PathEncodingFailure",
    "__version__",
    "__author__",
]

from .exceptions import (
    DecodeFailure,
    InvalidSetting,
    ParseFailure,
    PathEncodingFailure,
    ProcessLaunchFailure,
    PythonConfigError,
    VersionMismatch,
    report,
)

__all__ = [
    "PythonConfigError",
    "ProcessLaunchFailure",
    "DecodeFailure",
    "ParseFailure",
    "VersionMismatch",
    "PathEncodingFailure",
    "InvalidSetting",
    "report",
]

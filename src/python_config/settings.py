"""Environment-driven settings and the usage/exit-code policies of the CLI."""

import dataclasses
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Optional

from .exceptions.exceptions import InvalidSetting

ENV_INTERPRETER = "PYTHON_CONFIG_INTERPRETER"
ENV_USAGE_STREAM = "PYTHON_CONFIG_USAGE_STREAM"
ENV_HELP_EXIT = "PYTHON_CONFIG_HELP_EXIT"
ENV_LOG_LEVEL = "PYTHON_CONFIG_LOG_LEVEL"

Stream = Literal["stdout", "stderr"]


@dataclass(frozen=True)
class UsagePolicy:
    stream: Stream = "stderr"
    failure_code: int = 1
    help_code: int = 0


# CPython's python-config.in: usage on stderr, `--help` exits cleanly
PYTHON3_CONFIG = UsagePolicy()
# older python-config scripts exit with failure even for `--help`
LEGACY = UsagePolicy(help_code=1)


@dataclass(frozen=True)
class Settings:
    interpreter: Optional[str] = None
    usage_stream: Optional[Stream] = None
    help_exit: Optional[int] = None
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        stream = environ.get(ENV_USAGE_STREAM) or None
        if stream is not None and stream not in ("stdout", "stderr"):
            raise InvalidSetting(
                variable=ENV_USAGE_STREAM,
                problem=f"must be 'stdout' or 'stderr', got {stream!r}",
            )

        help_exit = environ.get(ENV_HELP_EXIT) or None
        if help_exit is not None:
            try:
                help_exit = int(help_exit)
            except ValueError:
                raise InvalidSetting(
                    variable=ENV_HELP_EXIT, problem=f"must be an integer, got {help_exit!r}"
                ) from None

        level_name = (environ.get(ENV_LOG_LEVEL) or "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise InvalidSetting(
                variable=ENV_LOG_LEVEL, problem=f"is not a logging level: {level_name!r}"
            )

        return cls(
            interpreter=environ.get(ENV_INTERPRETER) or None,
            usage_stream=stream,
            help_exit=help_exit,
            log_level=level,
        )

    def apply(self, policy: UsagePolicy) -> UsagePolicy:
        changes = {}
        if self.usage_stream is not None:
            changes["stream"] = self.usage_stream
        if self.help_exit is not None:
            changes["help_code"] = self.help_exit
        return dataclasses.replace(policy, **changes)

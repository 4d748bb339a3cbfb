import logging
from collections.abc import Callable

import click
from rich.console import Console
from rich.logging import RichHandler

from ..config import PythonConfig
from ..exceptions.exceptions import InvalidSetting, PythonConfigError, report
from ..settings import LEGACY, PYTHON3_CONFIG, Settings, UsagePolicy

log = logging.getLogger("python_config")

Handler = Callable[[PythonConfig], str]

# usage order matches python-config.in, `--help` included
FLAGS: list[tuple[str, Handler | None]] = [
    ("--prefix", PythonConfig.prefix),
    ("--exec-prefix", PythonConfig.exec_prefix),
    ("--includes", PythonConfig.includes),
    ("--libs", PythonConfig.libs),
    ("--cflags", PythonConfig.cflags),
    ("--ldflags", PythonConfig.ldflags),
    ("--extension-suffix", PythonConfig.extension_suffix),
    ("--help", None),
    ("--abiflags", PythonConfig.abi_flags),
    ("--configdir", PythonConfig.config_dir),
]
HANDLERS: dict[str, Handler] = {flag: h for flag, h in FLAGS if h is not None}


def usage(program: str) -> str:
    return f"Usage: {program} [{'|'.join(flag for flag, _ in FLAGS)}]"


def configure_logging(level: int) -> None:
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        )


def load_config(settings: Settings) -> PythonConfig:
    if settings.interpreter:
        log.debug("resolving interpreter %s", settings.interpreter)
        return PythonConfig.interpreter(settings.interpreter)
    return PythonConfig()


def exit_with_usage(ctx: click.Context, policy: UsagePolicy, code: int):
    click.echo(usage(ctx.find_root().info_name or ""), err=policy.stream == "stderr")
    ctx.exit(code)


class RawArgsCommand(click.Command):
    """Keeps the untouched argument list; click would swallow a bare `--`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["argv"] = list(args)
        return super().parse_args(ctx, args)


def make_command(name: str, policy: UsagePolicy) -> click.Command:
    @click.command(
        name=name,
        cls=RawArgsCommand,
        add_help_option=False,
        context_settings={"ignore_unknown_options": True},
    )
    @click.argument("flags", nargs=-1, type=click.UNPROCESSED)
    @click.pass_context
    def cli(ctx: click.Context, flags: tuple[str, ...]) -> None:
        """Print build configuration of the installed Python interpreter."""
        flags = tuple(ctx.meta.get("argv", flags))
        try:
            settings = Settings.from_env()
        except InvalidSetting as e:
            report(e)
            ctx.exit(policy.failure_code)

        configure_logging(settings.log_level)
        effective = settings.apply(policy)

        valid = {flag for flag, _ in FLAGS}
        if not flags or not all(flag in valid for flag in flags):
            exit_with_usage(ctx, effective, effective.failure_code)
        elif "--help" in flags:
            exit_with_usage(ctx, effective, effective.help_code)

        try:
            py = load_config(settings)
            log.debug("using %r", py)
            for flag in flags:
                log.debug("answering %s", flag)
                click.echo(HANDLERS[flag](py))
        except PythonConfigError as e:
            report(e)
            ctx.exit(1)

    return cli


python3_config = make_command("python3-config", PYTHON3_CONFIG)
python_config = make_command("python-config", LEGACY)

from .cli import FLAGS, make_command, python3_config, python_config, usage

__all__ = ["FLAGS", "make_command", "python3_config", "python_config", "usage"]

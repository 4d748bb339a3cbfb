from .cli import python3_config

python3_config()

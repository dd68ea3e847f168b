from .loader import load_config
from .models import AlphabetConfig, Config, LoggingConfig, ShellConfig

__all__ = ["AlphabetConfig", "Config", "LoggingConfig", "ShellConfig", "load_config"]

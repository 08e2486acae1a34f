"""Locate and load a KEY=VALUE env file, then read typed values from it.

    cfg = pyconfig.new_config()
    port = cfg.get_int("PORT", 8080)
    hosts = cfg.get_string_slice("HOSTS", ["localhost"])
"""

from .config import Config
from .errors import ConfigError, EnvFileLoadError, EnvFileNotFoundError
from .loader import (
	DEFAULT_ENV_FILE,
	ENV_PATH_KEY,
	executable_name,
	new,
	new_config,
	read_env_file,
	search_paths,
)

__all__ = [
	"Config",
	"ConfigError",
	"DEFAULT_ENV_FILE",
	"ENV_PATH_KEY",
	"EnvFileLoadError",
	"EnvFileNotFoundError",
	"executable_name",
	"new",
	"new_config",
	"read_env_file",
	"search_paths",
]

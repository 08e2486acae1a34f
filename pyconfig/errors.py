from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ConfigError(Exception):
	"""Base class for errors raised while loading an env file."""


class EnvFileLoadError(ConfigError):
	"""An explicitly given env file could not be read."""

	def __init__(self, path: str | Path):
		self.path = str(path)
		super().__init__(f"not found env file in {self.path}")


class EnvFileNotFoundError(ConfigError):
	"""None of the default search paths held a readable env file."""

	def __init__(self, name: str, candidates: Sequence[str | Path] = ()):
		self.name = name
		self.candidates = tuple(str(c) for c in candidates)
		super().__init__(f"not found .{name}.env or .config.env")

from __future__ import annotations

import io
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from .config import Config
from .errors import EnvFileLoadError, EnvFileNotFoundError

logger = logging.getLogger(__name__)

# Set to the absolute path of the file once a load succeeds.
ENV_PATH_KEY = "ENV_PATH"
DEFAULT_ENV_FILE = ".config.env"
ENV_FILE_SUFFIX = ".env"


def _main_module_name() -> str:
	"""Top-level module name for ``python -m pkg``, or "" if not run that way."""
	spec = getattr(sys.modules.get("__main__"), "__spec__", None)
	name = getattr(spec, "name", None) or ""
	if not name:
		# While the -m target is still importing, __main__ has no spec yet.
		orig_argv = getattr(sys, "orig_argv", [])
		if "-m" in orig_argv[:-1]:
			name = orig_argv[orig_argv.index("-m") + 1]
	return name.split(".")[0]


def executable_name() -> str:
	"""Base name of the running program, e.g. ``server`` for ``server.py``.

	For ``python -m server`` this is the top-level module name, ``server``.
	"""
	argv0 = sys.argv[0] if sys.argv else ""
	if argv0 == "-m" or Path(argv0).stem == "__main__":
		name = _main_module_name()
		if name and name != "__main__":
			return name
		if argv0 != "-m":
			# python path/to/pkg/__main__.py
			return Path(os.path.abspath(argv0)).parent.name
	if not argv0 or argv0 in ("-c", "-m"):
		argv0 = sys.executable or "python"
	name = Path(argv0).name
	if name.endswith(".py"):
		name = name[: -len(".py")]
	return name


def search_paths(cwd: str | os.PathLike[str] | None = None, name: str | None = None) -> list[Path]:
	"""Candidate env files, highest precedence first.

	./.<name>.env -> ./.config.env -> ../.config.env
	"""
	wd = Path.cwd() if cwd is None else Path(os.path.abspath(cwd))
	name = executable_name() if name is None else name

	paths = [
		wd / f".{name}{ENV_FILE_SUFFIX}",
		wd / DEFAULT_ENV_FILE,
	]
	# A filesystem root is its own parent.
	if wd.parent != wd:
		paths.append(wd.parent / DEFAULT_ENV_FILE)
	return paths


def read_env_file(path: str | os.PathLike[str]) -> dict[str, str]:
	"""Parse a KEY=VALUE file into a dict without touching ``os.environ``.

	Raises OSError if the file is missing or unreadable, and ValueError if it
	is not UTF-8 or holds a pair the environment cannot store. Keys the
	parser could not give a value to are dropped.
	"""
	p = Path(path)
	if not p.is_file():
		raise FileNotFoundError(f"no such env file: {p}")
	text = p.read_text(encoding="utf-8")
	parsed = dotenv_values(stream=io.StringIO(text))

	values = {}
	for key, value in parsed.items():
		if value is None:
			continue
		if not key or "=" in key or "\x00" in key or "\x00" in value:
			raise ValueError(f"invalid environment entry {key!r} in {p}")
		values[key] = value
	return values


def apply_to_environ(values: Mapping[str, str], *, override: bool = False) -> None:
	"""Copy ``values`` into ``os.environ``; existing keys win unless override=True."""
	for key, value in values.items():
		if not override and key in os.environ:
			continue
		os.environ[key] = value


def _load(path: Path, override: bool) -> Config:
	values = read_env_file(path)
	apply_to_environ(values, override=override)
	os.environ[ENV_PATH_KEY] = str(path)
	logger.info("loaded env file %s (%d keys)", path, len(values))
	return Config(env_path=str(path), values=values)


def new_config(path: str | os.PathLike[str] | None = None, *, override: bool = False) -> Config:
	"""Load an env file into ``os.environ`` and return an accessor for it.

	With ``path``, exactly that file is loaded. Without it, the files from
	:func:`search_paths` are tried in order and the first readable one wins.

	Once a load has succeeded, ``ENV_PATH`` is set and every later call
	returns immediately, even if it names a different ``path``. A failed call
	leaves nothing behind, so the next call searches again.

	No locking: call this once near process start, before starting threads.
	"""
	loaded_from = os.environ.get(ENV_PATH_KEY, "")
	if loaded_from:
		logger.debug("env already loaded from %s; skipping", loaded_from)
		return Config(env_path=loaded_from)

	if path is not None:
		full_path = Path(os.path.abspath(path))
		try:
			return _load(full_path, override)
		except (OSError, ValueError) as e:
			logger.debug("could not load env file %s: %s", full_path, e)
			raise EnvFileLoadError(full_path) from e

	name = executable_name()
	candidates = search_paths(name=name)
	for candidate in candidates:
		try:
			return _load(candidate, override)
		except (OSError, ValueError) as e:
			logger.debug("skipping env file candidate %s: %s", candidate, e)

	raise EnvFileNotFoundError(name, candidates)


new = new_config

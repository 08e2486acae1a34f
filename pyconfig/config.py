from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from typing import TypeVar

from .parsing import (
	Parsed,
	parse_bool,
	parse_float,
	parse_int,
	parse_int64,
	parse_list,
	parse_string,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Config:
	"""Typed, default-aware reads of environment-style key/value pairs.

	By default every call reads ``os.environ`` live, so values written by
	:func:`pyconfig.new_config` (or anything else) are visible immediately.
	Pass any other mapping as ``source`` to read from it instead.

	Getters never raise:
	- empty or missing value -> ``default`` if given, else the type's zero value
	- unparsable value -> ``default`` if given, else the zero value
	- slices: one unparsable element -> empty list (``default`` is not used)
	"""

	def __init__(
		self,
		source: Mapping[str, str] | None = None,
		*,
		env_path: str | None = None,
		values: Mapping[str, str] | None = None,
	):
		self._source = os.environ if source is None else source
		self.env_path = env_path
		self.values: dict[str, str] = dict(values or {})
		self.loaded = True

	@classmethod
	def from_values(cls, values: Mapping[str, str]) -> Config:
		"""Accessor over a private copy of ``values``; the environment is not read."""
		data = dict(values)
		return cls(data, values=data)

	def __repr__(self) -> str:
		return f"Config(env_path={self.env_path!r})"

	def _raw(self, key: str) -> str:
		return self._source.get(key) or ""

	def _scalar(self, key: str, parse: Callable[[str], Parsed[T]], zero: T, default: T | None) -> T:
		raw = self._raw(key)
		if raw == "":
			return zero if default is None else default

		result = parse(raw)
		if result.ok:
			return result.value  # type: ignore[return-value]

		logger.debug("config key %s: could not parse %r", key, raw)
		return zero if default is None else default

	def _slice(self, key: str, parse: Callable[[str], Parsed[T]], default: list[T] | None) -> list[T]:
		raw = self._raw(key)
		if raw == "":
			return [] if default is None else list(default)

		result = parse_list(raw, parse)
		if result.ok:
			return result.value  # type: ignore[return-value]

		logger.debug("config key %s: could not parse list %r", key, raw)
		return []

	def get(self, key: str, default: str | None = None) -> str:
		raw = self._raw(key)
		if raw == "" and default is not None:
			return default
		return raw

	def get_string(self, key: str, default: str | None = None) -> str:
		return self.get(key, default)

	def get_int(self, key: str, default: int | None = None) -> int:
		return self._scalar(key, parse_int, 0, default)

	def get_int64(self, key: str, default: int | None = None) -> int:
		return self._scalar(key, parse_int64, 0, default)

	def get_float(self, key: str, default: float | None = None) -> float:
		return self._scalar(key, parse_float, 0.0, default)

	def get_bool(self, key: str, default: bool | None = None) -> bool:
		return self._scalar(key, parse_bool, False, default)

	def get_string_slice(self, key: str, default: list[str] | None = None) -> list[str]:
		return self._slice(key, parse_string, default)

	def get_int_slice(self, key: str, default: list[int] | None = None) -> list[int]:
		return self._slice(key, parse_int, default)

	def get_int64_slice(self, key: str, default: list[int] | None = None) -> list[int]:
		return self._slice(key, parse_int64, default)

	def get_float_slice(self, key: str, default: list[float] | None = None) -> list[float]:
		return self._slice(key, parse_float, default)

	def get_bool_slice(self, key: str, default: list[bool] | None = None) -> list[bool]:
		return self._slice(key, parse_bool, default)

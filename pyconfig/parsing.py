"""String parsers used by the typed accessors.

Each parser returns a ``Parsed`` result instead of raising, so the accessor
layer can fall back to defaults without try/except around every call.
"""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
	r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
	re.IGNORECASE,
)
_HEX_FLOAT_RE = re.compile(r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)p[+-]?[0-9]+", re.IGNORECASE)

_TRUE = frozenset({"1", "t", "true"})
_FALSE = frozenset({"0", "f", "false"})


@dataclass(frozen=True)
class Parsed(Generic[T]):
	ok: bool
	value: T | None = None


def ok(value: T) -> Parsed[T]:
	return Parsed(True, value)


FAILED: Parsed = Parsed(False)


def _parse_ranged_int(raw: str, lo: int, hi: int) -> Parsed[int]:
	if not _INT_RE.fullmatch(raw):
		return FAILED
	value = int(raw)
	if value < lo or value > hi:
		return FAILED
	return ok(value)


def parse_string(raw: str) -> Parsed[str]:
	return ok(raw)


def parse_int(raw: str) -> Parsed[int]:
	"""Parse a platform-sized integer (bounded by ``sys.maxsize``)."""
	return _parse_ranged_int(raw, -sys.maxsize - 1, sys.maxsize)


def parse_int64(raw: str) -> Parsed[int]:
	return _parse_ranged_int(raw, INT64_MIN, INT64_MAX)


def parse_float(raw: str) -> Parsed[float]:
	"""Parse a 64-bit float.

	Accepts plain and scientific notation, hex floats with a binary exponent
	(``0x1p-2``), and the inf/nan tokens. A finite literal too large for a
	double is rejected rather than turned into inf.
	"""
	if _HEX_FLOAT_RE.fullmatch(raw):
		try:
			return ok(float.fromhex(raw))
		except OverflowError:
			return FAILED
	if not _FLOAT_RE.fullmatch(raw):
		return FAILED
	value = float(raw)
	if math.isinf(value) and "inf" not in raw.lower():
		return FAILED
	return ok(value)


def parse_bool(raw: str) -> Parsed[bool]:
	token = raw.lower()
	if token in _TRUE:
		return ok(True)
	if token in _FALSE:
		return ok(False)
	return FAILED


def parse_list(raw: str, parse: Callable[[str], Parsed[T]]) -> Parsed[list[T]]:
	"""Split ``raw`` on commas and parse every trimmed part.

	All-or-nothing: one bad part fails the whole list.
	"""
	out: list[T] = []
	for part in raw.split(","):
		result = parse(part.strip())
		if not result.ok:
			return FAILED
		out.append(result.value)  # type: ignore[arg-type]
	return ok(out)

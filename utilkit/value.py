"""A value of unknown type, with checked conversions to concrete types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_UINT32_MAX = 2**32 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_UINT64_MAX = 2**64 - 1
_FLOAT32_MAX = 3.4028234663852886e38


class InvalidTypeError(TypeError):
    """Raised when a value does not have the requested type."""

    def __init__(self, want: str, got: str) -> None:
        super().__init__(f"invalid type: want {want}, got {got}")
        self.want = want
        self.got = got


def compare_real_number(src: float, dst: float) -> int:
    """Return -1, 0 or 1 as src is less than, equal to or greater than dst."""
    if src < dst:
        return -1
    if src == dst:
        return 0
    return 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_in(low: int, high: int) -> Callable[[Any], bool]:
    return lambda value: _is_int(value) and low <= value <= high


def _is_float32(value: Any) -> bool:
    if not isinstance(value, float):
        return False
    return not math.isfinite(value) or abs(value) <= _FLOAT32_MAX


@dataclass(frozen=True)
class AnyValue:
    """Holds a value of any type, or the error that was met producing it."""

    val: Any = None
    err: Exception | None = None

    def _extract(self, want: str, accept: Callable[[Any], bool]) -> Any:
        if self.err is not None:
            raise self.err
        if not accept(self.val):
            raise InvalidTypeError(want, type(self.val).__name__)
        return self.val

    @staticmethod
    def _or_default(getter: Callable[[], T], default: T) -> T:
        try:
            return getter()
        except Exception:
            return default

    def as_int(self) -> int:
        return self._extract("int", _int_in(_INT64_MIN, _INT64_MAX))

    def as_int_or_default(self, default: int) -> int:
        return self._or_default(self.as_int, default)

    def as_uint(self) -> int:
        return self._extract("uint", _int_in(0, _UINT64_MAX))

    def as_uint_or_default(self, default: int) -> int:
        return self._or_default(self.as_uint, default)

    def as_int32(self) -> int:
        return self._extract("int32", _int_in(_INT32_MIN, _INT32_MAX))

    def as_int32_or_default(self, default: int) -> int:
        return self._or_default(self.as_int32, default)

    def as_uint32(self) -> int:
        return self._extract("uint32", _int_in(0, _UINT32_MAX))

    def as_uint32_or_default(self, default: int) -> int:
        return self._or_default(self.as_uint32, default)

    def as_int64(self) -> int:
        return self._extract("int64", _int_in(_INT64_MIN, _INT64_MAX))

    def as_int64_or_default(self, default: int) -> int:
        return self._or_default(self.as_int64, default)

    def as_uint64(self) -> int:
        return self._extract("uint64", _int_in(0, _UINT64_MAX))

    def as_uint64_or_default(self, default: int) -> int:
        return self._or_default(self.as_uint64, default)

    def as_float32(self) -> float:
        return self._extract("float32", _is_float32)

    def as_float32_or_default(self, default: float) -> float:
        return self._or_default(self.as_float32, default)

    def as_float64(self) -> float:
        return self._extract("float64", lambda value: isinstance(value, float))

    def as_float64_or_default(self, default: float) -> float:
        return self._or_default(self.as_float64, default)

    def as_str(self) -> str:
        return self._extract("str", lambda value: isinstance(value, str))

    def as_str_or_default(self, default: str) -> str:
        return self._or_default(self.as_str, default)

    def as_bytes(self) -> bytes:
        return self._extract("bytes", lambda value: isinstance(value, (bytes, bytearray)))

    def as_bytes_or_default(self, default: bytes) -> bytes:
        return self._or_default(self.as_bytes, default)

    def as_bool(self) -> bool:
        return self._extract("bool", lambda value: isinstance(value, bool))

    def as_bool_or_default(self, default: bool) -> bool:
        return self._or_default(self.as_bool, default)
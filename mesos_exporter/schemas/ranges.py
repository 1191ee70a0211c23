"""
Port range lists as reported by the Mesos master, e.g. "[31000-32000, 33000-33010]".

A RangeSet is an ordered tuple of inclusive (lo, hi) intervals. Intervals are
neither sorted nor merged, so size() overcounts overlapping ranges.
"""
import json
from typing import Any, Iterable

from pydantic_core import core_schema

from mesos_exporter.core.exceptions import RangeDecodeError

UINT64_MAX = 2**64 - 1

_TRIM_CHARS = '[]"'


def _parse_uint(part: str, token: str) -> int:
    digits = part.strip()
    # int() alone would also accept signs, underscores and non-ASCII digits
    if not digits or not digits.isascii() or not digits.isdigit():
        raise RangeDecodeError(f"bad range bound {part!r} in {token!r}")
    value = int(digits)
    if value > UINT64_MAX:
        raise RangeDecodeError(f"range bound {digits} out of range in {token!r}")
    return value


class RangeSet(tuple):
    """Ordered sequence of inclusive (lo, hi) port intervals."""

    def __new__(cls, ranges: Iterable[tuple[int, int]] = ()):
        return super().__new__(cls, tuple((int(lo), int(hi)) for lo, hi in ranges))

    def __repr__(self) -> str:
        return f"RangeSet({list(self)!r})"

    @classmethod
    def decode(cls, raw: str | bytes) -> "RangeSet":
        """Parse the "lo-hi, lo-hi" encoding, optionally wrapped in brackets/quotes.

        An empty or bracket-only encoding yields an empty set. A token without
        a "-" or with a bound that is not an unsigned 64-bit integer raises
        RangeDecodeError.
        """
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise RangeDecodeError(f"bad range encoding: {e}") from e

        data = raw.strip(_TRIM_CHARS)
        if not data:
            return cls()

        ranges = []
        for token in data.split(","):
            parts = token.split("-", 1)
            if len(parts) != 2:
                raise RangeDecodeError(f"bad range: {token}")
            ranges.append((_parse_uint(parts[0], token), _parse_uint(parts[1], token)))
        return cls(ranges)

    def encode(self) -> str:
        return "[" + ", ".join(f"{lo}-{hi}" for lo, hi in self) + "]"

    def size(self) -> int:
        """Number of ports covered: sum of (hi - lo + 1) per interval.

        Computed in unsigned 64-bit arithmetic, so an interval with hi < lo
        wraps around instead of raising.
        """
        total = 0
        for lo, hi in self:
            total = (total + 1 + ((hi - lo) & UINT64_MAX)) & UINT64_MAX
        return total

    @classmethod
    def _validate(cls, value: Any) -> "RangeSet":
        if isinstance(value, RangeSet):
            return value
        if value is None:
            return cls()
        if isinstance(value, (str, bytes)):
            return cls.decode(value)
        # Arrays and other JSON values go through the same codec as their raw encoding
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise RangeDecodeError(f"unsupported range value: {value!r}") from e
        return cls.decode(raw)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.encode()),
        )

"""
Primitive parsers for header values.

The lexical rules follow Go's strconv package so that values produced by Go
services (and by curl users copying them) parse the same way:
  - ints are base 10 with an optional sign, no whitespace, no underscores
  - unsigned ints take no sign at all
  - bools accept 1/t/T/TRUE/true/True and 0/f/F/FALSE/false/False
  - floats accept decimal, hex (0x1.8p3), inf/infinity/nan
"""
from __future__ import annotations

import math
import re
import struct

from headerbind.core.errors import ERR_RANGE, ERR_SYNTAX, HeaderParseError


OVERFLOW_ERROR = "error"
OVERFLOW_WRAP = "wrap"
OVERFLOW_POLICIES: tuple[str, ...] = (OVERFLOW_ERROR, OVERFLOW_WRAP)

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1
_MAX_DIGITS = 20  # len(str(_UINT64_MAX))


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise HeaderParseError("ParseBool", text, ERR_SYNTAX)


def parse_int(text: str, bits: int = 64, *, overflow: str = OVERFLOW_ERROR) -> int:
    if not _INT_RE.fullmatch(text):
        raise HeaderParseError("ParseInt", text, ERR_SYNTAX)
    v = _to_int(text, "ParseInt")
    if v < _INT64_MIN or v > _INT64_MAX:
        raise HeaderParseError("ParseInt", text, ERR_RANGE)
    return _narrow_int(v, bits, unsigned=False, overflow=overflow, func="ParseInt", text=text)


def parse_uint(text: str, bits: int = 64, *, overflow: str = OVERFLOW_ERROR) -> int:
    if not _UINT_RE.fullmatch(text):
        raise HeaderParseError("ParseUint", text, ERR_SYNTAX)
    v = _to_int(text, "ParseUint")
    if v > _UINT64_MAX:
        raise HeaderParseError("ParseUint", text, ERR_RANGE)
    return _narrow_int(v, bits, unsigned=True, overflow=overflow, func="ParseUint", text=text)


def parse_float(text: str, bits: int = 64, *, overflow: str = OVERFLOW_ERROR) -> float:
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        v = float(text)
    elif _DEC_FLOAT_RE.fullmatch(text):
        v = float(text)
        if math.isinf(v):
            raise HeaderParseError("ParseFloat", text, ERR_RANGE)
    elif _HEX_FLOAT_RE.fullmatch(text):
        try:
            v = float.fromhex(text)
        except OverflowError:
            raise HeaderParseError("ParseFloat", text, ERR_RANGE) from None
    else:
        raise HeaderParseError("ParseFloat", text, ERR_SYNTAX)

    if bits == 32:
        return _narrow_float32(v, overflow=overflow, text=text)
    return v


def _to_int(text: str, func: str) -> int:
    # int() refuses very long digit strings, so drop the sign and leading zeros first
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise HeaderParseError(func, text, ERR_RANGE)
    return sign * int(digits)


def _narrow_int(v: int, bits: int, *, unsigned: bool, overflow: str, func: str, text: str) -> int:
    if unsigned:
        lo, hi = 0, (1 << bits) - 1
    else:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if lo <= v <= hi:
        return v

    if overflow != OVERFLOW_WRAP:
        raise HeaderParseError(func, text, ERR_RANGE)

    # two's complement truncation to the declared width
    v &= (1 << bits) - 1
    if not unsigned and v > hi:
        v -= 1 << bits
    return v


def _narrow_float32(v: float, *, overflow: str, text: str) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", v))[0]
    except OverflowError:
        if overflow != OVERFLOW_WRAP:
            raise HeaderParseError("ParseFloat", text, ERR_RANGE) from None
        return math.copysign(math.inf, v)

from __future__ import annotations

from typing import Any, Dict, Optional


ERR_SYNTAX = "invalid syntax"
ERR_RANGE = "value out of range"


class HeaderBindError(Exception):
    code = "bind_error"

    def __init__(self, message: str, *, field: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.key = key

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "field": self.field,
            "header": self.key,
        }


class UnsupportedFieldTypeError(HeaderBindError, TypeError):
    code = "unsupported_type"

    def __init__(self, field_type: Any, *, field: Optional[str] = None, key: Optional[str] = None):
        super().__init__(f"unknown type: {field_type!r}", field=field, key=key)
        self.field_type = field_type


class HeaderParseError(HeaderBindError, ValueError):
    """
    A header value that does not parse as the field's primitive type.

    func names the failing parser (ParseBool, ParseInt, ParseUint, ParseFloat),
    num is the offending text and err is ERR_SYNTAX or ERR_RANGE.
    """

    code = "parse_error"

    def __init__(self, func: str, num: str, err: str, *, field: Optional[str] = None, key: Optional[str] = None):
        super().__init__(f"{func}: parsing {num!r}: {err}", field=field, key=key)
        self.func = func
        self.num = num
        self.err = err

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderParseError):
            return NotImplemented
        return (self.func, self.num, self.err) == (other.func, other.num, other.err)

    def __hash__(self) -> int:
        return hash((self.func, self.num, self.err))


class ConfigError(ValueError):
    pass

from .core.binder import Binder, bind
from .core.config import BindConfig, get_bind_config
from .core.errors import ConfigError, HeaderBindError, HeaderParseError, UnsupportedFieldTypeError
from .core.header_map import HeaderMap, header_values
from .core.types import (
    Bits,
    Float32,
    Float64,
    HeaderKey,
    HeaderUnmarshaler,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    header_field,
)

__all__ = [
    "Binder",
    "bind",
    "BindConfig",
    "get_bind_config",
    "ConfigError",
    "HeaderBindError",
    "HeaderParseError",
    "UnsupportedFieldTypeError",
    "HeaderMap",
    "header_values",
    "Bits",
    "Float32",
    "Float64",
    "HeaderKey",
    "HeaderUnmarshaler",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "header_field",
]

from __future__ import annotations

from dataclasses import MISSING, dataclass, field
from typing import Annotated, Any, List, Protocol, runtime_checkable


SKIP_MARKER = "-"
DEFAULT_TAG = "header"


@dataclass(frozen=True)
class HeaderKey:
    """
    Binding annotation for a record field.

    Use inside typing.Annotated:
      request_id: Annotated[str, HeaderKey("x-request-id")] = ""
      internal:   Annotated[str, HeaderKey("-")] = ""      # never bound
    """
    key: str


@dataclass(frozen=True)
class Bits:
    # Numeric width marker; unsigned only applies to ints.
    size: int
    unsigned: bool = False


Int8 = Annotated[int, Bits(8)]
Int16 = Annotated[int, Bits(16)]
Int32 = Annotated[int, Bits(32)]
Int64 = Annotated[int, Bits(64)]

Uint = Annotated[int, Bits(64, unsigned=True)]
Uint8 = Annotated[int, Bits(8, unsigned=True)]
Uint16 = Annotated[int, Bits(16, unsigned=True)]
Uint32 = Annotated[int, Bits(32, unsigned=True)]
Uint64 = Annotated[int, Bits(64, unsigned=True)]

Float32 = Annotated[float, Bits(32)]
Float64 = Annotated[float, Bits(64)]


@runtime_checkable
class HeaderUnmarshaler(Protocol):
    """
    A field type that parses itself from the full list of header values.

    The binder calls unmarshal_header on the field's current value (or on a
    fresh instance of the type) and assigns the instance back afterwards.
    Whatever it raises reaches the caller unchanged.
    """

    def unmarshal_header(self, values: List[str]) -> None:
        ...


def header_field(key: str, *, default: Any = MISSING, default_factory: Any = MISSING, tag: str = DEFAULT_TAG):
    """dataclasses.field() carrying the binding key in its metadata."""
    kwargs: dict[str, Any] = {"metadata": {tag: key}}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)

from __future__ import annotations

import collections.abc
import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, List, Optional, Tuple, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from headerbind.core.types import DEFAULT_TAG, Bits, HeaderKey, HeaderUnmarshaler


KIND_CUSTOM = "custom"
KIND_BOOL = "bool"
KIND_FLOAT = "float"
KIND_INT = "int"
KIND_UINT = "uint"
KIND_STR = "str"
KIND_STR_LIST = "str_list"
KIND_UNSUPPORTED = "unsupported"

_SEQUENCE_ORIGINS = (list, collections.abc.Sequence)


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    key: Optional[str]     # None => field carries no binding annotation
    field_type: Any        # declared type, Annotated extras stripped
    kind: str
    bits: int = 64
    hook_type: Optional[type] = None   # class whose unmarshal_header parses this field


def _split_annotated(hint: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        return args[0], tuple(args[1:])
    return hint, ()


def _unwrap_newtype(tp: Any) -> Any:
    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return tp


def classify(field_type: Any, extras: Tuple[Any, ...] = ()) -> Tuple[str, int]:
    """Map a declared type onto (conversion kind, bit width)."""
    base = _unwrap_newtype(field_type)
    bits = next((m for m in extras if isinstance(m, Bits)), None)

    origin = get_origin(base)
    if origin is None and isinstance(base, type) and issubclass(base, HeaderUnmarshaler):
        return KIND_CUSTOM, 0

    if base is bool:
        return KIND_BOOL, 0
    if base is float:
        size = bits.size if bits is not None else 64
        if size not in (32, 64):
            return KIND_UNSUPPORTED, 0
        return KIND_FLOAT, size
    if base is int:
        if bits is None:
            return KIND_INT, 64
        if bits.size not in (8, 16, 32, 64):
            return KIND_UNSUPPORTED, 0
        return (KIND_UINT if bits.unsigned else KIND_INT), bits.size
    if base is str:
        return KIND_STR, 0
    if origin in _SEQUENCE_ORIGINS and get_args(base) == (str,):
        return KIND_STR_LIST, 0
    return KIND_UNSUPPORTED, 0


def _dataclass_fields(record_type: type, tag: str) -> List[Tuple[str, Any, Tuple[Any, ...], Optional[str]]]:
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError as exc:
        raise TypeError(f"Cannot resolve field annotations of {record_type.__name__}: {exc}") from exc

    out = []
    for f in dataclasses.fields(record_type):
        base, extras = _split_annotated(hints.get(f.name, f.type))
        meta_key = f.metadata.get(tag) if f.metadata else None
        out.append((f.name, base, extras, meta_key))
    return out


def _model_fields(record_type: type) -> List[Tuple[str, Any, Tuple[Any, ...], Optional[str]]]:
    out = []
    for name, info in record_type.model_fields.items():
        out.append((name, info.annotation, tuple(info.metadata), None))
    return out


@lru_cache(maxsize=None)
def describe(record_type: type, tag: str = DEFAULT_TAG) -> Tuple[FieldDescriptor, ...]:
    """
    Descriptor table for a record class, in declared field order.

    Built once per (class, tag) and cached; the class itself is never touched.
    """
    if dataclasses.is_dataclass(record_type):
        raw = _dataclass_fields(record_type, tag)
    elif issubclass(record_type, BaseModel):
        raw = _model_fields(record_type)
    else:
        raise TypeError(f"{record_type.__name__} is not a dataclass or pydantic model")

    table: List[FieldDescriptor] = []
    for name, base, extras, meta_key in raw:
        marker = next((m for m in extras if isinstance(m, HeaderKey)), None)
        key = marker.key if marker is not None else meta_key
        kind, bits = classify(base, extras)
        hook_type = _unwrap_newtype(base) if kind == KIND_CUSTOM else None
        table.append(FieldDescriptor(name=name, key=key, field_type=base, kind=kind, bits=bits, hook_type=hook_type))
    return tuple(table)

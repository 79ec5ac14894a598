from __future__ import annotations

import logging
from typing import Any, List, Optional

from headerbind.core.config import BindConfig, get_bind_config
from headerbind.core.convert import parse_bool, parse_float, parse_int, parse_uint
from headerbind.core.descriptors import (
    KIND_BOOL,
    KIND_CUSTOM,
    KIND_FLOAT,
    KIND_INT,
    KIND_STR,
    KIND_STR_LIST,
    KIND_UINT,
    FieldDescriptor,
    describe,
)
from headerbind.core.errors import HeaderBindError, UnsupportedFieldTypeError
from headerbind.core.header_map import header_values

log = logging.getLogger("headerbind.binder")


class Binder:
    """
    Binds header values onto annotated fields of a dataclass or pydantic record.

    Fields are visited in declared order. The first failing field aborts the
    walk and its exception is raised; fields bound before it keep their new
    values, so bind into a fresh record when all-or-nothing matters.
    """

    def __init__(self, config: Optional[BindConfig] = None):
        self.config = config or BindConfig()

    def bind(self, record: Any, headers: Any) -> None:
        if headers is None or len(headers) == 0:
            return

        if isinstance(record, type):
            raise TypeError(f"bind() needs a record instance, got the class {record.__name__}")

        for desc in describe(type(record), self.config.tag):
            if desc.key is None or desc.key == self.config.skip_marker:
                continue

            values = header_values(headers, desc.key)
            if not values:
                log.debug("header %s absent; leaving %s unchanged", desc.key, desc.name)
                continue

            try:
                self._set_field(record, desc, values)
            except HeaderBindError as e:
                if e.field is None:
                    e.field, e.key = desc.name, desc.key
                log.debug("bind failed field=%s header=%s: %s", desc.name, desc.key, e)
                raise

            log.debug("bound %s from header %s (%d values)", desc.name, desc.key, len(values))

    def _set_field(self, record: Any, desc: FieldDescriptor, values: List[str]) -> None:
        kind = desc.kind
        overflow = self.config.overflow

        if kind == KIND_CUSTOM:
            current = getattr(record, desc.name, None)
            target = current if isinstance(current, desc.hook_type) else desc.hook_type()
            target.unmarshal_header(list(values))
            setattr(record, desc.name, target)
            return

        first = values[0]
        if kind == KIND_BOOL:
            value: Any = parse_bool(first)
        elif kind == KIND_FLOAT:
            value = parse_float(first, desc.bits, overflow=overflow)
        elif kind == KIND_INT:
            value = parse_int(first, desc.bits, overflow=overflow)
        elif kind == KIND_UINT:
            value = parse_uint(first, desc.bits, overflow=overflow)
        elif kind == KIND_STR:
            value = first
        elif kind == KIND_STR_LIST:
            value = list(values)
        else:
            raise UnsupportedFieldTypeError(desc.field_type, field=desc.name, key=desc.key)

        setattr(record, desc.name, value)


_default_binder: Optional[Binder] = None


def get_default_binder() -> Binder:
    global _default_binder
    if _default_binder is None:
        _default_binder = Binder(get_bind_config())
    return _default_binder


def reset_default_binder() -> None:
    global _default_binder
    _default_binder = None


def bind(record: Any, headers: Any) -> None:
    """Bind headers into record using the process-wide default binder."""
    get_default_binder().bind(record, headers)

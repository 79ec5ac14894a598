from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Dict, List, NewType, Optional, Sequence, Tuple

import pytest

from headerbind.core.descriptors import (
    KIND_BOOL,
    KIND_CUSTOM,
    KIND_FLOAT,
    KIND_INT,
    KIND_STR,
    KIND_STR_LIST,
    KIND_UINT,
    KIND_UNSUPPORTED,
    classify,
    describe,
)
from headerbind.core.types import Bits, HeaderKey, header_field

UserId = NewType("UserId", int)


class Tags(list):
    def unmarshal_header(self, values):
        self.extend(values)


@dataclass
class Described:
    a: str = header_field("x-a", default="")
    b: Annotated[int, Bits(16), HeaderKey("x-b")] = 0
    c: int = 0
    d: Annotated[str, HeaderKey("-")] = ""


@pytest.mark.parametrize(
    "tp,extras,expected",
    [
        (bool, (), (KIND_BOOL, 0)),
        (float, (), (KIND_FLOAT, 64)),
        (float, (Bits(32),), (KIND_FLOAT, 32)),
        (int, (), (KIND_INT, 64)),
        (int, (Bits(8),), (KIND_INT, 8)),
        (int, (Bits(32, unsigned=True),), (KIND_UINT, 32)),
        (UserId, (), (KIND_INT, 64)),
        (str, (), (KIND_STR, 0)),
        (List[str], (), (KIND_STR_LIST, 0)),
        (list[str], (), (KIND_STR_LIST, 0)),
        (Sequence[str], (), (KIND_STR_LIST, 0)),
        (Tags, (), (KIND_CUSTOM, 0)),
    ],
)
def test_classify_supported(tp, extras, expected):
    assert classify(tp, extras) == expected


@pytest.mark.parametrize(
    "tp,extras",
    [
        (bytes, ()),
        (Tuple[int, int, int], ()),
        (Dict[str, str], ()),
        (List[int], ()),
        (Optional[int], ()),
        (list, ()),
        (int, (Bits(12),)),
        (float, (Bits(16),)),
    ],
)
def test_classify_unsupported(tp, extras):
    assert classify(tp, extras) == (KIND_UNSUPPORTED, 0)


def test_describe_table_in_declared_order():
    table = describe(Described)
    assert [d.name for d in table] == ["a", "b", "c", "d"]
    assert [d.key for d in table] == ["x-a", "x-b", None, "-"]
    assert table[1].kind == KIND_INT
    assert table[1].bits == 16


def test_describe_is_cached_per_class():
    assert describe(Described) is describe(Described)
    assert describe(Described, "other") is not describe(Described)
    assert describe(Described, "other")[0].key is None


def test_describe_rejects_non_records():
    class Plain:
        x: int = 0

    with pytest.raises(TypeError):
        describe(Plain)

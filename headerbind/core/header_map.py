from __future__ import annotations

import string
from typing import Any, Dict, Iterable, Iterator, List, Mapping, MutableMapping, Optional, Sequence, Tuple, Union


_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")

HeaderValues = Union[str, Sequence[str]]


def canonical_key(key: str) -> str:
    """
    Canonical display form of a header key: "x-request-id" -> "X-Request-Id".

    Keys holding anything other than token characters are returned unchanged,
    same as net/http's CanonicalMIMEHeaderKey.
    """
    if not key or any(c not in _TOKEN_CHARS for c in key):
        return key
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


class HeaderMap(MutableMapping[str, List[str]]):
    """
    Ordered, case-insensitive multimap of header values.

    Keys are stored in canonical form and compared case-insensitively;
    insertion order of keys and of values within a key is kept.
    """

    def __init__(self, data: Union[Mapping[str, HeaderValues], Iterable[Tuple[str, str]], None] = None):
        self._items: Dict[str, List[str]] = {}
        if data is None:
            return
        if isinstance(data, Mapping):
            for k, v in data.items():
                if isinstance(v, str):
                    self.add(k, v)
                else:
                    for item in v:
                        self.add(k, item)
        else:
            for k, v in data:
                self.add(k, v)

    # --- multimap API ---

    def add(self, key: str, value: str) -> None:
        self._items.setdefault(canonical_key(key), []).append(value)

    def set(self, key: str, value: str) -> None:
        self._items[canonical_key(key)] = [value]

    def get_first(self, key: str, default: Optional[str] = None) -> Optional[str]:
        vals = self._items.get(canonical_key(key))
        return vals[0] if vals else default

    def getlist(self, key: str) -> List[str]:
        return list(self._items.get(canonical_key(key), []))

    def multi_items(self) -> List[Tuple[str, str]]:
        return [(k, v) for k, vals in self._items.items() for v in vals]

    # --- MutableMapping ---

    def __getitem__(self, key: str) -> List[str]:
        return self._items[canonical_key(key)]

    def __setitem__(self, key: str, value: HeaderValues) -> None:
        self._items[canonical_key(key)] = [value] if isinstance(value, str) else list(value)

    def __delitem__(self, key: str) -> None:
        del self._items[canonical_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and canonical_key(key) in self._items

    def __repr__(self) -> str:
        return f"HeaderMap({self._items!r})"


def header_values(headers: Any, key: str) -> List[str]:
    """
    All values stored under key, in order; [] when there are none.

    Case handling belongs to the container: HeaderMap and starlette Headers
    match case-insensitively, a plain dict matches the exact key only.
    """
    getlist = getattr(headers, "getlist", None)
    if callable(getlist):
        return list(getlist(key))

    # email.message.Message / http.client.HTTPMessage
    get_all = getattr(headers, "get_all", None)
    if callable(get_all):
        return list(get_all(key) or [])

    v = headers.get(key)
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    return list(v)

import pytest

from headerbind.core.binder import Binder, reset_default_binder
from headerbind.core.config import BindConfig
from headerbind.core.header_map import HeaderMap


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Keep the default binder deterministic regardless of the caller's shell
    for var in ("HEADERBIND_TAG", "HEADERBIND_OVERFLOW", "HEADERBIND_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)
    reset_default_binder()
    yield
    reset_default_binder()


@pytest.fixture()
def binder():
    return Binder(BindConfig())


@pytest.fixture()
def wrapping_binder():
    return Binder(BindConfig(overflow="wrap"))


@pytest.fixture()
def sample_headers() -> HeaderMap:
    out = HeaderMap()

    out.set("x-string", "some-string")
    out.add("x-slice", "some")
    out.add("x-slice", "slice")
    out.set("x-int", "-1")
    out.set("x-int8", "-2")
    out.set("x-int16", "-3")
    out.set("x-int32", "-4")
    out.set("x-int64", "-5")
    out.set("x-uint", "1")
    out.set("x-uint8", "2")
    out.set("x-uint16", "3")
    out.set("x-uint32", "4")
    out.set("x-uint64", "5")
    out.set("x-float32", "0.123")
    out.set("x-float64", "1.234")
    out.set("x-bool", "true")

    for i in range(10):
        out.add("x-ints", str(i))
    for i in range(10):
        out.add("x-floats", str(i))

    return out

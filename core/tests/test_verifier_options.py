from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from compverify.api import build_runtime
from compverify.binding import FieldBinding, bindable
from compverify.contracts import (
    ConversionError,
    NameNotBoundError,
    Scope,
    StandardCode,
    Status,
)
from compverify.testkit.dummies import DummyConnectivityVerifier
from compverify.verifier import DefaultComponentVerifier, NoSuchOptionError


class Mode(Enum):
    FAST = "fast"
    SAFE = "safe"


class Pool:
    def __init__(self, size: int) -> None:
        self.size = size


@bindable
@dataclass
class ClientConfig:
    host: str | None = None
    port: int = 0
    secure: bool = False
    mode: Mode = Mode.SAFE
    pool: Pool | None = None


@bindable
class LegacyClient:
    __bindings__ = (
        ("connectTimeout", float, "connect_timeout"),
        FieldBinding("pool", Pool),
    )

    def __init__(self) -> None:
        self.connect_timeout = 1.0
        self.pool = None


def _verifier(objects=None) -> DefaultComponentVerifier:
    return DefaultComponentVerifier("demo", build_runtime(objects=objects or {}))


def test_get_option_converts_present_values():
    verifier = _verifier()

    assert verifier.get_option({"port": "8080"}, "port", int) == 8080
    assert verifier.get_option({"secure": "true"}, "secure", bool) is True
    assert verifier.get_option({"mode": "fast"}, "mode", Mode) is Mode.FAST


def test_get_option_returns_none_for_absent_key():
    assert _verifier().get_option({}, "port", int) is None
    assert _verifier().get_option({"port": None}, "port", int) is None


def test_get_option_uses_default_supplier_only_when_absent():
    verifier = _verifier()

    assert verifier.get_option({}, "missing", int, lambda: 42) == 42
    assert verifier.get_option({"missing": "7"}, "missing", int, lambda: 42) == 7


def test_get_option_propagates_conversion_errors():
    with pytest.raises(ConversionError, match="Cannot convert 'abc' to int"):
        _verifier().get_option({"port": "abc"}, "port", int)


def test_get_mandatory_option_raises_no_such_option():
    with pytest.raises(NoSuchOptionError) as excinfo:
        _verifier().get_mandatory_option({}, "missing", str)

    assert excinfo.value.code is StandardCode.NO_SUCH_OPTION
    assert excinfo.value.key == "missing"
    assert str(excinfo.value) == "No such option: missing"


def test_option_helpers_require_runtime():
    with pytest.raises(RuntimeError, match="runtime is not set"):
        DefaultComponentVerifier("demo", None).get_option({"a": 1}, "a", int)


def test_set_properties_converts_literals_and_resolves_references():
    pool = Pool(size=4)
    verifier = _verifier({"sharedPool": pool})

    config = verifier.set_properties(
        ClientConfig(),
        {"host": "db", "PORT": "5432", "secure": "true", "mode": "fast", "pool": "#sharedPool"},
    )

    assert config.host == "db"
    assert config.port == 5432
    assert config.secure is True
    assert config.mode is Mode.FAST
    assert config.pool is pool


def test_set_properties_keeps_reference_strings_out_of_literal_conversion():
    verifier = _verifier({"pool": Pool(size=1)})

    config = verifier.set_properties(ClientConfig(), {"pool": "#bean:pool"})

    assert isinstance(config.pool, Pool)


def test_set_properties_with_prefix_only_binds_prefixed_entries():
    pool = Pool(size=2)
    verifier = _verifier({"p": pool})

    client = verifier.set_properties(
        LegacyClient(),
        {"client.connectTimeout": "2.5", "client.pool": "#p", "connectTimeout": "9"},
        prefix="client.",
    )

    assert client.connect_timeout == 2.5
    assert client.pool is pool


def test_set_properties_unbound_reference_propagates():
    with pytest.raises(NameNotBoundError):
        _verifier().set_properties(ClientConfig(), {"pool": "#nowhere"})


def test_set_properties_wrong_reference_type_is_a_conversion_error():
    verifier = _verifier({"notAPool": "just a string"})

    with pytest.raises(ConversionError):
        verifier.set_properties(ClientConfig(), {"pool": "#notAPool"})


def test_connectivity_override_uses_mandatory_option():
    verifier = DummyConnectivityVerifier("demo", build_runtime())

    ok = verifier.verify(Scope.CONNECTIVITY, {"host": "localhost"})
    missing = verifier.verify(Scope.CONNECTIVITY, {})

    assert ok.status is Status.OK
    assert missing.status is Status.ERROR
    assert missing.errors[0].code is StandardCode.NO_SUCH_OPTION
    assert missing.errors[0].parameter_keys == frozenset({"host"})

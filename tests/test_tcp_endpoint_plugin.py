from __future__ import annotations

import socket

import pytest

from compverify.api import build_runtime
from compverify.contracts import DETAIL_EXCEPTION_INSTANCE, Scope, StandardCode, Status
from plugins.tcp_endpoint import NETWORK, TCP_SCHEMA, TcpClientOptions, TcpEndpointVerifier


@pytest.fixture
def listening_port():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


@pytest.fixture
def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def _verifier(objects=None) -> TcpEndpointVerifier:
    return TcpEndpointVerifier(build_runtime(schemas=[TCP_SCHEMA], objects=objects or {}))


def test_parameters_scope_uses_tcp_schema():
    result = _verifier().verify(Scope.PARAMETERS, {"host": "localhost", "keepAlive": "sure"})

    assert result.status is Status.ERROR
    assert [(e.code, sorted(e.parameter_keys)) for e in result.errors] == [
        (StandardCode.MISSING_OPTION, ["port"]),
        (StandardCode.ILLEGAL_OPTION, ["keepAlive"]),
    ]


def test_connectivity_ok_against_listening_socket(listening_port):
    result = _verifier().verify(
        Scope.CONNECTIVITY,
        {"host": "127.0.0.1", "port": str(listening_port), "timeout": "2", "keepAlive": True},
    )

    assert result.status is Status.OK
    assert result.errors == ()


def test_connectivity_failure_is_network_error(closed_port):
    result = _verifier().verify(
        Scope.CONNECTIVITY, {"host": "127.0.0.1", "port": closed_port, "timeout": 1}
    )

    assert result.status is Status.ERROR
    error = result.errors[0]
    assert error.code == NETWORK
    assert error.parameter_keys == frozenset({"host", "port"})
    assert isinstance(error.detail(DETAIL_EXCEPTION_INSTANCE), OSError)


def test_connectivity_missing_host_aborts_with_no_such_option():
    result = _verifier().verify(Scope.CONNECTIVITY, {"port": 80})

    assert result.status is Status.ERROR
    assert result.errors[0].code is StandardCode.NO_SUCH_OPTION
    assert result.errors[0].parameter_keys == frozenset({"host"})


def test_connectivity_illegal_port_is_reported():
    result = _verifier().verify(Scope.CONNECTIVITY, {"host": "localhost", "port": "http"})

    assert result.status is Status.ERROR
    assert result.errors[0].code is StandardCode.ILLEGAL_OPTION


def test_socket_factory_reference_is_resolved_from_registry():
    calls = []

    class _FakeSocket:
        def setsockopt(self, *args):
            calls.append(("setsockopt", args))

        def close(self):
            calls.append(("close", ()))

    def factory(address, timeout):
        calls.append(("connect", (address, timeout)))
        return _FakeSocket()

    result = _verifier({"fakeFactory": factory}).verify(
        Scope.CONNECTIVITY,
        {"host": "db", "port": 5432, "timeout": "0.5", "socketFactory": "#fakeFactory"},
    )

    assert result.status is Status.OK
    assert calls == [("connect", (("db", 5432), 0.5)), ("close", ())]


def test_unbound_socket_factory_is_illegal_option():
    result = _verifier().verify(
        Scope.CONNECTIVITY, {"host": "db", "port": 1, "socketFactory": "#missing"}
    )

    assert result.status is Status.ERROR
    assert result.errors[0].code is StandardCode.ILLEGAL_OPTION


def test_client_options_defaults():
    options = TcpClientOptions()

    assert options.timeout == 5.0
    assert options.keep_alive is False
    assert options.socket_factory is None


def test_literal_socket_factory_is_illegal_option():
    result = _verifier().verify(
        Scope.CONNECTIVITY, {"host": "127.0.0.1", "port": 1, "socketFactory": "plain"}
    )

    assert result.status is Status.ERROR
    error = result.errors[0]
    assert error.code is StandardCode.ILLEGAL_OPTION
    assert error.parameter_keys == frozenset({"socketFactory"})


def test_non_callable_socket_factory_reference_is_illegal_option():
    result = _verifier({"f": 42}).verify(
        Scope.CONNECTIVITY, {"host": "127.0.0.1", "port": 1, "socketFactory": "#f"}
    )

    assert result.status is Status.ERROR
    error = result.errors[0]
    assert error.code is StandardCode.ILLEGAL_OPTION
    assert error.parameter_keys == frozenset({"socketFactory"})
    assert "42" in (error.description or "")

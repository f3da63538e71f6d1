from __future__ import annotations

import logging
import socket
from collections.abc import Mapping
from typing import Any

from compverify.contracts import (
    ConversionError,
    NameNotBoundError,
    Result,
    ResultBuilder,
    Scope,
    StandardCode,
    Status,
    VerificationErrorBuilder,
    VerifierRuntime,
    error_code,
)
from compverify.verifier import DefaultComponentVerifier, NoSuchOptionError

from .config import SCHEME, TcpClientOptions

NETWORK = error_code("NETWORK")

logger = logging.getLogger("compverify.plugins.tcp_endpoint")


class TcpEndpointVerifier(DefaultComponentVerifier):
    def __init__(self, runtime: VerifierRuntime | None, *, reference_marker: str = "#") -> None:
        super().__init__(SCHEME, runtime, reference_marker=reference_marker)

    def verify_connectivity(self, parameters: Mapping[str, Any]) -> Result:
        builder = ResultBuilder.with_status_and_scope(Status.OK, Scope.CONNECTIVITY)

        try:
            host = self.get_mandatory_option(parameters, "host", str)
            port = self.get_mandatory_option(parameters, "port", int)
            options = self.set_properties(TcpClientOptions(), parameters)
        except NoSuchOptionError as exc:
            builder.error(VerificationErrorBuilder.with_no_such_option(exc.key).build())
            return builder.build()
        except (ConversionError, NameNotBoundError) as exc:
            builder.error(
                VerificationErrorBuilder.with_exception(exc)
                .code(StandardCode.ILLEGAL_OPTION)
                .build()
            )
            return builder.build()

        if options.socket_factory is not None and not callable(options.socket_factory):
            builder.error(
                VerificationErrorBuilder.with_illegal_option(
                    "socketFactory", options.socket_factory
                ).build()
            )
            return builder.build()

        connect = options.socket_factory or socket.create_connection
        try:
            sock = connect((host, port), options.timeout)
            try:
                if options.keep_alive:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
            finally:
                sock.close()
        except OSError as exc:
            logger.info("Connectivity check to %s:%s failed: %s", host, port, exc)
            builder.error(
                VerificationErrorBuilder.with_exception(exc)
                .code(NETWORK)
                .description(f"Unable to connect to {host}:{port}: {exc}")
                .parameter_keys(["host", "port"])
                .build()
            )

        return builder.build()

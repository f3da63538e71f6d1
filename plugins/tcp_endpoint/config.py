from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from compverify.binding import FieldBinding, bindable
from compverify.catalog import ComponentSchema, OptionSchema

SCHEME = "tcp"
DEFAULT_TIMEOUT_S = 5.0

TCP_SCHEMA = ComponentSchema(
    scheme=SCHEME,
    description="Plain TCP client endpoint.",
    options={
        "host": OptionSchema(type="string", required=True, description="Remote host name"),
        "port": OptionSchema(type="integer", required=True, description="Remote port"),
        "timeout": OptionSchema(type="number", default=str(DEFAULT_TIMEOUT_S)),
        "keepAlive": OptionSchema(type="boolean", default="false"),
        "socketFactory": OptionSchema(
            type="object",
            description="Registry reference to a callable(address, timeout) returning a socket",
        ),
    },
)


@bindable
@dataclass
class TcpClientOptions:
    __bindings__ = (
        FieldBinding("timeout", float),
        FieldBinding("keepAlive", bool, "keep_alive"),
        FieldBinding("socketFactory", object, "socket_factory"),
    )

    timeout: float = DEFAULT_TIMEOUT_S
    keep_alive: bool = False
    socket_factory: Callable[..., Any] | None = None

from .config import SCHEME, TCP_SCHEMA, TcpClientOptions
from .verifier import NETWORK, TcpEndpointVerifier

__all__ = ["SCHEME", "TCP_SCHEMA", "TcpClientOptions", "TcpEndpointVerifier", "NETWORK"]

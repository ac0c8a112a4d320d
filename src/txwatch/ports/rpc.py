# txwatch/ports/rpc.py
from __future__ import annotations

from typing import Any, Protocol, Sequence
from ..domain.models import RpcEnvelope


class RPCClient(Protocol):
    """Port defining the contract for a single-shot JSON-RPC client."""

    def call(self, method: str, params: Sequence[Any]) -> RpcEnvelope:
        """
        Perform one request/response cycle and return the decoded envelope.
        Raises EncodingError, TransportError, RemoteError or DecodingError.
        """

    def close(self) -> None:
        """Release any transport resources owned by the client."""

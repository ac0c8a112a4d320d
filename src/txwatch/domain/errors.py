# txwatch/domain/errors.py
from __future__ import annotations


class ParserError(RuntimeError):
    """Base class for every failure surfaced by a transaction fetch."""


class EncodingError(ParserError):
    """The JSON-RPC request body could not be serialized."""


class TransportError(ParserError):
    """The HTTP round trip failed (connect, timeout, DNS, truncated read)."""


class RemoteError(ParserError):
    """The endpoint answered with a status other than 200 OK."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP request failed with status code {status_code}")


class DecodingError(ParserError):
    """A JSON payload did not match the shape it was decoded against."""


class NodeError(ParserError):
    """The node replied with a JSON-RPC error object instead of a result."""

    def __init__(self, code: int | None, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"RPC error code={code} message={message}")

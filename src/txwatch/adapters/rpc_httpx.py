from __future__ import annotations
import json, logging, httpx
from typing import Any, Sequence
from ..domain.decoding import decode_envelope
from ..domain.errors import DecodingError, EncodingError, RemoteError, TransportError
from ..domain.models import RpcEnvelope
from ..domain.value_types import RequestId
from ..ports.rpc import RPCClient

log = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}

def _encode_request(method: str, params: Sequence[Any], request_id: RequestId) -> bytes:
    payload = {"jsonrpc":"2.0","method":method,"params":list(params),"id":request_id}
    try:
        return json.dumps(payload, separators=(",", ":")).encode()
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot serialize {method} request: {e}") from e

class HttpxRPC(RPCClient):
    """Synchronous JSON-RPC client; one POST per call, no retries."""

    def __init__(self, rpc_url: str, request_id: RequestId = "1", client: httpx.Client | None = None) -> None:
        self.rpc_url = rpc_url
        self.request_id = request_id
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client()

    def call(self, method: str, params: Sequence[Any]) -> RpcEnvelope:
        body = _encode_request(method, params, self.request_id)
        log.debug("POST %s method=%s params=%s", self.rpc_url, method, list(params))
        try:
            with self.client.stream("POST", self.rpc_url, content=body, headers=_HEADERS) as r:
                if r.status_code != httpx.codes.OK:
                    log.warning("%s answered %s for %s", self.rpc_url, r.status_code, method)
                    raise RemoteError(r.status_code)
                raw = r.read()
        except httpx.RequestError as e:  # includes httpx.DecodingError from a bad Content-Encoding
            raise TransportError(f"{method} request to {self.rpc_url} failed: {e}") from e

        # buffered once; decode from the same bytes that were logged
        log.debug("Response body: %s", raw.decode(errors="replace"))
        try:
            return decode_envelope(raw)
        except DecodingError as e:
            log.warning("undecodable %s reply from %s: %s", method, self.rpc_url, e)
            raise

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_RPC_URL = "https://cloudflare-eth.com"
DEFAULT_REQUEST_ID = "1"
GET_TRANSACTIONS_METHOD = "eth_getTransactionsByAddress"

ENV_RPC_URL = "TXWATCH_RPC_URL"
ENV_REQUEST_ID = "TXWATCH_REQUEST_ID"

@dataclass(slots=True, frozen=True)
class FetcherConfig:
    rpc_url: str = DEFAULT_RPC_URL
    request_id: int | str = DEFAULT_REQUEST_ID
    method: str = GET_TRANSACTIONS_METHOD

    @classmethod
    def from_env(cls) -> "FetcherConfig":
        return cls(
            rpc_url=os.environ.get(ENV_RPC_URL) or DEFAULT_RPC_URL,
            request_id=os.environ.get(ENV_REQUEST_ID) or DEFAULT_REQUEST_ID,
        )

from __future__ import annotations
import httpx
from txwatch.adapters.rpc_httpx import HttpxRPC
from txwatch.config import FetcherConfig
from txwatch.domain.models import Transaction
from txwatch.domain.value_types import Address
from ..ports.rpc import RPCClient
from .subscriptions import SubscriptionRegistry
from .tracking import BlockTracker
from .use_cases import TransactionFetcher

class Parser:
    """Owns the registry, the block tracker and the fetcher for one endpoint."""

    def __init__(self, config: FetcherConfig | None = None, *, client: httpx.Client | None = None,
                 rpc: RPCClient | None = None) -> None:
        self.config = config or FetcherConfig()
        self.rpc: RPCClient = rpc or HttpxRPC(self.config.rpc_url, self.config.request_id, client=client)
        self.subscriptions = SubscriptionRegistry()
        self.tracker = BlockTracker()
        self.fetcher = TransactionFetcher(self.rpc, self.tracker, method=self.config.method)

    def subscribe(self, address: Address | str) -> bool:
        return self.subscriptions.subscribe(address)

    def current_block(self) -> int:
        return self.tracker.current_block()

    def get_transactions(self, address: Address | str) -> list[Transaction]:
        return self.fetcher.fetch_transactions(address)

    def close(self) -> None:
        self.rpc.close()

    def __enter__(self) -> "Parser": return self
    def __exit__(self, *exc: object) -> None: self.close()

def build_parser(config: FetcherConfig) -> Parser:
    return Parser(config)

from __future__ import annotations
import logging

from txwatch.config import GET_TRANSACTIONS_METHOD
from txwatch.domain.decoding import classify_result
from txwatch.domain.errors import DecodingError, NodeError
from txwatch.domain.models import BlockNumber, Transaction, TransactionList
from txwatch.domain.value_types import Address
from ..ports.rpc import RPCClient
from .tracking import BlockTracker

log = logging.getLogger(__name__)


class TransactionFetcher:
    """
    One eth_getTransactionsByAddress round trip per call.

    The reply's `result` is matched against two shapes (see classify_result):
      - transaction list -> returned; tracker moves to the highest blockNumber
      - bare block number -> tracker moves to it; no transactions returned
      - anything else     -> DecodingError, tracker untouched
    Any failure aborts the whole call; no partial list is returned.
    """

    def __init__(self, rpc: RPCClient, tracker: BlockTracker, method: str = GET_TRANSACTIONS_METHOD) -> None:
        self.rpc = rpc
        self.tracker = tracker
        self.method = method

    def fetch_transactions(self, address: Address | str) -> list[Transaction]:
        env = self.rpc.call(self.method, [address])
        if env.error is not None and not env.has_result:
            raise NodeError(env.error.code, env.error.message)

        decoded = classify_result(env.result)
        if isinstance(decoded, TransactionList):
            top = decoded.highest_block()
            if top is not None:
                self.tracker.set_block(top)
            log.debug("%s: %d transaction(s)", address, len(decoded.transactions))
            return list(decoded.transactions)
        if isinstance(decoded, BlockNumber):
            self.tracker.set_block(decoded.value)
            log.debug("%s: bare block number %d, no transactions", address, decoded.value)
            return []

        log.warning("%s: unrecognized result shape: %s", address, decoded.reason)
        raise DecodingError(f"unrecognized result shape: {decoded.reason}")

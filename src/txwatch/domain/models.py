from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union
from .value_types import RequestId

@dataclass(slots=True, frozen=True)
class Transaction:
    hash: str
    from_address: str
    to: str
    value: str           # big ints as strings
    block_number: int

@dataclass(slots=True, frozen=True)
class RpcErrorObject:
    code: int | None
    message: str

@dataclass(slots=True, frozen=True)
class RpcEnvelope:
    id: RequestId
    jsonrpc: str
    result: Any = None   # raw JSON value, interpreted later
    error: RpcErrorObject | None = None
    has_result: bool = True

@dataclass(slots=True, frozen=True)
class TransactionList:
    transactions: tuple[Transaction, ...]
    def highest_block(self) -> int | None:
        return max((tx.block_number for tx in self.transactions), default=None)

@dataclass(slots=True, frozen=True)
class BlockNumber:
    value: int

@dataclass(slots=True, frozen=True)
class Unrecognized:
    reason: str
    payload: Any = field(default=None, repr=False)

DecodedResult = Union[TransactionList, BlockNumber, Unrecognized]

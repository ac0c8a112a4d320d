from __future__ import annotations

import json
import re
from typing import Any

from txwatch.domain.errors import DecodingError
from txwatch.domain.models import (
    BlockNumber, DecodedResult, RpcEnvelope, RpcErrorObject,
    Transaction, TransactionList, Unrecognized,
)

# ---------- scalar helpers ----------------------------------------------------

_HEX_QUANTITY = re.compile(r"0[xX][0-9a-fA-F]+")

def _is_int(v: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a quantity
    return isinstance(v, int) and not isinstance(v, bool)

def _quantity(v: Any, what: str) -> int:
    """Bare JSON integer or 0x-prefixed hex quantity."""
    if _is_int(v):
        return v
    if isinstance(v, str) and _HEX_QUANTITY.fullmatch(v):
        return int(v, 16)
    raise DecodingError(f"{what}: expected integer, got {type(v).__name__} {v!r}")

def _string(v: Any, what: str) -> str:
    if isinstance(v, str):
        return v
    raise DecodingError(f"{what}: expected string, got {type(v).__name__}")

def _amount(v: Any, what: str) -> str:
    # integral JSON numbers are exact in Python; keep the string form
    if isinstance(v, str):
        return v
    if _is_int(v):
        return str(v)
    raise DecodingError(f"{what}: expected decimal string, got {type(v).__name__}")

# ---------------------------- public API --------------------------------------

_TX_FIELDS = ("hash", "from", "to", "value", "blockNumber")

def decode_envelope(raw: bytes) -> RpcEnvelope:
    """Parse a buffered response body into the generic JSON-RPC wrapper."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:  # RecursionError: pathologically deep nesting
        raise DecodingError(f"response body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodingError(f"envelope: expected JSON object, got {type(data).__name__}")

    missing = [k for k in ("id", "jsonrpc") if k not in data]
    if "result" not in data and "error" not in data:
        missing.append("result")
    if missing:
        raise DecodingError(f"envelope: missing field(s) {', '.join(missing)}")

    rid = data["id"]
    if not (_is_int(rid) or isinstance(rid, str)):
        raise DecodingError(f"envelope: id must be integer or string, got {type(rid).__name__}")

    error = None
    if data.get("error") is not None:
        err = data["error"]
        if isinstance(err, dict):
            code = err.get("code")
            error = RpcErrorObject(code=code if _is_int(code) else None, message=str(err.get("message", "")))
        else:
            error = RpcErrorObject(code=None, message=str(err))

    return RpcEnvelope(
        id=rid,
        jsonrpc=_string(data["jsonrpc"], "envelope.jsonrpc"),
        result=data.get("result"),
        error=error,
        has_result="result" in data,
    )

def decode_transaction(obj: Any, idx: int = 0) -> Transaction:
    where = f"result[{idx}]"
    if not isinstance(obj, dict):
        raise DecodingError(f"{where}: expected transaction object, got {type(obj).__name__}")
    missing = [k for k in _TX_FIELDS if k not in obj]
    if missing:
        raise DecodingError(f"{where}: missing field(s) {', '.join(missing)}")
    return Transaction(
        hash=_string(obj["hash"], f"{where}.hash"),
        from_address=_string(obj["from"], f"{where}.from"),
        to=_string(obj["to"], f"{where}.to"),
        value=_amount(obj["value"], f"{where}.value"),
        block_number=_quantity(obj["blockNumber"], f"{where}.blockNumber"),
    )

def decode_transactions(result: Any) -> list[Transaction]:
    """Interpret `result` as a list of transactions or raise DecodingError."""
    if not isinstance(result, list):
        raise DecodingError(f"result: expected transaction list, got {type(result).__name__}")
    return [decode_transaction(o, i) for i, o in enumerate(result)]

def decode_block_number(result: Any) -> int:
    """Interpret `result` as a single block number or raise DecodingError."""
    return _quantity(result, "result")

def classify_result(result: Any) -> DecodedResult:
    """
    Match one untyped payload against both candidate shapes, list first.
    Never raises; a payload neither decoder accepts comes back as Unrecognized.
    """
    errors: list[str] = []
    try:
        return TransactionList(tuple(decode_transactions(result)))
    except DecodingError as e:
        errors.append(str(e))
    try:
        return BlockNumber(decode_block_number(result))
    except DecodingError as e:
        errors.append(str(e))
    return Unrecognized(reason="; ".join(errors), payload=result)

from __future__ import annotations
from typing import Iterator
from ..domain.value_types import Address

class SubscriptionRegistry:
    """Addresses currently watched. Membership only; nothing is pushed."""

    def __init__(self) -> None:
        self._addresses: set[str] = set()

    def subscribe(self, address: Address | str) -> bool:
        if address in self._addresses:
            return False
        self._addresses.add(address)
        return True

    def unsubscribe(self, address: Address | str) -> bool:
        if address not in self._addresses:
            return False
        self._addresses.discard(address)
        return True

    def is_subscribed(self, address: Address | str) -> bool:
        return address in self._addresses

    def addresses(self) -> frozenset[str]:
        return frozenset(self._addresses)

    def __contains__(self, address: object) -> bool: return address in self._addresses
    def __len__(self) -> int: return len(self._addresses)
    def __iter__(self) -> Iterator[str]: return iter(sorted(self._addresses))

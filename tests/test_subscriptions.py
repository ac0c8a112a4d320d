from __future__ import annotations

from txwatch.application.subscriptions import SubscriptionRegistry


def test_subscribe_new_then_repeat():
    reg = SubscriptionRegistry()
    assert reg.subscribe("0xabc") is True
    assert reg.subscribe("0xabc") is False
    assert len(reg) == 1
    assert reg.addresses() == frozenset({"0xabc"})


def test_registry_holds_each_address_once():
    reg = SubscriptionRegistry()
    for _ in range(5):
        reg.subscribe("0x1")
        reg.subscribe("0x2")
    assert len(reg) == 2
    assert list(reg) == ["0x1", "0x2"]


def test_addresses_are_not_normalized():
    reg = SubscriptionRegistry()
    assert reg.subscribe("0xAbC") is True
    assert reg.subscribe("0xabc") is True
    assert "0xAbC" in reg and "0xabc" in reg


def test_unsubscribe():
    reg = SubscriptionRegistry()
    reg.subscribe("0x1")
    assert reg.unsubscribe("0x1") is True
    assert reg.unsubscribe("0x1") is False
    assert not reg.is_subscribed("0x1")
    # can be re-added afterwards
    assert reg.subscribe("0x1") is True


def test_addresses_snapshot_is_immutable_copy():
    reg = SubscriptionRegistry()
    reg.subscribe("0x1")
    snap = reg.addresses()
    reg.subscribe("0x2")
    assert snap == frozenset({"0x1"})

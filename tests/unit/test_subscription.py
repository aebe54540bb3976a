from trigger import EventRegistry
from trigger import Subscription


def test_subscribe_returns_active_handle():
    r = EventRegistry()
    calls = []

    sub = r.subscribe("e", calls.append)
    assert isinstance(sub, Subscription)
    assert sub.event == "e"
    assert sub.active

    r.fire("e", 1)
    assert calls == [1]


def test_cancel_unregisters_once():
    r = EventRegistry()
    sub = r.subscribe("e", print)

    assert sub.cancel() is True
    assert not sub.active
    assert r.active_events() == []
    assert sub.cancel() is False


def test_subscription_context_manager():
    r = EventRegistry()
    calls = []

    with r.subscribe("e", calls.append):
        r.fire("e", "inside")
    r.fire("e", "outside")

    assert calls == ["inside"]
    assert not r.has_listeners("e")


def test_subscribe_existing_listener_shares_registration():
    r = EventRegistry()

    def listener():
        pass

    r.on("e", listener)
    sub = r.subscribe("e", listener)
    assert r.listener_count("e") == 1

    r.off("e", listener)
    assert not sub.active


def test_subscription_repr():
    r = EventRegistry()
    sub = r.subscribe("e", print)
    assert "active" in repr(sub)
    sub.cancel()
    assert "cancelled" in repr(sub)

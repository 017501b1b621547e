from disclosure.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_event_bus_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("test", handler)
    assert bus.receiver_count("test") == 1
    bus.unsubscribe("test", handler)
    bus.emit("test", value=1)

    assert calls == []
    assert bus.receiver_count("test") == 0


def test_event_bus_unsubscribe_unknown_event_is_noop():
    bus = EventBus()
    bus.unsubscribe("missing", lambda sender, **kwargs: None)
    assert bus.receiver_count("missing") == 0

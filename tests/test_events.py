"""Tests for the event bus."""

import pytest

from ctxpick.events import EventBus, EventType


def test_publish_in_registration_order():
    bus = EventBus()
    calls = []
    bus.subscribe(EventType.UPDATE, lambda: calls.append("first"))
    bus.subscribe("update", lambda: calls.append("second"))

    bus.publish(EventType.UPDATE)

    assert calls == ["first", "second"]


def test_duplicate_subscriptions_are_kept():
    bus = EventBus()
    calls = []

    def handler():
        calls.append(1)

    bus.subscribe(EventType.UPDATE, handler)
    bus.subscribe(EventType.UPDATE, handler)
    bus.publish(EventType.UPDATE)
    assert calls == [1, 1]

    # only the first match is removed
    bus.unsubscribe(EventType.UPDATE, handler)
    bus.publish(EventType.UPDATE)
    assert calls == [1, 1, 1]


def test_unsubscribe_all():
    bus = EventBus()
    calls = []
    bus.subscribe(EventType.UPDATE, lambda: calls.append(1))
    bus.subscribe(EventType.UPDATE, lambda: calls.append(2))

    bus.unsubscribe(EventType.UPDATE)
    bus.publish(EventType.UPDATE)

    assert calls == []


def test_arguments_pass_through():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.UPDATE, lambda *args, **kwargs: received.append((args, kwargs)))

    bus.publish(EventType.UPDATE, 1, "two", three=3)

    assert received == [((1, "two"), {"three": 3})]


def test_subscriber_exceptions_propagate():
    bus = EventBus()

    def broken():
        raise RuntimeError("boom")

    bus.subscribe(EventType.UPDATE, broken)
    with pytest.raises(RuntimeError, match="boom"):
        bus.publish(EventType.UPDATE)


def test_unknown_event_name():
    bus = EventBus()
    with pytest.raises(ValueError):
        bus.subscribe("updated", lambda: None)


def test_publish_without_subscribers():
    EventBus().publish(EventType.UPDATE)

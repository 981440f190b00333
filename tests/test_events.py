import dataclasses

import pytest

from dailyhelper.events import Event, EventType


def test_event_defaults_to_unknown_empty():
    event = Event()
    assert event.type == EventType.UNKNOWN
    assert event.text == ""
    assert event.meta is None


def test_event_type_ordering_follows_declaration():
    assert EventType.UNKNOWN < EventType.MESSAGE
    assert EventType(1) is EventType.MESSAGE
    assert EventType(0) is EventType.UNKNOWN


def test_events_with_equal_fields_are_equal():
    a = Event(EventType.MESSAGE, "/rnd", {"chat": 1})
    b = Event(EventType.MESSAGE, "/rnd", {"chat": 1})
    assert a == b


def test_events_with_different_text_differ():
    a = Event(EventType.MESSAGE, "/rnd")
    b = Event(EventType.MESSAGE, "/help")
    assert not a == b


def test_event_is_immutable():
    event = Event(EventType.MESSAGE, "hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.text = "changed"
    assert event.text == "hello"
    assert event.type == EventType.MESSAGE


def test_unknown_event_type_value_rejected():
    with pytest.raises(ValueError):
        EventType(7)
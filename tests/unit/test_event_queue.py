from datetime import datetime

import pytest

from satsim.core.julian_date import JulianDate
from satsim.events import Event, EventQueue

T0 = JulianDate.from_iso8601("2024-01-01T00:00:00Z")


def _recorder(log):
    def handler(universe, event):
        log.append(event.data)
    return handler


def test_events_fire_in_time_order():
    queue = EventQueue()
    fired = []
    queue.register_handler('note', _recorder(fired))

    queue.add({'time': T0.add_seconds(30), 'type': 'note', 'data': 'c'})
    queue.add({'time': T0.add_seconds(10), 'type': 'note', 'data': 'a'})
    queue.add({'time': T0.add_seconds(20), 'type': 'note', 'data': 'b'})

    queue.process(T0.add_seconds(25))
    assert fired == ['a', 'b']
    assert len(queue) == 1

    queue.process(T0.add_seconds(30))
    assert fired == ['a', 'b', 'c']
    assert queue.size() == 0


def test_equal_times_fire_in_insertion_order():
    queue = EventQueue()
    fired = []
    queue.register_handler('note', _recorder(fired))

    for label in 'xyz':
        queue.add(Event(T0, 'note', label))

    events = queue.process(T0)
    assert fired == ['x', 'y', 'z']
    assert all(e.fired for e in events)


def test_future_events_wait():
    queue = EventQueue()
    queue.add(Event(T0.add_seconds(5), handler=lambda u, e: None))
    assert queue.process(T0) == []
    assert len(queue) == 1


def test_event_handler_overrides_type_handler():
    queue = EventQueue()
    calls = []
    queue.register_handler('note', lambda u, e: calls.append('type'))
    queue.add(Event(T0, 'note', handler=lambda u, e: calls.append('event')))

    queue.process(T0)
    assert calls == ['event']


def test_handler_lookup_is_case_insensitive():
    queue = EventQueue()
    handler = _recorder([])
    queue.register_handler('TrackObject', handler)
    assert queue.get_handler('trackobject') is handler

    assert queue.unregister_handler('TRACKOBJECT')
    assert queue.get_handler('trackObject') is None
    assert not queue.unregister_handler('trackObject')


def test_register_handler_validation():
    queue = EventQueue()
    with pytest.raises(ValueError):
        queue.register_handler('', lambda u, e: None)
    with pytest.raises(TypeError):
        queue.register_handler('note', 'not callable')


def test_missing_handler_raises_and_keeps_event():
    queue = EventQueue()
    queue.add(Event(T0, 'unknown'))
    with pytest.raises(LookupError):
        queue.process(T0)
    assert len(queue) == 1


def test_process_requires_julian_date():
    queue = EventQueue()
    with pytest.raises(TypeError):
        queue.process(datetime(2024, 1, 1))


def test_remove_and_clear():
    queue = EventQueue()
    first = queue.add(Event(T0, handler=lambda u, e: None))
    second = queue.add(Event(T0.add_seconds(1), handler=lambda u, e: None))

    assert queue.remove(first)
    assert not queue.remove(first)
    assert [e.id for e in queue.pending()] == [second]

    queue.clear()
    assert len(queue) == 0


def test_event_times_from_text_and_datetime():
    a = Event("2024-01-01T00:00:10Z")
    b = Event(datetime(2024, 1, 1, 0, 0, 10))
    assert a.time == b.time == T0.add_seconds(10)

    with pytest.raises(ValueError):
        Event(None)
    with pytest.raises(ValueError):
        Event("yesterday")


def test_ids_assigned():
    a = Event(T0)
    b = Event(T0, id='custom')
    assert a.id.startswith('evt_')
    assert b.id == 'custom'


def test_handler_can_schedule_due_events():
    queue = EventQueue()
    fired = []

    def chain(universe, event):
        fired.append(event.data)
        if event.data < 3:
            queue.add(Event(event.time, 'chain', event.data + 1))

    queue.register_handler('chain', chain)
    queue.add(Event(T0, 'chain', 1))
    queue.process(T0.add_seconds(1))

    assert fired == [1, 2, 3]


def test_universe_passed_to_handler():
    queue = EventQueue()
    seen = []
    universe = object()
    queue.add(Event(T0, handler=lambda u, e: seen.append(u)))
    queue.process(T0, universe)
    assert seen == [universe]

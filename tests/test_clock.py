import pytest

from core.clock import LogicalClock


def test_repeating_fires_once_per_interval(clock):
    calls = []
    clock.schedule_repeating(1.0, lambda: calls.append(clock.now()))
    clock.advance(0.5)
    assert calls == []
    clock.advance(0.5)
    assert calls == [1.0]
    clock.advance(3.0)
    assert calls == [1.0, 2.0, 3.0, 4.0]
    assert clock.now() == 4.0


def test_once_fires_then_forgets(clock):
    calls = []
    clock.schedule_once(3, lambda: calls.append("done"))
    clock.advance(2.9)
    assert calls == []
    clock.advance(0.2)
    assert calls == ["done"]
    clock.advance(10)
    assert calls == ["done"]
    assert clock.pending() == 0


def test_cancel_stops_callback(clock):
    calls = []
    handle = clock.schedule_repeating(1, lambda: calls.append(1))
    clock.advance(2)
    clock.cancel(handle)
    clock.advance(5)
    assert calls == [1, 1]
    # cancelling twice or cancelling garbage is fine
    clock.cancel(handle)
    clock.cancel(999)


def test_callbacks_fire_in_due_order(clock):
    order = []
    clock.schedule_once(2, lambda: order.append("b"))
    clock.schedule_once(1, lambda: order.append("a"))
    clock.schedule_once(2, lambda: order.append("c"))
    clock.advance(5)
    assert order == ["a", "b", "c"]


def test_callback_can_cancel_itself_and_schedule(clock):
    calls = []
    handles = {}

    def tick():
        calls.append(clock.now())
        clock.cancel(handles["tick"])
        clock.schedule_once(1, lambda: calls.append(("after", clock.now())))

    handles["tick"] = clock.schedule_repeating(1, tick)
    clock.advance(5)
    assert calls == [1, ("after", 2)]
    assert clock.pending() == 0


def test_invalid_arguments():
    clock = LogicalClock()
    with pytest.raises(ValueError):
        clock.schedule_repeating(0, lambda: None)
    with pytest.raises(ValueError):
        clock.schedule_once(-1, lambda: None)
    with pytest.raises(ValueError):
        clock.advance(-0.1)


def test_cancel_all(clock):
    clock.schedule_once(1, lambda: None)
    clock.schedule_repeating(1, lambda: None)
    clock.cancel_all()
    assert clock.pending() == 0

import pytest

from _helper import sample
from pizzeria.tracker import Customer, OrderTracker


class Recorder:
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def update(self, status: str) -> None:
        self.log.append((self.name, status))


class Failing:
    def update(self, status: str) -> None:
        raise RuntimeError("listener down")


def test_notify_in_registration_order():
    log = []
    tracker = OrderTracker()
    tracker.register(Recorder("a", log))
    tracker.register(Recorder("b", log))
    tracker.notify("one")
    tracker.notify("two")
    assert log == [("a", "one"), ("b", "one"), ("a", "two"), ("b", "two")]


def test_notify_without_listeners_is_noop():
    OrderTracker().notify("nobody listening")


def test_listener_registered_during_notify_misses_that_round():
    log = []
    tracker = OrderTracker()

    class Registrar:
        def update(self, status):
            tracker.register(Recorder("late", log))

    tracker.register(Registrar())
    tracker.notify("first")
    assert log == []
    assert len(tracker) == 2


def test_listener_failure_propagates():
    tracker = OrderTracker()
    tracker.register(Failing())
    with pytest.raises(RuntimeError):
        tracker.notify("status")


def test_customer_prints_notification():
    lines = []
    Customer("Ann", output_fn=lines.append).update("Order is being prepared.")
    assert lines == ["Ann notified: Order is being prepared."]


def test_notifications_counted():
    before = sample("notifications_sent_total")
    tracker = OrderTracker()
    tracker.register(Customer("Ann", output_fn=lambda _: None))
    tracker.register(Customer("Bob", output_fn=lambda _: None))
    tracker.notify("x")
    assert sample("notifications_sent_total") == before + 2

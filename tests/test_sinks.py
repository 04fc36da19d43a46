from pathlib import Path

from core.sinks import NotificationSink, SinkChain


def test_sinks_run_in_registration_order():
    order = []
    chain = SinkChain([lambda t, b: order.append("first")])
    chain.register(lambda t, b: order.append("second"))
    chain.notify("Title", "Body")
    assert order == ["first", "second"]


def test_failing_sink_does_not_stop_later_sinks(recording_sink):
    def broken(title, body):
        raise RuntimeError("notification daemon unavailable")

    chain = SinkChain([broken, recording_sink])
    chain.notify("Title", "Body")
    assert recording_sink.calls == [("Title", "Body")]


def test_notify_returns_nothing(recording_sink):
    assert SinkChain([recording_sink]).notify("T", "B") is None


def _delivery_log():
    delivered = []

    def deliver(title, body, icon):
        delivered.append((title, body, icon))

    return delivered, deliver


def test_notification_sink_uses_active_icon(activity):
    activity.label = "Review"
    delivered, deliver = _delivery_log()
    sink = NotificationSink(deliver, activity, True, Path("active.png"), Path("idle.png"))
    sink("Title", "Body")
    assert delivered == [("Title", "Body", Path("active.png"))]


def test_notification_sink_uses_inactive_icon(activity):
    delivered, deliver = _delivery_log()
    sink = NotificationSink(deliver, activity, True, Path("active.png"), Path("idle.png"))
    sink("Title", "Body")
    assert delivered == [("Title", "Body", Path("idle.png"))]


def test_notification_sink_omits_icon_when_disabled(activity):
    activity.label = "Review"
    delivered, deliver = _delivery_log()
    sink = NotificationSink(deliver, activity, False, Path("active.png"), Path("idle.png"))
    payload = sink.build_payload("Title", "Body")
    assert payload.icon is None
    sink("Title", "Body")
    assert delivered == [("Title", "Body", None)]

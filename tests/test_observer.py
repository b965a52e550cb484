import pytest

from craftclient.observer import ObserverSubject


class Recorder:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_event(self, *args):
        self.log.append((self.name, args))


def test_notify_by_name_in_registration_order():
    log = []
    subject = ObserverSubject()
    subject.register_listener(Recorder("first", log))
    subject.register_listener(Recorder("second", log))
    subject.notify_listeners("on_event", 1, "x")
    assert log == [("first", (1, "x")), ("second", (1, "x"))]


def test_notify_with_unbound_method():
    log = []
    subject = ObserverSubject()
    subject.register_listener(Recorder("only", log))
    subject.notify_listeners(Recorder.on_event, 42)
    assert log == [("only", (42,))]


def test_unregister_stops_notifications():
    log = []
    subject = ObserverSubject()
    kept = Recorder("kept", log)
    dropped = Recorder("dropped", log)
    subject.register_listener(kept)
    subject.register_listener(dropped)
    subject.unregister_listener(dropped)
    subject.notify_listeners("on_event")
    assert log == [("kept", ())]
    assert subject.listeners == (kept,)


def test_unregister_unknown_listener_raises():
    subject = ObserverSubject()
    with pytest.raises(ValueError):
        subject.unregister_listener(Recorder("ghost", []))


def test_listener_removed_during_notify_still_called_once():
    log = []
    subject = ObserverSubject()

    class SelfRemoving(Recorder):
        def on_event(self, *args):
            super().on_event(*args)
            subject.unregister_listener(self)

    subject.register_listener(SelfRemoving("a", log))
    subject.register_listener(Recorder("b", log))
    subject.notify_listeners("on_event")
    subject.notify_listeners("on_event")
    assert log == [("a", ()), ("b", ()), ("b", ())]
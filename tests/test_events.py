from types import SimpleNamespace

from dungeoncrawl.event import Event
from dungeoncrawl.events import Events


class _Recording(Event):
    def __init__(self, log, label, number_of_frames=1):
        super().__init__(number_of_frames)
        self.log = log
        self.label = label
        self.finished = False

    def execute(self, engine):
        self.log.append(self.label)

    def when_done(self, engine):
        self.finished = True


def test_new_queue_is_empty():
    assert Events().empty()


def test_create_event_queues_and_returns_instance():
    events = Events()
    log = []
    event = events.create_event(_Recording, log, "a", number_of_frames=2)
    assert event.label == "a"
    assert event.number_of_frames == 2
    assert not events.empty()


def test_execute_on_empty_queue_does_nothing():
    events = Events()
    events.execute(None)
    assert events.empty()


def test_single_frame_event_runs_once_and_is_removed():
    events = Events()
    log = []
    event = events.create_event(_Recording, log, "a")
    events.execute(None)
    assert log == ["a"]
    assert event.finished
    assert events.empty()


def test_multi_frame_event_stays_until_done():
    events = Events()
    log = []
    events.create_event(_Recording, log, "a", 2)
    events.execute(None)
    assert not events.empty()
    events.execute(None)
    assert events.empty()
    assert log == ["a", "a"]


def test_next_events_start_after_parent_finishes():
    events = Events()
    log = []
    parent = events.create_event(_Recording, log, "parent")
    parent.add_next(_Recording(log, "child"))
    events.execute(None)
    assert log == ["parent"]
    assert len(events) == 1
    events.execute(None)
    assert log == ["parent", "child"]
    assert events.empty()


def test_event_added_while_executing_is_kept():
    events = Events()
    engine = SimpleNamespace(events=events)
    log = []

    class _Spawner(Event):
        def execute(self, engine):
            engine.events.create_event(_Recording, log, "spawned")

    events.add(_Spawner())
    events.execute(engine)
    assert len(events) == 1
    events.execute(engine)
    assert log == ["spawned"]
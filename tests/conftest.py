import pytest

from utils import notes_db
from utils.model_schemas import Note
from utils.timers import Scheduler


class FakeClock:
    """Millisecond clock that only moves when a test tells it to."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)


@pytest.fixture
def db():
    notes_db.init_db(":memory:")
    yield notes_db
    notes_db.close_db()


@pytest.fixture
def make_notes():
    def _make(*pairs):
        return [
            Note(id=idx + 1, content=content, hidden_content=hidden)
            for idx, (content, hidden) in enumerate(pairs)
        ]
    return _make

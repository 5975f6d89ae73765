import threading
from datetime import datetime, timedelta, timezone
import uuid
import pytest
from be import serve
from be.model.store import MemStorage

thread: threading.Thread = None
app = None


def run_backend():
    serve.run_backend(app)


def pytest_configure(config):
    global thread, app
    print("frontend begin test")
    app = serve.create_app(MemStorage(seed=True))
    thread = threading.Thread(target=run_backend, daemon=True)
    thread.start()
    if not serve.init_completed_event.wait(timeout=10):
        raise RuntimeError("backend did not start")


def pytest_unconfigure(config):
    try:
        serve.shutdown_backend()
    except RuntimeError:
        pass
    if thread is not None:
        thread.join(timeout=5)
    print("frontend end test")


@pytest.fixture
def backend_storage():
    """The store behind the running backend."""
    return app.config["STORAGE"]


@pytest.fixture
def unique_name():
    def make(prefix):
        return "{}_{}".format(prefix, uuid.uuid4().hex[:12])

    return make


class TickingClock:
    """Each call is one second after the previous one."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 9, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def storage():
    """A fresh, empty store with a deterministic clock."""
    return MemStorage(seed=False, clock=TickingClock())

import pytest

from dogmeet import create_app


class FakeStore:
    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.appended = []

    def append_row(self, values):
        self.appended.append(list(values))
        self.rows.append(list(values))

    def list_rows(self):
        return [list(r) for r in self.rows]


class BrokenStore:
    def __init__(self, error=None):
        self.error = error or RuntimeError("quota exceeded")

    def append_row(self, values):
        raise self.error

    def list_rows(self):
        raise self.error


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def make_app():
    def _make_app(store=None, **config):
        settings = {"TESTING": True, "SPREADSHEET_ID": "sheet-123"}
        settings.update(config)
        return create_app(settings, store=store)
    return _make_app


@pytest.fixture
def store(make_store):
    return make_store()


@pytest.fixture
def app(make_app, store):
    return make_app(store)


@pytest.fixture
def client(app):
    return app.test_client()

import datetime
from decimal import Decimal

import pytest


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def first(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, pool):
        self._pool = pool
        self.options = {}

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execution_options(self, **options):
        self.options.update(options)
        return self

    async def execute(self, statement, params=None):
        self._pool.executed.append((str(statement), params, dict(self.options)))
        if self._pool.error is not None:
            raise self._pool.error
        return FakeResult(self._pool.responses.pop(0) if self._pool.responses else [])


class FakePool:
    """Stands in for an AsyncEngine: records statements, replays canned rows."""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.executed = []
        self.connections = 0
        self.disposed = False

    def connect(self):
        self.connections += 1
        return FakeConnection(self)

    async def dispose(self):
        self.disposed = True


@pytest.fixture()
def fake_pool():
    return FakePool()


@pytest.fixture()
def compact_employee():
    return {
        "id": 1,
        "name": "Eva Chen",
        "employee_id": 1004,
        "active": True,
        "hire_date": datetime.date(2024, 3, 1),
        "salary": Decimal("60000.00"),
        "details": {"department": "HR"},
        "photo": None,
    }


@pytest.fixture()
def make_pool():
    return FakePool

"""Shared fixtures: a recording fake connection and SQLite-backed SqlCon."""

import pytest

from quickdb import QuickQuery, SqlCon

PEOPLE_DDL = (
    'CREATE TABLE people ('
    'id INTEGER PRIMARY KEY AUTOINCREMENT, '
    'name TEXT, age INTEGER, status TEXT, completed_date TEXT)'
)


class RecordingCon(QuickQuery):
    """QuickQuery over canned results, recording every primitive call."""

    def __init__(self, rows=None, rowcount=1, **kwargs):
        super().__init__(**kwargs)
        self.rows = list(rows or [])
        self.rowcount = rowcount
        self.calls = []

    def quote(self, name):
        return '"' + name.replace('"', '""') + '"'

    def execute(self, sql, params=None):
        self.calls.append(('execute', sql, list(params or [])))
        return self.rowcount

    def fetch_one(self, sql, params=None):
        self.calls.append(('fetch_one', sql, list(params or [])))
        return dict(self.rows[0]) if self.rows else None

    def fetch_all(self, sql, params=None):
        self.calls.append(('fetch_all', sql, list(params or [])))
        return [dict(r) for r in self.rows]


@pytest.fixture
def recording_con():
    return RecordingCon()


@pytest.fixture
def db_url(tmp_path):
    return f'sqlite:///{tmp_path / "quick.db"}'


@pytest.fixture
def con(db_url):
    db = SqlCon(db_url)
    db.execute(PEOPLE_DDL)
    yield db
    db.close()

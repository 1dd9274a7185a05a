import sqlite3

import pytest

from samplestore.database import Database, SampleNotFoundError
from samplestore.sample import Sample

SCHEMA = """
CREATE TABLE IF NOT EXISTS samples (
    id TEXT PRIMARY KEY DEFAULT (lower(hex(randomblob(16)))),
    name TEXT NOT NULL
)
"""


class SqlitePool:
    """Runs ``$n``-style queries against an in-memory SQLite database."""

    def __init__(self):
        self.conn = sqlite3.connect(":memory:")
        self.conn.execute(SCHEMA)
        self.conn.commit()

    @staticmethod
    def _params(args):
        return {str(position): value for position, value in enumerate(args, start=1)}

    def _run(self, query, args):
        cursor = self.conn.execute(query, self._params(args))
        rows = cursor.fetchall()
        self.conn.commit()
        return cursor, rows

    def execute(self, query, *args):
        cursor, _ = self._run(query, args)
        return cursor.rowcount

    def query(self, query, *args):
        _, rows = self._run(query, args)
        return rows

    def query_row(self, query, *args):
        _, rows = self._run(query, args)
        return rows[0] if rows else None


@pytest.fixture
def db():
    pool = SqlitePool()
    yield Database(pool)
    pool.conn.close()


def test_insert_then_list_has_one(db):
    db.insert_sample("test")
    assert len(db.list_samples()) == 1


def test_insert_twice_then_list_has_two(db):
    want = 2
    for _ in range(want):
        db.insert_sample("test")
    assert len(db.list_samples()) == want


def test_delete_removes_all(db):
    for _ in range(2):
        db.insert_sample("test")
    db.delete_samples()
    assert db.list_samples() == []


def test_insert_returns_generated_id_and_name(db):
    sample = db.insert_sample("test")
    assert sample.name == "test"
    assert sample.id
    assert db.list_samples() == [sample]


def test_find_by_id_round_trip(db):
    sample = db.insert_sample("test")
    assert db.find_sample_by_id(sample.id) == sample


def test_update_changes_name(db):
    sample = db.insert_sample("test")
    db.update_sample(sample.id, "updated")
    assert db.find_sample_by_id(sample.id) == Sample(id=sample.id, name="updated")


def test_update_unknown_id_changes_nothing(db):
    sample = db.insert_sample("test")
    db.update_sample("missing", "updated")
    assert db.list_samples() == [sample]


def test_find_after_delete_raises(db):
    sample = db.insert_sample("test")
    db.delete_samples()
    with pytest.raises(SampleNotFoundError):
        db.find_sample_by_id(sample.id)


def test_not_found_is_lookup_error(db):
    with pytest.raises(LookupError):
        db.find_sample_by_id("missing")


def test_ids_are_distinct(db):
    ids = {db.insert_sample("test").id for _ in range(5)}
    assert len(ids) == 5


def test_list_empty_database(db):
    assert db.list_samples() == []
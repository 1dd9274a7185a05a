"""Sample storage on top of a connection pool."""

from __future__ import annotations

from typing import Any

from samplestore.sample import Sample

INSERT_SAMPLE = "INSERT INTO samples (name) VALUES ($1) RETURNING id"
UPDATE_SAMPLE = "UPDATE samples SET name = $1 WHERE id = $2"
FIND_SAMPLE_BY_ID = "SELECT id, name FROM samples WHERE id = $1"
LIST_SAMPLES = "SELECT id, name FROM samples"
DELETE_SAMPLES = "DELETE FROM samples"


class SampleNotFoundError(LookupError):
    """Raised when a query that must return a row returns none."""


class Database:
    """Reads and writes samples through a pool.

    The pool needs ``execute(query, *args)``, ``query(query, *args)``
    returning an iterable of rows, and ``query_row(query, *args)``
    returning one row or ``None``. Queries use ``$n`` placeholders.
    """

    def __init__(self, pool: Any) -> None:
        self._pool = pool

    def insert_sample(self, name: str) -> Sample:
        """Insert a sample and return it with the id the database gave it."""
        row = self._pool.query_row(INSERT_SAMPLE, name)
        if row is None:
            raise SampleNotFoundError("insert returned no id")
        return Sample(id=str(row[0]), name=name)

    def update_sample(self, sample_id: str, name: str) -> None:
        """Rename the sample with the given id; an unknown id changes nothing."""
        self._pool.execute(UPDATE_SAMPLE, name, sample_id)

    def find_sample_by_id(self, sample_id: str) -> Sample:
        """Return the sample with the given id."""
        row = self._pool.query_row(FIND_SAMPLE_BY_ID, sample_id)
        if row is None:
            raise SampleNotFoundError(f"no sample with id {sample_id!r}")
        return Sample(id=str(row[0]), name=row[1])

    def list_samples(self) -> list[Sample]:
        """Return every stored sample."""
        return [
            Sample(id=str(row_id), name=name)
            for row_id, name in self._pool.query(LIST_SAMPLES)
        ]

    def delete_samples(self) -> None:
        """Delete every stored sample."""
        self._pool.execute(DELETE_SAMPLES)
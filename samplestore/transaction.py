"""Sample storage on top of anything that runs queries, pool or transaction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional, Protocol, runtime_checkable

from samplestore.database import (
    DELETE_SAMPLES,
    FIND_SAMPLE_BY_ID,
    INSERT_SAMPLE,
    LIST_SAMPLES,
    UPDATE_SAMPLE,
    SampleNotFoundError,
)
from samplestore.sample import Sample


@runtime_checkable
class DBTX(Protocol):
    """What a pool or an open transaction offers for running queries."""

    def execute(self, query: str, *args: Any) -> Any:
        """Run a statement that returns no rows."""
        ...

    def query(self, query: str, *args: Any) -> Iterable[Sequence[Any]]:
        """Run a query and return its rows."""
        ...

    def query_row(self, query: str, *args: Any) -> Optional[Sequence[Any]]:
        """Run a query and return its first row, or ``None`` if it has none."""
        ...


class Transaction:
    """Reads and writes samples through a :class:`DBTX`."""

    def __init__(self, dbtx: DBTX) -> None:
        self._dbtx = dbtx

    def insert_sample(self, name: str) -> Sample:
        """Insert a sample and return it with the id the database gave it."""
        row = self._dbtx.query_row(INSERT_SAMPLE, name)
        if row is None:
            raise SampleNotFoundError("insert returned no id")
        return Sample(id=str(row[0]), name=name)

    def update_sample(self, sample_id: str, name: str) -> None:
        """Rename the sample with the given id; an unknown id changes nothing."""
        self._dbtx.execute(UPDATE_SAMPLE, name, sample_id)

    def find_sample_by_id(self, sample_id: str) -> Sample:
        """Return the sample with the given id."""
        row = self._dbtx.query_row(FIND_SAMPLE_BY_ID, sample_id)
        if row is None:
            raise SampleNotFoundError(f"no sample with id {sample_id!r}")
        return Sample(id=str(row[0]), name=row[1])

    def list_samples(self) -> list[Sample]:
        """Return every stored sample."""
        return [
            Sample(id=str(row_id), name=name)
            for row_id, name in self._dbtx.query(LIST_SAMPLES)
        ]

    def delete_samples(self) -> None:
        """Delete every stored sample."""
        self._dbtx.execute(DELETE_SAMPLES)
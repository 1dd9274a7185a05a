# samplestore

A small data-access layer for a `samples` table: each row has an `id`
assigned by the database and a `name`. Records come back as
`samplestore.sample.Sample`, a frozen dataclass with `id` and `name`
fields.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The table

The queries expect a table like this one, with the database generating the id:

```sql
CREATE TABLE samples (
    id   UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    name TEXT NOT NULL
);
```

The statements use PostgreSQL-style `$1`, `$2` placeholders.

## What runs the queries

Both `Database` and `Transaction` hand their SQL to an object you supply.
That object must offer three methods, each taking the query text followed
by its positional arguments:

- `execute(query, *args)` runs a statement; its result is not used.
- `query(query, *args)` returns an iterable of rows; each row of the
  list query unpacks into `(id, name)`.
- `query_row(query, *args)` returns the first row as a sequence, or
  `None` when there is no row.

`samplestore.transaction.DBTX` is a runtime-checkable `Protocol`
describing exactly these three methods, so `isinstance(obj, DBTX)` tells
you whether an object has them. Ids are converted with `str()`, so a
driver that returns `uuid.UUID` values works as well. Errors raised by
that object are passed on unchanged.

## Using `Database`

```python
from samplestore.database import Database, SampleNotFoundError

db = Database(pool)

sample = db.insert_sample("first")
db.update_sample(sample.id, "renamed")

print(db.find_sample_by_id(sample.id).name)   # "renamed"
print(len(db.list_samples()))                 # 1

db.delete_samples()
try:
    db.find_sample_by_id(sample.id)
except SampleNotFoundError:
    print("gone")
```

- `insert_sample(name)` returns the new `Sample` with the id the database
  returned; it raises `SampleNotFoundError` if the insert returns no row.
- `update_sample(sample_id, name)` renames a sample; an unknown id changes
  nothing and raises nothing.
- `find_sample_by_id(sample_id)` raises `SampleNotFoundError` (a
  `LookupError`) when no row matches.
- `list_samples()` returns a list, empty when the table is empty.
- `delete_samples()` removes every row.

## Using `Transaction`

`Transaction` offers the same five operations with the same behaviour,
but is typed against `DBTX`, so a pool, a single connection or an open
transaction can stand behind it and the same code works inside and
outside a transaction.

```python
from samplestore.transaction import Transaction

tx = Transaction(dbtx)
sample = tx.insert_sample("inside a transaction")
samples = tx.list_samples()
```

## What it does not do

The package includes no database driver and opens no connections: you
build the object that runs the queries and pass it in. It does not create
the `samples` table or apply any schema, and it does not begin, commit or
roll back transactions itself.
"""Data access for a table of named samples: a record type and two stores."""

__version__ = "0.1.0"
__all__ = ["sample", "database", "transaction"]
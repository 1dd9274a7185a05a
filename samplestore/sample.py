"""The sample record stored in the ``samples`` table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """A stored sample: its database identifier and its name."""

    id: str
    name: str
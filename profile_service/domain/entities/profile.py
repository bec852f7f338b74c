from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileEntity:
    id: int  # assigned by storage
    first_name: str
    last_name: str
    date_of_birth: str  # canonical timestamp, e.g. 1990-01-01T00:00:00.000Z

"""A hostname value that still needs resolving to an ip address."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Hostname:
    """A hostname; instances compare and order by their text."""

    data: str = ""
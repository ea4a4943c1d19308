# extally/model.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

NO_EXTENSION = "[no extension]"


@dataclass(frozen=True)
class ReportEntry:
    """Represents one line of the extension report."""
    key: str    # ".ext" or NO_EXTENSION
    count: int  # occurrences, always >= 1


@dataclass
class Tally:
    """Counts per extension key, in the order keys were first seen."""
    counts: Dict[str, int] = field(default_factory=dict)

    def add(self, key: str) -> int:
        """Increment the count for `key`, inserting it at 1 if new.

        Returns:
            int: The updated count for `key`.
        """
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self.counts.items())

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, key: object) -> bool:
        return key in self.counts

    def __getitem__(self, key: str) -> int:
        return self.counts[key]

# extally/report.py

from __future__ import annotations
from typing import Iterable, List, TextIO

from .model import ReportEntry, Tally


def build_report(tally: Tally) -> List[ReportEntry]:
    """Order the tally by ascending count.

    The sort is stable over first-seen order, so keys with equal counts
    keep the order in which they first appeared in the input.
    """
    entries = [ReportEntry(key=k, count=c) for k, c in tally.items()]
    entries.sort(key=lambda e: e.count)
    return entries


def format_entry(entry: ReportEntry) -> str:
    return f"{entry.key}: {entry.count}"


def write_report(out: TextIO, entries: Iterable[ReportEntry]) -> int:
    """Write report lines to a text stream.

    Args:
        out (TextIO): Destination stream, usually stdout.
        entries (Iterable[ReportEntry]): Ordered report entries.

    Returns:
        int: Number of lines written.
    """
    written = 0
    for entry in entries:
        out.write(format_entry(entry) + "\n")
        written += 1
    out.flush()
    return written

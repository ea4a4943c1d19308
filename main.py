# main.py

"""
Orchestrator: read paths from stdin, tally extensions, print the report sorted by count.
"""
from __future__ import annotations
import argparse
import sys
from typing import BinaryIO, Iterable, List, Optional, TextIO

from extally.extension import extension_key
from extally.lines import InputDecodeError, iter_lines
from extally.model import Tally
from extally.report import build_report, write_report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    There are no options; the parser only provides --help and rejects
    stray arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        description=(
            "Count file extensions in a list of paths read from stdin "
            "(one per line) and print them sorted by ascending count."
        ),
        epilog="Example: find . -type f | extally",
    )
    return p.parse_args(argv)


def count_extensions(lines: Iterable[str]) -> Tally:
    """Tally the extension key of every non-blank line."""
    tally = Tally()
    for line in lines:
        if not line.strip():
            continue
        tally.add(extension_key(line))
    return tally


def _read_tally(stdin: BinaryIO) -> Tally | None:
    """Consume all of stdin; return None after reporting a fatal input error."""
    try:
        return count_extensions(iter_lines(stdin))
    except InputDecodeError as exc:
        print(f"[ERR] Invalid input on stdin, {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"[ERR] Failed to read stdin: {exc}", file=sys.stderr)
    return None


def _emit(stdout: TextIO, tally: Tally) -> bool:
    """Write the report; return False after reporting a fatal output error."""
    try:
        write_report(stdout, build_report(tally))
    except (OSError, UnicodeEncodeError) as exc:
        print(f"[ERR] Failed to write report: {exc}", file=sys.stderr)
        return False
    return True


def run(stdin: BinaryIO, stdout: TextIO) -> int:
    """Run the tally over explicit streams.

    Returns:
        int: Exit code.
    """
    tally = _read_tally(stdin)
    if tally is None:
        return 1
    if not _emit(stdout, tally):
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main orchestration function.

    Returns:
        int: Exit code.
    """
    parse_args(argv)
    return run(sys.stdin.buffer, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())

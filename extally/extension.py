# extally/extension.py

from __future__ import annotations
from pathlib import PurePosixPath

from .model import NO_EXTENSION


def split_segment(path: str) -> str:
    """Return the last segment of a POSIX path.

    Trailing separators and ``.`` segments are ignored, so ``dir/a.txt/``
    gives ``a.txt`` and ``dir/.`` gives ``dir``. Returns an empty string
    for paths with no segment (``/``) and for ``..``.
    """
    name = PurePosixPath(path).name
    return "" if name == ".." else name


def _suffix(name: str) -> str:
    """Return the text after the last dot of a file name, or ''."""
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        # no dot at all, or a leading-dot name such as ".gitignore"
        return ""
    return ext


def extension_key(line: str) -> str:
    """Derive the extension key for one path line.

    Args:
        line (str): Path text; surrounding whitespace is ignored.

    Returns:
        str: ``"." + lowercase extension`` or ``NO_EXTENSION``.
    """
    ext = _suffix(split_segment(line.strip()))
    if not ext:
        return NO_EXTENSION
    return f".{ext.lower()}"

"""Gzip-compressing files, several at once."""

from __future__ import annotations

import gzip
import shutil
import sys
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path


def compress(path: str | PathLike[str]) -> Path:
    """Write ``<path>.gz`` holding the gzip-compressed file; return its path."""
    source = Path(path)
    target = source.with_name(source.name + ".gz")
    with open(source, "rb") as src:
        with gzip.open(target, "wb") as dst:
            shutil.copyfileobj(src, dst)
    return target


def _try_compress(path: str | PathLike[str]) -> bool:
    try:
        compress(path)
    except OSError:
        return False
    return True


def compress_all(paths: Iterable[str | PathLike[str]]) -> int:
    """Compress the files in parallel; return how many succeeded."""
    paths = list(paths)
    if not paths:
        return 0
    with ThreadPoolExecutor(max_workers=len(paths)) as pool:
        return sum(pool.map(_try_compress, paths))


def main(argv: Sequence[str] | None = None) -> int:
    """Compress every file named on the command line."""
    paths = list(sys.argv[1:] if argv is None else argv)
    count = compress_all(paths)
    print(f"Compressed {count} files")
    return 0
"""Counting words across files in parallel threads."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from os import PathLike


class WordTally:
    """Word counts that several threads can add to at once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._found: dict[str, int] = {}

    def add(self, word: str, count: int = 1) -> None:
        """Add ``count`` occurrences of a word."""
        with self._lock:
            self._found[word] = self._found.get(word, 0) + count

    def repeated(self) -> dict[str, int]:
        """Words counted more than once, with their counts."""
        with self._lock:
            return {word: n for word, n in self._found.items() if n > 1}


def tally_words(path: str | PathLike[str], tally: WordTally) -> None:
    """Add every whitespace-separated word of a file, lower-cased, to the tally."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            for word in line.split():
                tally.add(word.lower(), 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Count words in the named files and print those that appear more than once."""
    paths = list(sys.argv[1:] if argv is None else argv)
    tally = WordTally()
    print_lock = threading.Lock()

    def work(path: str) -> None:
        try:
            tally_words(path, tally)
        except OSError as exc:
            with print_lock:
                print(exc)

    threads = [threading.Thread(target=work, args=(path,)) for path in paths]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print("Words that appear more than once:")
    for word, count in sorted(tally.repeated().items()):
        print(f"{word}: {count}")
    return 0
"""String pipelines whose stages can run in separate threads."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Stage = Callable[[Iterable[Any]], Iterable[Any]]

_DONE = object()


def filter_bad(items: Iterable[str]) -> Iterator[str]:
    """Drop every item that contains the text ``bad``."""
    return (item for item in items if "bad" not in item)


def remove_consecutive_duplicates(items: Iterable[str]) -> Iterator[str]:
    """Drop items equal to the one just before them.

    The comparison starts against the empty string, so a leading empty
    item is dropped as well.
    """
    previous = ""
    for item in items:
        if item != previous:
            yield item
        previous = item


def split_sentences(sentences: Iterable[str]) -> Iterator[str]:
    """Split each sentence on single spaces and yield the pieces in order."""
    for sentence in sentences:
        yield from sentence.split(" ")


def _drain(source: queue.Queue[Any]) -> Iterator[Any]:
    while True:
        item = source.get()
        if item is _DONE:
            return
        yield item


def _feed(
    produce: Callable[[], Iterable[Any]],
    target: queue.Queue[Any],
    errors: list[BaseException],
) -> None:
    try:
        for item in produce():
            target.put(item)
    except BaseException as exc:  # handed back to the caller of run_threaded
        errors.append(exc)
    finally:
        target.put(_DONE)


def run_threaded(source: Iterable[Any], *args: Stage) -> list[Any]:
    """Run the source and each stage in its own thread, chained by queues.

    Returns everything the last stage produced, in order. The first error
    raised by any thread is raised again here once all threads have ended.
    """
    errors: list[BaseException] = []
    threads: list[threading.Thread] = []

    upstream: queue.Queue[Any] = queue.Queue()
    threads.append(
        threading.Thread(target=_feed, args=(lambda: source, upstream, errors), daemon=True)
    )
    for stage in args:
        downstream: queue.Queue[Any] = queue.Queue()
        inbox = upstream

        def produce(stage: Stage = stage, inbox: queue.Queue[Any] = inbox) -> Iterable[Any]:
            return stage(_drain(inbox))

        threads.append(
            threading.Thread(target=_feed, args=(produce, downstream, errors), daemon=True)
        )
        upstream = downstream

    for thread in threads:
        thread.start()
    results = list(_drain(upstream))
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return results
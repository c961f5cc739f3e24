"""Parallel processing utilities.

Batch processing pattern adapted from CAMEL-AI MarkItDownLoader
(camel/loaders/markitdown.py)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def process_batch(
    items: Sequence[T],
    processor: Callable[[T], R],
    max_workers: int = 4,
) -> Iterator[tuple[T, R | Exception]]:
    """Apply ``processor`` to independent items on a thread pool.

    Failures are yielded in place of results so one bad item never stops
    the batch; the caller decides whether to re-raise.

    Args:
        items: Items to process.
        processor: Function to apply to each item.
        max_workers: Upper bound on concurrent workers.

    Yields:
        Tuples of (item, result_or_exception), in completion order.
    """
    if not items:
        return

    workers = min(max_workers, len(items))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(processor, item): item for item in items}

        for future in as_completed(futures):
            item = futures[future]
            error = future.exception()
            yield item, error if error is not None else future.result()

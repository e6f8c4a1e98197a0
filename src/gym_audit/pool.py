"""Bounded-concurrency worker pool for fetch-and-assess jobs."""

import asyncio
import itertools
import logging
from typing import Any, Awaitable, Callable, List, Sequence, TypeVar, Union

from gym_audit.constants import DEFAULT_CONCURRENCY
from gym_audit.models import PoolFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_pool(
    items: Sequence[T],
    worker: Callable[[T, int], Awaitable[R]],
    concurrency: int = DEFAULT_CONCURRENCY,
) -> List[Union[R, PoolFailure]]:
    """Run ``worker(item, index)`` for every item with at most N in flight.

    Workers share a single cursor and each pulls its own next index, so a
    slow item only holds up the worker handling it. Results land at the
    item's original index whatever the completion order. An exception in one
    item is stored as PoolFailure at that index and the run continues.

    Args:
        items: Items to process
        worker: Coroutine function taking (item, index)
        concurrency: Number of concurrent workers

    Returns:
        List aligned with ``items`` holding results or PoolFailure entries
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    results: List[Any] = [None] * len(items)
    # next() on the shared counter never suspends, so each index is claimed once
    cursor = itertools.count()

    async def next_item() -> None:
        while True:
            i = next(cursor)
            if i >= len(items):
                return
            try:
                results[i] = await worker(items[i], i)
            except Exception as e:
                logger.warning(f"Item {i} ({items[i]}) failed: {e}")
                results[i] = PoolFailure(error=str(e) or type(e).__name__, item=items[i])

    workers = [next_item() for _ in range(min(concurrency, len(items)))]
    await asyncio.gather(*workers)
    return results

"""Shared concurrency primitives for paginated collection.

Two pieces are exposed:

1. **PageCounter** -- claim-next-unit-of-work semantics for a pool of
   asyncio worker tasks.  Every ``claim()`` hands out the next page
   number exactly once.  No lock is needed: asyncio runs all workers on
   one thread and ``claim()`` never awaits, so a claim cannot interleave
   with another.

2. **run_to_completion** -- a drop-in for ``asyncio.gather`` that lets
   every worker reach its natural end.  Failures are returned in place,
   never raised, so one worker's error cannot cancel its siblings.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

_T = TypeVar("_T")


class PageCounter:
    """Monotonic page-number dispenser shared by concurrent workers.

    Parameters
    ----------
    last:
        The highest page number that may be claimed.
    first:
        The first page number handed out (default ``1``).
    """

    def __init__(self, last: int, first: int = 1) -> None:
        self._next = first
        self._last = last

    def claim(self) -> int | None:
        """Return the next unclaimed page number, or ``None`` when exhausted."""
        page = self._next
        self._next += 1
        if page > self._last:
            return None
        return page

    @property
    def claimed(self) -> int:
        """Number of claim attempts made so far, exhausted ones included."""
        return self._next - 1


async def run_to_completion(coros: list[Awaitable[_T]]) -> list[_T | BaseException]:
    """Await every coroutine, returning exceptions in place of results.

    Parameters
    ----------
    coros:
        Awaitable objects to execute concurrently.

    Returns
    -------
    list[_T | BaseException]
        Results in the same order as the input coroutines.
    """
    return await asyncio.gather(*coros, return_exceptions=True)

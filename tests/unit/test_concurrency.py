"""Unit tests for the shared concurrency primitives."""

from __future__ import annotations

import asyncio

import pytest

from lastfmq.utils.concurrency import PageCounter, run_to_completion


class TestPageCounter:
    def test_claims_each_page_once(self) -> None:
        counter = PageCounter(last=3)
        assert [counter.claim() for _ in range(5)] == [1, 2, 3, None, None]

    def test_custom_first_page(self) -> None:
        counter = PageCounter(last=5, first=4)
        assert [counter.claim(), counter.claim(), counter.claim()] == [4, 5, None]

    def test_empty_range(self) -> None:
        assert PageCounter(last=0).claim() is None

    def test_claimed_counts_attempts(self) -> None:
        counter = PageCounter(last=1)
        counter.claim()
        counter.claim()
        assert counter.claimed == 2

    @pytest.mark.asyncio
    async def test_concurrent_claims_never_overlap(self) -> None:
        counter = PageCounter(last=50)
        seen: list[int] = []

        async def _claimer() -> None:
            page = counter.claim()
            while page is not None:
                seen.append(page)
                await asyncio.sleep(0)
                page = counter.claim()

        await asyncio.gather(*(_claimer() for _ in range(7)))
        assert sorted(seen) == list(range(1, 51))


class TestRunToCompletion:
    @pytest.mark.asyncio
    async def test_results_in_input_order(self) -> None:
        async def _value(v: int, delay: float) -> int:
            await asyncio.sleep(delay)
            return v

        assert await run_to_completion([_value(1, 0.02), _value(2, 0.0)]) == [1, 2]

    @pytest.mark.asyncio
    async def test_failure_does_not_cancel_siblings(self) -> None:
        finished: list[str] = []

        async def _fail() -> None:
            raise RuntimeError("boom")

        async def _slow() -> str:
            await asyncio.sleep(0.01)
            finished.append("slow")
            return "ok"

        results = await run_to_completion([_fail(), _slow()])

        assert isinstance(results[0], RuntimeError)
        assert results[1] == "ok"
        assert finished == ["slow"]

import asyncio

import pytest

from thirstee_cache.services.sweeper import CacheSweeper


def test_sweeper_evicts_expired_entries_periodically(cache, clock):
    cache.set("stale", 1, 1)
    cache.set("fresh", 2, 100)
    clock.advance(5)

    original_cleanup = cache.cleanup

    async def scenario():
        swept = asyncio.Event()

        def cleanup():
            evicted = original_cleanup()
            swept.set()
            return evicted

        cache.cleanup = cleanup
        async with CacheSweeper(cache, interval=0.01) as sweeper:
            assert sweeper.running
            await asyncio.wait_for(swept.wait(), timeout=5)
        return sweeper

    sweeper = asyncio.run(scenario())

    assert cache.keys() == ["fresh"]
    assert not sweeper.running


def test_stop_cancels_the_sweep_task(cache):
    async def scenario():
        sweeper = CacheSweeper(cache, interval=60)
        sweeper.start()
        task = sweeper._task
        sweeper.start()
        assert sweeper._task is task
        await sweeper.stop()
        return task

    task = asyncio.run(scenario())
    assert task.cancelled()


def test_stop_without_start_is_a_noop(cache):
    sweeper = CacheSweeper(cache, interval=60)
    asyncio.run(sweeper.stop())
    assert not sweeper.running


def test_sweep_once_reports_evicted_count(cache, clock):
    cache.set("a", 1, 1)
    cache.set("b", 2, 1)
    clock.advance(2)

    assert CacheSweeper(cache).sweep_once() == 2
    assert len(cache) == 0


def test_failed_sweep_keeps_loop_alive(cache, monkeypatch):
    calls = []

    async def scenario():
        second_sweep = asyncio.Event()

        def broken_cleanup():
            calls.append(1)
            if len(calls) >= 2:
                second_sweep.set()
            raise RuntimeError("boom")

        monkeypatch.setattr(cache, "cleanup", broken_cleanup)
        async with CacheSweeper(cache, interval=0.01) as sweeper:
            await asyncio.wait_for(second_sweep.wait(), timeout=5)
            assert sweeper.running

    asyncio.run(scenario())
    assert len(calls) >= 2


def test_interval_must_be_positive(cache):
    with pytest.raises(ValueError):
        CacheSweeper(cache, interval=0)

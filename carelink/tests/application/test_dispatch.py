"""Tests for best-effort background dispatch."""

import asyncio

import pytest

from carelink.application.dispatch import BestEffortDispatcher, DispatchFailure


@pytest.mark.asyncio
async def test_dispatch_returns_before_task_runs():
    started = asyncio.Event()
    release = asyncio.Event()
    dispatcher = BestEffortDispatcher()

    async def slow():
        started.set()
        await release.wait()

    dispatcher.dispatch("slow", slow)

    assert dispatcher.pending == 1
    assert not started.is_set()

    release.set()
    await dispatcher.drain()
    assert started.is_set()
    assert dispatcher.pending == 0


@pytest.mark.asyncio
async def test_failures_are_recorded_not_raised():
    seen: list[DispatchFailure] = []
    dispatcher = BestEffortDispatcher(on_failure=seen.append)

    async def boom():
        raise RuntimeError("smtp down")

    task = dispatcher.dispatch("welcome_notification", boom)
    await dispatcher.drain()

    assert task.exception() is None
    assert len(dispatcher.failures) == 1
    failure = dispatcher.failures[0]
    assert failure.name == "welcome_notification"
    assert str(failure.error) == "smtp down"
    assert seen == [failure]


@pytest.mark.asyncio
async def test_failing_callback_does_not_escape():
    def broken_callback(failure: DispatchFailure) -> None:
        raise ValueError("callback bug")

    dispatcher = BestEffortDispatcher(on_failure=broken_callback)

    async def boom():
        raise RuntimeError("down")

    dispatcher.dispatch("task", boom)
    await dispatcher.drain()

    assert len(dispatcher.failures) == 1


@pytest.mark.asyncio
async def test_recorded_failures_are_capped():
    dispatcher = BestEffortDispatcher(max_recorded_failures=2)

    for i in range(3):

        async def boom(i=i):
            raise RuntimeError(f"failure {i}")

        dispatcher.dispatch(f"task-{i}", boom)
    await dispatcher.drain()

    assert [f.name for f in dispatcher.failures] == ["task-1", "task-2"]


@pytest.mark.asyncio
async def test_successful_tasks_record_nothing():
    calls = []
    dispatcher = BestEffortDispatcher()

    async def ok():
        calls.append("ran")

    dispatcher.dispatch("ok", ok)
    await dispatcher.drain()

    assert calls == ["ran"]
    assert dispatcher.failures == []

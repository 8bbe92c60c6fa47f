"""SingleFlight 유닛 테스트"""
import asyncio

import pytest

from src.engine.single_flight import SingleFlight


@pytest.mark.asyncio
async def test_followers_share_leader_result():
    flight = SingleFlight()
    calls = 0

    async def compute():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.02)
        return "value"

    results = await asyncio.gather(*(flight.do("key", compute) for _ in range(4)))

    assert calls == 1
    assert [value for value, _ in results] == ["value"] * 4
    assert sorted(shared for _, shared in results) == [False, True, True, True]
    assert not flight.in_flight("key")


@pytest.mark.asyncio
async def test_different_keys_run_independently():
    flight = SingleFlight()
    calls: list[str] = []

    def make(key):
        async def compute():
            calls.append(key)
            await asyncio.sleep(0.01)
            return key
        return compute

    results = await asyncio.gather(flight.do("a", make("a")), flight.do("b", make("b")))

    assert sorted(calls) == ["a", "b"]
    assert results == [("a", False), ("b", False)]


@pytest.mark.asyncio
async def test_leader_error_is_shared_and_key_released():
    flight = SingleFlight()

    async def failing():
        await asyncio.sleep(0.01)
        raise RuntimeError("upstream down")

    results = await asyncio.gather(
        flight.do("key", failing), flight.do("key", failing), return_exceptions=True
    )

    assert all(isinstance(r, RuntimeError) for r in results)
    assert not flight.in_flight("key")

    async def ok():
        return 1

    assert await flight.do("key", ok) == (1, False)


@pytest.mark.asyncio
async def test_sequential_calls_are_not_cached():
    flight = SingleFlight()
    calls = 0

    async def compute():
        nonlocal calls
        calls += 1
        return calls

    assert await flight.do("key", compute) == (1, False)
    assert await flight.do("key", compute) == (2, False)


@pytest.mark.asyncio
async def test_cancelled_leader_does_not_cancel_followers():
    """선두 요청이 끊겨도 후속 요청은 계산 결과를 받는다"""
    flight = SingleFlight()
    calls = 0

    async def compute():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.05)
        return "value"

    leader = asyncio.create_task(flight.do("key", compute))
    await asyncio.sleep(0.01)
    follower = asyncio.create_task(flight.do("key", compute))
    await asyncio.sleep(0.01)

    leader.cancel()

    assert await follower == ("value", True)
    assert leader.cancelled()
    assert calls == 1
    assert not flight.in_flight("key")


@pytest.mark.asyncio
async def test_cancelled_leader_computation_still_completes():
    flight = SingleFlight()
    finished = asyncio.Event()

    async def compute():
        await asyncio.sleep(0.02)
        finished.set()
        return "value"

    leader = asyncio.create_task(flight.do("key", compute))
    await asyncio.sleep(0.005)
    leader.cancel()

    await asyncio.wait_for(finished.wait(), timeout=1.0)
    await asyncio.sleep(0.01)
    assert not flight.in_flight("key")

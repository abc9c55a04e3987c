import asyncio

import pytest

from pledge import InvalidArgument, reject, resolve
from pledge.collection import map_


class Boom(Exception):
    pass


def test_map_plain_values() -> None:
    async def run():
        values = [1, 2, 3, 4]
        result = await map_(values, lambda v: v * v)
        assert result == [1, 4, 9, 16]
        assert len(result) == len(values)

    asyncio.run(run())


def test_map_waits_for_futures() -> None:
    async def run():
        async def slow(value: int) -> int:
            await asyncio.sleep(0.01)
            return value

        result = await map_([resolve(1), slow(2), 3], lambda v: v + 1, label="inc")
        assert result == [2, 3, 4]

    asyncio.run(run())


def test_map_calls_fn_once_per_item_in_order() -> None:
    async def run():
        seen: list[int] = []

        def record(value: int) -> int:
            seen.append(value)
            return value

        await map_([resolve(3), 1, resolve(2)], record)
        assert seen == [3, 1, 2]

    asyncio.run(run())


def test_map_rejects_with_first_failure() -> None:
    async def run():
        calls: list[int] = []
        entries = [resolve(1), reject(Boom("2")), reject(Boom("3"))]

        with pytest.raises(Boom, match="2"):
            await map_(entries, calls.append)
        assert calls == []

    asyncio.run(run())


def test_map_fn_error_arrives_through_future() -> None:
    async def run():
        def explode(value: int) -> int:
            raise Boom(f"bad {value}")

        mapped = map_([1], explode)
        with pytest.raises(Boom, match="bad 1"):
            await mapped

    asyncio.run(run())


def test_map_validates_synchronously() -> None:
    with pytest.raises(InvalidArgument, match="map_"):
        map_({"a": 1}, str)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        map_("abc", str)
    with pytest.raises(TypeError):
        map_([1, 2], None)  # type: ignore[arg-type]


def test_map_is_repeatable() -> None:
    async def run():
        entries = [resolve(1), resolve(2)]
        first = await map_(entries, lambda v: v * 2)
        second = await map_(entries, lambda v: v * 2)
        assert first == second == [2, 4]

    asyncio.run(run())

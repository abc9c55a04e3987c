import asyncio

import pytest
from kungfu import Error, Ok

from pledge import RejectedValue, lift, reject, resolve
from pledge.collection import hash_


class Boom(Exception):
    pass


def test_attempt_ok() -> None:
    async def run():
        result = await lift.attempt(hash_({"a": resolve(1)}))
        match result:
            case Ok(value):
                assert value == {"a": 1}
            case Error(e):
                pytest.fail(f"unexpected error: {e}")

    asyncio.run(run())


def test_attempt_error_keeps_reason() -> None:
    async def run():
        reason = Boom("boom")
        result = await lift.attempt(reject(reason))
        match result:
            case Ok(value):
                pytest.fail(f"unexpected value: {value}")
            case Error(e):
                assert e is reason

    asyncio.run(run())


def test_from_result_ok() -> None:
    async def run():
        assert await lift.from_result(Ok(5)) == 5

    asyncio.run(run())


def test_from_result_error() -> None:
    async def run():
        reason = Boom("bad")
        with pytest.raises(Boom) as excinfo:
            await lift.from_result(Error(reason))
        assert excinfo.value is reason

        with pytest.raises(RejectedValue) as wrapped:
            await lift.from_result(Error("not an exception"))
        assert wrapped.value.value == "not an exception"

    asyncio.run(run())

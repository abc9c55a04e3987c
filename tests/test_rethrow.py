import asyncio
import logging
from collections.abc import Callable

import pytest

from pledge import reject, resolve, then
from pledge.debug import rethrow


class Boom(Exception):
    pass


def test_rethrow_raises_now_and_schedules_later() -> None:
    scheduled: list[Callable[[], object]] = []
    reason = Boom("whoops")

    with pytest.raises(Boom) as excinfo:
        rethrow(reason, schedule=scheduled.append)
    assert excinfo.value is reason

    assert len(scheduled) == 1
    with pytest.raises(Boom) as later:
        scheduled[0]()
    assert later.value is reason


def test_rethrow_as_rejection_handler() -> None:
    async def run():
        loop = asyncio.get_running_loop()
        reported: list[BaseException | None] = []
        loop.set_exception_handler(lambda _, context: reported.append(context.get("exception")))

        reason = Boom("whoops")
        chained = then(reject(reason), on_rejected=rethrow)

        with pytest.raises(Boom) as excinfo:
            await chained
        assert excinfo.value is reason

        for _ in range(3):
            await asyncio.sleep(0)
        assert reason in reported

    asyncio.run(run())


def test_rethrow_reason_reaches_next_handler() -> None:
    async def run():
        scheduled: list[Callable[[], object]] = []
        reason = Boom("whoops")

        chained = then(
            reject(reason),
            on_rejected=lambda exc: rethrow(exc, schedule=scheduled.append),
        )
        handled = then(chained, on_rejected=lambda exc: f"handled {exc}")

        assert await handled == "handled whoops"
        assert len(scheduled) == 1

    asyncio.run(run())


def test_rethrow_not_reached_on_success() -> None:
    async def run():
        scheduled: list[Callable[[], object]] = []
        chained = then(
            resolve(1),
            on_rejected=lambda exc: rethrow(exc, schedule=scheduled.append),
        )
        assert await chained == 1
        assert scheduled == []

    asyncio.run(run())


def test_rethrow_without_loop_logs(caplog: pytest.LogCaptureFixture) -> None:
    reason = Boom("no loop")

    with caplog.at_level(logging.ERROR, logger="pledge.debug._rethrow"):
        with pytest.raises(Boom):
            rethrow(reason)

    records = [r for r in caplog.records if r.name == "pledge.debug._rethrow"]
    assert len(records) == 1
    assert records[0].exc_info is not None
    assert records[0].exc_info[1] is reason

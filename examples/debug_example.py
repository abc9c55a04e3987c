"""
Debug — rethrow a rejection so the event loop reports it.

Level 3: pledge.debug
Level 2: kungfu.Result via pledge.lift
"""

import asyncio

from kungfu import Ok, Error

from pledge import lift, then
from pledge.debug import rethrow
from examples._infra import banner, run, FakeDb


db = FakeDb()


async def main() -> None:
    banner("rethrow: reported by the loop and still handled")

    loop = asyncio.get_running_loop()
    loop.set_exception_handler(
        lambda _, context: print(f"  ! loop saw: {context.get('exception')!r}")
    )

    checked = then(db.get_user(42), on_rejected=rethrow)
    result = await lift.attempt(checked)
    await asyncio.sleep(0)

    match result:
        case Ok(user):
            print(f"  ✓ {user.name}")
        case Error(e):
            print(f"  ✗ handled in-band: {e}")


if __name__ == "__main__":
    run(main)

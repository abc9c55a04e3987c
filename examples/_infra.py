"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field


# Types
@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    can_post: bool = False


# Errors
class NotFound(Exception):
    def __init__(self, entity: str, id: int | str) -> None:
        super().__init__(f"{entity}:{id} not found")
        self.entity = entity
        self.id = id


# Fake DB
@dataclass(slots=True)
class FakeDb:
    users: dict[int, User] = field(default_factory=lambda: {
        1: User(1, "Alice", can_post=True),
        2: User(2, "Bob"),
        3: User(3, "Carol", can_post=True),
    })

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(0.01)
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    async def can_post(self, user: User) -> bool:
        await asyncio.sleep(0.01)
        return user.can_post


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())

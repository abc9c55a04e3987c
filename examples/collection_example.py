"""
Collection — map, filter and hash over futures.

Level 3: pledge.collection
Level 2: asyncio.Future
"""

from pledge import collection as C
from examples._infra import banner, run, FakeDb, NotFound


db = FakeDb()


async def main() -> None:
    banner("map_: names of users")
    names = await C.map_([db.get_user(i) for i in (1, 2, 3)], lambda u: u.name)
    print(f"  {names}")

    banner("filter_: users allowed to post (async predicate)")
    users = [db.get_user(i) for i in (1, 2, 3)]
    writers = await C.filter_(users, db.can_post, label="writers")
    print(f"  {[u.name for u in writers]}")

    banner("hash_: keyed join")
    profile = await C.hash_({"owner": db.get_user(1), "guest": db.get_user(2), "region": "eu"})
    for key, value in sorted(profile.items()):
        print(f"  {key}: {value}")

    banner("hash_: first failure wins")
    try:
        await C.hash_({"owner": db.get_user(1), "ghost": db.get_user(42)})
    except NotFound as e:
        print(f"  ✗ {e}")


if __name__ == "__main__":
    run(main)

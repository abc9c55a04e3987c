"""
Collection — combinators over many futures at once.

    from pledge import collection as C

    doubled = await C.map_(entries, lambda v: v * 2)
    admins = await C.filter_(users, is_admin)          # sync or async predicate
    profile = await C.hash_({"user": get_user(), "plan": get_plan()})
"""

from __future__ import annotations

from pledge.collection._map import map_
from pledge.collection._filter import filter_, Predicate
from pledge.collection._hash import hash_

__all__ = (
    "Predicate",
    "map_",
    "filter_",
    "hash_",
)

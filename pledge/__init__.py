"""
pledge — collection combinators over asyncio futures.

    from pledge import collection as C   # map_, filter_, hash_
    from pledge import debug as D        # rethrow
    from pledge import lift              # futures <-> kungfu results
"""

from pledge import collection
from pledge import debug
from pledge import lift
from pledge._errors import InvalidArgument, RejectedValue
from pledge._future import is_future, resolve, reject, then, all_
from pledge._types import Entry, Label, Scheduler
from pledge.collection import map_, filter_, hash_
from pledge.debug import rethrow

__version__ = "0.1.0"

__all__ = (
    "collection",
    "debug",
    "lift",
    "InvalidArgument",
    "RejectedValue",
    "is_future",
    "resolve",
    "reject",
    "then",
    "all_",
    "map_",
    "filter_",
    "hash_",
    "rethrow",
    "Entry",
    "Label",
    "Scheduler",
)

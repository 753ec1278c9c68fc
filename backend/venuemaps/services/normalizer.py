"""
VenueMaps Backend — Response Normalizer
========================================

What:  Turns the SDK's polymorphic result shapes into one ordered list.
Why:   Clients iterate `data` and read `count`; they never branch on
       which shape the SDK chose.
How:   sequence → as-is, keyed mapping → its values in insertion order,
       anything else (None, scalars, strings) → empty list.
Who:   VenueService, for POI lists, search hits and structures.

The SDK returns collections either as JSON arrays or as objects keyed by
index/id ({"0": {...}, "1": {...}}). Nothing past VenueService ever sees
the keyed form.
"""

from collections.abc import Mapping
from typing import Any, List


def normalize(raw: Any) -> List[Any]:
    """
    Normalize an SDK result into a list. Pure and total; never raises.

    >>> normalize({"0": {"id": 1}, "1": {"id": 2}})
    [{'id': 1}, {'id': 2}]
    >>> normalize(None)
    []
    """
    if isinstance(raw, list):
        return raw
    if isinstance(raw, tuple):
        return list(raw)
    if isinstance(raw, Mapping):
        return list(raw.values())
    return []

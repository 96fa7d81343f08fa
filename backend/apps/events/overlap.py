"""Time range intersection for event scheduling.

Ranges are closed: ``[10:00, 12:00]`` and ``[12:00, 13:00]`` overlap because
they share 12:00.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, NamedTuple


class Slot(NamedTuple):
    start: datetime
    end: datetime
    id: Any = None


def as_slot(item) -> Slot:
    if isinstance(item, Slot):
        return item
    if isinstance(item, tuple):
        return Slot(*item)
    return Slot(item.start_date, item.end_date, getattr(item, "pk", None))


def ranges_overlap(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    return a_start <= b_end and a_end >= b_start


def find_overlaps(start: datetime, end: datetime, existing: Iterable, excluding: Any = None) -> list:
    conflicts = []
    for item in existing:
        slot = as_slot(item)
        if excluding is not None and slot.id == excluding:
            continue
        if ranges_overlap(slot.start, slot.end, start, end):
            conflicts.append(item)
    return conflicts


def has_overlap(start: datetime, end: datetime, existing: Iterable, excluding: Any = None) -> bool:
    return bool(find_overlaps(start, end, existing, excluding=excluding))

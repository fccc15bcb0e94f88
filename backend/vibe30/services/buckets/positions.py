"""
Ordering helpers. Positions are always written densely as 0..n-1.
"""
import math
import random
from dataclasses import replace
from typing import Callable, Iterable, Sequence, TypeVar

from vibe30.core.errors import ValidationError, NotFoundError
from vibe30.services.buckets.domain import Activity

T = TypeVar("T")


def renumber(activities: Iterable[Activity]) -> list[Activity]:
    return [replace(a, position=i) for i, a in enumerate(activities)]


def order_for_replace(activities: Sequence[Activity]) -> list[Activity]:
    """Order a caller-supplied list by its own positions (stable), then pack it."""
    for a in activities:
        if a.position is None or a.position < 0:
            raise ValidationError("Activity positions must be non-negative integers")
    return renumber(sorted(activities, key=lambda a: a.position))


def next_position(positions: Iterable[int]) -> int:
    existing = list(positions)
    return max(existing) + 1 if existing else 0


def move(activities: Sequence[Activity], dragged_id: int, target_id: int) -> list[Activity]:
    """
    Drag-and-drop reorder: take the dragged activity out and insert it at the
    index the target occupied, then renumber.
    """
    ids = [a.id for a in activities]
    if dragged_id not in ids or target_id not in ids:
        raise NotFoundError("Activity not found in bucket")
    dragged_index = ids.index(dragged_id)
    target_index = ids.index(target_id)

    reordered = list(activities)
    dragged = reordered.pop(dragged_index)
    reordered.insert(target_index, dragged)
    return renumber(reordered)


def select_random(items: Sequence[T], rand: Callable[[], float] = random.random) -> T:
    """Uniform draw; no memory of earlier draws."""
    if not items:
        raise ValidationError("Add at least one activity before drawing")
    return items[math.floor(rand() * len(items))]

from __future__ import annotations

import random
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def pick_random(items: Sequence[T]) -> T:
    """Return one element of ``items`` chosen uniformly at random.

    Callers guarantee ``items`` is non-empty; an empty sequence is a bug in
    the caller, not a user-facing condition.
    """
    if not items:
        raise ValueError("pick_random() requires a non-empty sequence")
    return random.choice(items)

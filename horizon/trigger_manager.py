"""Pairwise overlap checks between registered triggers."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from .math_helper import are_rects_overlapping
from .singleton import Singleton

if TYPE_CHECKING:
    from .trigger import TriggerComponent


class TriggerManager(Singleton):
    """Tests every pair of triggers each frame and reports overlaps to both."""

    def __init__(self) -> None:
        self._triggers: list["TriggerComponent"] = []

    def add_trigger_component(self, trigger: "TriggerComponent") -> None:
        self._triggers.append(trigger)

    def clear_trigger_components(self) -> None:
        self._triggers.clear()

    def update(self) -> None:
        for first, second in itertools.combinations(list(self._triggers), 2):
            first_parent = first.parent
            second_parent = second.parent
            if first_parent is not None and second_parent is not None and first_parent.equals(second_parent):
                continue
            if are_rects_overlapping(first.collision_rect, second.collision_rect):
                first.overlaps_with(second)
                second.overlaps_with(first)

    def __len__(self) -> int:
        return len(self._triggers)
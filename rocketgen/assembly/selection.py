"""Candidate filters for each assembly phase and weighted part selection.

Every filter factory returns a pure predicate over a ``Part``; the only
randomness lives in ``choose_part``.
"""
from typing import Callable, Sequence

from ..parts.catalog import Part
from ..parts.category import Body, Engine, Exhaust, Tip, Transition
from .errors import NoEligiblePartError
from .random_source import RandomSource

PartFilter = Callable[[Part], bool]

# Room kept free during the body phase: one row for the engine, one for a decoration.
DECORATION_RESERVE = 2


def nose_cone_filter(remaining_height: int) -> PartFilter:
    def accept(part: Part) -> bool:
        return part.category == Transition(0) and part.height <= remaining_height
    return accept


def body_filter(bottom_width: int, remaining_height: int) -> PartFilter:
    """Transitions or body segments that attach below ``bottom_width``."""
    max_height = remaining_height - DECORATION_RESERVE

    def accept(part: Part) -> bool:
        if part.height > max_height:
            return False
        if part.category == Transition(bottom_width):
            return True
        return part.category == Body() and part.connector_width == bottom_width
    return accept


def engine_filter(bottom_width: int, remaining_height: int) -> PartFilter:
    def accept(part: Part) -> bool:
        return part.category == Engine(bottom_width) and part.height <= remaining_height
    return accept


def decoration_filter(bottom_width: int, remaining_height: int) -> PartFilter:
    """Tips (placed on top) or exhaust matching ``bottom_width``."""
    def accept(part: Part) -> bool:
        if part.height > remaining_height:
            return False
        return part.category == Tip() or part.category == Exhaust(bottom_width)
    return accept


def choose_part(candidates: Sequence[Part], random_source: RandomSource) -> Part:
    """Pick one candidate, weighted by ``selection_weight``.

    Raises:
        NoEligiblePartError: If ``candidates`` is empty
    """
    if not candidates:
        raise NoEligiblePartError("No part satisfies the current constraints")
    index = random_source.weighted_index([part.selection_weight for part in candidates])
    return candidates[index]

"""Part categories.

A category is a tagged value: ``Tip`` and ``Body`` carry no payload, while
``Transition``, ``Engine`` and ``Exhaust`` carry the connector width they
require from the section directly above them.
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Tip:
    """Nose ornament, stacked on top of the finished rocket."""

    def __str__(self):
        return "Tip"


@dataclass(frozen=True)
class Body:
    """Straight body segment; same connector width at both ends."""

    def __str__(self):
        return "Body"


@dataclass(frozen=True)
class Transition:
    """Changes the connector width. ``Transition(0)`` is a nose cone."""
    width: int

    def __str__(self):
        return f"Transition({self.width})"


@dataclass(frozen=True)
class Engine:
    width: int

    def __str__(self):
        return f"Engine({self.width})"


@dataclass(frozen=True)
class Exhaust:
    width: int

    def __str__(self):
        return f"Exhaust({self.width})"


Category = Union[Tip, Body, Transition, Engine, Exhaust]

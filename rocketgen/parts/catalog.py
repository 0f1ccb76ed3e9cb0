"""Part records and the default part catalog."""
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Tuple

from .category import Body, Category, Engine, Exhaust, Tip, Transition


@dataclass(frozen=True)
class Part:
    """A single ASCII-art fragment of a rocket.

    Args:
        name: Stable identifier of the part
        height: Number of text rows the part occupies
        connector_width: Joint size at the part's attaching (bottom) edge
        shape: Rows of text separated by line breaks
        category: Structural role of the part
        selection_weight: Unnormalised weight used in weighted sampling
    """
    name: str
    height: int
    connector_width: int
    shape: str
    category: Category
    selection_weight: int

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self.shape.split("\n"))

    @property
    def width(self) -> int:
        """Printed width of the widest row."""
        return max(len(line) for line in self.lines)

    def __str__(self):
        return self.shape


def validate_part(part: Part):
    """Raise ValueError if a part definition is inconsistent."""
    if part.height <= 0:
        raise ValueError(f"Part {part.name!r} must have a positive height")
    if part.selection_weight <= 0:
        raise ValueError(f"Part {part.name!r} must have a positive selection weight")
    if part.connector_width < 0:
        raise ValueError(f"Part {part.name!r} has a negative connector width")
    if len(part.lines) != part.height:
        raise ValueError(
            f"Part {part.name!r} declares height {part.height} "
            f"but its shape has {len(part.lines)} rows"
        )


class PartCatalog:
    """Immutable, ordered collection of parts."""

    def __init__(self, parts: Iterable[Part]):
        parts = tuple(parts)
        names = set()
        for part in parts:
            validate_part(part)
            if part.name in names:
                raise ValueError(f"Duplicate part name {part.name!r}")
            names.add(part.name)
        self._parts = parts

    def query(self, predicate: Callable[[Part], bool]) -> Tuple[Part, ...]:
        """Return every part satisfying ``predicate``, in catalog order."""
        return tuple(part for part in self._parts if predicate(part))

    def get(self, name: str) -> Part:
        for part in self._parts:
            if part.name == name:
                return part
        raise KeyError(name)

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def __len__(self):
        return len(self._parts)

    def __contains__(self, part):
        return part in self._parts


PARTS_BIN = (
    # Tips
    Part("tip_needle", 1, 0, "│", Tip(), 1),
    Part("tip_antenna", 2, 0, "│\n║", Tip(), 1),

    # Transitions
    Part("nose_ogive", 1, 1, "/'\\", Transition(0), 2),
    Part("nose_flat", 1, 1, "┌┴┐", Transition(0), 2),
    Part("nose_capped", 1, 1, "┌╩┐", Transition(0), 1),
    Part("flare_slope", 1, 3, "/   \\", Transition(1), 2),
    Part("nose_tall", 2, 3, "/'\\\n/   \\", Transition(0), 1),
    Part("flare_step", 1, 3, "┌┘ └┐", Transition(1), 1),
    Part("taper_slope", 1, 1, "\\   /", Transition(3), 1),
    Part("taper_step", 1, 1, "└┐ ┌┘", Transition(3), 1),

    # Body
    Part("narrow_plain", 1, 1, "│ │", Body(), 10),
    Part("narrow_porthole", 1, 1, "│°│", Body(), 5),
    Part("narrow_finned", 1, 1, "/│ │\\", Body(), 1),
    Part("wide_plain", 1, 3, "│   │", Body(), 10),
    Part("wide_portholes", 1, 3, "│° °│", Body(), 5),
    Part("wide_hatch", 1, 3, "│ O │", Body(), 5),
    Part("wide_finned", 2, 3, "/│ ^ │\\\n/_│ | │_\\", Body(), 1),

    # Engines
    Part("engine_narrow", 1, 0, "'─'", Engine(1), 1),
    Part("engine_wide", 1, 1, "\\_/", Engine(3), 1),

    # Exhaust
    Part("exhaust_plume", 1, 0, "( )", Exhaust(1), 1),
    Part("exhaust_dot", 1, 0, "·", Exhaust(0), 1),
    Part("exhaust_period", 1, 0, ".", Exhaust(0), 1),
    Part("exhaust_tick", 1, 0, "'", Exhaust(0), 1),
)

DEFAULT_CATALOG = PartCatalog(PARTS_BIN)

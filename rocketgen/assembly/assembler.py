"""Rocket assembly.

``RocketAssembler`` builds a rocket in five fixed phases:

1. INIT        - validate the requested height
2. NOSE_CONE   - one ``Transition(0)`` part on top
3. BODY        - transitions and body segments until the body/decoration
                 ratio is reached
4. ENGINE      - exactly one engine matching the bottom connector
5. DECORATION  - tips on top and exhaust below until the height is exact
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..parts.catalog import DEFAULT_CATALOG, Part, PartCatalog
from ..parts.category import Tip
from ..utils.config import logger
from .errors import ConfigurationError, RocketError, UnsatisfiableHeightError
from .random_source import NumpyRandomSource, RandomSource
from .renderer import render, rocket_width
from .selection import (
    DECORATION_RESERVE,
    body_filter,
    choose_part,
    decoration_filter,
    engine_filter,
    nose_cone_filter,
)

MIN_HEIGHT = 3
DEFAULT_RATIO_RANGE = (0.2, 0.4)


class Phase(Enum):
    INIT = 1
    NOSE_CONE = 2
    BODY = 3
    ENGINE = 4
    DECORATION = 5
    DONE = 6


@dataclass(frozen=True)
class Rocket:
    """A finished rocket: parts ordered from top to bottom."""
    max_height: int
    sections: Tuple[Part, ...]
    body_decor_ratio: float = field(default=0.0, compare=False)

    @property
    def height(self) -> int:
        return sum(part.height for part in self.sections)

    @property
    def width(self) -> int:
        return rocket_width(self.sections)

    @property
    def part_names(self) -> List[str]:
        return [part.name for part in self.sections]

    def render(self, pad_right: bool = False) -> str:
        return render(self.sections, pad_right=pad_right)

    def __str__(self):
        return self.render()

    @classmethod
    def generate(cls, max_height: int, catalog: PartCatalog = DEFAULT_CATALOG,
                 random_source: Optional[RandomSource] = None) -> "Rocket":
        """Build a random rocket of exactly ``max_height`` rows."""
        return RocketAssembler(max_height, catalog, random_source).build()


class RocketAssembler:
    """Single-use builder running the five assembly phases."""

    def __init__(self, max_height: int, catalog: PartCatalog = DEFAULT_CATALOG,
                 random_source: Optional[RandomSource] = None,
                 ratio_range: Tuple[float, float] = DEFAULT_RATIO_RANGE):
        """Initialize the assembler.

        Args:
            max_height: Exact height of the rocket to build
            catalog: Parts to choose from
            random_source: Source of random draws, numpy-backed if omitted
            ratio_range: Half-open range the body/decoration ratio is drawn from
        """
        self.max_height = max_height
        self.catalog = catalog
        self.random_source = random_source or NumpyRandomSource()
        self.ratio_range = ratio_range

        self.phase = Phase.INIT
        self.sections: List[Part] = []
        self.current_height = 0
        self.bottom_connector_width = 0
        self.body_decor_ratio = None

    @property
    def remaining_height(self) -> int:
        return self.max_height - self.current_height

    def build(self) -> Rocket:
        """Run every phase and return the finished rocket.

        Raises:
            ConfigurationError: If the requested height is below the minimum
            NoEligiblePartError: If a phase has no candidate part
            UnsatisfiableHeightError: If decorations cannot fill the height exactly
        """
        if self.phase is not Phase.INIT:
            raise RocketError("Rocket assembler can only build once")

        self._validate()
        self.phase = Phase.NOSE_CONE
        self._add_nose_cone()
        self.phase = Phase.BODY
        self._add_body()
        self.phase = Phase.ENGINE
        self._add_engine()
        self.phase = Phase.DECORATION
        self._add_decorations()
        self.phase = Phase.DONE

        logger.debug(f"Assembled rocket of height {self.current_height}: "
                     f"{[part.name for part in self.sections]}")
        return Rocket(self.max_height, tuple(self.sections), self.body_decor_ratio)

    def _validate(self):
        if self.max_height < MIN_HEIGHT:
            raise ConfigurationError(
                f"Cannot build a rocket shorter than {MIN_HEIGHT} rows "
                f"(requested {self.max_height})"
            )

    def _choose(self, predicate) -> Part:
        candidates = self.catalog.query(predicate)
        part = choose_part(candidates, self.random_source)
        logger.debug(f"{self.phase.name}: chose {part.name} from {len(candidates)} candidates, "
                     f"{self.remaining_height - part.height} rows left")
        return part

    def _append_section(self, part: Part):
        self._check_fits(part)
        self.sections.append(part)
        self.current_height += part.height
        self.bottom_connector_width = part.connector_width

    def _prepend_section(self, part: Part):
        self._check_fits(part)
        self.sections.insert(0, part)
        self.current_height += part.height

    def _check_fits(self, part: Part):
        if part.height > self.remaining_height:
            raise UnsatisfiableHeightError(
                f"Cannot add {part.name} because it would make the rocket too tall"
            )

    def _add_nose_cone(self):
        self._append_section(self._choose(nose_cone_filter(self.remaining_height)))

    def _add_body(self):
        self.body_decor_ratio = self.random_source.uniform(*self.ratio_range)
        logger.debug(f"Body/decoration ratio: {self.body_decor_ratio:.3f}")

        while (self.remaining_height / self.current_height > self.body_decor_ratio
               and self.remaining_height > DECORATION_RESERVE):
            predicate = body_filter(self.bottom_connector_width, self.remaining_height)
            self._append_section(self._choose(predicate))

    def _add_engine(self):
        predicate = engine_filter(self.bottom_connector_width, self.remaining_height)
        self._append_section(self._choose(predicate))

    def _add_decorations(self):
        while self.remaining_height > 0:
            predicate = decoration_filter(self.bottom_connector_width, self.remaining_height)
            if not self.catalog.query(predicate):
                raise UnsatisfiableHeightError(
                    f"No decoration fits the remaining {self.remaining_height} rows "
                    f"below connector width {self.bottom_connector_width}"
                )
            part = self._choose(predicate)
            if part.category == Tip():
                self._prepend_section(part)
            else:
                self._append_section(part)

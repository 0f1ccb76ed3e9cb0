"""Text rendering of assembled rockets."""
import math
from typing import Iterable, List, Sequence

from ..parts.catalog import Part


def rocket_width(sections: Iterable[Part]) -> int:
    """Width of the widest row across every row of every section."""
    return max((part.width for part in sections), default=0)


def render_lines(sections: Sequence[Part], pad_right: bool = False) -> List[str]:
    """Centre every row of every section within the rocket width.

    Args:
        sections: Parts ordered from top to bottom
        pad_right: Also pad each row on the right up to the rocket width

    Returns:
        list: Rendered rows, without line breaks
    """
    width = rocket_width(sections)
    rows = []
    for part in sections:
        for line in part.lines:
            padding = math.ceil((width - len(line)) / 2)
            row = " " * padding + line
            if pad_right:
                row = row.ljust(width)
            rows.append(row)
    return rows


def render(sections: Sequence[Part], pad_right: bool = False) -> str:
    """Render sections as one string, each row terminated by a line break."""
    return "".join(row + "\n" for row in render_lines(sections, pad_right))

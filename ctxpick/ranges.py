"""Line range descriptors.

A range is either :data:`WHOLE` (the entire file) or a :class:`LineSpan`, an
inclusive 1-based ``[start, end]`` span. The textual encoding is ``""`` for
the whole file and ``"<start>-<end>"`` for a span.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias

RANGE_PATTERN = re.compile(r"^(\d+)-(\d+)$")


class RangeError(ValueError):
    """Raised for range strings that are neither empty nor ``start-end``."""


class Whole(Enum):
    """Sentinel for "use the entire file"."""

    WHOLE = ""

    def __str__(self) -> str:
        return ""


WHOLE = Whole.WHOLE


@dataclass(frozen=True)
class LineSpan:
    """Inclusive, 1-based line span."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 1 or self.start > self.end:
            raise RangeError(f"Invalid line span: {self.start}-{self.end}")

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def select(self, lines: list[str]) -> list[str]:
        """Pick the lines covered by this span, skipping those past the end."""
        return lines[self.start - 1 : self.end]


LineRange: TypeAlias = LineSpan | Literal[Whole.WHOLE]


def parse_range(value: "str | LineRange") -> LineRange:
    """Parse the textual range encoding, passing descriptors through as-is."""
    if isinstance(value, LineSpan | Whole):
        return value
    if value == "":
        return WHOLE
    if m := RANGE_PATTERN.match(value):
        return LineSpan(int(m.group(1)), int(m.group(2)))
    raise RangeError(f"Invalid range {value!r}, expected '' or 'start-end'")

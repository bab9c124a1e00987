"""
Region geometry as reported by the region selector.

The selector is asked for `WxH+X+Y` strings in gif mode, e.g.
`640x480+100+200`.
"""

import re
from dataclasses import dataclass
from enum import Enum

from capmenu.core.errors import GeometryError

_GEOMETRY_RE = re.compile(
    r"^\s*(?P<width>\d+)x(?P<height>\d+)(?P<x>[+-]\d+)(?P<y>[+-]\d+)\s*$"
)


class Orientation(Enum):
    """Which side of the region dominates. Picks the GIF scale axis."""
    WIDE = "wide"
    TALL = "tall"


@dataclass(frozen=True)
class Geometry:
    """A selected screen region."""
    width: int
    height: int
    x: int
    y: int

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def offset(self) -> str:
        return f"{self.x:+d}{self.y:+d}"

    @property
    def orientation(self) -> Orientation:
        return Orientation.WIDE if self.width >= self.height else Orientation.TALL

    def recorder_arg(self) -> str:
        """Render as `X,Y WxH`, the form the recorder's -g flag takes."""
        return f"{self.x},{self.y} {self.size}"

    def __str__(self):
        return f"{self.size}{self.offset}"


def parse_geometry(raw: str) -> Geometry:
    """
    Parse a `WxH+X+Y` region string.

    Args:
        raw: Selector output

    Returns:
        Geometry

    Raises:
        GeometryError: If the string is not a region
    """
    match = _GEOMETRY_RE.match(raw or "")
    if not match:
        raise GeometryError(f"Invalid geometry: {raw!r}")

    width = int(match.group("width"))
    height = int(match.group("height"))
    if width == 0 or height == 0:
        raise GeometryError(f"Empty region: {raw!r}")

    return Geometry(
        width=width,
        height=height,
        x=int(match.group("x")),
        y=int(match.group("y")),
    )


def scale_filter(orientation: Orientation, scale: int) -> str:
    """
    Build the ffmpeg scale expression for a GIF.

    The dominant axis is pinned to `scale`, the other follows the
    aspect ratio.
    """
    if orientation == Orientation.WIDE:
        return f"scale={scale}:-1"
    return f"scale=-1:{scale}"

"""
Crop insets - pixels trimmed from each edge of a source frame.

Pure functions over small value types. Insets are not validated against the
source they are applied to; out-of-range values are clipped so the resulting
rectangle always lies inside the source frame.
"""
from dataclasses import dataclass, asdict
from typing import Dict

from transcode_prep.core.geometry import Rectangle


@dataclass(frozen=True)
class Crop:
    """
    Offsets for left, top, right and bottom cropping, in pixels.

    Examples:
        >>> src = Rectangle(0, 0, 1920, 1080)
        >>> Crop(left=10, top=20, right=30, bottom=40).rect(src)
        Rectangle(x0=10, y0=20, x1=1890, y1=1040)
        >>> Crop().empty()
        True
    """
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def empty(self) -> bool:
        """Report whether no edge is cropped."""
        return self == Crop()

    def rect(self, source: Rectangle) -> Rectangle:
        """
        Return the part of source that remains after cropping.

        The result is clipped to source, so over-large or inconsistent
        insets collapse to an empty rectangle instead of a negative size.
        """
        src = source.canon()
        r = Rectangle(
            src.x0 + self.left,
            src.y0 + self.top,
            src.x1 - self.right,
            src.y1 - self.bottom,
        )
        return r.intersect(src).canon()

    @classmethod
    def from_rect(cls, source: Rectangle, rect: Rectangle) -> 'Crop':
        """
        Return the crop that reduces source to rect.

        rect is canonicalized and clipped to source first, so for any
        rectangle r, Crop.from_rect(src, r).rect(src) equals
        r.canon().intersect(src.canon()).

        Examples:
            >>> src = Rectangle(0, 0, 1920, 1080)
            >>> Crop.from_rect(src, Rectangle(10, 20, 1890, 1040))
            Crop(left=10, top=20, right=30, bottom=40)
        """
        src = source.canon()
        r = rect.canon().intersect(src)
        if r.empty():
            # crop the whole frame away
            return cls(left=src.dx(), top=src.dy())
        return cls(
            left=r.x0 - src.x0,
            top=r.y0 - src.y0,
            right=src.x1 - r.x1,
            bottom=src.y1 - r.y1,
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

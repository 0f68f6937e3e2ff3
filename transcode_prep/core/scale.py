"""
Aspect-preserving crop adjustment.

scale() takes a source frame and a crop rectangle and returns the largest
rectangle with the source's aspect ratio that fits in the crop, centered
where the crop was. This lets callers normalize an arbitrary user crop to
the aspect ratio the output codec expects without re-deriving offsets.

All functions are pure and total: degenerate input produces a well-defined
(possibly empty) rectangle rather than an error.
"""
import logging
import math

from transcode_prep.core.geometry import Point, Rectangle

logger = logging.getLogger(__name__)


def aspect(r: Rectangle) -> Point:
    """
    Return r's aspect ratio as a vector in lowest terms.

    Args:
        r: Rectangle to measure; canonicalized first

    Returns:
        Point(width, height) divided by their greatest common divisor,
        or Point(0, 0) if either dimension is zero

    Examples:
        >>> aspect(Rectangle(0, 0, 1920, 1080))
        Point(x=16, y=9)
        >>> aspect(Rectangle(0, 0, 0, 1080))
        Point(x=0, y=0)
    """
    size = r.canon().size()
    if size.x == 0 or size.y == 0:
        return Point(0, 0)
    return size.div(math.gcd(size.x, size.y))


def delta(ar: Point, src: Rectangle, r: Rectangle) -> Point:
    """
    Return the difference between src and r in units of ar.

    Each axis is rounded up to the nearest whole unit, so removing that
    many units from src leaves a size no larger than r.
    """
    if ar.x == 0 or ar.y == 0:
        return Point(0, 0)
    return Point(
        -(-(src.dx() - r.dx()) // ar.x),
        -(-(src.dy() - r.dy()) // ar.y),
    )


def scale(source: Rectangle, crop: Rectangle) -> Rectangle:
    """
    Fit a rectangle with source's aspect ratio inside crop.

    The result is centered on crop's center and never larger than crop
    (after crop is clipped to source).

    Args:
        source: Source frame rectangle
        crop: Requested crop rectangle, in source coordinates

    Returns:
        Center-weighted crop rectangle with source's aspect ratio. If
        source has no area, the clipped crop is returned unchanged.

    Examples:
        >>> src = Rectangle(0, 0, 1920, 1080)
        >>> scale(src, Rectangle(910, 490, 1010, 590))
        Rectangle(x0=912, y0=513, x1=1008, y1=567)
    """
    s = source.canon()
    c = crop.canon().intersect(s)

    ar = aspect(s)
    if ar.x == 0 or ar.y == 0:
        logger.debug("Source %s has no area, returning crop %s unscaled", s, c)
        return c

    # save the crop's center then move it to the origin
    cc = c.center()
    c = c.sub(c.min)

    # the axis needing more whole units removed decides for both
    d = delta(ar, s, c)
    u = max(d.x, d.y)
    c = Rectangle(0, 0, s.dx() - u * ar.x, s.dy() - u * ar.y)

    return c.add(cc.sub(c.center()))

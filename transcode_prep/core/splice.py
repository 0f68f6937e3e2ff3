"""
Splices - ordered collections of time ranges.

A Splice lists the segments of a source asset to include in an output,
in the order they should be concatenated. Members may overlap and need not
be sorted; is_sorted() reports whether they are without changing anything.

The text form is a two-dimensional JSON array of [start, end] pairs:

    [[5.0,10.0],[20.0,30.0]]
"""
import json
import logging
from datetime import timedelta
from typing import Iterable, List, Union

from transcode_prep.core.timecode import MAX_SECONDS, DurationOverflowError, Range

logger = logging.getLogger(__name__)


class SpliceDecodeError(ValueError):
    """Raised when splice text is not an array of numeric pairs"""


class Splice(list):
    """
    A list of Ranges.

    Examples:
        >>> s = Splice([Range(2, 3), Range(1, 5), Range(1, 2)])
        >>> s.is_sorted()
        False
        >>> Splice(sorted(s, key=Range.sort_key))
        [Range(start=1, end=2), Range(start=1, end=5), Range(start=2, end=3)]
        >>> s.union()
        Range(start=1, end=5)
    """

    def size(self) -> timedelta:
        """
        Return the cumulative duration of the splice, overlaps included.

        Raises:
            DurationOverflowError: If the total is too long to represent
        """
        try:
            return sum((r.size() for r in self), timedelta())
        except OverflowError:
            raise DurationOverflowError(f"Total duration of {len(self)} ranges is too long") from None

    def union(self) -> Range:
        """Return the smallest Range that contains every member."""
        if not self:
            return Range()
        lo, hi = self[0]
        for r in self[1:]:
            if r.start < lo:
                lo = r.start
        for r in self[1:]:
            if r.end > hi:
                hi = r.end
        return Range(lo, hi)

    def within(self, bound: Range) -> bool:
        """Report whether every member lies inside bound. True when empty."""
        return all(r.start >= bound.start and r.end <= bound.end for r in self)

    def is_sorted(self) -> bool:
        """Report whether the members are in (start, duration) order."""
        keys = [r.sort_key() for r in self]
        return all(a <= b for a, b in zip(keys, keys[1:]))

    def to_json(self) -> str:
        return '[' + ','.join(r.to_json() for r in self) + ']'

    @classmethod
    def from_text(cls, data: Union[str, bytes]) -> 'Splice':
        """
        Decode a splice from its JSON array text.

        Empty input decodes to an empty splice. Rows with more than two
        numbers keep only the first two; rows with fewer are zero-padded.

        Raises:
            SpliceDecodeError: If data is not a JSON array of numeric arrays

        Examples:
            >>> Splice.from_text("[[5,10],[20,30]]")
            [Range(start=5.0, end=10.0), Range(start=20.0, end=30.0)]
            >>> Splice.from_text("")
            []
        """
        return cls(_decode_ranges(data))

    def load_text(self, data: Union[str, bytes]) -> None:
        """
        Replace the members with the ranges decoded from data.

        The splice is only modified once the whole input has decoded
        successfully. Empty input leaves it as it is.
        """
        if not data:
            return
        self[:] = _decode_ranges(data)


def _decode_ranges(data: Union[str, bytes]) -> List[Range]:
    if not data:
        return []
    try:
        rows = json.loads(data, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise SpliceDecodeError(f"Invalid splice: {e}") from e

    if rows is None:
        return []
    if not isinstance(rows, list):
        raise SpliceDecodeError(f"Invalid splice: expected an array of ranges, got {type(rows).__name__}")

    ranges = []
    for i, row in enumerate(rows):
        if not isinstance(row, list) or not all(_is_number(v) for v in row):
            raise SpliceDecodeError(f"Invalid splice: range #{i} is not an array of numbers: {row!r}")
        if len(row) > 2:
            logger.debug("Splice range #%d has %d values, using the first two", i, len(row))
        start, end = (list(row[:2]) + [0, 0])[:2]
        if not (abs(start) < MAX_SECONDS and abs(end) < MAX_SECONDS and abs(end - start) < MAX_SECONDS):
            raise SpliceDecodeError(f"Invalid splice: range #{i} is out of range: {row!r}")
        ranges.append(Range(float(start), float(end)))
    return ranges


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _reject_constant(name: str):
    # json accepts NaN and Infinity, which are not valid JSON numbers
    raise ValueError(f"{name} is not a valid number")


def sort_splice(ranges: Iterable[Range]) -> Splice:
    """Return a new Splice holding ranges in (start, duration) order."""
    return Splice(sorted(ranges, key=Range.sort_key))

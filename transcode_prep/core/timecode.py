"""
Timecode intervals - operations on media timestamps.

A Range is a time interval expressed in decimal seconds. Ranges are plain
immutable values: nothing here does I/O or keeps state, so every function
is deterministic and safe to call from anywhere.

The textual timecode format is HH:MM:SS:FF (hours, minutes, seconds, frame).
On input a ';' may replace the ':' before the frame field to mark drop-frame
timecode; the marker is accepted but not treated differently.
"""
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Tuple

# Frame rate assumed when a caller passes fps=0
DEFAULT_FPS = 23.997

# Largest number of seconds a duration can hold
MAX_SECONDS = timedelta.max.days * 86400

_NUM = r'([-+]?\d+(?:\.\d*)?)'
_TIMECODE_RE = re.compile(rf'^\s*{_NUM}:{_NUM}:{_NUM}(?:[:;](\d+))?')


class TimecodeFormatError(ValueError):
    """Raised when a timecode string cannot be parsed"""


class DurationOverflowError(ValueError):
    """Raised when a duration is too long to represent"""


@dataclass(frozen=True)
class Range:
    """
    A pair of decimal seconds defining a time interval.

    The interval starts at `start` and ends at `end`. Nothing forces
    start <= end at construction; use canon() for the ordered form.

    Examples:
        >>> Range(10, 5).canon()
        Range(start=5, end=10)
        >>> Range(5, 10).size().total_seconds()
        5.0
        >>> Range(5, 10).to_json()
        '[5.000000,10.000000]'
    """
    start: float = 0.0
    end: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.start, self.end)[i]

    def __iter__(self):
        yield self.start
        yield self.end

    def __len__(self) -> int:
        return 2

    def canon(self) -> 'Range':
        """Return the range in proper order, where start <= end."""
        if self.start > self.end:
            return Range(self.end, self.start)
        return self

    def size(self) -> timedelta:
        """
        Return the duration of the range. Never negative.

        Raises:
            DurationOverflowError: If the duration exceeds MAX_SECONDS
        """
        dx = abs(self.end - self.start)
        if not dx < MAX_SECONDS:
            raise DurationOverflowError(f"Duration of {self} is too long: {dx:f}s")
        return timedelta(seconds=dx)

    def sort_key(self) -> Tuple[float, float]:
        """Ordering key: ascending start, ties broken by ascending duration."""
        return (self.start, abs(self.end - self.start))

    def timecode(self, fps: float = 0) -> str:
        """Return the end of the range in HH:MM:SS:FF format."""
        return to_timecode(self.end, fps)

    def timecodes(self, fps: float = 0) -> Tuple[str, str]:
        """Return the start and end of the range in HH:MM:SS:FF format."""
        return to_timecode(self.start, fps), to_timecode(self.end, fps)

    def to_json(self) -> str:
        # fixed-point on both fields; json.dumps would switch to exponents
        return '[%f,%f]' % (self.start, self.end)

    def __str__(self) -> str:
        return f"({_elapsed(self.start)}-{_elapsed(self.end)})"


def parse(timecode: str, fps: float = 0) -> Range:
    """
    Parse a timecode into the elapsed time since the start of the media.

    Accepts HH:MM:SS:FF, HH:MM:SS;FF or HH:MM:SS. The frame number FF is
    converted to seconds using fps; when fps is 0, DEFAULT_FPS is used.

    Args:
        timecode: Timecode text
        fps: Frame rate used to convert the frame field into seconds

    Returns:
        Range anchored at zero and ending at the parsed time

    Raises:
        TimecodeFormatError: If fewer than hours, minutes and seconds are present,
            or the time is longer than MAX_SECONDS

    Examples:
        >>> parse("01:02:03:12", 24)
        Range(start=0, end=3723.5)
        >>> parse("00:00:10")
        Range(start=0, end=10.0)
    """
    if fps == 0:
        fps = DEFAULT_FPS
    m = _TIMECODE_RE.match(timecode)
    if m is None:
        raise TimecodeFormatError(
            f"Invalid timecode: {timecode!r}. Expected 'HH:MM:SS:FF', 'HH:MM:SS;FF' or 'HH:MM:SS'"
        )
    h, mins, s = (float(v) for v in m.group(1, 2, 3))
    frames = int(m.group(4) or 0)
    total = h * 3600 + mins * 60 + s + frames / fps
    if not abs(total) < MAX_SECONDS:
        raise TimecodeFormatError(f"Invalid timecode: {timecode!r}. Time is out of range")
    return Range(0, total)


def to_timecode(seconds: float, fps: float = 0) -> str:
    """
    Format a number of seconds as an HH:MM:SS:FF timecode.

    The hour field is not bounded. Fractional seconds are truncated and
    negative times carry a leading minus sign.

    Examples:
        >>> to_timecode(3723.5, 24)
        '01:02:03:00'
        >>> to_timecode(-5)
        '-00:00:05:00'
    """
    if fps == 0:
        fps = DEFAULT_FPS
    sign = '-' if int(seconds) < 0 else ''
    h, rem = divmod(int(abs(seconds)), 3600)
    m, s = divmod(rem, 60)
    # TODO: derive the frame number from the fractional second and fps
    f = 0
    return sign + '%02d:%02d:%02d:%02d' % (h, m, s, f)


def _elapsed(seconds: float) -> str:
    sign = '-' if seconds < 0 else ''
    if not abs(seconds) < MAX_SECONDS:
        return '%s%fs' % (sign, abs(seconds))
    return sign + str(timedelta(seconds=abs(seconds)))

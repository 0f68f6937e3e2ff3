"""
Fractional frame rates.
"""
from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Framerate:
    """
    A frame rate as an integer numerator over a divisor.

    Examples:
        >>> Framerate(30000, 1001).fps()
        29.97002997002997
        >>> Framerate(24, 0).empty()
        True
    """
    numerator: int = 0
    denominator: int = 0

    @classmethod
    def parse(cls, text: str) -> 'Framerate':
        """
        Parse a frame rate written as 'N/D', an integer or a decimal.

        Raises:
            ValueError: If text is not a non-negative rational number

        Examples:
            >>> Framerate.parse("30000/1001")
            Framerate(numerator=30000, denominator=1001)
            >>> Framerate.parse("23.976")
            Framerate(numerator=2997, denominator=125)
        """
        try:
            rate = Fraction(text.strip())
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"Invalid frame rate: {text!r}. Expected e.g. '24', '29.97' or '30000/1001'")
        if rate < 0:
            raise ValueError(f"Invalid frame rate: {text!r}. Must not be negative")
        return cls(rate.numerator, rate.denominator)

    def empty(self) -> bool:
        return self.numerator == 0 or self.denominator == 0

    def fps(self) -> float:
        """Frames per second, or 0.0 when unset so timecode defaults apply."""
        if self.empty():
            return 0.0
        return self.numerator / self.denominator

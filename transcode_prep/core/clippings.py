"""
Conversion of splices into provider input clippings.

Transcoding providers trim a source by start and end timecodes. This keeps
that mapping in one place so provider integrations don't each reformat
ranges themselves.
"""
from dataclasses import dataclass
from typing import List

from transcode_prep.core.splice import Splice


@dataclass(frozen=True)
class InputClipping:
    """A start/end timecode pair in HH:MM:SS:FF format"""
    start_timecode: str
    end_timecode: str


def splice_to_clippings(splice: Splice, fps: float = 0) -> List[InputClipping]:
    """
    Convert every range of splice to an InputClipping, in splice order.

    Examples:
        >>> splice_to_clippings(Splice([Range(5, 10)]))
        [InputClipping(start_timecode='00:00:05:00', end_timecode='00:00:10:00')]
    """
    clippings = []
    for r in splice:
        start, end = r.timecodes(fps)
        clippings.append(InputClipping(start, end))
    return clippings

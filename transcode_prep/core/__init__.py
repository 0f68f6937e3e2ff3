"""
Pure time-interval and frame-geometry primitives.

Nothing in this package performs I/O; every type is an immutable value.
"""
from transcode_prep.core.crop import Crop
from transcode_prep.core.framerate import Framerate
from transcode_prep.core.geometry import Point, Rectangle, ZR
from transcode_prep.core.scale import aspect, scale
from transcode_prep.core.splice import Splice, SpliceDecodeError
from transcode_prep.core.timecode import Range, TimecodeFormatError, parse

__all__ = [
    'Crop',
    'Framerate',
    'Point',
    'Range',
    'Rectangle',
    'Splice',
    'SpliceDecodeError',
    'TimecodeFormatError',
    'ZR',
    'aspect',
    'parse',
    'scale',
]

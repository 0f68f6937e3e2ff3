"""
Command line interface.

    transcode-prep timecode 01:02:03:12 --fps 24
    transcode-prep splice '[[5,10],[20,30]]' --fps 30000/1001
    transcode-prep scale --source 1920x1080 --crop 100,0,100,0
    transcode-prep serve --port 8080
"""
import argparse
import logging
import sys
from typing import List, Optional

from transcode_prep import __version__
from transcode_prep.config import Settings
from transcode_prep.core.clippings import splice_to_clippings
from transcode_prep.core.crop import Crop
from transcode_prep.core.framerate import Framerate
from transcode_prep.core.geometry import Rectangle
from transcode_prep.core.scale import aspect, scale
from transcode_prep.core.splice import Splice
from transcode_prep.core.timecode import parse
from transcode_prep.providers import ProviderRegistry

logger = logging.getLogger(__name__)


def parse_crop(text: str) -> Crop:
    """
    Parse 'LEFT,TOP,RIGHT,BOTTOM' pixel insets.

    Raises:
        ValueError: If text is not four comma separated integers

    Examples:
        >>> parse_crop("10,20,30,40")
        Crop(left=10, top=20, right=30, bottom=40)
    """
    parts = text.split(',')
    if len(parts) != 4:
        raise ValueError(f"Invalid crop: {text!r}. Expected 'LEFT,TOP,RIGHT,BOTTOM'")
    try:
        left, top, right, bottom = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid crop: {text!r}. All insets must be integers")
    return Crop(left=left, top=top, right=right, bottom=bottom)


def cmd_timecode(args, settings: Settings) -> None:
    fps = args.fps.fps() if args.fps is not None else settings.fps
    r = parse(args.timecode, fps)
    print(f"Range:    {r.to_json()}")
    print(f"Duration: {r.size().total_seconds():.3f}s")
    print(f"Timecode: {r.timecode(fps)}")


def cmd_splice(args, settings: Settings) -> None:
    fps = args.fps.fps() if args.fps is not None else settings.fps
    s = Splice.from_text(args.splice)
    print(f"Ranges ({len(s)}):")
    for i, (r, c) in enumerate(zip(s, splice_to_clippings(s, fps)), 1):
        print(f"  {i}. {r}  {c.start_timecode} -> {c.end_timecode}")
    print(f"Total:  {s.size().total_seconds():.3f}s")
    print(f"Union:  {s.union().to_json()}")
    print(f"Sorted: {'yes' if s.is_sorted() else 'no'}")


def cmd_scale(args, settings: Settings) -> None:
    source = Rectangle.parse(args.source)
    crop = parse_crop(args.crop)
    cropped = crop.rect(source)
    scaled = scale(source, cropped)
    ar = aspect(source)
    insets = Crop.from_rect(source, scaled)
    print(f"Aspect: {ar.x}:{ar.y}")
    print(f"Crop:   {cropped} ({cropped.dx()}x{cropped.dy()})")
    print(f"Scaled: {scaled} ({scaled.dx()}x{scaled.dy()})")
    print(f"Insets: left={insets.left} top={insets.top} right={insets.right} bottom={insets.bottom}")


def cmd_serve(args, settings: Settings) -> None:
    # imported here so the other commands don't need Flask loaded
    from transcode_prep.web import create_app, run_server

    app = create_app(ProviderRegistry.from_entry_points(), settings)
    run_server(app, args.host or settings.host, args.port or settings.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='transcode-prep',
        description='Preview source splices and aspect-preserving crops for transcode jobs',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('timecode', help='Parse an HH:MM:SS:FF timecode')
    p.add_argument('timecode')
    p.add_argument('--fps', type=Framerate.parse, default=None,
                   help="Frame rate, e.g. '24' or '30000/1001' (default: 23.997)")
    p.set_defaults(func=cmd_timecode)

    p = sub.add_parser('splice', help='Summarize a [[start,end],...] splice')
    p.add_argument('splice')
    p.add_argument('--fps', type=Framerate.parse, default=None, help='Frame rate for timecodes')
    p.set_defaults(func=cmd_splice)

    p = sub.add_parser('scale', help='Fit a crop to the source aspect ratio')
    p.add_argument('--source', required=True, help="Source frame size, e.g. '1920x1080'")
    p.add_argument('--crop', default='0,0,0,0', help="Insets as 'LEFT,TOP,RIGHT,BOTTOM'")
    p.set_defaults(func=cmd_scale)

    p = sub.add_parser('serve', help='Run the HTTP preview service')
    p.add_argument('--host', default=None)
    p.add_argument('--port', type=int, default=None)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
        logging.basicConfig(level=settings.log_level, format='%(levelname)s %(name)s: %(message)s')
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        args.func(args, settings)
    except ValueError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""Command-line entry point: parse path data and print the resulting segments.

    pathgeom "M0,0 L10,0 L10,10 Z"
    pathgeom --json --scale 2 -f icons.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from pathgeom.config import settings
from pathgeom.models.path import ArcTo, ClosePath, CubicCurveTo, Path, QuadraticCurveTo, Segment
from pathgeom.models.responses import ParseErrorOut, ParseResponse, SegmentOut
from pathgeom.parser.cache import ParseCache
from pathgeom.parser.config import ParserConfig
from pathgeom.parser.errors import PathParseError
from pathgeom.parser.interpreter import ParseResult, parse_path
from pathgeom.svg.export import to_path_data

logger = logging.getLogger(__name__)


def _segment_points(seg: Segment) -> list[tuple[float, float]]:
    if isinstance(seg, ClosePath):
        return []
    if isinstance(seg, CubicCurveTo):
        return [seg.control1.as_tuple(), seg.control2.as_tuple(), seg.point.as_tuple()]
    if isinstance(seg, QuadraticCurveTo):
        return [seg.control.as_tuple(), seg.point.as_tuple()]
    return [seg.point.as_tuple()]


def describe_segment(seg: Segment) -> str:
    """One human-readable line per segment."""
    name = type(seg).__name__
    if isinstance(seg, ArcTo):
        arc = seg.arc
        return (
            f"{name} center=({arc.center.x:g}, {arc.center.y:g}) r=({arc.rx:g}, {arc.ry:g}) "
            f"rot={arc.rotation:g} start={arc.start_angle:g} extent={arc.extent:g} "
            f"-> ({seg.point.x:g}, {seg.point.y:g})"
        )
    points = " ".join(f"({x:g}, {y:g})" for x, y in _segment_points(seg))
    return f"{name} {points}".rstrip()


def build_response(path: Path, error: PathParseError | None) -> ParseResponse:
    return ParseResponse(
        path_data=to_path_data(path),
        segments=[SegmentOut(kind=type(seg).__name__, points=_segment_points(seg)) for seg in path],
        subpath_count=len(path.subpaths()),
        bbox=path.bbox(),
        error=(
            ParseErrorOut(kind=type(error).__name__, message=error.message, offset=error.offset)
            if error is not None
            else None
        ),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathgeom", description="Parse path data into geometric segments")
    parser.add_argument("paths", nargs="*", help="Path data strings")
    parser.add_argument("-f", "--file", help="File with one path data string per line")
    parser.add_argument(
        "--tolerant",
        action=argparse.BooleanOptionalAction,
        default=settings.tolerant,
        help="Keep the partial path on errors instead of failing",
    )
    parser.add_argument(
        "--cache", action=argparse.BooleanOptionalAction, default=settings.use_cache, help="Memoize repeated inputs"
    )
    parser.add_argument("--scale", type=float, default=1.0, help="Uniform scale applied to the result")
    parser.add_argument("--flatten-arcs", action="store_true", help="Emit arcs as cubic Bezier segments")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    return parser


def _read_inputs(args: argparse.Namespace) -> list[str]:
    inputs = list(args.paths)
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            inputs.extend(line.strip() for line in f if line.strip())
    return inputs


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args = build_arg_parser().parse_args(argv)
    inputs = _read_inputs(args)
    if not inputs:
        print("No path data given.", file=sys.stderr)
        return 2

    config = ParserConfig(arcs_as_cubics=args.flatten_arcs)
    cache = ParseCache(max_entries=settings.cache_max_entries, config=config) if args.cache else None

    failures = 0
    for text in inputs:
        try:
            if cache is not None:
                result = cache.get_or_parse(text, tolerant=args.tolerant)
            else:
                result = parse_path(text, tolerant=args.tolerant, config=config)
        except PathParseError as e:
            failures += 1
            print(f"error: {e}", file=sys.stderr)
            continue

        _emit(result, args)

    logger.info("Parsed %d inputs, %d failed", len(inputs), failures)
    return 1 if failures else 0


def _emit(result: ParseResult, args: argparse.Namespace) -> None:
    path = result.path.scaled(args.scale) if args.scale != 1.0 else result.path
    if args.json:
        print(build_response(path, result.error).model_dump_json())
        return
    for seg in path:
        print(describe_segment(seg))
    if result.error is not None:
        print(f"warning: {result.error}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())

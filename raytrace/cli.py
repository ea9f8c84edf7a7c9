"""Command-line entry point for the demo scenes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from raytrace.canvas import RENDERS_PATH, Canvas
from raytrace.color import Color
from raytrace.simulation import run_canvas, run_projectiles
from raytrace.tuples import Tuple

DEMO_FILENAME = "chapter02.ppm"


def demo(out: TextIO | None = None, directory: str | Path | None = None) -> Path | None:
    """Print a sample point, vector and colour, and save a small canvas.

    Returns the written path, or None if the file could not be written.
    """
    out = sys.stdout if out is None else out
    print(Tuple.point(1.0, 2.0, 3.0), file=out)
    print(Tuple.vector(1.0, 2.0, 3.0), file=out)
    color = Color(1.0, 0.8, 0.6)
    print(color, file=out)

    canvas = Canvas(10, 2, color)
    folder = Path(directory) if directory is not None else RENDERS_PATH
    try:
        path = canvas.write_ppm(DEMO_FILENAME, folder)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    print(f"File '{path}' successfully saved.", file=out)
    return path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="raytrace", description="Run one of the demo scenes."
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="demo",
        choices=("demo", "projectiles", "canvas"),
        help="scene to run (default: demo)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help=f"directory for rendered images (default: {RENDERS_PATH})",
    )
    args = parser.parse_args(argv)

    if args.command == "projectiles":
        run_projectiles()
        return 0
    if args.command == "canvas":
        return 0 if run_canvas(directory=args.output_dir) is not None else 1
    return 0 if demo(directory=args.output_dir) is not None else 1


if __name__ == "__main__":
    sys.exit(main())
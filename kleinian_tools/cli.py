"""Command-line driver: trace a limit set and write it to a file.

```
python -m kleinian_tools --ta 2 --tb 2 --level 50 -o image.svg
```

Output files ending in `.svg` are written as a single SVG path
element. Any other extension is rendered through matplotlib.

"""

import argparse
import logging
import math
import sys

from kleinian_tools import limit_set, drawtools
from kleinian_tools.base import GeometryError

logger = logging.getLogger(__name__)

PRESETS = {
    "apollonian": (2 + 0j, 2 + 0j),
    "sqrt3": (complex(math.sqrt(3), 1.0), 2 + 0j),
}

DEFAULT_OUTPUT = "image.svg"

def parse_complex(value):
    try:
        return complex(value.replace(" ", ""))
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            "'{}' is not a complex number".format(value)
        ) from err

def positive_float(value):
    try:
        result = float(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            "'{}' is not a number".format(value)
        ) from err
    if result <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return result

def positive_int(value):
    try:
        result = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            "'{}' is not an integer".format(value)
        ) from err
    if result < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return result

def build_parser():
    parser = argparse.ArgumentParser(
        prog="kleinian-limit-set",
        description="Draw the limit set of a two-generator Kleinian group"
        " with parabolic commutator (Grandma's recipe)."
    )
    parser.add_argument("--preset", choices=sorted(PRESETS),
                        default="apollonian",
                        help="named pair of traces (default: apollonian)")
    parser.add_argument("--ta", type=parse_complex,
                        help="trace of the generator a, e.g. 1.732+1j")
    parser.add_argument("--tb", type=parse_complex,
                        help="trace of the generator b")
    parser.add_argument("--level", type=positive_int,
                        default=limit_set.DEFAULT_MAX_LEVEL,
                        help="maximum word length (default: %(default)s)")
    parser.add_argument("--epsilon", type=positive_float,
                        default=limit_set.EPSILON,
                        help="resolution of the curve (default: %(default)s)")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help="output file (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debugging output")
    return parser

def write_output(path, filename):
    if filename.lower().endswith(".svg"):
        drawtools.write_svg(path, filename)
        return

    drawing = drawtools.LimitSetDrawing()
    try:
        drawing.draw_limit_set(path)
        drawing.save(filename)
    finally:
        drawing.close()

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    ta, tb = PRESETS[args.preset]
    if args.ta is not None:
        ta = args.ta
    if args.tb is not None:
        tb = args.tb

    logger.info("tracing limit set for ta=%s, tb=%s to depth %d",
                ta, tb, args.level)
    try:
        path = limit_set.limit_set(ta, tb, max_level=args.level,
                                   epsilon=args.epsilon)
    except GeometryError as err:
        logger.error("%s", err)
        return 1

    write_output(path, args.output)
    logger.info("wrote %d points to %s", len(path), args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())

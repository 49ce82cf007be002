"""Demo: plot x**2 with its numeric derivative and integral.

    python -m calculus --width 60 --height 20 --domain -5 5 --range -10 10
"""

import argparse
import logging
from typing import Optional, Sequence

from calculus.core.config import configure_logging
from calculus.core.math import derivative, integral
from calculus.plotting import Grapher

logger = logging.getLogger(__name__)


def square(x: float) -> float:
    return x * x


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="calculus",
        description="Plot x^2 (#), its derivative (d) and its integral (i) as ASCII art.",
    )
    p.add_argument("--width", type=int, default=80, help="Output width in characters")
    p.add_argument("--height", type=int, default=24, help="Output height in characters")
    p.add_argument("--domain", type=float, nargs=2, default=(-10.0, 10.0), metavar=("LO", "HI"))
    p.add_argument("--range", type=float, nargs=2, default=(-10.0, 10.0), metavar=("LO", "HI"))
    p.add_argument("--log-level", default=None, help="Logging level (default: CALCULUS_LOG_LEVEL or WARNING)")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    grapher = Grapher()
    grapher.set_output_dimensions(args.width, args.height)
    grapher.set_domain(*args.domain)
    grapher.set_range(*args.range)

    grapher.add_function(square, "#")
    grapher.add_function(derivative(square), "d")
    grapher.add_function(integral(square), "i")

    logger.info(
        "Rendering %dx%d, domain=%s, range=%s",
        args.width, args.height, tuple(args.domain), tuple(args.range),
    )
    grapher.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

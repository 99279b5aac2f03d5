"""Example: classify triangles by their quadrances and spreads."""

import argparse
import logging
from typing import Optional, Sequence

from rattrig import is_acute_triangle, is_obtuse_triangle, is_right_triangle, is_valid_triangle, trigonom
from rattrig.logging_utils import init_logger, instrument

logger = logging.getLogger(__name__)

TRIANGLES = [
    ("Right triangle (3-4-5)", (0.0, 0.0), (3.0, 0.0), (0.0, 4.0)),
    ("Equilateral triangle", (0.0, 0.0), (2.0, 0.0), (1.0, 1.7320508075688772)),
    ("Isosceles triangle", (0.0, 0.0), (2.0, 0.0), (1.0, 1.5)),
    ("Obtuse triangle", (0.0, 0.0), (1.0, 0.0), (0.1, 0.1)),
    ("Collinear points", (0.0, 0.0), (1.0, 1.0), (2.0, 2.0)),
]


def analyze(title, p1, p2, p3, formulas=trigonom) -> None:
    print(f"=== {title} ===")
    if not is_valid_triangle(p1, p2, p3):
        logger.warning("Points %s, %s, %s are collinear", p1, p2, p3)
        print("  not a triangle\n")
        return

    q1, q2, q3 = formulas.quadrance_from_three_points(p1, p2, p3)
    s1, s2, s3 = formulas.spread_from_three_points(p1, p2, p3)
    print(f"  quadrances: {q1:.6g}, {q2:.6g}, {q3:.6g}")
    print(f"  spreads:    {s1:.6g}, {s2:.6g}, {s3:.6g}")
    print(f"  quadrea:    {formulas.archimedes(q1, q2, q3):.6g}")
    print(f"  sine law:   {s1 / q1:.6g}, {s2 / q2:.6g}, {s3 / q3:.6g}")

    if is_right_triangle(s1, s2, s3):
        kind = "right"
    elif is_acute_triangle(s1, s2, s3):
        kind = "acute"
    elif is_obtuse_triangle(s1, s2, s3):
        kind = "obtuse"
    else:
        kind = "unclassified"
    print(f"  type:       {kind}")

    twist = formulas.cross_from_three_points(p1, p2, p3)
    orientation = "counter-clockwise" if twist > 0 else "clockwise"
    print(f"  twist:      {twist:.6g} ({orientation})\n")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Analyse sample triangles")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $RATTRIG_LOG or INFO)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every formula call at DEBUG level",
    )
    args = parser.parse_args(argv)
    init_logger(args.log_level)

    formulas = instrument(trigonom) if args.trace else trigonom
    for title, p1, p2, p3 in TRIANGLES:
        analyze(title, p1, p2, p3, formulas)


if __name__ == "__main__":
    main()

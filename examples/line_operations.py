"""Example: point-to-line quadrance and line-to-line spread."""

from rattrig import (
    DivisionByZeroError,
    Line2D,
    are_lines_parallel,
    are_lines_perpendicular,
    cross_from_line,
    point_on_line,
    quadrance_from_line,
    safe_spread_from_line,
    spread_from_line,
)


def _describe(line) -> str:
    a, b, c = line
    return f"{a}x + {b}y + {c} = 0"


def main() -> None:
    line = (1.0, 1.0, 0.0)
    print(f"Quadrance from (1, 1) to {_describe(line)}:", quadrance_from_line((1.0, 1.0), line))

    vertical = (1.0, 0.0, 0.0)
    horizontal = (0.0, 1.0, 0.0)
    print("Spread vertical/horizontal:", spread_from_line(vertical, horizontal))
    print("Cross vertical/horizontal:", cross_from_line(vertical, horizontal))
    print("Perpendicular:", are_lines_perpendicular(vertical, horizontal))
    print("Parallel x+y=0 / 2x+2y+1=0:", are_lines_parallel((1, 1, 0), (2, 2, 1)))

    diagonal = Line2D.through((0, 0), (2, 2))
    print("Line through (0,0) and (2,2):", _describe(diagonal.as_tuple()))
    print("(5, 5) on it:", point_on_line((5, 5), diagonal.as_tuple()))

    try:
        safe_spread_from_line((0, 0, 1), vertical)
    except DivisionByZeroError as exc:
        print("Degenerate line rejected:", exc)


if __name__ == "__main__":
    main()

"""Example: the core quantities on integer, float and rational inputs."""

from fractions import Fraction

from rattrig import (
    Point2D,
    Triangle2D,
    archimedes,
    are_collinear,
    cross,
    cross3d,
    is_valid_triangle,
    quadrance,
    quadrance3d,
    quadrance_from_three_points,
    spread,
    spread_from_three_points,
)


def main() -> None:
    q = quadrance((1, 2), (4, 6))
    print("Quadrance (1, 2) -> (4, 6):", q)

    print("Spread (1, 1) vs (1, 0):", spread((1.0, 1.0), (1.0, 0.0)))
    print("Cross (1, 1) x (1, 0):", cross((1, 1), (1, 0)))

    q1, q2, q3 = quadrance_from_three_points((0, 0), (3, 0), (0, 4))
    print(f"Quadrances: q1={q1}, q2={q2}, q3={q3}")
    s1, s2, s3 = spread_from_three_points((0, 0), (3, 0), (0, 4))
    print(f"Spreads: s1={s1}, s2={s2}, s3={s3}")
    print("Quadrea:", archimedes(q1, q2, q3))

    triangle = Triangle2D(Point2D(0, 0), Point2D(3, 0), Point2D(0, 4))
    print("Triangle area (quadrea):", triangle.area())
    print("Triangle twist:", triangle.twist())
    print("Degenerate:", triangle.is_degenerate())

    exact = archimedes(Fraction(1, 2), Fraction(1, 4), Fraction(1, 6))
    print("Quadrea of 1/2, 1/4, 1/6:", exact)

    print("Collinear (0,0) (1,1) (2,2):", are_collinear((0, 0), (1, 1), (2, 2)))
    print("Valid triangle:", is_valid_triangle((0, 0), (1, 1), (2, 2)))

    print("3D quadrance:", quadrance3d((0, 0, 0), (1, 2, 3)))
    print("3D cross:", cross3d((1, 0, 0), (0, 1, 0)))


if __name__ == "__main__":
    main()

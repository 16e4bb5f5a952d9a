# Geoshapes
# Copyright 2025 - Geoshapes authors

import logging
from decimal import ROUND_HALF_UP, Context, Decimal

from preferences import get_global_preferences
from shape import Point, Shape

logger = logging.getLogger(__name__)

# Enough digits to hold any finite float with its decimals
_FIXED_POINT_DIGITS = 330


def _to_fixed(value: float, precision: int) -> Decimal:
    """Rounds the exact binary value of a float to `precision` decimals, ties away from zero."""
    exponent = Decimal(10) ** -precision
    context = Context(prec=_FIXED_POINT_DIGITS + precision)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=context)


class Triangle(Shape):
    def __init__(
        self,
        first_point: Point,
        second_point: Point,
        third_point: Point,
        color: str | None = None,
        filled: bool | None = None,
    ):
        super().__init__([first_point, second_point, third_point], color, filled)
        self._type_precision = get_global_preferences().get_type_precision()

    def __str__(self):
        p = self._points
        return f"Triangle[v1={p[0]},v2={p[1]},v3={p[2]}]"

    def get_type(self) -> str:
        """Classifies the triangle by how many of its edges have the same length.

        Lengths are rounded half-up to the precision captured at construction
        (2 decimals by default), so values that only differ beyond it count as equal.
        """
        precision = self._type_precision
        p = self._points
        a = _to_fixed(p[0].distance(p[1]), precision)
        b = _to_fixed(p[1].distance(p[2]), precision)
        c = _to_fixed(p[2].distance(p[0]), precision)
        logger.debug(f"Edge lengths for {self}: {a}, {b}, {c}")

        if a == b == c:
            return "equilateral triangle"
        if a == b or a == c or b == c:
            return "isosceles triangle"
        return "scalene triangle"


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    triangles = [
        Triangle(Point(0, 0), Point(1, 0), Point(0.5, 0.866)),
        Triangle(Point(0, 0), Point(2, 0), Point(1, 5), "red", False),
        Triangle(Point(0, 0), Point(2, 0), Point(5, 7)),
    ]
    for triangle in triangles:
        print(f"{triangle}: {triangle.get_type()}, perimeter {triangle.get_perimeter():.2f}")

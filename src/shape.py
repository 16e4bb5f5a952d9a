# Geoshapes
# Copyright 2025 - Geoshapes authors

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from preferences import get_global_preferences


class ValidationError(ValueError):
    """Raised when a shape is built from invalid vertices."""


@dataclass(frozen=True)
class Point:
    """Represents a point in 2D space.

    Using a frozen dataclass makes instances immutable, hashable, and
    provides an __eq__ method automatically.
    """

    x: float = 0
    y: float = 0

    def __str__(self):
        return f"({self.x}, {self.y})"

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def distance(self, other: Union["Point", float, None] = None, y: float | None = None) -> float:
        """Returns the Euclidean distance to another point.

        Accepts either nothing (distance to the origin), a Point, or a pair of
        raw coordinates. When only x is given, y defaults to 0.
        """
        if other is None:
            x2, y2 = 0, 0
        elif isinstance(other, Point):
            x2, y2 = other.x, other.y
        else:
            x2, y2 = other, (0 if y is None else y)
        return math.hypot(x2 - self.x, y2 - self.y)


class Shape(ABC):
    """An abstract base class for polygons defined by their vertices.

    The vertices are stored in insertion order and the polygon is considered
    closed: the last vertex connects back to the first one.
    By setting __hash__ = None, subclasses are unhashable by default.
    """

    MIN_POINTS = 3

    __hash__ = None

    def __init__(self, points: list[Point], color: str | None = None, filled: bool | None = None):
        """Initializes the Shape with a list of points.

        A defensive copy of the points is made to prevent external
        modifications to the list from affecting the Shape's state.
        An empty color and a missing filled value are taken from the global preferences.
        """
        if len(points) < self.MIN_POINTS:
            raise ValidationError(
                f"Array of `points` should contain at least {self.MIN_POINTS} points, "
                f"got {len(points)}"
            )

        prefs = get_global_preferences()
        self._points = list(points)  # Defensive copy
        self._color = color or prefs.get_default_color()
        self._filled = prefs.get_default_filled() if filled is None else filled

    def __str__(self):
        filled = "filled" if self._filled else "not filled"
        points = ", ".join(str(p) for p in self._points)
        return f"A Shape with color of {self._color} and {filled}. Points: {points}."

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._points == other._points
            and self._color == other._color
            and self._filled == other._filled
        )

    def get_perimeter(self) -> float:
        # Pair each vertex with the next one, wrapping around to close the polygon
        next_points = self._points[1:] + self._points[:1]
        return sum(a.distance(b) for a, b in zip(self._points, next_points))

    @abstractmethod
    def get_type(self) -> str:
        """Returns a human-readable category, e.g. "scalene triangle"."""
        raise NotImplementedError

    @property
    def points(self) -> list[Point]:
        return list(self._points)

    @property
    def color(self) -> str:
        return self._color

    @property
    def filled(self) -> bool:
        return self._filled

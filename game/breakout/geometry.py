"""
Integer geometry for the breakout rules engine
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Vector:
    """Integer displacement / velocity"""
    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: int) -> Vector:
        return self.scaled(factor)

    def scaled(self, factor: int) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def dot(self, other: Vector) -> int:
        return self.x * other.x + self.y * other.y

    @property
    def square_length(self) -> int:
        return self.x * self.x + self.y * self.y

    def is_unit(self) -> bool:
        return self.square_length == 1

    def mirror_over(self, normal: Vector) -> Vector:
        """Reflect this vector over the plane with the given unit normal"""
        return self - normal.scaled(2 * self.dot(normal))


ZERO = Vector(0, 0)
UP = Vector(0, -1)
DOWN = Vector(0, 1)
LEFT = Vector(-1, 0)
RIGHT = Vector(1, 0)


@dataclass(frozen=True)
class Point:
    """Integer location on the field"""
    x: int
    y: int

    def __add__(self, other: Vector) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union[Point, Vector]):
        # point - point is a displacement, point - vector is a point
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def is_up_and_left_from(self, other: Point) -> bool:
        return self.x <= other.x and self.y <= other.y


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left and bottom-right corners"""
    top_left: Point
    bottom_right: Point

    def __post_init__(self):
        if not self.top_left.is_up_and_left_from(self.bottom_right):
            raise ValueError(
                f"Top-left {self.top_left} is not up and left from {self.bottom_right}"
            )

    @property
    def left(self) -> int:
        return self.top_left.x

    @property
    def right(self) -> int:
        return self.bottom_right.x

    @property
    def top(self) -> int:
        return self.top_left.y

    @property
    def bottom(self) -> int:
        return self.bottom_right.y

    @property
    def center(self) -> Point:
        return Point(
            self.left + (self.right - self.left) // 2,
            self.top + (self.bottom - self.top) // 2,
        )

    def contains(self, point: Point) -> bool:
        return self.top_left.is_up_and_left_from(point) and point.is_up_and_left_from(self.bottom_right)

    def contains_rect(self, other: Rect) -> bool:
        return self.contains(other.top_left) and self.contains(other.bottom_right)

    def overlap(self, other: Rect) -> Optional[Vector]:
        return overlap(self, other)


def overlap(a: Rect, b: Rect) -> Optional[Vector]:
    """
    Detect on which side of `a` it has crossed into `b`.

    Returns the unit normal of that side (RIGHT, LEFT, DOWN or UP), or None.
    Sides are checked in that fixed order and the first match wins, so an
    exact corner contact always resolves to the horizontal normal first.
    A side only counts when the center of `a` projects onto the face of `b`,
    which filters out corners merely clipping each other.
    """
    center = a.center
    within_rows = b.top <= center.y <= b.bottom
    within_columns = b.left <= center.x <= b.right

    # a's right edge crossed b's left edge
    if a.right >= b.left and a.left < b.left and within_rows:
        return RIGHT
    # a's left edge crossed b's right edge
    if a.left <= b.right and a.right > b.right and within_rows:
        return LEFT
    # a's bottom edge crossed b's top edge
    if a.bottom >= b.top and a.top < b.top and within_columns:
        return DOWN
    # a's top edge crossed b's bottom edge
    if a.top <= b.bottom and a.bottom > b.bottom and within_columns:
        return UP
    return None

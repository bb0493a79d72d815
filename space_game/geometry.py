"""
Axis-aligned bounding box helpers
"""

from typing import NamedTuple, Protocol, Tuple


class Box(Protocol):
    """
    Anything centred at (x, y) with half-extents (w, h)
    """

    x: float
    y: float
    w: float
    h: float


class Field(NamedTuple):
    """
    Size of the play field in game-space pixels
    """

    width: int
    height: int


def bounds(box: Box) -> Tuple[float, float, float, float]:
    """
    Borders of a box

    :param box: Box to measure
    :type box: Box

    :return: (left, right, top, bottom)
    :rtype: tuple
    """
    return box.x - box.w, box.x + box.w, box.y - box.h, box.y + box.h


def overlaps(a: Box, b: Box) -> bool:
    """
    Check whether two boxes overlap

    Touching borders count as an overlap. The test is symmetric and a box
    always overlaps itself.

    :param a: First box
    :type a: Box

    :param b: Second box
    :type b: Box

    :return: True if both the horizontal and vertical intervals intersect
    :rtype: bool
    """
    return abs(a.x - b.x) <= a.w + b.w and abs(a.y - b.y) <= a.h + b.h


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value between low and high bounds"""
    return low if value < low else high if value > high else value

"""Axis-aligned bounding box overlap tests."""

from __future__ import annotations


def aabb(ax: float, ay: float, aw: float, ah: float,
         bx: float, by: float, bw: float, bh: float) -> bool:
    """Return True when rectangle A and rectangle B overlap.

    Edges that only touch do not count as an overlap.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def collides(a, b) -> bool:
    """AABB test for any two records exposing x, y, width and height."""
    return aabb(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)

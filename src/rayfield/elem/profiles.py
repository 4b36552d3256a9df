#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Module for ray intersections with the profiles of 2d surfaces

    The shapes used by optical surfaces are circles, line segments and
    simple polygons built from segments. The intersection functions take the
    ray as a start point and a unit direction and report the distance to the
    hit along with the point of incidence.

.. Created on Tue Mar  3 13:18:57 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from math import sqrt
from typing import Optional

from rayfield.coord_geometry_types import Vec2d, Dir2d, Pts2d
from rayfield.util.misc_math import cross2d, perpendicular, normalize

Hit = Optional[tuple[float, Vec2d]]


def intersect_circle(center: Vec2d, radius: float, p0: Vec2d, d: Dir2d,
                     eps: float = 1.0e-9) -> Hit:
    ''' Intersect a circle, starting from an arbitrary point.

    Args:
        center: center of the circle
        radius: radius of the circle
        p0: start point of the ray
        d:  unit direction of the ray
        eps: hits closer than eps to p0 are ignored

    Returns:
        tuple: distance to intersection point *s1*, intersection point *p*,
        or None if the ray misses the circle
    '''
    if radius <= 0.0:
        return None
    w = p0 - center
    # |w + s*d|**2 = r**2 with |d| = 1
    b = np.dot(w, d)
    c = np.dot(w, w) - radius*radius
    disc = b*b - c
    if disc < 0.0:
        return None
    sq = sqrt(disc)
    for s in (-b - sq, -b + sq):
        if s > eps:
            return s, p0 + s*d
    return None


def intersect_segment(a: Vec2d, b: Vec2d, p0: Vec2d, d: Dir2d,
                      eps: float = 1.0e-9) -> Hit:
    ''' Intersect the line segment from a to b, starting from p0.

    Solves p0 + s*d = a + u*(b - a) with cross products. The hit is valid
    for 0 <= u <= 1 and s > eps.

    Returns:
        tuple: distance to intersection point *s*, intersection point *p*,
        or None if the ray is parallel to or misses the segment
    '''
    e = b - a
    denom = cross2d(d, e)
    if abs(denom) < 1.0e-15:
        return None
    w = a - p0
    s = cross2d(w, e)/denom
    u = cross2d(w, d)/denom
    if u < 0.0 or u > 1.0 or s <= eps:
        return None
    return s, p0 + s*d


def signed_area(pts: Pts2d) -> float:
    """ shoelace area of the polygon pts, positive if counterclockwise """
    x = pts[:, 0]
    y = pts[:, 1]
    return 0.5*float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def segments_cross(a1, a2, b1, b2) -> bool:
    """ True if the closed segments a1-a2 and b1-b2 share a point """
    def orient(p, q, r):
        return cross2d(q - p, r - p)

    def on_segment(p, q, r):
        return (min(p[0], q[0]) <= r[0] <= max(p[0], q[0]) and
                min(p[1], q[1]) <= r[1] <= max(p[1], q[1]))

    o1 = orient(a1, a2, b1)
    o2 = orient(a1, a2, b2)
    o3 = orient(b1, b2, a1)
    o4 = orient(b1, b2, a2)
    if (o1*o2 < 0.0) and (o3*o4 < 0.0):
        return True
    if o1 == 0.0 and on_segment(a1, a2, b1):
        return True
    if o2 == 0.0 and on_segment(a1, a2, b2):
        return True
    if o3 == 0.0 and on_segment(b1, b2, a1):
        return True
    if o4 == 0.0 and on_segment(b1, b2, a2):
        return True
    return False


def polygon_edges(pts: Pts2d):
    """ iterate over the (start, end) vertex pairs of a closed polygon """
    num = len(pts)
    for i in range(num):
        yield pts[i], pts[(i + 1) % num]


def is_simple_polygon(pts: Pts2d) -> bool:
    """ True if no two non-adjacent edges of the polygon touch """
    edges = list(polygon_edges(pts))
    num = len(edges)
    for i in range(num):
        for j in range(i + 1, num):
            if j == i + 1 or (i == 0 and j == num - 1):
                continue
            if segments_cross(*edges[i], *edges[j]):
                return False
    return True


def edge_normals(pts: Pts2d) -> Pts2d:
    """ outward unit normals of the polygon edges, for either winding """
    # perpendicular() turns an edge to the left, i.e. inward for ccw
    sgn = -1.0 if signed_area(pts) > 0.0 else 1.0
    return np.array([sgn*normalize(perpendicular(b - a))
                     for a, b in polygon_edges(pts)])


def circle_points(center: Vec2d, radius: float, steps: int = 64) -> Pts2d:
    """ Return a closed polyline approximating the circle. """
    t = np.linspace(0.0, 2*np.pi, steps + 1)
    return np.column_stack((center[0] + radius*np.cos(t),
                            center[1] + radius*np.sin(t)))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" miscellaneous functions for working with 2d numpy vectors and floats

    Points and directions are plain 2 element numpy arrays, so addition,
    subtraction and scaling come from numpy. The functions here supply the
    rest of the 2d vector algebra used by the ray tracing code.

.. Created on Mon Mar  2 11:27:06 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from numpy.linalg import norm
from math import sqrt, asin, pi, degrees, radians, cos, sin

from rayfield.coord_geometry_types import Vec2d, Dir2d, Mat2d, V2d


def vec2d(x: float, y: float) -> Vec2d:
    """ return a float numpy array for the point or vector (x, y) """
    return np.array([x, y], dtype=np.float64)


def dot(v1: Vec2d, v2: Vec2d) -> float:
    return float(v1[0]*v2[0] + v1[1]*v2[1])


def cross2d(v1: Vec2d, v2: Vec2d) -> float:
    """ z component of the cross product of v1 and v2 """
    return float(v1[0]*v2[1] - v1[1]*v2[0])


def length(v: Vec2d) -> float:
    return float(norm(v))


def distance(pt0: Vec2d, pt1: Vec2d) -> float:
    return sqrt(distance_sqr_2d(pt0, pt1))


def is_degenerate(v: Vec2d, eps: float = 1e-15) -> bool:
    """ True if v is too short to define a direction """
    return length(v) <= eps


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def perpendicular(v: Vec2d) -> Vec2d:
    """ return v rotated by +90 degrees """
    return np.array([-v[1], v[0]])


def angle(v: Vec2d) -> float:
    """ return the angle of v from the +x axis in degrees, [0, 360)

    The angle is found from the arcsine of y/length and corrected for the
    quadrant with the sign of x. A zero vector returns 0.
    """
    lngth = length(v)
    if lngth == 0.0:
        return 0.0
    ang = asin(min(1.0, max(-1.0, v[1]/lngth)))
    if v[0] < 0.0:
        ang = pi - ang
    if ang < 0.0:
        ang += 2*pi
    deg = degrees(ang)
    return 0.0 if deg >= 360.0 else deg


def rot2d(angle_deg: float) -> Mat2d:
    """ counterclockwise rotation matrix for angle_deg """
    a = radians(angle_deg)
    c, s = cos(a), sin(a)
    return np.array([[c, -s],
                     [s, c]])


def rotate_about(pts: V2d, center: Vec2d, angle_deg: float):
    """ rotate a point, or an N x 2 array of points, about center """
    rot_mat = rot2d(angle_deg)
    pts = np.asarray(pts, dtype=np.float64)
    return (pts - center).dot(rot_mat.T) + center


def distance_sqr_2d(pt0, pt1):
    """ return distance squared between 2d points pt0 and pt1 """
    return (pt0[0] - pt1[0])**2 + (pt0[1] - pt1[1])**2


def perpendicular_distance_2d(pt, pt1, pt2):
    """ return perpendicular distance of pt from the line between pt1 and pt2
    """
    return (((pt2[0] - pt1[0])*(pt1[1] - pt[1])
            - (pt1[0] - pt[0])*(pt2[1] - pt1[1]))
            / sqrt(distance_sqr_2d(pt2, pt1)))


def distance_to_segment(pt: Vec2d, pt1: Vec2d, pt2: Vec2d) -> float:
    """ return the distance of pt from the segment between pt1 and pt2 """
    e1 = pt2 - pt1
    len_sqr_e1 = e1[0]**2 + e1[1]**2
    if len_sqr_e1 == 0.0:
        return distance(pt, pt1)
    t = np.dot(e1, pt - pt1)/len_sqr_e1
    if t <= 0.0:
        return distance(pt, pt1)
    elif t >= 1.0:
        return distance(pt, pt2)
    return abs(perpendicular_distance_2d(pt, pt1, pt2))


def unit_dir(d: V2d) -> Dir2d:
    """ return d as a unit length float array, d must not be degenerate """
    return normalize(np.asarray(d, dtype=np.float64))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Module for thin lens surface type

.. Created on Mon Mar  9 14:05:38 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from math import copysign

import rayfield.optical.model_constants as mc
from rayfield.elem.profiles import intersect_segment
from rayfield.elem.surface import OpticalSurface, as_point
from rayfield.raytr.ray import Ray
from rayfield.raytr.traceerror import InvalidGeometryError
from rayfield.util.misc_math import (distance, dot, normalize,
                                     perpendicular, rotate_about)


class ThinLens(OpticalSurface):
    """ Ideal lens of zero thickness spanning the segment a -> b

    A ray crossing the lens at signed height h from its center leaves with
    slope m - h/f with respect to the lens axis, where m is the incoming
    slope. Rays parallel to the axis therefore meet at the focal point a
    distance f past the lens. A negative focal length gives a diverging
    lens.
    """
    label = 'Thin lens'

    def __init__(self, a, b, focal_length, **kwargs):
        super().__init__(**kwargs)
        self.a = as_point(a, 'a')
        self.b = as_point(b, 'b')
        if distance(self.a, self.b) == 0.0:
            raise InvalidGeometryError("lens endpoints coincide")
        if focal_length == 0.0:
            raise InvalidGeometryError("focal length must be nonzero")
        self.focal_length = float(focal_length)

    def __repr__(self):
        return ("{!s}(a={!r}, b={!r}, focal_length={!r})"
                .format(type(self).__name__, self.a.tolist(),
                        self.b.tolist(), self.focal_length))

    def definition(self):
        defn = super().definition()
        defn.update(a=self.a, b=self.b, focal_length=self.focal_length)
        return defn

    def listobj_str(self):
        return (f"{self.label}: {self.position()}"
                f"   f={self.focal_length:.6g}\n")

    @property
    def power(self):
        return 1.0/self.focal_length

    @property
    def axis(self):
        """ unit vector along the optical axis, normal to the lens """
        return normalize(perpendicular(self.b - self.a))

    def intersect(self, ray):
        hit = intersect_segment(self.a, self.b, ray.origin, ray.direction,
                                eps=mc.EPS)
        return None if hit is None else hit[1]

    def generate_ray(self, ray, scene=None):
        if not self.accepts(ray, scene):
            return None
        pt = ray.intersection_point
        axis = self.axis
        tngt = normalize(self.b - self.a)
        ht = dot(pt - self.center(), tngt)
        d_axis = dot(ray.direction, axis)
        if d_axis == 0.0:
            return None
        slope = dot(ray.direction, tngt)/abs(d_axis)
        slope_out = slope - ht/self.focal_length
        d_out = copysign(1.0, d_axis)*axis + slope_out*tngt
        return Ray(pt, normalize(d_out),
                   intensity=ray.intensity*self.efficiency, parent=ray)

    def focal_points(self):
        """ the two focal points, on either side of the lens """
        c = self.center()
        f = self.focal_length*self.axis
        return c + f, c - f

    def boundary(self):
        return np.array([self.a, self.b])

    def position(self):
        c = self.center()
        return f"({c[0]:.6g}, {c[1]:.6g})"

    def move_by(self, dx, dy):
        delta = np.array([dx, dy], dtype=np.float64)
        self.a = self.a + delta
        self.b = self.b + delta

    def rot_by(self, angle_deg):
        self.a, self.b = rotate_about(self.boundary(), self.center(),
                                      angle_deg)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Ray segments and the propagation chains they form

    A :class:`Ray` is a directed segment with an intensity. A root ray is
    created by an emitter; every other ray is generated by a surface from the
    ray that hit it. Each ray owns the next segment of its chain, its
    *child*, while the *parent* reference only points back up the chain.

.. Created on Thu Mar  5 09:41:12 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from matplotlib.path import Path

import rayfield.optical.model_constants as mc
from rayfield.raytr.traceerror import InvalidGeometryError
from rayfield.util.colors import RayStyle
from rayfield.util.misc_math import (angle, distance, distance_to_segment,
                                     is_degenerate, unit_dir)


class Ray:
    """ A segment of a ray chain.

    Attributes:
        origin: start point of the segment
        direction: unit direction of the segment
        intensity: non-negative brightness carried by the segment
        parent: the ray this one was generated from, None for a root ray
        intersection_point: cached point where the ray hits a surface
        intersection_object: cached surface hit by the ray, or None
        new_intersecting_object: True if the cached intersection is stale
            and the child must be regenerated
        focal_point: estimated focus of the chain, see
            :meth:`~.Scene.find_focal_point`
        style: :class:`~.RayStyle` used by a drawing layer
    """

    def __init__(self, origin, direction, intensity=1.0, parent=None,
                 style=None):
        self.origin = np.array(origin, dtype=np.float64)
        d = np.array(direction, dtype=np.float64)
        if self.origin.shape != (2,) or d.shape != (2,):
            raise InvalidGeometryError("origin and direction must be 2d")
        if is_degenerate(d):
            raise InvalidGeometryError("ray direction has zero length")
        if not intensity >= 0.0:
            raise InvalidGeometryError(
                f"ray intensity must be non-negative, got {intensity}")
        self.direction = unit_dir(d)
        self.intensity = float(intensity)
        self.parent = parent
        self._child = None
        self.intersection_point = None
        self.intersection_object = None
        self.new_intersecting_object = True
        self.focal_point = None
        if style is None:
            style = parent.style if parent is not None else RayStyle()
        self.style = style

    def __repr__(self):
        return ("{!s}(origin={!r}, direction={!r}, intensity={!r})"
                .format(type(self).__name__, self.origin.tolist(),
                        self.direction.tolist(), self.intensity))

    def listobj_str(self):
        kind = "emitter" if self.is_emitter else "child"
        o_str = (f"{kind}: origin=({self.origin[0]:.6g}, "
                 f"{self.origin[1]:.6g})   angle={angle(self.direction):.4f}"
                 f"   intensity={self.intensity:.6g}\n")
        if self.intersection_object is not None:
            pt = self.intersection_point
            o_str += (f"  hits {self.intersection_object.label} at "
                      f"({pt[0]:.6g}, {pt[1]:.6g})\n")
        return o_str

    def __json_encode__(self):
        return {'origin': self.origin, 'direction': self.direction,
                'intensity': self.intensity, 'style': self.style}

    def __json_decode__(self, **attrs):
        self.__init__(attrs['origin'], attrs['direction'],
                      intensity=attrs.get('intensity', 1.0),
                      style=attrs.get('style'))

    @property
    def child(self):
        return self._child

    @property
    def is_emitter(self):
        return self.parent is None

    def set_child(self, ray):
        """ Attach ray as the next segment, discarding the current one. """
        if ray is self._child:
            return
        if self._child is not None:
            self._child.parent = None
            self._child.detach_chain()
        self._child = ray
        if ray is not None:
            ray.parent = self

    def detach_chain(self):
        """ Release every segment downstream of this ray. """
        cur = self._child
        self._child = None
        while cur is not None:
            nxt = cur._child
            cur._child = None
            cur.parent = None
            cur = nxt

    def invalidate(self):
        """ Mark the cached intersection as stale. """
        self.new_intersecting_object = True

    def set_intersection(self, surface, pt):
        self.intersection_object = surface
        self.intersection_point = pt
        self.new_intersecting_object = False

    def move_to(self, origin):
        self.origin = np.array(origin, dtype=np.float64)
        self.invalidate()

    def set_direction(self, direction):
        d = np.array(direction, dtype=np.float64)
        if is_degenerate(d):
            raise InvalidGeometryError("ray direction has zero length")
        self.direction = unit_dir(d)
        self.invalidate()

    def root(self):
        """ Return the emitter ray at the head of this ray's chain. """
        r = self
        while r.parent is not None:
            r = r.parent
        return r

    def chain(self):
        """ Iterate over this ray and all the rays downstream of it. """
        r = self
        while r is not None:
            yield r
            r = r._child

    def end_point(self, far_distance=mc.FAR_DISTANCE):
        """ The point of incidence, or a far point if nothing is hit. """
        if self.intersection_point is not None:
            return self.intersection_point
        return self.origin + far_distance*self.direction

    def segment_length(self, far_distance=mc.FAR_DISTANCE):
        return distance(self.origin, self.end_point(far_distance))

    def path(self, far_distance=mc.FAR_DISTANCE):
        """ Return the traced segment as a matplotlib Path. """
        return Path(np.array([self.origin, self.end_point(far_distance)]),
                    [Path.MOVETO, Path.LINETO])

    def distance_to_point(self, pt, far_distance=mc.FAR_DISTANCE):
        """ Distance from pt to the nearest segment of the chain. """
        pt = np.asarray(pt, dtype=np.float64)
        return min(distance_to_segment(pt, r.origin,
                                       r.end_point(far_distance))
                   for r in self.chain())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Top level scene model

    A :class:`Scene` owns the emitted (root) rays and the optical surfaces
    of a 2d optical layout. :meth:`Scene.recalculate` rebuilds every ray
    chain from its root: each ray is intersected with all the surfaces, the
    nearest surface generates the next ray, and so on until a ray hits
    nothing, a surface ends the chain or the depth cap is reached.

    Both collections keep insertion order; the position of a ray or a
    surface is the index used by :meth:`Scene.get_ray`,
    :meth:`Scene.remove_surface`, etc.

.. Created on Fri Mar  6 11:08:28 2026

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np
from scipy.linalg import lstsq, LinAlgError

import rayfield.optical.model_constants as mc
from rayfield.elem.surface import OpticalSurface
from rayfield.raytr.ray import Ray
from rayfield.raytr.raytrace import nearest_intersection
from rayfield.raytr.traceerror import InvalidGeometryError
from rayfield.util.misc_math import cross2d

logger = logging.getLogger(__name__)


class Scene:
    """ Container of rays and optical surfaces

    Attributes:
        rays: list of root :class:`~.Ray` instances, in insertion order
        surfaces: list of :class:`~.OpticalSurface` instances, in insertion
            order
        min_intensity: chains end at rays dimmer than this
        max_depth: maximum number of segments in a chain
        far_distance: drawn length of a segment that hits nothing
        track_focal_point: if True, :meth:`recalculate` also runs
            :meth:`find_focal_point`
        collect_focal_points: if True, found focal points are appended to
            :attr:`focal_trail`
    """

    def __init__(self, index_of_refraction=mc.AMBIENT_INDEX,
                 min_intensity=mc.MIN_INTENSITY,
                 max_depth=mc.MAX_CHAIN_DEPTH,
                 far_distance=mc.FAR_DISTANCE,
                 track_focal_point=False, collect_focal_points=False):
        if not index_of_refraction > 0.0:
            raise InvalidGeometryError(
                f"index of refraction must be positive, "
                f"got {index_of_refraction}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if not min_intensity >= 0.0:
            raise ValueError(
                f"min_intensity must be non-negative, got {min_intensity}")
        if not far_distance > 0.0:
            raise ValueError(
                f"far_distance must be positive, got {far_distance}")
        self.rays = []
        self.surfaces = []
        self._index_of_refraction = float(index_of_refraction)
        self.min_intensity = min_intensity
        self.max_depth = max_depth
        self.far_distance = far_distance
        self.track_focal_point = track_focal_point
        self.collect_focal_points = collect_focal_points
        self.focal_trail = []

    def __repr__(self):
        return ("{!s}(rays={}, surfaces={}, index_of_refraction={!r})"
                .format(type(self).__name__, len(self.rays),
                        len(self.surfaces), self.index_of_refraction))

    def __json_encode__(self):
        return {'index_of_refraction': self.index_of_refraction,
                'min_intensity': self.min_intensity,
                'max_depth': self.max_depth,
                'far_distance': self.far_distance,
                'track_focal_point': self.track_focal_point,
                'collect_focal_points': self.collect_focal_points,
                'rays': self.rays,
                'surfaces': self.surfaces}

    def __json_decode__(self, **attrs):
        rays = attrs.pop('rays', [])
        surfaces = attrs.pop('surfaces', [])
        self.__init__(**attrs)
        for srf in surfaces:
            self.add_surface(srf)
        for r in rays:
            self.add_ray(r)
        self.recalculate()

    def listobj_str(self):
        o_str = (f"ambient index={self.index_of_refraction}   "
                 f"min intensity={self.min_intensity}   "
                 f"max depth={self.max_depth}\n")
        o_str += f"surfaces: {len(self.surfaces)}\n"
        for i, srf in enumerate(self.surfaces):
            o_str += f"{i}: " + srf.listobj_str()
        o_str += f"rays: {len(self.rays)}   segments: {self.rays_count()}\n"
        for i, r in enumerate(self.rays):
            o_str += f"{i}: " + r.listobj_str()
        return o_str

    @property
    def index_of_refraction(self):
        """ refractive index of the ambient medium """
        return self._index_of_refraction

    @index_of_refraction.setter
    def index_of_refraction(self, n):
        if not n > 0.0:
            raise InvalidGeometryError(
                f"index of refraction must be positive, got {n}")
        self._index_of_refraction = float(n)
        self.recalculate()

    def add_ray(self, r):
        """ Add a root ray to the scene. Adding a ray twice is ignored. """
        if not isinstance(r, Ray):
            raise TypeError(f"expected a Ray, got {type(r).__name__}")
        if r.parent is not None:
            raise InvalidGeometryError("only root rays can be added")
        if not any(r is ray for ray in self.rays):
            self.rays.append(r)

    def add_surface(self, srf):
        """ Add an optical surface. Adding a surface twice is ignored. """
        if not isinstance(srf, OpticalSurface):
            raise TypeError(
                f"expected an OpticalSurface, got {type(srf).__name__}")
        if not any(srf is s for s in self.surfaces):
            self.surfaces.append(srf)

    def remove_ray(self, index):
        """ Remove the root ray at index, releasing its chain. """
        r = self.rays.pop(index)
        r.detach_chain()
        r.set_intersection(None, None)
        r.invalidate()
        return r

    def remove_surface(self, index):
        """ Remove the surface at index.

        Chains that hit the surface are cut at the ray hitting it, which is
        marked stale; call :meth:`recalculate` to rebuild them.
        """
        srf = self.surfaces.pop(index)
        for root in self.rays:
            for r in root.chain():
                if r.intersection_object is srf:
                    r.detach_chain()
                    r.set_intersection(None, None)
                    r.invalidate()
                    break
        return srf

    def get_ray(self, index):
        return self.rays[index]

    def get_surface(self, index):
        return self.surfaces[index]

    def who_is_surface(self, index):
        return self.surfaces[index].label

    def clear(self):
        """ Remove all rays and surfaces. """
        for r in self.rays:
            r.detach_chain()
        self.rays = []
        self.surfaces = []
        self.focal_trail = []

    def move_surface(self, index, dx, dy):
        self.surfaces[index].move_by(dx, dy)
        self.recalculate()

    def rotate_surface(self, index, angle_deg):
        self.surfaces[index].rot_by(angle_deg)
        self.recalculate()

    def recalculate(self):
        """ Rebuild every ray chain from its root ray. """
        for i in range(len(self.rays)):
            self.recalc_ray(i)
        logger.debug("recalculated %d chains, %d segments",
                     len(self.rays), self.rays_count())

        if self.track_focal_point:
            self.find_focal_point()

    def recalc_ray(self, n):
        """ Rebuild the chain of root ray n. Out of range n is ignored. """
        if n < 0 or n >= len(self.rays):
            return

        cur_ray = self.rays[n]
        cur_ray.invalidate()
        depth = 1
        while cur_ray is not None:
            if cur_ray.new_intersecting_object:
                srf, pt = nearest_intersection(cur_ray, self.surfaces)
                cur_ray.set_intersection(srf, pt)
                new_ray = None
                if srf is not None:
                    if depth < self.max_depth:
                        new_ray = srf.generate_ray(cur_ray, self)
                    else:
                        logger.warning("chain of ray %d cut at %d segments",
                                       n, depth)
                cur_ray.set_child(new_ray)
                if new_ray is None and depth < self.max_depth:
                    logger.debug("chain of ray %d ends at %d segments, %s",
                                 n, depth, "no surface hit" if srf is None
                                 else f"terminated by {srf.label}")
            cur_ray = cur_ray.child
            depth += 1

    def chains(self):
        """ Iterate over the chains, each as a list of rays. """
        for r in self.rays:
            yield list(r.chain())

    def rays_count(self):
        """ total number of ray segments in all chains """
        return sum(1 for r in self.rays for _ in r.chain())

    def describe(self):
        """ Return a "label, position" line for each surface. """
        return [f"{srf.label}, {srf.position()}" for srf in self.surfaces]

    def rays_near(self, pt, tolerance):
        """ indices of the chains passing within tolerance of pt """
        return [i for i, r in enumerate(self.rays)
                if r.distance_to_point(pt, self.far_distance) <= tolerance]

    def surfaces_near(self, pt, tolerance):
        """ indices of the surfaces within tolerance of pt """
        return [i for i, srf in enumerate(self.surfaces)
                if srf.distance_to_point(pt) <= tolerance]

    def find_focal_point(self):
        """ Estimate where the first and last chains cross.

        The terminal segments of the chains of the first and last root rays
        are extended as lines and intersected in the least squares sense.
        At most FOCAL_SEARCH_DEPTH segments are walked down each chain.

        Returns:
            the focal point, or None if there are fewer than two rays or
            the terminal segments are parallel
        """
        if len(self.rays) < 2:
            return None
        r1 = terminal_ray(self.rays[0])
        r2 = terminal_ray(self.rays[-1])
        p1, v1 = r1.origin, r1.direction
        p2, v2 = r2.origin, r2.direction
        if abs(cross2d(v1, v2)) < 1.0e-12:
            logger.debug("no focal point, terminal rays are parallel")
            return None

        A = np.array([[v1[0], -v2[0]],
                      [v1[1], -v2[1]]])
        b = p2 - p1
        try:
            x, *_ = lstsq(A, b)
        except LinAlgError as err:
            logger.debug("no focal point: %s", err)
            return None
        fp = p1 + v1*x[0]
        r1.focal_point = fp
        r2.focal_point = fp
        if self.collect_focal_points:
            self.focal_trail.append(fp)
        return fp

    def clear_focal_trail(self):
        self.focal_trail = []


def terminal_ray(r, max_depth=mc.FOCAL_SEARCH_DEPTH):
    """ Walk down the chain from r to its last ray, at most max_depth steps.
    """
    depth = 0
    while r.child is not None and depth < max_depth:
        r = r.child
        depth += 1
    return r

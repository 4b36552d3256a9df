#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Module for optical surfaces placed in a 2d scene

    The :class:`OpticalSurface` base class specifies the api that each kind
    of optical element implements:

        - :meth:`~OpticalSurface.intersect` finds where a ray hits the
          surface
        - :meth:`~OpticalSurface.generate_ray` produces the ray leaving the
          surface, or None if the chain ends there

    The concrete surfaces are :class:`Mirror`, :class:`Sphere` and
    :class:`Prism`; an ideal thin lens is provided by
    :class:`~rayfield.oprops.thinlens.ThinLens`.

.. Created on Tue Mar  3 16:12:30 2026

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from matplotlib.path import Path

import rayfield.optical.model_constants as mc
from rayfield.elem.profiles import (intersect_segment, intersect_circle,
                                    polygon_edges, edge_normals,
                                    signed_area, is_simple_polygon,
                                    circle_points)
from rayfield.raytr.raytrace import reflect_ray, refract_ray
from rayfield.raytr.traceerror import InvalidGeometryError
from rayfield.util.colors import SurfaceStyle
from rayfield.util.misc_math import (distance, distance_to_segment, dot,
                                     normalize, perpendicular, rotate_about)


def as_point(p, name):
    pt = np.array(p, dtype=np.float64)
    if pt.shape != (2,) or not np.all(np.isfinite(pt)):
        raise InvalidGeometryError(f"{name} must be a finite 2d point")
    return pt


def _index(n):
    if not n > 0.0:
        raise InvalidGeometryError(
            f"index of refraction must be positive, got {n}")
    return float(n)


def scene_params(scene):
    """ minimum intensity and ambient index from scene, or the defaults """
    if scene is None:
        return mc.MIN_INTENSITY, mc.AMBIENT_INDEX
    return scene.min_intensity, scene.index_of_refraction


class OpticalSurface:
    """ Base class for the optical elements of a scene

    Attributes:
        label: display name of the surface type
        efficiency: fraction of the incoming intensity passed on to the
            generated ray
        style: :class:`~.SurfaceStyle` used by a drawing layer
    """
    label = 'Optic'

    def __init__(self, efficiency=1.0, style=None):
        if not 0.0 < efficiency <= 1.0:
            raise InvalidGeometryError(
                f"efficiency must be in (0, 1], got {efficiency}")
        self.efficiency = float(efficiency)
        self.style = SurfaceStyle() if style is None else style

    def __repr__(self):
        return "{!s}()".format(type(self).__name__)

    def definition(self):
        """ constructor arguments that recreate this surface """
        return {'efficiency': self.efficiency, 'style': self.style}

    def __json_encode__(self):
        return self.definition()

    def __json_decode__(self, **attrs):
        self.__init__(**attrs)

    def listobj_str(self):
        return f"{self.label}: {self.position()}   eff={self.efficiency}\n"

    def intersect(self, ray):
        ''' Intersect the surface with ray.

        Returns:
            the point of incidence, or None if the ray misses the surface
        '''
        return None

    def generate_ray(self, ray, scene=None):
        ''' Return the ray leaving the surface, or None to end the chain.

        Args:
            ray: the incoming :class:`~.Ray`; its cached intersection must
                be on this surface
            scene: the :class:`~.Scene` supplying the minimum intensity and
                the ambient refractive index
        '''
        return None

    def accepts(self, ray, scene=None):
        """ True if ray is bright enough and was found to hit this surface """
        min_intensity, _ = scene_params(scene)
        if ray.intensity < min_intensity:
            return False
        if ray.intersection_object is not self:
            return False
        return ray.intersection_point is not None

    def boundary(self):
        """ Return the outline of the surface as an N x 2 array. """
        raise NotImplementedError

    def outline(self):
        """ Return the outline of the surface as a matplotlib Path. """
        return Path(self.boundary())

    def center(self):
        return self.boundary().mean(axis=0)

    def position(self):
        c = self.center()
        return f"({c[0]:.6g}, {c[1]:.6g})"

    def move_by(self, dx, dy):
        raise NotImplementedError

    def rot_by(self, angle_deg):
        """ Rotate counterclockwise by angle_deg about center(). """
        raise NotImplementedError

    def distance_to_point(self, pt):
        pt = np.asarray(pt, dtype=np.float64)
        bndry = self.boundary()
        return min(distance_to_segment(pt, a, b)
                   for a, b in zip(bndry[:-1], bndry[1:]))


class Mirror(OpticalSurface):
    """ Flat mirror between endpoints a and b

    A two sided mirror reflects from both faces. A one sided mirror only
    reflects rays arriving on the left side of the direction a -> b, i.e.
    the side its :attr:`normal` points to; rays hitting the back face end
    their chain.
    """
    label = 'Mirror'

    def __init__(self, a, b, two_sided=True, **kwargs):
        super().__init__(**kwargs)
        self.a = as_point(a, 'a')
        self.b = as_point(b, 'b')
        if distance(self.a, self.b) == 0.0:
            raise InvalidGeometryError("mirror endpoints coincide")
        self.two_sided = two_sided

    def __repr__(self):
        return ("{!s}(a={!r}, b={!r}, two_sided={!r})"
                .format(type(self).__name__, self.a.tolist(),
                        self.b.tolist(), self.two_sided))

    def definition(self):
        defn = super().definition()
        defn.update(a=self.a, b=self.b, two_sided=self.two_sided)
        return defn

    def listobj_str(self):
        sides = "two sided" if self.two_sided else "one sided"
        return (f"{self.label}: {self.position()}   {sides}"
                f"   eff={self.efficiency}\n")

    @property
    def normal(self):
        return normalize(perpendicular(self.b - self.a))

    def intersect(self, ray):
        hit = intersect_segment(self.a, self.b, ray.origin, ray.direction,
                                eps=mc.EPS)
        return None if hit is None else hit[1]

    def generate_ray(self, ray, scene=None):
        if not self.accepts(ray, scene):
            return None
        nrml = self.normal
        if not self.two_sided and dot(ray.direction, nrml) > 0.0:
            return None
        return reflect_ray(ray, ray.intersection_point, nrml,
                           efficiency=self.efficiency)

    def boundary(self):
        return np.array([self.a, self.b])

    def position(self):
        return (f"({self.a[0]:.6g}, {self.a[1]:.6g}) - "
                f"({self.b[0]:.6g}, {self.b[1]:.6g})")

    def move_by(self, dx, dy):
        delta = np.array([dx, dy], dtype=np.float64)
        self.a = self.a + delta
        self.b = self.b + delta

    def rot_by(self, angle_deg):
        self.a, self.b = rotate_about(self.boundary(), self.center(),
                                      angle_deg)


class Sphere(OpticalSurface):
    """ Circular body of refractive material, a ball lens

    The local normal at a point of incidence is (pt - center)/radius. A ray
    travelling against it is entering the sphere and is refracted from the
    ambient index into the sphere's index; otherwise it is leaving.
    """
    label = 'Sphere'

    def __init__(self, center, radius, index_of_refraction=1.5, **kwargs):
        super().__init__(**kwargs)
        self.cntr = as_point(center, 'center')
        if not radius > 0.0:
            raise InvalidGeometryError(
                f"sphere radius must be positive, got {radius}")
        self.radius = float(radius)
        self.index_of_refraction = _index(index_of_refraction)

    def __repr__(self):
        return ("{!s}(center={!r}, radius={!r}, index_of_refraction={!r})"
                .format(type(self).__name__, self.cntr.tolist(),
                        self.radius, self.index_of_refraction))

    def definition(self):
        defn = super().definition()
        defn.update(center=self.cntr, radius=self.radius,
                    index_of_refraction=self.index_of_refraction)
        return defn

    def listobj_str(self):
        return (f"{self.label}: {self.position()}   r={self.radius:.6g}"
                f"   n={self.index_of_refraction}\n")

    def intersect(self, ray):
        hit = intersect_circle(self.cntr, self.radius, ray.origin,
                               ray.direction, eps=mc.EPS)
        return None if hit is None else hit[1]

    def generate_ray(self, ray, scene=None):
        if not self.accepts(ray, scene):
            return None
        _, n_ambient = scene_params(scene)
        pt = ray.intersection_point
        nrml = (pt - self.cntr)/self.radius
        if dot(ray.direction, nrml) < 0.0:
            n_in, n_out = n_ambient, self.index_of_refraction
        else:
            n_in, n_out = self.index_of_refraction, n_ambient
        return refract_ray(ray, pt, nrml, n_in, n_out,
                           efficiency=self.efficiency)

    def center(self):
        return self.cntr

    def boundary(self):
        return circle_points(self.cntr, self.radius)

    def outline(self):
        return Path.circle(self.cntr, self.radius)

    def move_by(self, dx, dy):
        self.cntr = self.cntr + np.array([dx, dy], dtype=np.float64)

    def rot_by(self, angle_deg):
        pass

    def distance_to_point(self, pt):
        dst = distance(np.asarray(pt, dtype=np.float64), self.cntr)
        return max(0.0, dst - self.radius)


class Prism(OpticalSurface):
    """ Simple polygon of refractive material

    The vertices may wind either way. Each edge refracts with its outward
    normal; the sign of the incident direction against that normal tells an
    entering ray from a leaving one.
    """
    label = 'Prism'

    def __init__(self, vertices, index_of_refraction=1.5, **kwargs):
        super().__init__(**kwargs)
        pts = np.array(vertices, dtype=np.float64)
        self.vertices = self._validate(pts)
        self.index_of_refraction = _index(index_of_refraction)
        self.update()

    @staticmethod
    def _validate(pts):
        if pts.ndim != 2 or pts.shape[1] != 2 or len(pts) < 3:
            raise InvalidGeometryError("a prism needs at least 3 vertices")
        if not np.all(np.isfinite(pts)):
            raise InvalidGeometryError("prism vertices must be finite")
        for a, b in polygon_edges(pts):
            if distance(a, b) == 0.0:
                raise InvalidGeometryError("prism has a repeated vertex")
        if signed_area(pts) == 0.0:
            raise InvalidGeometryError("prism has zero area")
        if not is_simple_polygon(pts):
            raise InvalidGeometryError("prism edges intersect each other")
        return pts

    def update(self):
        self.normals = edge_normals(self.vertices)
        return self

    def __repr__(self):
        return ("{!s}(vertices={!r}, index_of_refraction={!r})"
                .format(type(self).__name__, self.vertices.tolist(),
                        self.index_of_refraction))

    def definition(self):
        defn = super().definition()
        defn.update(vertices=self.vertices,
                    index_of_refraction=self.index_of_refraction)
        return defn

    def listobj_str(self):
        o_str = (f"{self.label}: {self.position()}"
                 f"   n={self.index_of_refraction}\n")
        for i, v in enumerate(self.vertices):
            o_str += f"  {i}: ({v[0]:.6g}, {v[1]:.6g})\n"
        return o_str

    def hit_edge(self, ray):
        """ Return (edge index, distance, point) of the nearest edge hit.

        Edges are tested in winding order; the first of equally near edges
        wins. Returns None if the ray misses the prism.
        """
        nearest = None
        for i, (a, b) in enumerate(polygon_edges(self.vertices)):
            hit = intersect_segment(a, b, ray.origin, ray.direction,
                                    eps=mc.EPS)
            if hit is not None and (nearest is None or hit[0] < nearest[1]):
                nearest = i, hit[0], hit[1]
        return nearest

    def intersect(self, ray):
        nearest = self.hit_edge(ray)
        return None if nearest is None else nearest[2]

    def generate_ray(self, ray, scene=None):
        if not self.accepts(ray, scene):
            return None
        nearest = self.hit_edge(ray)
        if nearest is None:
            return None
        _, n_ambient = scene_params(scene)
        i, _, pt = nearest
        nrml = self.normals[i]
        if dot(ray.direction, nrml) < 0.0:
            n_in, n_out = n_ambient, self.index_of_refraction
        else:
            n_in, n_out = self.index_of_refraction, n_ambient
        return refract_ray(ray, pt, nrml, n_in, n_out,
                           efficiency=self.efficiency)

    def center(self):
        return self.vertices.mean(axis=0)

    def boundary(self):
        return np.vstack((self.vertices, self.vertices[:1]))

    def outline(self):
        return Path(self.boundary(), closed=True)

    def move_by(self, dx, dy):
        self.vertices = self.vertices + np.array([dx, dy], dtype=np.float64)

    def rot_by(self, angle_deg):
        self.vertices = rotate_about(self.vertices, self.center(), angle_deg)
        self.update()

    def distance_to_point(self, pt):
        if self.outline().contains_point(pt):
            return 0.0
        return super().distance_to_point(pt)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar  7 10:14:36 2026

@author: Mike
"""

import logging
import unittest
import pytest
from pytest import approx
import numpy as np
import numpy.testing as npt

from rayfield.elem.surface import Mirror, Sphere, Prism
from rayfield.oprops.thinlens import ThinLens
from rayfield.optical.scene import Scene, terminal_ray
from rayfield.raytr.ray import Ray
from rayfield.raytr.traceerror import InvalidGeometryError


def chain_geometry(scene):
    return [[(r.origin.copy(), r.direction.copy(), r.intensity)
             for r in chain] for chain in scene.chains()]


class SceneEditTestCase(unittest.TestCase):
    def setUp(self):
        self.scene = Scene()

    def test_empty(self):
        self.scene.recalculate()
        assert self.scene.rays_count() == 0
        assert self.scene.describe() == []
        assert self.scene.find_focal_point() is None

    def test_add_and_index(self):
        m1 = Mirror((5., -1.), (5., 1.))
        m2 = Sphere((0., 10.), 1.)
        self.scene.add_surface(m1)
        self.scene.add_surface(m2)
        self.scene.add_surface(m1)
        assert len(self.scene.surfaces) == 2
        assert self.scene.get_surface(1) is m2
        assert self.scene.who_is_surface(0) == 'Mirror'

        r = Ray((0., 0.), (1., 0.))
        self.scene.add_ray(r)
        self.scene.add_ray(r)
        assert len(self.scene.rays) == 1
        assert self.scene.get_ray(0) is r

    def test_add_rejects(self):
        with pytest.raises(TypeError):
            self.scene.add_surface("mirror")
        with pytest.raises(TypeError):
            self.scene.add_ray((0., 0.))
        root = Ray((0., 0.), (1., 0.))
        child = Ray((1., 0.), (0., 1.), parent=root)
        with pytest.raises(InvalidGeometryError):
            self.scene.add_ray(child)

    def test_invalid_settings(self):
        with pytest.raises(InvalidGeometryError):
            Scene(index_of_refraction=0.0)
        with pytest.raises(ValueError):
            Scene(max_depth=0)
        with pytest.raises(InvalidGeometryError):
            self.scene.index_of_refraction = -1.0
        with pytest.raises(ValueError):
            Scene(min_intensity=-1e-3)
        with pytest.raises(ValueError):
            Scene(min_intensity=float('nan'))
        with pytest.raises(ValueError):
            Scene(far_distance=0.0)

    def test_unknown_setting(self):
        with pytest.raises(TypeError):
            Scene(min_intensty=0.5)
        s = Scene(min_intensity=0.5, collect_focal_points=True)
        assert s.min_intensity == 0.5
        assert s.collect_focal_points

    def test_remove_ray(self):
        self.scene.add_surface(Mirror((5., -1.), (5., 1.)))
        r0 = Ray((0., 0.), (1., 0.))
        r1 = Ray((0., 0.5), (1., 0.))
        self.scene.add_ray(r0)
        self.scene.add_ray(r1)
        self.scene.recalculate()
        assert self.scene.rays_count() == 4

        removed = self.scene.remove_ray(0)
        assert removed is r0
        assert r0.child is None
        assert self.scene.get_ray(0) is r1
        assert self.scene.rays_count() == 2

    def test_remove_surface(self):
        self.scene.add_surface(Mirror((5., -1.), (5., 1.)))
        self.scene.add_surface(Mirror((8., -1.), (8., 1.)))
        self.scene.add_ray(Ray((0., 0.), (1., 0.)))
        self.scene.recalculate()
        assert self.scene.rays[0].child is not None

        m = self.scene.remove_surface(0)
        assert m.a[0] == 5.
        r = self.scene.rays[0]
        assert r.child is None
        assert r.new_intersecting_object
        self.scene.recalculate()
        npt.assert_allclose(r.intersection_point, [8., 0.])

        self.scene.remove_surface(0)
        self.scene.recalculate()
        assert r.child is None
        assert r.intersection_object is None

    def test_clear(self):
        self.scene.add_surface(Mirror((5., -1.), (5., 1.)))
        self.scene.add_ray(Ray((0., 0.), (1., 0.)))
        self.scene.recalculate()
        self.scene.clear()
        assert self.scene.rays == []
        assert self.scene.surfaces == []

    def test_describe(self):
        self.scene.add_surface(Mirror((5., -1.), (5., 1.)))
        self.scene.add_surface(Sphere((10., 0.), 2.))
        assert self.scene.describe() == ["Mirror, (5, -1) - (5, 1)",
                                         "Sphere, (10, 0)"]

        self.scene.add_ray(Ray((0., 0.), (1., 0.)))
        self.scene.recalculate()
        listing = self.scene.listobj_str()
        assert "0: Mirror: (5, -1) - (5, 1)   two sided" in listing
        assert "1: Sphere: (10, 0)" in listing
        assert "0: emitter: origin=(0, 0)" in listing
        assert "hits Mirror at (5, 0)" in listing
        assert "segments: 2" in listing


class SceneTraceTestCase(unittest.TestCase):
    def test_mirror_reflects_back(self):
        s = Scene()
        s.add_surface(Mirror((5., -1.), (5., 1.)))
        s.add_ray(Ray((0., 0.), (1., 0.)))
        s.recalculate()

        root = s.rays[0]
        child = root.child
        npt.assert_allclose(child.origin, [5., 0.])
        npt.assert_allclose(child.direction, [-1., 0.], atol=1e-15)
        assert child.child is None
        assert child.intersection_object is None
        assert s.rays_count() == 2

    def test_sphere_passes_through(self):
        s = Scene()
        s.add_surface(Sphere((10., 0.), 2., index_of_refraction=1.5))
        s.add_ray(Ray((0., 1.), (1., 0.)))
        s.recalculate()

        chain = next(s.chains())
        assert len(chain) == 3
        assert chain[1].origin[0] < 10.
        assert chain[2].origin[0] > 10.
        # a ball lens converges the ray toward the axis
        assert chain[2].direction[1] < 0.0
        assert chain[2].direction[0] > 0.0

    def test_dim_ray_has_no_child(self):
        s = Scene()
        s.add_surface(Mirror((5., -1.), (5., 1.)))
        r = Ray((0., 0.), (1., 0.), intensity=1e-4)
        s.add_ray(r)
        s.recalculate()
        assert r.intersection_object is s.surfaces[0]
        assert r.child is None

    def test_nearest_surface_wins(self):
        s = Scene()
        far = Mirror((8., -1.), (8., 1.))
        near = Mirror((3., -1.), (3., 1.))
        s.add_surface(far)
        s.add_surface(near)
        s.add_ray(Ray((0., 0.), (1., 0.)))
        s.recalculate()
        assert s.rays[0].intersection_object is near

    def test_recalculate_is_idempotent(self):
        s = Scene()
        s.add_surface(Sphere((10., 0.), 2.))
        s.add_surface(Prism([[15., -3.], [18., 0.], [15., 3.]]))
        s.add_surface(Mirror((25., -5.), (24., 5.)))
        for y in np.linspace(-1.5, 1.5, 7):
            s.add_ray(Ray((0., y), (1., 0.)))

        s.recalculate()
        first = chain_geometry(s)
        s.recalculate()
        second = chain_geometry(s)

        assert len(first) == len(second)
        for c1, c2 in zip(first, second):
            assert len(c1) == len(c2)
            for (o1, d1, i1), (o2, d2, i2) in zip(c1, c2):
                npt.assert_array_equal(o1, o2)
                npt.assert_array_equal(d1, d2)
                assert i1 == i2

    def test_facing_mirrors_attenuate(self):
        s = Scene()
        s.add_surface(Mirror((0., -1.), (0., 1.), efficiency=0.5))
        s.add_surface(Mirror((10., -1.), (10., 1.), efficiency=0.5))
        s.add_ray(Ray((5., 0.), (1., 0.)))
        s.recalculate()

        chain = next(s.chains())
        # 0.5**10 falls below the minimum intensity
        assert len(chain) == 11
        assert chain[-1].intensity == approx(0.5**10)
        assert chain[-1].child is None

    def test_facing_mirrors_depth_cap(self):
        s = Scene(max_depth=20)
        s.add_surface(Mirror((0., -1.), (0., 1.)))
        s.add_surface(Mirror((10., -1.), (10., 1.)))
        s.add_ray(Ray((5., 0.), (1., 0.)))
        with self.assertLogs('rayfield.optical.scene', level=logging.WARNING):
            s.recalculate()
        assert s.rays_count() == 20

    def test_chain_end_logged(self):
        s = Scene()
        s.add_surface(Mirror((5., -1.), (5., 1.), two_sided=False))
        s.add_ray(Ray((0., 0.), (1., 0.)))
        s.add_ray(Ray((10., 0.), (-1., 0.)))
        with self.assertLogs('rayfield.optical.scene',
                             level=logging.DEBUG) as cm:
            s.recalculate()
        msgs = [rec.getMessage() for rec in cm.records]
        assert "chain of ray 0 ends at 2 segments, no surface hit" in msgs
        assert ("chain of ray 1 ends at 1 segments, terminated by Mirror"
                in msgs)

    def test_index_change_recalculates(self):
        s = Scene()
        s.add_surface(Sphere((10., 0.), 2., index_of_refraction=1.5))
        r = Ray((0., 1.), (1., 0.))
        s.add_ray(r)
        s.recalculate()
        assert r.child.direction[1] < 0.0

        s.index_of_refraction = 1.5
        npt.assert_allclose(r.child.direction, [1., 0.], atol=1e-12)

    def test_move_and_rotate_surface(self):
        s = Scene()
        s.add_surface(Mirror((5., -1.), (5., 1.)))
        r = Ray((0., 0.), (1., 0.))
        s.add_ray(r)
        s.recalculate()

        s.move_surface(0, 5., 0.)
        npt.assert_allclose(r.child.origin, [10., 0.])

        s.rotate_surface(0, 90.)
        assert r.child is None

    def test_hit_testing(self):
        s = Scene()
        s.add_surface(Mirror((5., -1.), (5., 1.)))
        s.add_surface(Sphere((0., 10.), 1.))
        s.add_ray(Ray((0., 0.), (1., 0.)))
        s.add_ray(Ray((0., 5.), (1., 0.)))
        s.recalculate()

        assert s.rays_near((2., 0.1), 0.5) == [0]
        assert s.rays_near((2., 2.5), 0.5) == []
        assert s.surfaces_near((5.2, 0.), 0.5) == [0]
        assert s.surfaces_near((0., 11.2), 0.5) == [1]


class FocalPointTestCase(unittest.TestCase):
    def setUp(self):
        self.lens = ThinLens((10., -5.), (10., 5.), 5.)

    def test_focus(self):
        s = Scene()
        s.add_surface(self.lens)
        s.add_ray(Ray((0., 2.), (1., 0.)))
        s.add_ray(Ray((0., 0.5), (1., 0.)))
        s.add_ray(Ray((0., -3.), (1., 0.)))
        s.recalculate()
        fp = s.find_focal_point()
        npt.assert_allclose(fp, [15., 0.], atol=1e-9)
        npt.assert_allclose(s.rays[0].child.focal_point, fp)
        npt.assert_allclose(s.rays[-1].child.focal_point, fp)

    def test_parallel_terminals(self):
        s = Scene()
        s.add_ray(Ray((0., 2.), (1., 0.)))
        s.add_ray(Ray((0., -3.), (1., 0.)))
        s.recalculate()
        assert s.find_focal_point() is None

    def test_single_ray(self):
        s = Scene()
        s.add_ray(Ray((0., 2.), (1., 0.)))
        assert s.find_focal_point() is None

    def test_tracking_and_trail(self):
        s = Scene(track_focal_point=True, collect_focal_points=True)
        s.add_surface(self.lens)
        s.add_ray(Ray((0., 2.), (1., 0.)))
        s.add_ray(Ray((0., -3.), (1., 0.)))
        s.recalculate()
        s.move_surface(0, 1., 0.)
        assert len(s.focal_trail) == 2
        npt.assert_allclose(s.focal_trail[0], [15., 0.], atol=1e-9)
        npt.assert_allclose(s.focal_trail[1], [16., 0.], atol=1e-9)
        s.clear_focal_trail()
        assert s.focal_trail == []

    def test_terminal_ray_depth(self):
        s = Scene(max_depth=30)
        s.add_surface(Mirror((0., -1.), (0., 1.)))
        s.add_surface(Mirror((10., -1.), (10., 1.)))
        r = Ray((5., 0.), (1., 0.))
        s.add_ray(r)
        with self.assertLogs('rayfield.optical.scene', level=logging.WARNING):
            s.recalculate()
        last = terminal_ray(r)
        assert last is list(r.chain())[10]
        assert terminal_ray(r, max_depth=50).child is None


if __name__ == '__main__':
    unittest.main(verbosity=3)

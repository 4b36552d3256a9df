#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" pen and brush styles for surfaces and rays

    The styles are presentation data only. They are carried by surfaces and
    rays so that a drawing layer can render a scene, but play no part in the
    ray tracing.

.. Created on Tue Mar  3 20:00:41 2026

.. codeauthor: Michael J. Hayford
"""
import attr
from matplotlib.colors import is_color_like, to_rgba


def _check_color(instance, attribute, value):
    if not is_color_like(value):
        raise ValueError(f"{attribute.name}: {value!r} is not a color")


def _check_alpha(instance, attribute, value):
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{attribute.name} must be in [0, 1], got {value}")


@attr.s
class SurfaceStyle:
    """ Outline pen and fill brush of an optical surface """
    edge_color = attr.ib(default='blue', validator=_check_color)
    edge_width = attr.ib(default=2.0, converter=float)
    fill_color = attr.ib(default='darkblue', validator=_check_color)
    fill_alpha = attr.ib(default=0.3, converter=float, validator=_check_alpha)

    def edge_rgba(self):
        return to_rgba(self.edge_color)

    def fill_rgba(self):
        return to_rgba(self.fill_color, alpha=self.fill_alpha)

    def highlighted(self):
        """ Return the style used when the surface is selected. """
        return attr.evolve(self, edge_width=2*(1 + self.edge_width),
                           fill_alpha=0.5 + 0.5*self.fill_alpha)


@attr.s
class RayStyle:
    """ Pen for ray segments and pen/brush for the emitter marker """
    color = attr.ib(default='#fa000080', validator=_check_color)
    width = attr.ib(default=1.0, converter=float)
    emitter_width = attr.ib(default=2.0, converter=float)
    emitter_radius = attr.ib(default=5.0, converter=float)

    def rgba(self):
        return to_rgba(self.color)

    def highlighted(self):
        return attr.evolve(self, width=2*(1 + self.width))

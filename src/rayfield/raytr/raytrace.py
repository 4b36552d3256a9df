#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Functions to support ray tracing a scene of optical surfaces

.. Created on Thu Mar  5 11:01:04 2026

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np
from numpy.linalg import norm
from math import sqrt, copysign

from rayfield.raytr.ray import Ray
from rayfield.raytr.traceerror import TraceTIRError
from rayfield.util.misc_math import normalize

logger = logging.getLogger(__name__)


def bend(d_in, normal, n_in, n_out):
    """ refract incoming direction, d_in, about normal """
    try:
        normal_len = norm(normal)
        cosI = np.dot(d_in, normal)/normal_len
        sinI_sqr = 1.0 - cosI*cosI
        n_cosIp = copysign(sqrt(n_out*n_out - n_in*n_in*sinI_sqr), cosI)
        alpha = n_cosIp - n_in*cosI
        d_out = (n_in*d_in + alpha*normal)/n_out
        return d_out
    except ValueError:
        raise TraceTIRError(d_in, normal, n_in, n_out)


def reflect(d_in, normal):
    """ reflect incoming direction, d_in, about unit normal """
    cosI = np.dot(d_in, normal)
    d_out = d_in - 2.0*cosI*normal
    return d_out


def facing_normal(d_in, normal):
    """ return the unit normal oriented against the incoming direction """
    normal = normalize(normal)
    return -normal if np.dot(d_in, normal) > 0.0 else normal


def reflect_ray(ray, pt, normal, efficiency=1.0):
    """ generate the ray reflected at pt about normal """
    d_out = reflect(ray.direction, normalize(normal))
    return Ray(pt, d_out, intensity=ray.intensity*efficiency, parent=ray)


def refract_ray(ray, pt, normal, n_in, n_out, efficiency=1.0):
    """ generate the ray refracted at pt by Snell's law

    The normal is flipped, if needed, to face the incoming ray. If the
    incidence angle exceeds the critical angle the reflected ray is
    generated instead.

    Args:
        ray: the incoming :class:`~.Ray`
        pt: point of incidence
        normal: surface normal at pt, either orientation
        n_in: refractive index of the medium being exited
        n_out: refractive index of the medium being entered
        efficiency: fraction of the intensity carried by the new ray

    Returns:
        the new :class:`~.Ray`, a child of *ray*
    """
    nrml = facing_normal(ray.direction, normal)
    try:
        d_out = bend(ray.direction, nrml, n_in, n_out)
    except TraceTIRError as ray_tir:
        ray_tir.int_pt = pt
        logger.debug("TIR at %s, n_in=%g, n_out=%g", pt, n_in, n_out)
        d_out = reflect(ray.direction, nrml)
    return Ray(pt, normalize(d_out), intensity=ray.intensity*efficiency,
               parent=ray)


def nearest_intersection(ray, surfaces):
    """ find the surface hit first by ray

    Args:
        ray: the :class:`~.Ray` to intersect
        surfaces: sequence of optical surfaces, in scene order

    Returns:
        (**surface**, **pt**) for the hit nearest the ray origin, or
        (None, None) if no surface is hit. On an exact tie the surface
        earlier in *surfaces* is chosen.
    """
    nearest_srf = None
    nearest_pt = None
    nearest_dst = np.inf
    for srf in surfaces:
        pt = srf.intersect(ray)
        if pt is None:
            continue
        dst = norm(pt - ray.origin)
        if dst < nearest_dst:
            nearest_srf, nearest_pt, nearest_dst = srf, pt, dst
    return nearest_srf, nearest_pt

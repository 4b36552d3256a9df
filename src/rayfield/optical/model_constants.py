#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" scene model constants

    Default values for the tunable parameters of a
    :class:`~rayfield.optical.scene.Scene`. MIN_INTENSITY, MAX_CHAIN_DEPTH,
    FAR_DISTANCE and AMBIENT_INDEX may be overridden when creating a Scene;
    see the Scene keyword arguments.

.. Created on Mon Mar  2 16:00:55 2026

.. codeauthor: Michael J. Hayford
"""

# ray chains end once a ray's intensity drops below this value
MIN_INTENSITY = 1.0e-3

# hard cap on the number of segments in a single ray chain
MAX_CHAIN_DEPTH = 256

# length drawn for a ray segment that doesn't hit anything
FAR_DISTANCE = 1.0e4

# intersection distances at or below eps are ignored, so a ray never
#  re-intersects the surface it starts on
EPS = 1.0e-9

# max number of segments walked when looking for a terminal ray
FOCAL_SEARCH_DEPTH = 10

# refractive index of the medium filling the scene
AMBIENT_INDEX = 1.0

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Support for ray trace exception handling and geometry validation

.. Created on Wed Mar  4 15:22:40 2026

.. codeauthor: Michael J. Hayford
"""


class TraceError(Exception):
    """ Exception raised when ray tracing a scene """


class TraceTIRError(TraceError):
    """ Exception raised when ray TIRs at an interface """
    def __init__(self, inc_dir, normal, prev_indx, follow_indx):
        self.surface = None
        self.int_pt = None
        self.inc_dir = inc_dir
        self.normal = normal
        self.prev_indx = prev_indx
        self.follow_indx = follow_indx


class InvalidGeometryError(ValueError):
    """ Exception raised when a surface or ray is defined with degenerate
    or malformed geometry """

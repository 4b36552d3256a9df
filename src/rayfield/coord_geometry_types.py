#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for vectors and matrices

These type hints are provided to ensure a consistent convention of
distinguishing between numpy arrays and array-like arrays.

Vec2d is used for coordinates
Dir2d is used for vector directions, unit length
Mat2d is a 2 x 2 matrix
Pts2d is an N x 2 array of points, e.g. a polygon or a polyline

Created on Mon Mar  2 10:48:54 2026

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Dir2d = npt.NDArray
Mat2d = npt.NDArray
Pts2d = npt.NDArray

V2d = npt.ArrayLike

""" package supplying utility functions for math and numpy support

    The :mod:`~rayfield.util` subpackage provides miscellaneous functions for
    geometric calculations and presentation styles. These include:

        - 2d vector math on numpy arrays, :mod:`~.misc_math`
        - pen and brush styles for surfaces and rays, :mod:`~.colors`
"""

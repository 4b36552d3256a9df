""" Package for idealized optical surfaces

    The :mod:`~.oprops` subpackage provides surfaces whose optical action is
    described directly rather than by refraction at a physical boundary.

        - Ideal thin lens, :mod:`~.thinlens`
"""

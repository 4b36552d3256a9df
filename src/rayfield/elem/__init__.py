""" Package providing the optical surfaces of a scene

    The :mod:`~.elem` subpackage provides classes and functions
    for the optical elements placed in a scene. These include:

        - Ray intersections with circles, segments and polygons,
          :mod:`~.profiles`
        - The surface api and the mirror, sphere and prism surfaces,
          :mod:`~.surface`
"""

""" Package for ray tracing in a 2d scene

    The :mod:`~.raytr` subpackage provides core classes and functions
    for ray tracing. These include:

        - Ray segments and ray chains, :mod:`~.ray`
        - Reflection, refraction and nearest surface selection,
          :mod:`~.raytrace`
        - Tabular listings of ray chains, :mod:`~.trace`
        - Exception classes for reporting ray trace errors, :mod:`~.traceerror`
"""

from collections import namedtuple

RaySeg = namedtuple('RaySeg', ['p', 'd', 'dst', 'intensity'])
RaySeg.__doc__ = "ray segment data"
RaySeg.p.__doc__ = "the start point of the segment"
RaySeg.d.__doc__ = "unit direction of the segment"
RaySeg.dst.__doc__ = "distance to the point of incidence, None if unbounded"
RaySeg.intensity.__doc__ = "intensity carried by the segment"

# -*- coding: utf-8 -*-
""" The **rayfield** interactive 2D geometrical optics package

    A scene of optical surfaces and emitted rays is contained in the
    :mod:`~.optical` subpackage. It is supported by the following
    subpackages:

        - :mod:`~.optical`: the :class:`~.scene.Scene` propagation driver,
          configuration constants and scene files
        - :mod:`~.elem`: optical surfaces (mirrors, spheres, prisms) and the
          geometry of ray-profile intersections
        - :mod:`~.oprops`: idealized optical surfaces, e.g. a thin lens
        - :mod:`~.raytr`: rays, ray chains, reflection and refraction

    The :mod:`~.util` subpackage provides vector math on numpy arrays and
    presentation styles consumed by a drawing layer. Drawing itself is left
    to the host application.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object. Multi-line strings are
    allowed; each line should end with a newline character. Examples include
    :meth:`.Scene.listobj_str` and :meth:`.Mirror.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))

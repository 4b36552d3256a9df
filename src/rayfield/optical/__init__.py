""" Package for the scene model

    The :mod:`~.optical` subpackage contains the top level scene and its
    support:

        - The :class:`~.scene.Scene` owning rays and surfaces and rebuilding
          ray chains, :mod:`~.scene`
        - Default tunable parameters, :mod:`~.model_constants`
        - Saving and restoring scenes, :mod:`~.scenefile`
"""

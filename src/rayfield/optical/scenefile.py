#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Save a Scene to, and restore it from, a rayfield .rfs file

    Scene files are JSON written with json_tricks. Only the definitions are
    stored: the surfaces, the root rays and the scene settings. Ray chains
    are rebuilt when the scene is restored.

.. Created on Tue Mar 10 22:25:37 2026

.. codeauthor: Michael J. Hayford
"""
import logging
from pathlib import Path

import json_tricks

import rayfield
from rayfield.optical.scene import Scene

logger = logging.getLogger(__name__)

SCENE_SUFFIX = '.rfs'


def scene_to_json(scene):
    """ Return the JSON text for scene. """
    fs_dict = {'rf_version': rayfield.__version__,
               'scene': scene}
    return json_tricks.dumps(fs_dict, indent=1, separators=(',', ':'),
                             allow_nan=True)


def scene_from_json(contents):
    """ Return the Scene encoded in the JSON text contents.

    Raises:
        ValueError: if contents doesn't hold a scene
    """
    obj_dict = json_tricks.loads(contents)
    scene = obj_dict.get('scene') if isinstance(obj_dict, dict) else None
    if not isinstance(scene, Scene):
        raise ValueError("no scene found in scene file contents")
    file_version = obj_dict.get('rf_version', 'unknown')
    if file_version != rayfield.__version__:
        logger.info("scene written by rayfield %s, reading with %s",
                    file_version, rayfield.__version__)
    return scene


def save_scene(scene, file_name):
    """ Save scene in a rayfield JSON file.

    Args:
        scene: the :class:`~.Scene` to save
        file_name: str or Path; the suffix is replaced by .rfs

    Returns:
        the Path of the file written
    """
    file_pth = Path(file_name).with_suffix(SCENE_SUFFIX)

    if not file_pth.parent.exists():
        file_pth.parent.mkdir(parents=True)

    with open(file_pth, 'w') as f:
        f.write(scene_to_json(scene))
    logger.info("saved scene with %d surfaces and %d rays to %s",
                len(scene.surfaces), len(scene.rays), file_pth)
    return file_pth


def open_scene(file_name):
    """ open a rayfield file and return the Scene it contains

    The chains of the restored scene are recalculated.
    """
    file_pth = Path(file_name)
    with open(file_pth, 'r') as f:
        contents = f.read()
    scene = scene_from_json(contents)
    logger.info("opened scene %s", file_pth.name)
    return scene

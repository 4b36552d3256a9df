#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Tabular listings of ray chains and scenes

.. Created on Wed Mar 11 21:10:37 2026

.. codeauthor: Michael J. Hayford
"""
import pandas as pd

import rayfield.optical.model_constants as mc
from rayfield.raytr import RaySeg


def chain_segs(ray):
    """ Return a list of :class:`~.RaySeg` for the chain starting at ray. """
    segs = []
    for r in ray.chain():
        dst = (None if r.intersection_point is None
               else r.segment_length())
        segs.append(RaySeg(r.origin, r.direction, dst, r.intensity))
    return segs


def chain_df(ray, far_distance=mc.FAR_DISTANCE):
    """ Return a DataFrame with a row per segment of the chain at ray. """
    rows = []
    for r in ray.chain():
        srf = r.intersection_object
        rows.append({'origin': r.origin,
                     'direction': r.direction,
                     'intensity': r.intensity,
                     'end_pt': r.end_point(far_distance),
                     'surface': srf.label if srf is not None else None})
    # object dtype keeps None as the label of an unbounded segment
    df = pd.DataFrame(rows, columns=['origin', 'direction', 'intensity',
                                     'end_pt', 'surface'], dtype=object)
    df['intensity'] = df['intensity'].astype(float)
    return df


def list_chain(ray, far_distance=mc.FAR_DISTANCE):
    """ Print a table of the segments of the chain at ray. """
    print(chain_df(ray, far_distance).to_string())


def surface_df(scene):
    """ Return a DataFrame listing label, type and position per surface. """
    rows = [{'label': srf.label,
             'type': type(srf).__name__,
             'position': srf.position()} for srf in scene.surfaces]
    return pd.DataFrame(rows, columns=['label', 'type', 'position'])

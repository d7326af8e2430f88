#!/usr/bin/env python3
"""
Small helpers for turning numpy arrays into netpbm images.

Function list:
- isint (test if an object is an int/np.int)
- find_channel_axis (find the axis of an array that holds RGB channels)
- guess_variant (pick PBM, PGM or PPM for an array)
- depth_for (pick 8 or 16 bit samples for an array)
- check_fits (make sure an array's values fit in a sample depth)
- to_8bit (scale 16-bit data down to 8 bits)
"""

from typing import Union

import numpy as np

from .formats import FormatVariant, SampleDepth


def isint(n):
    """
    Check whether the given variable is an integer (either a built-in
    int or a numpy integer type).

    Notes
    -----
    You might think that isinstance(n, int) is what you want, but that
      has the undesirable behavior of returning True for bools, and
      returning False for numpy integer types.
    """
    return np.issubdtype(type(n), np.integer)


def find_channel_axis(data, possible_channel_lengths=[3]) -> Union[int, None]:
    """
    Return -1 if the last axis of a 3D array has one of the given
    lengths (3, for RGB, by default), otherwise None.

    Note that netpbm pixmaps always store the channels last, so unlike
    some other formats the first axis is never considered.
    """
    if isinstance(possible_channel_lengths, int):
        possible_channel_lengths = [possible_channel_lengths]
    if data.ndim == 3 and data.shape[-1] in possible_channel_lengths:
        return -1
    return None


def guess_variant(data: np.ndarray) -> FormatVariant:
    """
    bool arrays become bitmaps, (y, x, 3) arrays pixmaps, and any other
    2D array a graymap.
    """
    if data.dtype == bool and data.ndim == 2:
        return FormatVariant.BITMAP
    if find_channel_axis(data) is not None:
        return FormatVariant.PIXMAP
    if data.ndim == 2:
        return FormatVariant.GRAYMAP
    raise ValueError('Data must have shape (y, x) for a bitmap or graymap, or'
                     f' (y, x, 3) for a pixmap, but had shape {data.shape}')


def depth_for(data: np.ndarray) -> SampleDepth:
    """
    Choose the sample depth needed to store an integer array: 16-bit
    arrays, and wider arrays holding values above 255, get SIXTEEN.
    """
    if data.dtype == bool:
        return SampleDepth.EIGHT
    if not np.issubdtype(data.dtype, np.integer):
        raise TypeError('netpbm files hold integer samples, so data must have an'
                        f' integer or bool dtype but had dtype {data.dtype}.'
                        ' Convert it with npnetpbm.to_8bit or .astype() first.')
    if data.dtype.itemsize == 1:
        return SampleDepth.EIGHT
    if data.dtype.itemsize == 2 and data.dtype.kind == 'u':
        return SampleDepth.SIXTEEN
    if data.size > 0 and data.max() > SampleDepth.EIGHT.maxval:
        return SampleDepth.SIXTEEN
    return SampleDepth.EIGHT


def check_fits(data: np.ndarray, depth: SampleDepth) -> None:
    if data.size == 0 or data.dtype == bool:
        return
    if data.min() < 0 or data.max() > depth.maxval:
        raise ValueError(f'Values must be between 0 and {depth.maxval} to be saved'
                         f' with {depth.name.lower()}-bit samples, but data had'
                         f' range [{data.min()}, {data.max()}]')


def to_8bit(data: np.ndarray, maxval=None) -> np.ndarray:
    """
    Scale an integer array down to uint8, mapping `maxval` (by default
    65535 for 16-bit data, 255 otherwise) to 255.
    """
    if data.dtype == np.uint8:
        return data
    if data.dtype == bool:
        return data.astype(np.uint8) * 255
    if maxval is None:
        maxval = SampleDepth.SIXTEEN.maxval if data.dtype.itemsize > 1 else SampleDepth.EIGHT.maxval
    return (data.astype(np.float64) * 255 / maxval + 0.5).clip(0, 255).astype(np.uint8)

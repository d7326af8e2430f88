#!/usr/bin/env python3
"""
Read and write PBM files, whose format is specified at
http://netpbm.sourceforge.net/doc/pbm.html

PBM images are black and white: loaded data is a bool array where True
(1) is black.
"""

from ..formats import FormatVariant
from . import netpbm

VARIANT = FormatVariant.BITMAP


def load(filename, verbose=False):
    """Returns (data, header), with data.shape ordered (height, width)"""
    return netpbm.load(filename, variant=VARIANT, verbose=verbose)


def save(data, filename, mode='binary', comments=None, overwrite=True):
    """Any nonzero value in data is saved as a 1 (black) pixel."""
    netpbm.save(data, filename, variant=VARIANT, mode=mode,
                comments=comments, overwrite=overwrite)


def predict_file_size(data, mode='binary', comments=None) -> int:
    return netpbm.predict_file_size(data, variant=VARIANT, mode=mode,
                                    comments=comments)

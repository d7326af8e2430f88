#!/usr/bin/env python3
"""
Read and write PPM files, whose format is specified at
http://netpbm.sourceforge.net/doc/ppm.html

Data is ordered (height, width, 3), the last axis being red, green, blue.
"""

from ..formats import FormatVariant
from . import netpbm

VARIANT = FormatVariant.PIXMAP


def load(filename, verbose=False):
    return netpbm.load(filename, variant=VARIANT, verbose=verbose)


def save(data, filename, mode='binary', comments=None, overwrite=True):
    netpbm.save(data, filename, variant=VARIANT, mode=mode,
                comments=comments, overwrite=overwrite)


def predict_file_size(data, mode='binary', comments=None) -> int:
    return netpbm.predict_file_size(data, variant=VARIANT, mode=mode,
                                    comments=comments)

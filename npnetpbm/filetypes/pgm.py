#!/usr/bin/env python3
"""
Read and write PGM files, whose format is specified at
http://netpbm.sourceforge.net/doc/pgm.html

Samples are 8 bit (maxval 255) or 16 bit (maxval 65535). Files with any
other maxval load as the smallest of those that holds them, unscaled.
"""

from ..formats import FormatVariant
from . import netpbm

VARIANT = FormatVariant.GRAYMAP


def load(filename, verbose=False):
    return netpbm.load(filename, variant=VARIANT, verbose=verbose)


def save(data, filename, mode='binary', comments=None, overwrite=True):
    netpbm.save(data, filename, variant=VARIANT, mode=mode,
                comments=comments, overwrite=overwrite)


def predict_file_size(data, mode='binary', comments=None) -> int:
    return netpbm.predict_file_size(data, variant=VARIANT, mode=mode,
                                    comments=comments)

#!/usr/bin/env python3
"""
The three netpbm variants, the two encodings, and the two sample depths.

The magic number's digit fully determines the (variant, mode) pair:
    P1 bitmap ascii     P4 bitmap binary
    P2 graymap ascii    P5 graymap binary
    P3 pixmap ascii     P6 pixmap binary
"""

from enum import Enum
from typing import Tuple

import numpy as np


class FormatVariant(Enum):
    # name, channels per pixel, header fields, bit packed in binary mode
    BITMAP = ('pbm', 1, 2, True)
    GRAYMAP = ('pgm', 1, 3, False)
    PIXMAP = ('ppm', 3, 3, False)

    def __init__(self, extension, channels, header_fields, bit_packed):
        self.extension = extension
        self.channels = channels
        self.header_fields = header_fields
        self.bit_packed = bit_packed

    @property
    def has_maxval(self) -> bool:
        return self.header_fields > 2

    @classmethod
    def from_extension(cls, extension: str) -> 'FormatVariant':
        for variant in cls:
            if variant.extension == extension.lower():
                return variant
        raise ValueError(f'No netpbm variant uses the extension "{extension}"')


class EncodingMode(Enum):
    ASCII = 'ascii'
    BINARY = 'binary'

    @classmethod
    def parse(cls, mode) -> 'EncodingMode':
        """Accept an EncodingMode or one of 'ascii'/'plain'/'binary'/'raw'."""
        if isinstance(mode, cls):
            return mode
        if not isinstance(mode, str):
            raise TypeError(f'mode must be a str or EncodingMode but was {type(mode)}')
        mode = mode.lower()
        if mode in ['ascii', 'plain', 'text']:
            return cls.ASCII
        if mode in ['binary', 'raw']:
            return cls.BINARY
        raise ValueError(f'mode must be "ascii" or "binary" but was "{mode}"')


class SampleDepth(Enum):
    EIGHT = (1, 255, np.dtype(np.uint8))
    SIXTEEN = (2, 65535, np.dtype('>u2'))

    def __init__(self, bytes_per_sample, maxval, dtype):
        self.bytes_per_sample = bytes_per_sample
        self.maxval = maxval
        self.dtype = dtype

    @classmethod
    def from_maxval(cls, maxval: int) -> 'SampleDepth':
        return cls.SIXTEEN if maxval > 255 else cls.EIGHT


_magic_table = {
    ord('1'): (FormatVariant.BITMAP, EncodingMode.ASCII),
    ord('2'): (FormatVariant.GRAYMAP, EncodingMode.ASCII),
    ord('3'): (FormatVariant.PIXMAP, EncodingMode.ASCII),
    ord('4'): (FormatVariant.BITMAP, EncodingMode.BINARY),
    ord('5'): (FormatVariant.GRAYMAP, EncodingMode.BINARY),
    ord('6'): (FormatVariant.PIXMAP, EncodingMode.BINARY),
}


def lookup_magic(digit: int) -> Tuple[FormatVariant, EncodingMode]:
    """
    Return the (variant, mode) pair for the byte following the 'P' of a
    magic number. Raises KeyError for bytes outside '1'..'6'.
    """
    return _magic_table[digit]


def magic_number(variant: FormatVariant, mode: EncodingMode) -> bytes:
    for digit, pair in _magic_table.items():
        if pair == (variant, mode):
            return bytes([ord('P'), digit])
    raise ValueError(f'No magic number for {variant} {mode}')


def sample_count(width, height, variant: FormatVariant) -> int:
    return width * height * variant.channels


def data_size(width, height, variant: FormatVariant, depth: SampleDepth) -> int:
    """Size in bytes of a decoded sample buffer (one byte per bitmap pixel)."""
    if variant is FormatVariant.BITMAP:
        return width * height
    return sample_count(width, height, variant) * depth.bytes_per_sample

#!/usr/bin/env python3
"""
Pack and unpack the pixel data of binary PBM files, whose format is
specified at http://netpbm.sourceforge.net/doc/pbm.html

Each pixel is one bit, most significant bit first, and every row is
padded with "don't care" bits up to the next byte boundary. Unpacked
data has one byte (0 or 1) per pixel.
"""

import numpy as np

from .errors import PixelDataSizeMismatch


def row_padding(width: int) -> int:
    """Number of don't-care bits at the end of each packed row."""
    return (8 - width % 8) % 8


def row_bytes(width: int) -> int:
    """Number of bytes per packed row (padded to the next byte boundary)."""
    return (width + 7) // 8


def pack_rows(data: bytes, width: int) -> bytes:
    """
    Pack one-byte-per-pixel bitmap data into bits. Any nonzero byte is
    packed as a 1. The padding bits of each row are written as 0.
    """
    bits = np.frombuffer(data, dtype=np.uint8) != 0
    if width == 0:
        return b''
    if bits.size % width != 0:
        raise PixelDataSizeMismatch(bits.size + width - bits.size % width, bits.size)
    height = bits.size // width

    # Pad each row to the next byte boundary
    padded = np.zeros((height, width + row_padding(width)), dtype=bool)
    padded[:, :width] = bits.reshape(height, width)
    return np.packbits(padded, axis=1).tobytes()


def unpack_rows(data: bytes, width: int, height=None) -> bytes:
    """
    Unpack bit-packed bitmap rows into one byte per pixel, dropping the
    padding bits at the end of each row.

    If `height` is None, as many complete rows as `data` holds are
    unpacked. Otherwise exactly `height` rows are read, and any bytes
    after them are ignored.
    """
    if width == 0:
        return b''
    bytes_per_row = row_bytes(width)
    if height is None:
        height = len(data) // bytes_per_row
    elif len(data) < bytes_per_row * height:
        raise PixelDataSizeMismatch(bytes_per_row * height, len(data))

    packed = np.frombuffer(data, dtype=np.uint8, count=bytes_per_row * height)
    # Unpack bits and reshape, then slice to remove padding bits
    bits = np.unpackbits(packed.reshape(height, bytes_per_row), axis=1)
    return bits[:, :width].tobytes()

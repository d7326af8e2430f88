#!/usr/bin/env python3
"""
Pixel data of "plain" (ASCII) netpbm files: samples written as decimal
numbers separated by whitespace.

Decoded sample buffers are bytes: one byte per sample for 8-bit images,
two bytes per sample (most significant byte first) for 16-bit images.

Function list:
- encode_rows(data, width, height, channels, depth) -> bytes
- encode_bitmap_rows(data, width, height) -> bytes
- decode_samples(data, depth) -> bytes
- decode_bitmap_samples(data) -> bytes
"""

import numpy as np

from .errors import WidthTooWideForAscii, LineTooWide, PixelDataSizeMismatch
from .formats import SampleDepth
from .header import is_digit, LF, COMMENT_START

# Lines of a plain netpbm file should not be longer than this
MAX_LINE_CHARS = 70


def encode_rows(data: bytes,
                width: int,
                height: int,
                channels: int = 1,
                depth: SampleDepth = SampleDepth.EIGHT,
                max_line_chars: int = MAX_LINE_CHARS) -> bytes:
    """
    Render a sample buffer as rows of space-separated decimal numbers,
    one image row per line.

    Raises WidthTooWideForAscii if `width` alone exceeds `max_line_chars`,
    and LineTooWide if the digits of any row add up to more than
    `max_line_chars` characters.
    """
    if width > max_line_chars:
        raise WidthTooWideForAscii(width, max_line_chars)
    expected = width * height * channels * depth.bytes_per_sample
    if len(data) != expected:
        raise PixelDataSizeMismatch(expected, len(data))

    samples = np.frombuffer(data, dtype=depth.dtype).reshape(height, width * channels)
    lines = []
    for row_number, row in enumerate(samples.tolist()):
        tokens = [str(value) for value in row]
        counter = 0
        for token in tokens:
            counter += len(token)
            if counter > max_line_chars:
                raise LineTooWide(row_number, max_line_chars)
        lines.append(' '.join(tokens) + '\n')
    return ''.join(lines).encode('ascii')


def encode_bitmap_rows(data: bytes,
                       width: int,
                       height: int,
                       max_line_chars: int = MAX_LINE_CHARS) -> bytes:
    """Like encode_rows, but every nonzero sample is written as 1."""
    bits = (np.frombuffer(data, dtype=np.uint8) != 0).astype(np.uint8)
    return encode_rows(bits.tobytes(), width, height,
                       max_line_chars=max_line_chars)


def decode_samples(data: bytes, depth: SampleDepth = SampleDepth.EIGHT) -> bytes:
    """
    Parse whitespace-separated decimal numbers into a sample buffer.

    Values wider than the sample depth keep only their low 8 or 16 bits.
    A number running right up to the end of `data` is still decoded.
    Comments ('#' to end of line) are skipped.
    """
    values = []
    value = 0
    pending = False
    in_comment = False
    for byte in data:
        if in_comment:
            if byte == LF:
                in_comment = False
            continue
        if is_digit(byte):
            value = value * 10 + byte - 48
            pending = True
            continue
        if pending:
            values.append(value)
            value = 0
            pending = False
        if byte == COMMENT_START:
            in_comment = True
    if pending:
        values.append(value)

    mask = depth.maxval
    return np.array([v & mask for v in values], dtype=depth.dtype).tobytes()


def decode_bitmap_samples(data: bytes) -> bytes:
    """
    Every '0' in `data` becomes a 0 sample and every '1' a 1 sample.
    Anything else (whitespace, newlines) is skipped, so tightly packed
    rows like b'0110' work too.
    """
    chars = np.frombuffer(data, dtype=np.uint8)
    chars = chars[(chars == ord('0')) | (chars == ord('1'))]
    return (chars - ord('0')).astype(np.uint8).tobytes()

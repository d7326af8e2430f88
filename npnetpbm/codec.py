#!/usr/bin/env python3
"""
Convert between the bytes of a netpbm file and an in-memory Image.

Function list:
- decode(buffer) -> Image
- decode_with_header(buffer) -> (Image, ImageHeader)
- encode(image, mode) -> bytes
- predict_size(image, mode) -> int
"""

from typing import Tuple

import numpy as np

from . import ascii_codec, bitpack, utils
from .errors import PixelDataSizeMismatch
from .formats import FormatVariant, EncodingMode, SampleDepth, data_size
from .header import ImageHeader, parse_header, format_header


class Image:
    """
    A decoded netpbm image.

    `data` holds the samples row by row: one byte (0 or 1) per pixel for
    bitmaps, and 1 or 2 bytes (big-endian) per sample for graymaps and
    pixmaps, with the 3 channels of a pixmap pixel interleaved.
    """
    def __init__(self,
                 width: int,
                 height: int,
                 data: bytes,
                 variant: FormatVariant = FormatVariant.GRAYMAP,
                 depth: SampleDepth = SampleDepth.EIGHT):
        if not utils.isint(width) or width < 0:
            raise ValueError(f'width must be a non-negative int but was {width}')
        if not utils.isint(height) or height < 0:
            raise ValueError(f'height must be a non-negative int but was {height}')
        if variant is FormatVariant.BITMAP:
            depth = SampleDepth.EIGHT
        data = bytes(data)
        expected = data_size(width, height, variant, depth)
        if len(data) != expected:
            raise PixelDataSizeMismatch(expected, len(data))
        self.width = int(width)
        self.height = int(height)
        self.data = data
        self.variant = variant
        self.depth = depth

    @property
    def channels(self) -> int:
        return self.variant.channels

    @property
    def shape(self) -> Tuple[int, ...]:
        if self.channels > 1:
            return (self.height, self.width, self.channels)
        return (self.height, self.width)

    def to_array(self) -> np.ndarray:
        """
        Return the pixel values as a numpy array with dimensions ordered
        (height, width) or (height, width, 3) for pixmaps. Bitmaps come
        back as bool, other images as uint8 or uint16.
        """
        if self.variant is FormatVariant.BITMAP:
            return np.frombuffer(self.data, dtype=np.uint8).reshape(self.shape).astype(bool)
        data = np.frombuffer(self.data, dtype=self.depth.dtype).reshape(self.shape)
        # Convert big-endian 16-bit samples to native byte order
        return data.astype(self.depth.dtype.newbyteorder('='))

    @classmethod
    def from_array(cls, data, variant: FormatVariant = None, depth: SampleDepth = None) -> 'Image':
        """
        Build an Image from a numpy array ordered (height, width) or
        (height, width, 3).

        If not given, `variant` is guessed from the array: bool arrays are
        bitmaps, arrays with a trailing axis of length 3 are pixmaps and
        everything else is a graymap. If not given, `depth` is SIXTEEN for
        16-bit integer arrays or arrays holding values above 255.
        """
        if not isinstance(data, np.ndarray):
            raise TypeError('data must be a np.ndarray but was {}'.format(type(data)))
        if variant is None:
            variant = utils.guess_variant(data)

        expected_ndim = 3 if variant.channels > 1 else 2
        if data.ndim != expected_ndim or (expected_ndim == 3 and data.shape[-1] != variant.channels):
            m = (f'A {variant.extension} image must have shape (y, x)' if expected_ndim == 2
                 else f'A {variant.extension} image must have shape (y, x, {variant.channels})')
            raise ValueError(m + f' but data had shape {data.shape}')
        height, width = data.shape[:2]

        if variant is FormatVariant.BITMAP:
            if data.dtype != bool and np.any((data != 0) & (data != 1)):
                print('WARNING: Saving as a bitmap, so all nonzero values will become 1.')
            samples = (data != 0).astype(np.uint8)
            return cls(width, height, samples.tobytes(), variant, SampleDepth.EIGHT)

        if depth is None:
            depth = utils.depth_for(data)
        utils.check_fits(data, depth)
        samples = np.ascontiguousarray(data).astype(depth.dtype)
        return cls(width, height, samples.tobytes(), variant, depth)

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and self.variant is other.variant
                and self.depth is other.depth
                and self.data == other.data)

    def __repr__(self):
        return (f'Image(width={self.width}, height={self.height},'
                f' variant={self.variant.name}, depth={self.depth.name})')


def _decode_pixels(header: ImageHeader, pixels: bytes) -> bytes:
    expected = data_size(header.width, header.height, header.variant, header.depth)
    if header.mode is EncodingMode.ASCII:
        if header.variant is FormatVariant.BITMAP:
            samples = ascii_codec.decode_bitmap_samples(pixels)
        else:
            samples = ascii_codec.decode_samples(pixels, header.depth)
        surplus = len(samples) - expected
    elif header.variant is FormatVariant.BITMAP:
        samples = bitpack.unpack_rows(pixels, header.width, header.height)
        surplus = len(pixels) - bitpack.row_bytes(header.width) * header.height
    else:
        # Binary graymaps and pixmaps store the samples as-is
        samples = bytes(pixels[:expected])
        surplus = len(pixels) - expected

    if len(samples) < expected:
        raise PixelDataSizeMismatch(expected, len(samples))
    if surplus > 0:
        unit = 'samples' if header.mode is EncodingMode.ASCII else 'bytes'
        print(f'WARNING: Ignoring {surplus} {unit} found after the end of the pixel data.')
    return samples[:expected]


def decode_with_header(buffer, variants=None) -> Tuple[Image, ImageHeader]:
    """
    Decode the full contents of a netpbm file, returning the Image and
    the ImageHeader it was described by.
    """
    header = parse_header(buffer, variants=variants)
    pixels = memoryview(buffer)[header.data_offset:]
    samples = _decode_pixels(header, pixels)
    image = Image(header.width, header.height, samples, header.variant, header.depth)
    return image, header


def decode(buffer, variants=None) -> Image:
    """
    Decode the full contents of a netpbm file (P1 through P6).

    If `variants` is given, only files of those FormatVariants are
    accepted.
    """
    return decode_with_header(buffer, variants=variants)[0]


def encode(image: Image,
           mode='binary',
           comments=None,
           max_line_chars: int = ascii_codec.MAX_LINE_CHARS) -> bytes:
    """
    Encode an Image as the full contents of a netpbm file.

    Parameters
    ----------
    image : Image
        The image to encode. Its variant decides between PBM, PGM and PPM.

    mode : 'binary' or 'ascii', or an EncodingMode
        Binary files are much smaller. Ascii files can only hold images
        whose rows fit in `max_line_chars` characters.

    comments : str or list of str, optional
        Written into the header, each line prefixed by '# '.
    """
    if not isinstance(image, Image):
        raise TypeError('image must be an Image but was {}'.format(type(image)))
    mode = EncodingMode.parse(mode)

    if image.variant is FormatVariant.BITMAP:
        if mode is EncodingMode.ASCII:
            pixels = ascii_codec.encode_bitmap_rows(image.data, image.width, image.height,
                                              max_line_chars=max_line_chars)
        else:
            pixels = bitpack.pack_rows(image.data, image.width)
    else:
        if mode is EncodingMode.ASCII:
            pixels = ascii_codec.encode_rows(image.data, image.width, image.height,
                                       image.channels, image.depth,
                                       max_line_chars=max_line_chars)
        else:
            pixels = image.data

    header = format_header(image.variant, mode, image.width, image.height,
                           image.depth, comments=comments)
    return header + pixels


def predict_size(image: Image, mode='binary', comments=None) -> int:
    """
    Predict the size in bytes of the encoded image.

    Returns
    -------
    int
        The predicted file size in bytes.
    """
    mode = EncodingMode.parse(mode)
    if mode is EncodingMode.ASCII:
        return len(encode(image, mode, comments=comments))

    header_size = len(format_header(image.variant, mode, image.width,
                                    image.height, image.depth, comments=comments))
    if image.variant is FormatVariant.BITMAP:
        # Each row is padded to the next byte boundary
        pixel_bytes = bitpack.row_bytes(image.width) * image.height
    else:
        pixel_bytes = len(image.data)
    return header_size + pixel_bytes

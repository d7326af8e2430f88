#!/usr/bin/env python3
"""
Read and write netpbm files, whose formats are specified at
http://netpbm.sourceforge.net/doc/pbm.html
http://netpbm.sourceforge.net/doc/pgm.html
http://netpbm.sourceforge.net/doc/ppm.html

Files are always read into memory in full and written in one go.
"""

import os

import numpy as np

from .. import codec
from ..ascii_codec import MAX_LINE_CHARS
from ..formats import FormatVariant


def read_bytes(filename) -> bytes:
    with open(filename, 'rb') as f:
        return f.read()


def write_bytes(data: bytes, filename, overwrite=True) -> None:
    if not overwrite and os.path.exists(filename):
        raise FileExistsError(f'File {filename} already exists. '
                              'Set overwrite=True to overwrite.')
    with open(filename, 'wb') as f:
        f.write(data)


def load(filename, variant: FormatVariant = None, verbose=False):
    """
    Load pixel data from a netpbm file and return it as a numpy array,
    along with the file's ImageHeader.

    The returned array has dimensions ordered y then x, as is standard in
    Python. This means data.shape is ordered (height, width), or
    (height, width, 3) for PPM files.

    If `variant` is given, files of any other variant are rejected with
    UnsupportedNetpbmType.
    """
    image, header = codec.decode_with_header(read_bytes(filename), variants=variant)
    if verbose:
        for comment in header.comments:  # Print comments
            print('# ' + comment)
    return image.to_array(), header


def save(data,
         filename,
         variant: FormatVariant = None,
         mode='binary',
         comments=None,
         max_line_chars=MAX_LINE_CHARS,
         overwrite=True) -> None:
    """
    Write a numpy array to file in netpbm format.

    The whole file is encoded before the file is opened, so nothing is
    written if the data can't be encoded (for example, an image too wide
    to be saved in ascii mode).
    """
    if not isinstance(data, np.ndarray):
        raise TypeError('data must be a np.ndarray but was {}'.format(type(data)))
    if not isinstance(filename, (str, os.PathLike)):
        raise TypeError('filename must be a str but was {}'.format(type(filename)))
    image = codec.Image.from_array(data, variant=variant)
    contents = codec.encode(image, mode, comments=comments,
                            max_line_chars=max_line_chars)
    write_bytes(contents, filename, overwrite=overwrite)


def predict_file_size(data: np.ndarray,
                      variant: FormatVariant = None,
                      mode='binary',
                      comments=None) -> int:
    """
    Predict the file size of a netpbm file given the image data.

    Parameters
    ----------
    data : np.ndarray
        The image data as a numpy array.

    Returns
    -------
    int
        The predicted file size in bytes.
    """
    if not isinstance(data, np.ndarray):
        raise TypeError('data must be a np.ndarray but was {}'.format(type(data)))
    image = codec.Image.from_array(data, variant=variant)
    return codec.predict_size(image, mode, comments=comments)

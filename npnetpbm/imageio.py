#!/usr/bin/env python3
"""
Functions for reading, writing, and showing netpbm images.

Function list:
- load(filename) -> numpy.ndarray
- save(data, filename) -> Saves a numpy array as a PBM, PGM or PPM file
- show(np_array) -> Displays a numpy array of pixel values as an image
"""

from typing import Literal, Union, Tuple
import os

import numpy as np

from . import utils
from .ascii_codec import MAX_LINE_CHARS
from .formats import FormatVariant

supported_extensions = ['pbm', 'pgm', 'ppm', 'pnm']


def _get_extension(filename, kwargs) -> str:
    if 'format' in kwargs:
        extension = kwargs['format'].lower()
    elif '.' in os.path.basename(filename):
        extension = os.path.basename(filename).split('.')[-1].lower()
    else:
        raise ValueError('Could not determine file format from filename'
                         f' "{filename}". Please specify the file type via'
                         ' the `format` argument, e.g. format="pgm"')
    if extension not in supported_extensions:
        raise ValueError(f'File format of "{filename}" not supported/recognized.')
    return extension


def load(filename, dim_order='yx', verbose=False, **kwargs) -> Union[np.ndarray, Tuple[np.ndarray, dict]]:
    """
    Open a PBM, PGM, PPM or PNM file and return its pixel values as a
    numpy array.

    As is typical for Python, the returned array will by default have
     dimensions ordered as yx for PBM and PGM images, or yxc for PPM
     images. Set dim_order='xy' if you want to reverse the order of
     the axes.
    PBM files load as bool arrays, PGM and PPM files as uint8 or uint16
     arrays depending on the file's maxval.

    A .pbm, .pgm or .ppm file must contain that kind of image. A .pnm
     file may contain any of them.

    Pass metadata=True to also get a dict holding the file's format,
     mode ('ascii' or 'binary'), maxval and header comments.
    """
    filename = os.path.expanduser(str(filename))
    extension = _get_extension(filename, kwargs)

    if extension == 'pbm':
        from .filetypes import pbm
        data, header = pbm.load(filename, verbose=verbose)
    elif extension == 'pgm':
        from .filetypes import pgm
        data, header = pgm.load(filename, verbose=verbose)
    elif extension == 'ppm':
        from .filetypes import ppm
        data, header = ppm.load(filename, verbose=verbose)
    else:
        from .filetypes import netpbm
        data, header = netpbm.load(filename, verbose=verbose)

    if 'xy' in dim_order:
        data = data.T

    if any([kwargs.get(key, False) for key in
            ['metadata', 'get_metadata', 'return_metadata']]):
        metadata = {
            'format': header.variant.extension,
            'mode': header.mode.value,
            'maxval': header.maxval,
            'comments': list(header.comments),
        }
        return data, metadata
    else:
        return data

open = load  # Function name alias
read = load  # Function name alias
imread = load  # Function name alias


def save(data,
         filename,
         mode: Literal['binary', 'ascii', None] = None,
         overwrite=False,
         dim_order='yx',
         comments=None,
         metadata=None,
         max_line_chars=MAX_LINE_CHARS) -> None:
    """
    Save a numpy array to file with a netpbm format specified by the
    filename extension.

    As is typical for Python, the input array is assumed to have
     dimensions ordered as yx for 1-channel images or yxc for RGB
     images. Set dim_order='xy' if your array is in xy or cxy order.

    For .pnm files the format is chosen from the data: bool arrays are
     saved as PBM, (y, x, 3) arrays as PPM, and anything else as PGM.
    uint16 arrays, and other integer arrays holding values above 255,
     are saved with 16-bit samples.

    `mode` is 'binary' (the default) or 'ascii'. `comments` are written
     into the header. If `mode` or `comments` is not given, it is taken
     from `metadata` (as returned by load(..., metadata=True)) if present.
    """
    if not isinstance(data, np.ndarray):
        raise TypeError('data must be a np.ndarray but was {}'.format(type(data)))
    filename = os.path.expanduser(str(filename))
    filename = filename.rstrip('/')
    if os.path.exists(filename) and not overwrite:
        raise FileExistsError(f'File {filename} already exists. '
                              'Set overwrite=True to overwrite.')
    extension = filename.split('.')[-1].lower()
    assert extension in supported_extensions, f'Filetype {extension} not supported'

    if metadata is not None:
        if mode is None:
            mode = metadata.get('mode', None)
        if comments is None:
            comments = metadata.get('comments', None)
    if mode is None:
        mode = 'binary'

    if 'xy' in dim_order:
        data = data.T

    from .filetypes import netpbm
    if extension == 'pnm':
        variant = None
    else:
        variant = FormatVariant.from_extension(extension)
    netpbm.save(data, filename, variant=variant, mode=mode, comments=comments,
                max_line_chars=max_line_chars, overwrite=True)

write = save  # Function name alias
imwrite = save  # Function name alias


def show(data,
         dim_order='yx',
         convert_to_8bit=True,
         **kwargs) -> None:
    """
    Display a numpy array of pixel values as an image. Supported types:
      1-channel (bitmap or grayscale) : data.shape must be (y, x)
      3-channel (RGB)                 : data.shape must be (y, x, 3)

    If `dim_order` is set to 'xy' (instead of the default 'yx'), then
    swap the y and x above.

    `data` may also be the filename of a netpbm file to show.

    Images are shown using `PIL.Image.fromarray(data).show()`.
    Bitmaps are shown with 1 (True) as black, as in PBM files.
    kwargs get passed along to Image.fromarray.
    """
    if isinstance(data, (str, os.PathLike)):
        if os.path.exists(data):
            data = load(data, dim_order=dim_order)

    if 'xy' in dim_order:
        data = data.T

    if not (data.ndim == 2 or (data.ndim == 3 and utils.find_channel_axis(data) is not None)):
        m = ('Data must have shape (y, x) for bitmaps or grayscale, or'
             f' (y, x, 3) for RGB but had shape {data.shape}')
        if 'xy' in dim_order:
            m = m.replace('y, x', 'x, y')
        raise ValueError(m)

    if data.dtype == bool:
        # In PBM files 1 is black
        data = ~data
    if convert_to_8bit and data.dtype != np.uint8:
        data = utils.to_8bit(data)

    from PIL import Image  # pip install pillow
    Image.fromarray(data, **kwargs).show()

imshow = show  # Function name alias

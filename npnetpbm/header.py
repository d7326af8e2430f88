#!/usr/bin/env python3
"""
Read and write the plain-text header at the top of every netpbm file.

A header is the magic number (P1 through P6) followed by the width, the
height and, except for bitmaps, the maximum sample value. Fields are
decimal numbers separated by whitespace, and '#' starts a comment that
runs to the end of the line. Exactly one whitespace byte separates the
last field from the pixel data.

Function list:
- classify(byte) -> ByteClass
- parse_header(buffer) -> ImageHeader
- format_header(variant, mode, width, height, depth) -> bytes
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Union

from .errors import (NotNetpbmFile, UnsupportedNetpbmType,
                     UnexpectedHeaderCharacter, HeaderOverrun, TruncatedHeader)
from .formats import (FormatVariant, EncodingMode, SampleDepth,
                      lookup_magic, magic_number)

_whitespace = frozenset(b' \t\r\n')
LF = ord('\n')
COMMENT_START = ord('#')


class ByteClass(Enum):
    DIGIT = 'digit'
    WHITESPACE = 'whitespace'
    COMMENT = 'comment'
    OTHER = 'other'


def is_digit(byte: int) -> bool:
    return 48 <= byte <= 57


def is_whitespace(byte: int) -> bool:
    """Blanks, TABs, CRs and LFs count as whitespace."""
    return byte in _whitespace


def is_comment_start(byte: int) -> bool:
    return byte == COMMENT_START


def classify(byte: int) -> ByteClass:
    if is_digit(byte):
        return ByteClass.DIGIT
    if is_whitespace(byte):
        return ByteClass.WHITESPACE
    if is_comment_start(byte):
        return ByteClass.COMMENT
    return ByteClass.OTHER


class ImageHeader(NamedTuple):
    width: int
    height: int
    data_offset: int  # Index of the first byte of pixel data
    variant: FormatVariant
    mode: EncodingMode
    depth: SampleDepth
    maxval: int
    comments: List[str] = []


class _State(Enum):
    FIELD = 'field'          # Last significant byte was part of a token
    SEPARATOR = 'separator'  # Last significant byte was whitespace
    COMMENT = 'comment'


class HeaderTokenizer:
    """
    Finite-state machine that consumes header bytes one at a time.

    Call feed() with each byte after the magic number until it returns
    True, at which point width, height and maxval hold the parsed fields.
    """
    def __init__(self, variant: FormatVariant):
        self.variant = variant
        self.state = _State.FIELD  # The magic number counts as a token
        self.resume_state = None
        # -1 until the whitespace following the magic number is seen
        self.field_index = -1
        self.fields = [0, 0, 0]
        self.comments = []
        self._comment = bytearray()

    @property
    def width(self):
        return self.fields[0]

    @property
    def height(self):
        return self.fields[1]

    @property
    def maxval(self):
        return self.fields[2] if self.variant.has_maxval else 1

    def feed(self, byte: int, position: Optional[int] = None) -> bool:
        if self.state is _State.COMMENT:
            if byte == LF:
                self.comments.append(self._comment.decode(errors='replace').strip())
                self._comment.clear()
                self.state = self.resume_state
            else:
                self._comment.append(byte)
            return False

        byte_class = classify(byte)
        if byte_class is ByteClass.COMMENT:
            self.resume_state = self.state
            self.state = _State.COMMENT
        elif byte_class is ByteClass.DIGIT:
            if not 0 <= self.field_index < self.variant.header_fields:
                raise HeaderOverrun()
            self.fields[self.field_index] = self.fields[self.field_index] * 10 + byte - 48
            self.state = _State.FIELD
        elif byte_class is ByteClass.WHITESPACE:
            if self.state is _State.FIELD:
                self.field_index += 1
                self.state = _State.SEPARATOR
                if self.field_index >= self.variant.header_fields:
                    return True
        else:
            raise UnexpectedHeaderCharacter(byte, position)
        return False


def parse_header(buffer: Union[bytes, bytearray, memoryview],
                 variants=None) -> ImageHeader:
    """
    Parse the header at the start of a netpbm file's contents.

    Parameters
    ----------
    buffer : bytes-like
        The file contents. Only the header portion is examined.

    variants : FormatVariant or iterable of FormatVariant, optional
        If given, only files of these variants are accepted and any other
        magic number raises UnsupportedNetpbmType.

    Returns
    -------
    ImageHeader
        data_offset is the index into `buffer` where pixel data begins.
    """
    if len(buffer) < 2 or buffer[0] != ord('P'):
        raise NotNetpbmFile()
    try:
        variant, mode = lookup_magic(buffer[1])
    except KeyError:
        raise NotNetpbmFile() from None
    if isinstance(variants, FormatVariant):
        variants = (variants,)
    elif variants is not None:
        variants = tuple(variants)
    if variants is not None and variant not in variants:
        raise UnsupportedNetpbmType(
            f'Input is an unsupported netpbm type: P{chr(buffer[1])} holds a'
            f' {variant.extension} image but {"/".join(v.extension for v in variants)}'
            ' was expected.')

    tokenizer = HeaderTokenizer(variant)
    for position in range(2, len(buffer)):
        if tokenizer.feed(buffer[position], position):
            data_offset = position + 1
            break
    else:
        raise TruncatedHeader()

    maxval = tokenizer.maxval
    if variant is FormatVariant.BITMAP:
        depth = SampleDepth.EIGHT
    else:
        if not 0 < maxval <= SampleDepth.SIXTEEN.maxval:
            raise UnsupportedNetpbmType(f'maxval must be between 1 and 65535 but was {maxval}')
        depth = SampleDepth.from_maxval(maxval)

    return ImageHeader(width=tokenizer.width,
                       height=tokenizer.height,
                       data_offset=data_offset,
                       variant=variant,
                       mode=mode,
                       depth=depth,
                       maxval=maxval,
                       comments=tokenizer.comments)


def format_comments(comments) -> bytes:
    """
    Turn a str (possibly multi-line) or a list of str into '# '-prefixed
    header comment lines.
    """
    if comments is None:
        return b''
    if isinstance(comments, (list, tuple)):
        comments = '\n'.join(comments)
    if not isinstance(comments, str):
        raise TypeError(f'comments must be a str but was {type(comments)}')
    # Insist on each line starting with a '# '
    comments = '# ' + comments.replace('\n', '\n# ')
    # Remove any double '# ', if we created any
    comments = comments.replace('# # ', '# ')
    while any([comments.endswith(c) for c in ['#', ' ', '\n']]):
        comments = comments[:-1]
    if not comments:
        return b''
    return comments.encode() + b'\n'


def format_header(variant: FormatVariant,
                  mode: EncodingMode,
                  width: int,
                  height: int,
                  depth: SampleDepth = SampleDepth.EIGHT,
                  comments=None) -> bytes:
    header = magic_number(variant, mode) + b'\n'
    header += format_comments(comments)
    header += f'{width} {height}\n'.encode()
    if variant.has_maxval:
        header += f'{depth.maxval}\n'.encode()
    return header

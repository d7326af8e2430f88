#!/usr/bin/env python3
"""
Exceptions raised while reading or writing netpbm data.

All of them subclass NetpbmError, which is a ValueError, so callers that
already catch ValueError for bad image input keep working.
"""


class NetpbmError(ValueError):
    pass


class NotNetpbmFile(NetpbmError):
    def __init__(self, message='Input is not a netpbm file.'):
        super().__init__(message)


class UnsupportedNetpbmType(NetpbmError):
    def __init__(self, message='Input is an unsupported netpbm type.'):
        super().__init__(message)


class UnexpectedHeaderCharacter(NetpbmError):
    """A byte that is not a digit, whitespace or comment was found in a header."""
    def __init__(self, character: int, position=None):
        self.character = character
        self.position = position
        message = f'Unexpected character in file header. Character: {character}'
        if position is not None:
            message += f' (at byte {position})'
        super().__init__(message)


class HeaderOverrun(NetpbmError):
    def __init__(self, message='Loader reading past end of header.'):
        super().__init__(message)


class TruncatedHeader(NetpbmError):
    def __init__(self, message='Input ended before the header was complete.'):
        super().__init__(message)


class WidthTooWideForAscii(NetpbmError):
    def __init__(self, width, limit):
        self.width = width
        self.limit = limit
        super().__init__(f'Width can not be greater than {limit} for ascii'
                         f' netpbm files, but was {width}.')


class LineTooWide(NetpbmError):
    def __init__(self, row, limit):
        self.row = row
        self.limit = limit
        super().__init__(f'Row {row} needs more than {limit} characters,'
                         ' which is not allowed in ascii netpbm files.')


class PixelDataSizeMismatch(NetpbmError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f'Expected {expected} bytes of pixel data but'
                         f' got {actual}.')

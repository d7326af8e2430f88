#!/usr/bin/env python3

import numpy as np
import pytest

import npnetpbm
from npnetpbm import Image, decode, decode_with_header, encode, predict_size
from npnetpbm.errors import (WidthTooWideForAscii, LineTooWide,
                             PixelDataSizeMismatch, UnsupportedNetpbmType)
from npnetpbm.formats import FormatVariant, EncodingMode, SampleDepth

J = [0, 0, 0, 0, 1, 0,
     0, 0, 0, 0, 1, 0,
     0, 0, 0, 0, 1, 0,
     0, 0, 0, 0, 1, 0,
     0, 0, 0, 0, 1, 0,
     0, 0, 0, 0, 1, 0,
     1, 0, 0, 0, 1, 0,
     0, 1, 1, 1, 0, 0,
     0, 0, 0, 0, 0, 0,
     0, 0, 0, 0, 0, 0]


def make_image(variant, depth, width, height=3, ascii_safe=False, seed=0):
    rng = np.random.default_rng(seed)
    if variant is FormatVariant.BITMAP:
        values = rng.integers(0, 2, size=width * height)
        return Image(width, height, values.astype(np.uint8).tobytes(), variant)
    high = 10 if ascii_safe else depth.maxval + 1
    values = rng.integers(0, high, size=width * height * variant.channels)
    return Image(width, height, values.astype(depth.dtype).tobytes(), variant, depth)


def test_decode_ascii_pbm():
    buffer = b'P1\n6 10\n' + ' '.join(str(v) for v in J).encode() + b'\n'
    image, header = decode_with_header(buffer)
    assert (image.width, image.height) == (6, 10)
    assert header.data_offset == 8
    assert header.depth is SampleDepth.EIGHT
    assert header.mode is EncodingMode.ASCII
    assert image.variant is FormatVariant.BITMAP
    assert image.data == bytes(J)


def test_decode_binary_pgm_is_raw_copy():
    image = decode(b'P5\n2 2\n255\n' + bytes([0, 255, 255, 0]))
    assert image.variant is FormatVariant.GRAYMAP
    assert image.data == bytes([0, 255, 255, 0])
    assert image.to_array().tolist() == [[0, 255], [255, 0]]


def test_decode_sixteen_bit_binary_is_big_endian():
    image = decode(b'P5\n1 2\n65535\n\x01\x02\xff\x00')
    assert image.depth is SampleDepth.SIXTEEN
    array = image.to_array()
    assert array.dtype == np.uint16
    assert array.tolist() == [[258], [65280]]


def test_decode_ascii_ppm_without_trailing_newline():
    image = decode(b'P3\n2 1\n255\n255 0 0 0 0 255')
    assert image.variant is FormatVariant.PIXMAP
    array = image.to_array()
    assert array.shape == (1, 2, 3)
    assert array.tolist() == [[[255, 0, 0], [0, 0, 255]]]


def test_decode_binary_pbm():
    image = decode(b'P4\n6 2\n' + bytes([0b00001011, 0b10001000]))
    assert image.data == bytes([0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0])
    assert image.to_array().dtype == bool


def test_decode_with_restricted_variants():
    with pytest.raises(UnsupportedNetpbmType):
        decode(b'P5\n1 1\n255\n\x00', variants=FormatVariant.BITMAP)


@pytest.mark.parametrize('buffer', [
    b'P5\n2 2\n255\n\x00\x00\x00',
    b'P6\n1 1\n65535\n\x00\x00\x00\x00\x00',
    b'P4\n9 2\n\x00\x00\x00',
    b'P2\n2 2\n255\n1 2 3',
    b'P1\n2 2\n0 1 1',
])
def test_missing_pixel_data(buffer):
    with pytest.raises(PixelDataSizeMismatch):
        decode(buffer)


def test_surplus_pixel_data_is_ignored(capsys):
    image = decode(b'P5\n2 1\n255\n\x01\x02\x03\x04')
    assert image.data == bytes([1, 2])
    assert 'WARNING' in capsys.readouterr().out

    image = decode(b'P2\n2 1\n255\n1 2\n3\n')
    assert image.data == bytes([1, 2])
    assert 'WARNING' in capsys.readouterr().out


@pytest.mark.parametrize('variant', list(FormatVariant))
@pytest.mark.parametrize('mode', list(EncodingMode))
@pytest.mark.parametrize('depth', list(SampleDepth))
@pytest.mark.parametrize('width', [5, 11, 16])
def test_round_trip(variant, mode, depth, width):
    if variant is FormatVariant.BITMAP and depth is SampleDepth.SIXTEEN:
        pytest.skip('Bitmaps are always 8 bit')
    image = make_image(variant, depth, width,
                       ascii_safe=mode is EncodingMode.ASCII, seed=width)
    assert decode(encode(image, mode)) == image


@pytest.mark.parametrize('variant', list(FormatVariant))
@pytest.mark.parametrize('mode', list(EncodingMode))
def test_reencoding_is_identical(variant, mode):
    depth = SampleDepth.EIGHT if variant is FormatVariant.BITMAP else SampleDepth.SIXTEEN
    image = make_image(variant, depth, 7, ascii_safe=True)
    encoded = encode(image, mode, comments='first line\nsecond line')
    decoded, header = decode_with_header(encoded)
    reencoded = encode(decoded, mode, comments=header.comments)
    assert reencoded[:header.data_offset] == encoded[:header.data_offset]
    assert reencoded == encoded


def test_encode_headers():
    image = Image(2, 1, bytes([0, 1, 0, 2]), FormatVariant.GRAYMAP, SampleDepth.SIXTEEN)
    assert encode(image, 'ascii') == b'P2\n2 1\n65535\n1 2\n'
    assert encode(image, 'binary') == b'P5\n2 1\n65535\n' + bytes([0, 1, 0, 2])
    bitmap = Image(6, 10, bytes(J), FormatVariant.BITMAP)
    assert encode(bitmap, EncodingMode.BINARY).startswith(b'P4\n6 10\n')
    assert encode(bitmap, EncodingMode.ASCII).startswith(b'P1\n6 10\n0 0 0 0 1 0\n')


def test_encode_wide_ascii_bitmap():
    image = Image(160, 2, bytes(320), FormatVariant.BITMAP)
    with pytest.raises(WidthTooWideForAscii):
        encode(image, 'ascii')
    # Binary bitmaps have no width limit
    assert len(encode(image, 'binary')) == len(b'P4\n160 2\n') + 40


def test_encode_sixteen_bit_ppm_line_too_wide():
    image = Image(6, 10, bytes([255] * 360), FormatVariant.PIXMAP, SampleDepth.SIXTEEN)
    with pytest.raises(LineTooWide):
        encode(image, 'ascii')


def test_encode_bad_mode():
    image = make_image(FormatVariant.GRAYMAP, SampleDepth.EIGHT, 3)
    with pytest.raises(ValueError):
        encode(image, 'compressed')
    with pytest.raises(TypeError):
        encode(image.data, 'binary')


def test_predict_size():
    for variant in FormatVariant:
        for width in [5, 8, 13]:
            image = make_image(variant, SampleDepth.EIGHT, width, ascii_safe=True)
            for mode in EncodingMode:
                assert predict_size(image, mode) == len(encode(image, mode))
            assert predict_size(image, comments='hi') == len(encode(image, comments='hi'))


def test_image_checks_buffer_size():
    with pytest.raises(PixelDataSizeMismatch):
        Image(2, 2, bytes(3), FormatVariant.BITMAP)
    with pytest.raises(PixelDataSizeMismatch):
        Image(2, 2, bytes(4), FormatVariant.GRAYMAP, SampleDepth.SIXTEEN)
    with pytest.raises(PixelDataSizeMismatch):
        Image(2, 2, bytes(4), FormatVariant.PIXMAP)
    Image(2, 2, bytes(24), FormatVariant.PIXMAP, SampleDepth.SIXTEEN)
    with pytest.raises(ValueError):
        Image(-1, 2, b'')


def test_from_array():
    image = Image.from_array(np.eye(3, dtype=bool))
    assert image.variant is FormatVariant.BITMAP
    assert image.data == bytes([1, 0, 0, 0, 1, 0, 0, 0, 1])

    image = Image.from_array(np.zeros((4, 5), dtype=np.uint16))
    assert (image.variant, image.depth) == (FormatVariant.GRAYMAP, SampleDepth.SIXTEEN)
    assert (image.width, image.height) == (5, 4)

    image = Image.from_array(np.zeros((4, 5, 3), dtype=np.uint8))
    assert (image.variant, image.depth) == (FormatVariant.PIXMAP, SampleDepth.EIGHT)

    image = Image.from_array(np.array([[300, 2]]))
    assert image.depth is SampleDepth.SIXTEEN
    assert image.data == bytes([1, 44, 0, 2])

    image = Image.from_array(np.array([[3, 2]]))
    assert image.depth is SampleDepth.EIGHT

    with pytest.raises(TypeError):
        Image.from_array(np.zeros((2, 2), dtype=float))
    with pytest.raises(ValueError):
        Image.from_array(np.array([[-1, 2]]))
    with pytest.raises(ValueError):
        Image.from_array(np.array([[256, 2]], dtype=np.uint16), depth=SampleDepth.EIGHT)
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((4, 5)), variant=FormatVariant.PIXMAP)
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((2, 4, 5), dtype=np.uint8))


def test_from_array_to_array():
    data = np.arange(24, dtype=np.uint16).reshape(2, 4, 3) * 1000
    image = Image.from_array(data)
    assert np.array_equal(image.to_array(), data)
    assert image.to_array().dtype == np.uint16


def test_from_array_bitmap_warns_about_lossy_values(capsys):
    image = Image.from_array(np.array([[0, 1], [2, 0]]), variant=FormatVariant.BITMAP)
    assert image.data == bytes([0, 1, 1, 0])
    assert 'WARNING' in capsys.readouterr().out


def test_top_level_names():
    assert npnetpbm.decode is decode
    assert issubclass(npnetpbm.LineTooWide, npnetpbm.NetpbmError)

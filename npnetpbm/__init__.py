#!/usr/bin/env python3

from .imageio import *

from .codec import Image, decode, decode_with_header, encode, predict_size
from .header import ImageHeader, parse_header, format_header
from .formats import FormatVariant, EncodingMode, SampleDepth
from .errors import *
from .utils import to_8bit

# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A binary codec that mirrors the in-memory layout of values: fixed width numbers in big or little endian, strings and
byte buffers as raw bytes, compound values as the concatenation of their parts. Nothing else is ever written, no
lengths, no tags, no terminators.
"""

from podcodec.api import decode_from_bytes, decode_from_source, encode_to_bytes, encode_to_sink
from podcodec.byteorder import ByteOrder
from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import (
    CustomError,
    EncodingError,
    OutOfDataError,
    SerializationError,
    SerializationIOError,
    UnsupportedOperationError,
    UnsupportedTypeError,
)
from podcodec.shapes import Shape, make_shape
from podcodec.types import (
    Identifier,
    IgnoredAny,
    Length,
    char,
    f32,
    f64,
    i8,
    i16,
    i32,
    i64,
    i128,
    u8,
    u16,
    u32,
    u64,
    u128,
)
from podcodec.version import __version__

__all__ = [
    'ByteOrder',
    'CustomError',
    'Decoder',
    'Encoder',
    'EncodingError',
    'Identifier',
    'IgnoredAny',
    'Length',
    'OutOfDataError',
    'SerializationError',
    'SerializationIOError',
    'Shape',
    'UnsupportedOperationError',
    'UnsupportedTypeError',
    '__version__',
    'char',
    'decode_from_bytes',
    'decode_from_source',
    'encode_to_bytes',
    'encode_to_sink',
    'f32',
    'f64',
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'make_shape',
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
]

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

r"""
This module implements utf-8 encoding of strings and of single characters, without any length prefix.

A string is written as its utf-8 bytes, and decoding it reads everything that is left in the deserializer:

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 666f6f626172
>>> bytes(se.finalize()).hex()
'666f6f626172'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('d182d0b5d181d182'))
>>> decode_utf8(de)
'тест'
>>> de.finalize()

A character is written as its 1 to 4 utf-8 bytes, when decoding the first byte tells how many bytes follow:

>>> se = Serializer.build_bytes_serializer()
>>> encode_char(se, 'a')  # writes 61
>>> encode_char(se, 'т')  # writes d182
>>> encode_char(se, '😎')  # writes f09f988e
>>> bytes(se.finalize()).hex()
'61d182f09f988e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('61d182f09f988e'))
>>> decode_char(de)  # reads 61
'a'
>>> decode_char(de)  # reads d182
'т'
>>> decode_char(de)  # reads f09f988e
'😎'
>>> de.finalize()

Invalid utf-8 raises an `EncodingError`, a truncated character raises an `OutOfDataError`:

>>> de = Deserializer.build_bytes_deserializer(b'\x80')
>>> try:
...     decode_char(de)
... except EncodingError as e:
...     print(*e.args)
invalid utf-8 character: 80

>>> de = Deserializer.build_bytes_deserializer(b'\xd1')
>>> try:
...     decode_char(de)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: 1 requested, 0 available

>>> de = Deserializer.build_bytes_deserializer(b'ab\xff')
>>> try:
...     decode_utf8(de)
... except EncodingError as e:
...     print(*e.args)
invalid utf-8 string: 'utf-8' codec can't decode byte 0xff in position 2: invalid start byte
"""

from podcodec.serialization import CustomError, Deserializer, EncodingError, OutOfDataError, Serializer  # noqa: F401

# number of bytes of a utf-8 encoded character, indexed by its first byte, 0 means the byte cannot start a character
UTF8_CHAR_WIDTH: bytes = bytes(
    [1] * 0x80  # 0x00..0x7f: ascii
    + [0] * 0x42  # 0x80..0xc1: continuation bytes and overlong 2 byte forms
    + [2] * 0x1e  # 0xc2..0xdf
    + [3] * 0x10  # 0xe0..0xef
    + [4] * 0x05  # 0xf0..0xf4
    + [0] * 0x0b  # 0xf5..0xff: beyond U+10FFFF
)
assert len(UTF8_CHAR_WIDTH) == 256


def utf8_char_width(first_byte: int) -> int:
    """ Number of bytes of a utf-8 character that starts with the given byte, or 0 if it's not a valid start.

    >>> [utf8_char_width(b) for b in (0x00, 0x7f, 0x80, 0xc1, 0xc2, 0xdf, 0xe0, 0xef, 0xf0, 0xf4, 0xf5, 0xff)]
    [1, 1, 0, 0, 2, 2, 3, 3, 4, 4, 0, 0]
    """
    return UTF8_CHAR_WIDTH[first_byte]


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8, without a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    serializer.write_bytes(value.encode('utf-8'))


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string by consuming the rest of the deserializer.

    This modules's docstring has more details and examples.
    """
    data = bytes(deserializer.read_all())
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f'invalid utf-8 string: {e}') from e


def encode_char(serializer: Serializer, value: str) -> None:
    """ Encodes a single character using its 1 to 4 UTF-8 bytes.
    """
    assert isinstance(value, str)
    if len(value) != 1:
        raise CustomError(f'expected a single character, got {len(value)}')
    serializer.write_bytes(value.encode('utf-8'))


def decode_char(deserializer: Deserializer) -> str:
    """ Decodes a single UTF-8 character, the first byte determines how many more bytes are read.

    A first byte that cannot start a character is consumed alone and fails validation.
    """
    first = deserializer.read_byte()
    width = utf8_char_width(first)
    data = bytes((first,))
    if width > 1:
        data += bytes(deserializer.read_bytes(width - 1))
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f'invalid utf-8 character: {data.hex()}') from e

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
The byte-order policy decides how multi-byte numbers are laid out, it is chosen once per encode/decode call and
applied to every integer wider than 8 bits and to every float.

>>> ByteOrder.BIG.int_to_bytes(0x1234, 2, signed=False).hex()
'1234'
>>> ByteOrder.LITTLE.int_to_bytes(0x1234, 2, signed=False).hex()
'3412'
>>> ByteOrder.LE.int_from_bytes(b'\x34\x12', signed=False) == 0x1234
True
>>> ByteOrder.parse('le') is ByteOrder.LITTLE
True
>>> ByteOrder.BIG.float_format(4)
'>f'
"""

from enum import StrEnum
from typing import Literal

from podcodec.serialization.types import Buffer

_FLOAT_FORMATS: dict[int, str] = {4: 'f', 8: 'd'}

_ALIASES: dict[str, str] = {
    'be': 'big',
    'big': 'big',
    'big_endian': 'big',
    'network': 'big',
    'le': 'little',
    'little': 'little',
    'little_endian': 'little',
}


class ByteOrder(StrEnum):
    BIG = 'big'
    LITTLE = 'little'

    # short names, these are aliases of the members above
    BE = 'big'
    LE = 'little'

    @classmethod
    def parse(cls, value: 'str | ByteOrder') -> 'ByteOrder':
        """Parse any of the usual spellings ('be', 'big', 'big-endian', 'LE', ...) of a byte order."""
        if isinstance(value, ByteOrder):
            return value
        key = str(value).strip().lower().replace('-', '_')
        try:
            return cls(_ALIASES[key])
        except KeyError:
            raise ValueError(f'invalid byte order: {value!r}') from None

    @property
    def struct_prefix(self) -> Literal['>', '<']:
        """Prefix to use with the `struct` module."""
        return '>' if self is ByteOrder.BIG else '<'

    def int_to_bytes(self, value: int, length: int, *, signed: bool) -> bytes:
        """Pack an int in exactly `length` bytes, raises `OverflowError` if it doesn't fit."""
        return value.to_bytes(length, byteorder=self.value, signed=signed)

    def int_from_bytes(self, data: Buffer, *, signed: bool) -> int:
        return int.from_bytes(data, byteorder=self.value, signed=signed)

    def float_format(self, length: int) -> str:
        """Struct format for an IEEE-754 float of the given byte length (4 or 8)."""
        try:
            return self.struct_prefix + _FLOAT_FORMATS[length]
        except KeyError:
            raise ValueError(f'unsupported float length: {length}') from None

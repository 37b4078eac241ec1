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
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

A single byte is always written as is, the byte order only matters for 2 bytes or more.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True)  # writes 04d2
>>> encode_int(se, -1234, length=2, signed=True, byte_order=ByteOrder.LITTLE)  # writes 2efb
>>> encode_int(se, 0x12345678, length=4, signed=False, byte_order=ByteOrder.LITTLE)  # writes 78563412
>>> bytes(se.finalize()).hex()
'00ff04d22efb78563412'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d22efb78563412'))
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, byte_order=ByteOrder.LITTLE)  # reads 2efb
-1234
>>> hex(decode_int(de, length=4, signed=False, byte_order=ByteOrder.LITTLE))  # reads 78563412
'0x12345678'
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False)
... except CustomError as e:
...     print(*e.args)
256 does not fit in 1 unsigned byte(s)

>>> de = Deserializer.build_bytes_deserializer(b'\x12')
>>> try:
...     decode_int(de, length=2, signed=False)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: 2 requested, 1 available
"""

from podcodec.byteorder import ByteOrder
from podcodec.serialization import CustomError, Deserializer, OutOfDataError, Serializer  # noqa: F401


def encode_int(
    serializer: Serializer,
    number: int,
    *,
    length: int,
    signed: bool,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    try:
        data = byte_order.int_to_bytes(number, length, signed=signed)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise CustomError(f'{number} does not fit in {length} {kind} byte(s)') from None
    serializer.write_bytes(data)


def decode_int(
    deserializer: Deserializer,
    *,
    length: int,
    signed: bool,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return byte_order.int_from_bytes(data, signed=signed)

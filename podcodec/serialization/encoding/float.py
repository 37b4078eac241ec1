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
This module implements encoding of IEEE-754 floats, in single (4 bytes) or double (8 bytes) precision.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 3fc00000
>>> encode_float(se, 1.5, length=4, byte_order=ByteOrder.LITTLE)  # writes 0000c03f
>>> encode_float(se, -2.0, length=8)  # writes c000000000000000
>>> bytes(se.finalize()).hex()
'3fc000000000c03fc000000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc000000000c03fc000000000000000'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=4, byte_order=ByteOrder.LITTLE)
1.5
>>> decode_float(de, length=8)
-2.0
>>> de.finalize()

Precision is lost when a double doesn't have an exact single precision representation:

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 0.1, length=4)
>>> de = Deserializer.build_bytes_deserializer(se.finalize())
>>> decode_float(de, length=4) == 0.1
False

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, 1e300, length=4)
... except CustomError as e:
...     print(*e.args)
1e+300 does not fit in a 4 byte float
"""

from podcodec.byteorder import ByteOrder
from podcodec.serialization import CustomError, Deserializer, Serializer


def encode_float(
    serializer: Serializer,
    value: float,
    *,
    length: int,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> None:
    """ Encode a float using the given byte-length (4 or 8) and byte order.

    This modules's docstring has more details and examples.
    """
    format = byte_order.float_format(length)
    try:
        serializer.write_struct((value,), format)
    except OverflowError:
        raise CustomError(f'{value} does not fit in a {length} byte float') from None


def decode_float(deserializer: Deserializer, *, length: int, byte_order: ByteOrder = ByteOrder.BIG) -> float:
    """ Decode a float using the given byte-length (4 or 8) and byte order.

    This modules's docstring has more details and examples.
    """
    value, = deserializer.read_struct(byte_order.float_format(length))
    return value

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
This module implements encoding of a raw byte sequence: the bytes are written as they are, without a length prefix.

Since nothing marks where the sequence ends, decoding reads everything that is left in the deserializer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')
>>> bytes(se.finalize()).hex()
'74657374'

>>> de = Deserializer.build_bytes_deserializer(b'test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'')
>>> decode_bytes(de)
b''

Use `take()` to decode a byte sequence of a known size that is followed by something else:

>>> de = Deserializer.build_bytes_deserializer(b'testfoo')
>>> decode_bytes(de.take(4))
b'test'
>>> bytes(de.read_all())
b'foo'
"""

from podcodec.serialization import Deserializer, Serializer
from podcodec.serialization.types import Buffer


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence as is.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray, memoryview))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence by consuming the rest of the deserializer.

    This modules's docstring has more details and examples.
    """
    return bytes(deserializer.read_all())

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
There isn't a "format" per-se for a tuple, the encoding of `tuple[A, B, C]` is the encoding of A concatenated with B
concatenated with C. This compound encoder is a shortcut for cases that already have a tuple of values and a matching
tuple of encoders of those values. The same layout is used for structs, fields are just encoded in order.

>>> from podcodec.serialization.encoding.utf8 import encode_char, decode_char
>>> from podcodec.serialization.encoding.int import encode_int, decode_int
>>> from functools import partial
>>> u16 = dict(length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, ('a', 0x1234, 'π'), (encode_char, partial(encode_int, **u16), encode_char))
>>> bytes(se.finalize()).hex()
'611234cf80'

Breakdown of the result:

    61: 'a'
    1234: 0x1234
    cf80: 'π'

Exactly as many values as decoders are read, whatever comes after is left in the deserializer:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('611234cf80ff'))
>>> decode_tuple(de, (decode_char, partial(decode_int, **u16), decode_char))
('a', 4660, 'π')
>>> bytes(de.read_all())
b'\xff'
"""

from typing import Any

from podcodec.serialization import CustomError, Deserializer, Serializer

from . import ElementDecoder, ElementEncoder


def encode_tuple(
    serializer: Serializer,
    values: tuple[Any, ...],
    encoders: tuple[ElementEncoder[Any, Any], ...],
) -> None:
    if len(values) != len(encoders):
        raise CustomError(f'expected {len(encoders)} values, got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[ElementDecoder[Any, Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)

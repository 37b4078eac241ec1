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
Sequences are written without a count: the layout is just `[value_0]...[value_N]`.

>>> from functools import partial
>>> from podcodec.serialization.encoding.int import encode_int, decode_int
>>> encode_u16 = partial(encode_int, length=2, signed=False)
>>> decode_u16 = partial(decode_int, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_sequence(se, [0x1234, 0x5678, 0xabcd], encode_u16)
>>> bytes(se.finalize()).hex()
'12345678abcd'

Since there is no count, a sequence of unknown length is decoded by reading elements until the deserializer is
empty. The builder can be any collection that can be initialized with an `Iterable[T]`:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('12345678abcd'))
>>> [hex(i) for i in decode_sequence(de, decode_u16, list)]
['0x1234', '0x5678', '0xabcd']
>>> de.finalize()

An element that is cut short fails the whole sequence:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('12345678ab'))
>>> try:
...     decode_sequence(de, decode_u16, list)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: 2 requested, 1 available

Sequences of a known length (fixed-size arrays) use the tuple layout instead, see `compound_encoding.tuple`.
"""

from collections.abc import Iterable, Iterator
from typing import Callable, TypeVar

from podcodec.serialization import Deserializer, OutOfDataError, Serializer  # noqa: F401

from . import ElementDecoder, ElementEncoder

T = TypeVar('T')
R = TypeVar('R')


def encode_sequence(serializer: Serializer, values: Iterable[T], encoder: ElementEncoder[Serializer, T]) -> None:
    for value in values:
        encoder(serializer, value)


def decode_sequence(
    deserializer: Deserializer,
    decoder: ElementDecoder[Deserializer, T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    def iter_values() -> Iterator[T]:
        while not deserializer.is_empty():
            yield decoder(deserializer)
    return builder(iter_values())

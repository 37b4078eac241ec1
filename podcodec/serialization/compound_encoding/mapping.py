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
A mapping is written as its entries in iteration order, each entry as the key followed by the value, there is no
count and no separator.

>>> from podcodec.serialization.encoding.utf8 import encode_char
>>> from podcodec.serialization.encoding.bool import encode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_mapping(se, {'a': True, 'b': False}, encode_char, encode_bool)
>>> bytes(se.finalize()).hex()
'61016200'

Without a count or any marker a mapping cannot be decoded, there is no `decode_mapping`.
"""

from collections.abc import Mapping
from typing import TypeVar

from podcodec.serialization import Serializer

from . import ElementEncoder

K = TypeVar('K')
V = TypeVar('V')


def encode_mapping(
    serializer: Serializer,
    values: Mapping[K, V],
    key_encoder: ElementEncoder[Serializer, K],
    value_encoder: ElementEncoder[Serializer, V],
) -> None:
    for key, value in values.items():
        key_encoder(serializer, key)
        value_encoder(serializer, value)

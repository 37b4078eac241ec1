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
An optional value is written without a tag: `None` writes nothing and a present value writes just the value.

>>> from podcodec.serialization.encoding.utf8 import encode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'test', encode_utf8)
>>> encode_optional(se, None, encode_utf8)
>>> bytes(se.finalize())
b'test'

Since absence leaves no trace in the output, there is no `decode_optional`.
"""

from typing import Optional, TypeVar

from podcodec.serialization import Serializer

from . import ElementEncoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: ElementEncoder[Serializer, T]) -> None:
    if value is not None:
        encoder(serializer, value)

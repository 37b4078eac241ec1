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

from __future__ import annotations

from typing import Any

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError
from podcodec.serialization.types import Buffer
from podcodec.shapes.shape import Shape


class BytesShape(Shape[Buffer]):
    """ Represents a raw byte sequence, any bytes-like value is accepted, `bytes` are always produced.
    """

    __slots__ = ()
    _is_decodable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        return cls()

    @override
    def _check_value(self, value: Buffer, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise CustomError(f'expected bytes, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: Buffer, /) -> None:
        encoder.encode_bytes(value)

    @override
    def _decode(self, decoder: Decoder, /) -> bytes:
        return decoder.decode_bytes()

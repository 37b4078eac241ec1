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
Shapes that exist in the data model but that this codec can't handle in any direction, they fail with an
`UnsupportedOperationError` as soon as they are encoded or decoded.
"""

from __future__ import annotations

from typing import Any

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.shapes.shape import Shape


class _UnsupportedShape(Shape[Any]):
    __slots__ = ()
    _is_decodable = False

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        return cls()

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        pass


class AnyShape(_UnsupportedShape):
    """ Represents `typing.Any` and `object`: without a type the layout is unknown.
    """

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> None:
        encoder.encode_any(value)

    @override
    def _decode(self, decoder: Decoder, /) -> Any:
        decoder.decode_any()


class IdentifierShape(_UnsupportedShape):
    """ Represents `Identifier`.
    """

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> None:
        encoder.encode_identifier(value)

    @override
    def _decode(self, decoder: Decoder, /) -> Any:
        decoder.decode_identifier()


class IgnoredAnyShape(_UnsupportedShape):
    """ Represents `IgnoredAny`.
    """

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> None:
        encoder.encode_ignored_any(value)

    @override
    def _decode(self, decoder: Decoder, /) -> Any:
        decoder.decode_ignored_any()

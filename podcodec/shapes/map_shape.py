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

from collections.abc import Mapping
from typing import Any, TypeVar, get_args

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.shape import Shape

K = TypeVar('K')
V = TypeVar('V')


class MapShape(Shape[Mapping[K, V]]):
    """ Represents `dict[K, V]` and other mappings, entries are encoded as key then value, without a count.

    With no count, maps can be encoded but never decoded.
    """

    __slots__ = ('_key', '_value')

    _key: Shape[K]
    _value: Shape[V]

    def __init__(self, key: Shape[K], value: Shape[V]) -> None:
        self._key = key
        self._value = value

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 2:
            raise UnsupportedTypeError('expected dict[<type>, <type>]')
        key_type, value_type = args
        return cls(Shape.from_type(key_type, type_map=type_map), Shape.from_type(value_type, type_map=type_map))

    @override
    def is_decodable(self) -> bool:
        return False

    @override
    def _check_value(self, value: Mapping[K, V], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise CustomError(f'expected a mapping, got {type(value).__name__}')
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: Mapping[K, V], /) -> None:
        encoder.encode_map(value, self._key, self._value)

    @override
    def _decode(self, decoder: Decoder, /) -> Mapping[K, V]:
        decoder.decode_map()

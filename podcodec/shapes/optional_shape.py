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

from types import NoneType
from typing import Any, TypeVar, get_args

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import UnsupportedTypeError
from podcodec.shapes.shape import Shape

V = TypeVar('V')


class OptionalShape(Shape[V | None]):
    """ Represents a value that is either `V` or `None`.

    `None` takes no bytes and a present value is encoded as is, so optionals can be encoded but never decoded.
    """

    __slots__ = ('_value',)

    _value: Shape[V]

    def __init__(self, shape: Shape[V]) -> None:
        self._value = shape

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 2 or NoneType not in args:
            raise UnsupportedTypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)
        return cls(Shape.from_type(not_none_type, type_map=type_map))

    @override
    def is_decodable(self) -> bool:
        return False

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: V | None, /) -> None:
        if value is None:
            encoder.encode_none()
        else:
            encoder.encode_some(value, self._value)

    @override
    def _decode(self, decoder: Decoder, /) -> V | None:
        decoder.decode_option()

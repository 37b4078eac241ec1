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

from typing import Any, TypeVar

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import UnsupportedTypeError
from podcodec.shapes.shape import Shape
from podcodec.shapes.utils import is_newtype

T = TypeVar('T')


class NewtypeShape(Shape[T]):
    """ Represents a `typing.NewType` wrapper, it has exactly the layout of the wrapped type.
    """

    __slots__ = ('_name', '_inner')

    _name: str
    _inner: Shape[T]

    def __init__(self, name: str, inner: Shape[T]) -> None:
        self._name = name
        self._inner = inner

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_newtype(type_):
            raise UnsupportedTypeError('expected a NewType')
        return cls(type_.__name__, Shape.from_type(type_.__supertype__, type_map=type_map))

    @override
    def is_decodable(self) -> bool:
        return self._inner.is_decodable()

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        self._inner._check_value(value, deep=deep)

    @override
    def _encode(self, encoder: Encoder, value: T, /) -> None:
        encoder.encode_newtype_struct(self._name, value, self._inner)

    @override
    def _decode(self, decoder: Decoder, /) -> T:
        return decoder.decode_newtype_struct(self._name, self._inner)

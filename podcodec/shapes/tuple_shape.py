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

from collections.abc import Iterable
from typing import Any, get_args, get_origin

from typing_extensions import override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.collection_shape import SequenceShape
from podcodec.shapes.shape import Shape


class TupleShape(Shape[tuple]):
    """ Represents `tuple[A, B, ...]` values, a fixed number of elements of different types without a count.

    `tuple[T, ...]` is a sequence of unknown length instead, building from it results in a `SequenceShape`.
    """

    __slots__ = ('_args',)

    _args: tuple[Shape, ...]

    def __init__(self, args: Iterable[Shape]) -> None:
        self._args = tuple(args)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Shape:
        if get_origin(type_) is not tuple:
            raise UnsupportedTypeError('expected tuple[<type>, ...] or tuple[<type>, <type>, ...]')
        args = get_args(type_)
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceShape._from_type(type_, type_map=type_map)
        return cls(Shape.from_type(arg, type_map=type_map) for arg in args)

    @override
    def is_decodable(self) -> bool:
        return all(arg.is_decodable() for arg in self._args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise CustomError(f'expected tuple, got {type(value).__name__}')
        if len(value) != len(self._args):
            raise CustomError(f'expected {len(self._args)} elements, got {len(value)}')
        if deep:
            for item, arg in zip(value, self._args):
                arg._check_value(item, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: tuple, /) -> None:
        encoder.encode_tuple(value, self._args)

    @override
    def _decode(self, decoder: Decoder, /) -> tuple:
        return decoder.decode_tuple(self._args)

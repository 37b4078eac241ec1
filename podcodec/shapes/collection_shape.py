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

from collections import deque
from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.shape import Shape
from podcodec.shapes.utils import pretty_type
from podcodec.types import Length

T = TypeVar('T')

# how to build each supported collection from an iterable of items
_BUILDERS: dict[type, Callable[[Iterable[Any]], Collection[Any]]] = {
    list: list,
    tuple: tuple,
    deque: deque,
}


def _get_item_type(type_: Any) -> tuple[Any, Callable[[Iterable[Any]], Collection[Any]]]:
    """ Extract the item type and builder from `list[T]`, `deque[T]` or `tuple[T, ...]`.
    """
    origin = get_origin(type_) or type_
    builder = _BUILDERS.get(origin)
    if builder is None:
        raise UnsupportedTypeError(f'expected list, tuple or deque, got {pretty_type(type_)}')
    args = get_args(type_)
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            raise UnsupportedTypeError('expected tuple[<type>, ...]')
        return args[0], builder
    if len(args) != 1:
        raise UnsupportedTypeError(f'expected {origin.__name__}[<type>]')
    return args[0], builder


def _check_collection(value: Any) -> None:
    if not isinstance(value, Iterable) or isinstance(value, (str, bytes, bytearray, memoryview, Mapping)):
        raise CustomError(f'expected a sequence, got {type(value).__name__}')


class SequenceShape(Shape[Collection[T]]):
    """ Represents `list[T]`, `deque[T]` and `tuple[T, ...]`, a sequence of unknown length.

    Elements are encoded one after the other, without a count, and decoded until the source is empty.
    """

    __slots__ = ('_item', '_builder')

    _item: Shape[T]
    _builder: Callable[[Iterable[T]], Collection[T]]

    def __init__(self, item: Shape[T], builder: Callable[[Iterable[T]], Collection[T]] = list) -> None:
        self._item = item
        self._builder = builder

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        item_type, builder = _get_item_type(type_)
        return cls(Shape.from_type(item_type, type_map=type_map), builder)

    @override
    def is_decodable(self) -> bool:
        return self._item.is_decodable()

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        _check_collection(value)
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: Collection[T], /) -> None:
        encoder.encode_seq(value, self._item)

    @override
    def _decode(self, decoder: Decoder, /) -> Collection[T]:
        return decoder.decode_seq(self._item, self._builder)


class ArrayShape(Shape[Collection[T]]):
    """ Represents `Annotated[list[T], Length(n)]` (or `tuple[T, ...]`), an array of exactly `n` elements.

    Arrays use the same layout as tuples: the elements one after the other, without a count.
    """

    __slots__ = ('_item', '_length', '_builder')

    _item: Shape[T]
    _length: int
    _builder: Callable[[Iterable[T]], Collection[T]]

    def __init__(self, item: Shape[T], length: int, builder: Callable[[Iterable[T]], Collection[T]] = list) -> None:
        self._item = item
        self._length = length
        self._builder = builder

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        lengths = [m for m in getattr(type_, '__metadata__', ()) if isinstance(m, Length)]
        if len(lengths) != 1:
            raise UnsupportedTypeError('expected exactly one Length() in Annotated[...]')
        length, = lengths
        item_type, builder = _get_item_type(type_.__origin__)
        return cls(Shape.from_type(item_type, type_map=type_map), length.value, builder)

    @override
    def is_decodable(self) -> bool:
        return self._item.is_decodable()

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        _check_collection(value)
        if not isinstance(value, Collection) or len(value) != self._length:
            raise CustomError(f'expected {self._length} elements')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: Collection[T], /) -> None:
        encoder.encode_tuple(tuple(value), (self._item,) * self._length)

    @override
    def _decode(self, decoder: Decoder, /) -> Collection[T]:
        return self._builder(decoder.decode_tuple((self._item,) * self._length))

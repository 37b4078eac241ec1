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
from typing import Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.shape import Shape
from podcodec.shapes.utils import is_namedtuple

N = TypeVar('N', bound=tuple)


class TupleStructShape(Shape[N]):
    """ Represents a NamedTuple, fields are encoded in order like a tuple.

    A NamedTuple with a single field is a newtype and one without fields is a unit struct, neither adds any byte of
    its own, so in practice all three share the same layout.
    """

    __slots__ = ('_args', '_class')

    _args: tuple[Shape, ...]
    _class: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[Shape]) -> None:
        self._class = namedtuple
        self._args = tuple(args)

    @property
    def name(self) -> str:
        return self._class.__name__

    @override
    @classmethod
    def _from_type(cls, type_: type[N], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_namedtuple(type_):
            raise UnsupportedTypeError('expected NamedTuple type')
        hints = get_type_hints(type_, include_extras=True)
        args = [hints[field_name] for field_name in type_._fields]  # type: ignore[attr-defined]
        return cls(type_, (Shape.from_type(arg, type_map=type_map) for arg in args))

    @override
    def is_decodable(self) -> bool:
        return all(arg.is_decodable() for arg in self._args)

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise CustomError(f'expected {self.name} instance, got {type(value).__name__}')
        if len(value) != len(self._args):
            raise CustomError(f'expected {len(self._args)} fields, got {len(value)}')
        if deep:
            for item, arg in zip(value, self._args):
                arg._check_value(item, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: N, /) -> None:
        match self._args:
            case ():
                encoder.encode_unit_struct(self.name)
            case (arg,):
                encoder.encode_newtype_struct(self.name, value[0], arg)
            case _:
                encoder.encode_tuple_struct(self.name, tuple(value), self._args)

    def encode_variant(self, encoder: Encoder, enum_name: str, variant_index: int, value: N) -> None:
        """ Encode the value as the variant of an enum, this is used by `VariantShape`.
        """
        self._check_value(value, deep=False)
        match self._args:
            case ():
                encoder.encode_unit_variant(enum_name, variant_index, self.name)
            case (arg,):
                encoder.encode_newtype_variant(enum_name, variant_index, self.name, value[0], arg)
            case _:
                encoder.encode_tuple_variant(enum_name, variant_index, self.name, tuple(value), self._args)

    @override
    def _decode(self, decoder: Decoder, /) -> N:
        values: tuple[Any, ...]
        match self._args:
            case ():
                decoder.decode_unit_struct(self.name)
                values = ()
            case (arg,):
                values = (decoder.decode_newtype_struct(self.name, arg),)
            case _:
                values = decoder.decode_tuple_struct(self.name, self._args)
        return self._class(*values)

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

from enum import Enum
from typing import Any, TypeVar, get_args

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.dataclass_shape import StructShape
from podcodec.shapes.namedtuple_shape import TupleStructShape
from podcodec.shapes.shape import Shape
from podcodec.shapes.utils import is_subclass, pretty_type

E = TypeVar('E', bound=Enum)


class UnitEnumShape(Shape[E]):
    """ Represents an `enum.Enum`, each member is a unit variant.

    Only the payload of a variant is encoded and unit variants have no payload, so any member encodes to nothing.
    Since there is no tag, enums can't be decoded.
    """

    __slots__ = ('_class',)

    _class: type[E]

    def __init__(self, enum_class: type[E]) -> None:
        self._class = enum_class

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise UnsupportedTypeError('expected an Enum subclass')
        return cls(type_)

    @override
    def is_decodable(self) -> bool:
        return False

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise CustomError(f'expected {self._class.__name__} member, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: E, /) -> None:
        variant_index = list(self._class).index(value)
        encoder.encode_unit_variant(self._class.__name__, variant_index, value.name)

    @override
    def _decode(self, decoder: Decoder, /) -> E:
        decoder.decode_enum(self._class.__name__)


class VariantShape(Shape[Any]):
    """ Represents an enum written as a union of classes `A | B | C`, each class being one variant.

    Variants can be dataclasses (struct variants, or unit variants when without fields) and NamedTuples (tuple
    variants, newtype variants with a single field, or unit variants without fields). A value is matched to its
    variant with `isinstance`, the first match wins. Only the payload is encoded, so these can't be decoded.
    """

    __slots__ = ('_name', '_variants')

    _name: str
    _variants: tuple[tuple[type, StructShape | TupleStructShape], ...]

    def __init__(self, name: str, variants: tuple[tuple[type, StructShape | TupleStructShape], ...]) -> None:
        self._name = name
        self._variants = variants

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        variants: list[tuple[type, StructShape | TupleStructShape]] = []
        for arg in get_args(type_):
            shape = Shape.from_type(arg, type_map=type_map)
            if not isinstance(shape, (StructShape, TupleStructShape)):
                raise UnsupportedTypeError(f'{pretty_type(arg)} cannot be a variant, use a dataclass or a NamedTuple')
            variants.append((arg, shape))
        return cls(pretty_type(type_), tuple(variants))

    @override
    def is_decodable(self) -> bool:
        return False

    def _find_variant(self, value: Any) -> tuple[int, StructShape | TupleStructShape]:
        for variant_index, (variant_class, shape) in enumerate(self._variants):
            if isinstance(value, variant_class):
                return variant_index, shape
        raise CustomError(f'expected one of {self._name}, got {type(value).__name__}')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        _, shape = self._find_variant(value)
        if deep:
            shape._check_value(value, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> None:
        variant_index, shape = self._find_variant(value)
        shape.encode_variant(encoder, self._name, variant_index, value)

    @override
    def _decode(self, decoder: Decoder, /) -> Any:
        decoder.decode_enum(self._name)

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

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError, UnsupportedTypeError
from podcodec.shapes.shape import Shape

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class StructShape(Shape[D]):
    """ Represents a dataclass, its fields are encoded in declaration order and field names are not written.

    A dataclass without fields is a unit struct and takes no bytes.
    """

    __slots__ = ('_fields', '_class')

    _fields: tuple[tuple[str, Shape], ...]
    _class: type[D]

    def __init__(self, fields_: dict[str, Shape], class_: type[D]) -> None:
        self._fields = tuple(fields_.items())
        self._class = class_

    @property
    def name(self) -> str:
        return self._class.__name__

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_dataclass(type_) or not isinstance(type_, type):
            raise UnsupportedTypeError('expected a dataclass')
        hints = get_type_hints(type_, include_extras=True)
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        values: dict[str, Shape] = {}
        for field in fields(type_):
            if not field.init:
                raise UnsupportedTypeError(f'field {field.name} of {type_.__name__} is not in __init__')
            values[field.name] = Shape.from_type(hints[field.name], type_map=type_map)
        return cls(values, type_)

    @override
    def is_decodable(self) -> bool:
        return all(field_shape.is_decodable() for _, field_shape in self._fields)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise CustomError(f'expected {self.name} instance, got {type(value).__name__}')
        if deep:
            for field_name, field_shape in self._fields:
                field_shape._check_value(getattr(value, field_name), deep=True)

    def _values(self, value: D) -> dict[str, Any]:
        return {field_name: getattr(value, field_name) for field_name, _ in self._fields}

    @override
    def _encode(self, encoder: Encoder, value: D, /) -> None:
        if not self._fields:
            encoder.encode_unit_struct(self.name)
        else:
            encoder.encode_struct(self.name, self._fields, self._values(value))

    def encode_variant(self, encoder: Encoder, enum_name: str, variant_index: int, value: D) -> None:
        """ Encode the value as the variant of an enum, this is used by `VariantShape`.
        """
        self._check_value(value, deep=False)
        if not self._fields:
            encoder.encode_unit_variant(enum_name, variant_index, self.name)
        else:
            encoder.encode_struct_variant(enum_name, variant_index, self.name, self._fields, self._values(value))

    @override
    def _decode(self, decoder: Decoder, /) -> D:
        if not self._fields:
            decoder.decode_unit_struct(self.name)
            return self._class()
        kwargs = decoder.decode_struct(self.name, self._fields)
        return self._class(**kwargs)

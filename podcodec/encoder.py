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

r"""
The `Encoder` walks a value following its shape and appends the bytes of each primitive to a sink, in order, adding
nothing of its own: no length prefixes, no tags, no terminators.

>>> from podcodec.shapes import make_shape
>>> from podcodec.types import u16
>>> se = Serializer.build_bytes_serializer()
>>> encoder = Encoder.little_endian(se)
>>> encoder.encode_u16(0x1234)
>>> encoder.encode_seq([1, 2], make_shape(u16))
>>> encoder.encode_str('ok')
>>> bytes(se.finalize()).hex()
'3412010002006f6b'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from podcodec.byteorder import ByteOrder
from podcodec.serialization import CustomError, Serializer, UnsupportedOperationError
from podcodec.serialization.adapters import GenericSerializerAdapter
from podcodec.serialization.compound_encoding.mapping import encode_mapping
from podcodec.serialization.compound_encoding.optional import encode_optional
from podcodec.serialization.compound_encoding.sequence import encode_sequence
from podcodec.serialization.compound_encoding.tuple import encode_tuple
from podcodec.serialization.encoding.bool import encode_bool
from podcodec.serialization.encoding.bytes import encode_bytes
from podcodec.serialization.encoding.float import encode_float
from podcodec.serialization.encoding.int import encode_int
from podcodec.serialization.encoding.utf8 import encode_char, encode_utf8
from podcodec.serialization.types import Buffer

if TYPE_CHECKING:
    from podcodec.shapes import Shape


class Encoder(GenericSerializerAdapter[Serializer]):
    """ Serialization engine, it is itself a `Serializer` that writes into `inner` and carries the byte order.

    Shapes drive the traversal by calling the `encode_*` methods, compound methods receive the shapes of their
    elements and call `shape.encode(self, element)` for each one.
    """

    byte_order: ByteOrder

    def __init__(self, serializer: Serializer, byte_order: ByteOrder = ByteOrder.BIG) -> None:
        super().__init__(serializer)
        self.byte_order = ByteOrder.parse(byte_order)

    @classmethod
    def big_endian(cls, serializer: Serializer) -> Self:
        return cls(serializer, ByteOrder.BIG)

    @classmethod
    def little_endian(cls, serializer: Serializer) -> Self:
        return cls(serializer, ByteOrder.LITTLE)

    def is_human_readable(self) -> bool:
        """Always `False`, this is a binary format."""
        return False

    # numbers:

    def encode_int(self, value: int, *, length: int, signed: bool) -> None:
        encode_int(self, value, length=length, signed=signed, byte_order=self.byte_order)

    def encode_i8(self, value: int) -> None:
        self.encode_int(value, length=1, signed=True)

    def encode_i16(self, value: int) -> None:
        self.encode_int(value, length=2, signed=True)

    def encode_i32(self, value: int) -> None:
        self.encode_int(value, length=4, signed=True)

    def encode_i64(self, value: int) -> None:
        self.encode_int(value, length=8, signed=True)

    def encode_i128(self, value: int) -> None:
        self.encode_int(value, length=16, signed=True)

    def encode_u8(self, value: int) -> None:
        self.encode_int(value, length=1, signed=False)

    def encode_u16(self, value: int) -> None:
        self.encode_int(value, length=2, signed=False)

    def encode_u32(self, value: int) -> None:
        self.encode_int(value, length=4, signed=False)

    def encode_u64(self, value: int) -> None:
        self.encode_int(value, length=8, signed=False)

    def encode_u128(self, value: int) -> None:
        self.encode_int(value, length=16, signed=False)

    def encode_float(self, value: float, *, length: int) -> None:
        encode_float(self, value, length=length, byte_order=self.byte_order)

    def encode_f32(self, value: float) -> None:
        self.encode_float(value, length=4)

    def encode_f64(self, value: float) -> None:
        self.encode_float(value, length=8)

    # other primitives:

    def encode_bool(self, value: bool) -> None:
        encode_bool(self, value)

    def encode_char(self, value: str) -> None:
        if len(value) != 1:
            raise CustomError(f'expected a single character, got {value!r}')
        encode_char(self, value)

    def encode_str(self, value: str) -> None:
        encode_utf8(self, value)

    def encode_bytes(self, value: Buffer) -> None:
        encode_bytes(self, value)

    # units and wrappers, none of these write anything of their own:

    def encode_none(self) -> None:
        pass

    def encode_some(self, value: Any, shape: Shape) -> None:
        encode_optional(self, value, shape.encode)

    def encode_unit(self) -> None:
        pass

    def encode_unit_struct(self, name: str) -> None:
        pass

    def encode_unit_variant(self, name: str, variant_index: int, variant: str) -> None:
        pass

    def encode_newtype_struct(self, name: str, value: Any, shape: Shape) -> None:
        shape.encode(self, value)

    def encode_newtype_variant(self, name: str, variant_index: int, variant: str, value: Any, shape: Shape) -> None:
        shape.encode(self, value)

    # compounds:

    def encode_seq(self, values: Iterable[Any], shape: Shape) -> None:
        encode_sequence(self, values, shape.encode)

    def encode_tuple(self, values: tuple[Any, ...], shapes: Sequence[Shape]) -> None:
        encode_tuple(self, values, tuple(shape.encode for shape in shapes))

    def encode_tuple_struct(self, name: str, values: tuple[Any, ...], shapes: Sequence[Shape]) -> None:
        self.encode_tuple(values, shapes)

    def encode_tuple_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        values: tuple[Any, ...],
        shapes: Sequence[Shape],
    ) -> None:
        self.encode_tuple(values, shapes)

    def encode_map(self, values: Mapping[Any, Any], key_shape: Shape, value_shape: Shape) -> None:
        encode_mapping(self, values, key_shape.encode, value_shape.encode)

    def encode_struct(self, name: str, fields: Sequence[tuple[str, Shape]], values: Mapping[str, Any]) -> None:
        """ Encode each field in the order given by `fields`, field names are not written."""
        for field_name, field_shape in fields:
            field_shape.encode(self, values[field_name])

    def encode_struct_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        fields: Sequence[tuple[str, Shape]],
        values: Mapping[str, Any],
    ) -> None:
        self.encode_struct(name, fields, values)

    # not supported:

    def encode_any(self, value: Any) -> None:
        raise UnsupportedOperationError('encode_any')

    def encode_identifier(self, value: Any) -> None:
        raise UnsupportedOperationError('encode_identifier')

    def encode_ignored_any(self, value: Any) -> None:
        raise UnsupportedOperationError('encode_ignored_any')

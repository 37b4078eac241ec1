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
The `Decoder` walks the requested shape and consumes from a source exactly the bytes each primitive needs.

Since nothing on the wire describes the data, some shapes can't be decoded at all: booleans, optionals, enums, maps
and untyped values. Their `decode_*` methods always fail with `UnsupportedOperationError`, without reading anything.

>>> from podcodec.shapes import make_shape
>>> from podcodec.types import u16
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('12345678abcd'))
>>> decoder = Decoder(de, ByteOrder.LITTLE)
>>> [hex(i) for i in decoder.decode_seq(make_shape(u16))]
['0x3412', '0x7856', '0xcdab']
>>> decoder.is_empty()
True

>>> de = Deserializer.build_bytes_deserializer(b'\x01')
>>> try:
...     Decoder(de).decode_bool()
... except UnsupportedOperationError as e:
...     print(*e.args)
`decode_bool` is not supported
>>> de.read_byte()
1
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from typing_extensions import override

from podcodec.byteorder import ByteOrder
from podcodec.serialization import CustomError, Deserializer, UnsupportedOperationError
from podcodec.serialization.adapters import GenericDeserializerAdapter
from podcodec.serialization.compound_encoding.sequence import decode_sequence
from podcodec.serialization.compound_encoding.tuple import decode_tuple
from podcodec.serialization.encoding.bytes import decode_bytes
from podcodec.serialization.encoding.float import decode_float
from podcodec.serialization.encoding.int import decode_int
from podcodec.serialization.encoding.utf8 import decode_char, decode_utf8
from podcodec.serialization.types import Buffer

if TYPE_CHECKING:
    from podcodec.shapes import Shape

R = TypeVar('R')


class Decoder(GenericDeserializerAdapter[Deserializer]):
    """ Deserialization engine, it is itself a `Deserializer` that reads from `inner` and carries the byte order.

    Shapes drive the traversal by calling the `decode_*` methods, compound methods receive the shapes of their
    elements and call `shape.decode(self)` for each one.
    """

    byte_order: ByteOrder

    def __init__(self, deserializer: Deserializer, byte_order: ByteOrder = ByteOrder.BIG) -> None:
        super().__init__(deserializer)
        self.byte_order = ByteOrder.parse(byte_order)
        self._bytes_read = 0

    def is_human_readable(self) -> bool:
        """Always `False`, this is a binary format."""
        return False

    @property
    def bytes_read(self) -> int:
        """Number of bytes consumed through this decoder."""
        return self._bytes_read

    @override
    def read_byte(self) -> int:
        value = super().read_byte()
        self._bytes_read += 1
        return value

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        data = super().read_bytes(n, exact=exact)
        self._bytes_read += len(memoryview(data))
        return data

    @override
    def read_all(self) -> Buffer:
        data = super().read_all()
        self._bytes_read += len(memoryview(data))
        return data

    # numbers:

    def decode_int(self, *, length: int, signed: bool) -> int:
        return decode_int(self, length=length, signed=signed, byte_order=self.byte_order)

    def decode_i8(self) -> int:
        return self.decode_int(length=1, signed=True)

    def decode_i16(self) -> int:
        return self.decode_int(length=2, signed=True)

    def decode_i32(self) -> int:
        return self.decode_int(length=4, signed=True)

    def decode_i64(self) -> int:
        return self.decode_int(length=8, signed=True)

    def decode_i128(self) -> int:
        return self.decode_int(length=16, signed=True)

    def decode_u8(self) -> int:
        return self.decode_int(length=1, signed=False)

    def decode_u16(self) -> int:
        return self.decode_int(length=2, signed=False)

    def decode_u32(self) -> int:
        return self.decode_int(length=4, signed=False)

    def decode_u64(self) -> int:
        return self.decode_int(length=8, signed=False)

    def decode_u128(self) -> int:
        return self.decode_int(length=16, signed=False)

    def decode_float(self, *, length: int) -> float:
        return decode_float(self, length=length, byte_order=self.byte_order)

    def decode_f32(self) -> float:
        return self.decode_float(length=4)

    def decode_f64(self) -> float:
        return self.decode_float(length=8)

    # other primitives:

    def decode_char(self) -> str:
        return decode_char(self)

    def decode_str(self) -> str:
        """ Consumes everything that is left in the source."""
        return decode_utf8(self)

    def decode_bytes(self) -> bytes:
        """ Consumes everything that is left in the source."""
        return decode_bytes(self)

    # units and wrappers:

    def decode_unit(self) -> None:
        return None

    def decode_unit_struct(self, name: str) -> None:
        return None

    def decode_newtype_struct(self, name: str, shape: Shape[R]) -> R:
        return shape.decode(self)

    # compounds:

    def decode_seq(self, shape: Shape[R], builder: Callable[[Iterable[R]], Any] = list) -> Any:
        """ Decode elements until the source is empty.

        An element that consumes no bytes (a unit, an empty struct) would never empty the source, so it is an error.
        """
        def decode_item(decoder: Decoder) -> R:
            start = self._bytes_read
            item = shape.decode(decoder)
            if self._bytes_read == start:
                raise CustomError(f'sequence element of {type(shape).__name__} consumed no bytes')
            return item
        return decode_sequence(self, decode_item, builder)

    def decode_tuple(self, shapes: Sequence[Shape]) -> tuple[Any, ...]:
        """ Decode exactly one element per shape, whatever comes after is left in the source."""
        return decode_tuple(self, tuple(shape.decode for shape in shapes))

    def decode_tuple_struct(self, name: str, shapes: Sequence[Shape]) -> tuple[Any, ...]:
        return self.decode_tuple(shapes)

    def decode_struct(self, name: str, fields: Sequence[tuple[str, Shape]]) -> dict[str, Any]:
        """ Decode each field in order, the result maps field names to values."""
        return {field_name: field_shape.decode(self) for field_name, field_shape in fields}

    # not supported:

    def decode_bool(self) -> NoReturn:
        raise UnsupportedOperationError('decode_bool')

    def decode_option(self) -> NoReturn:
        raise UnsupportedOperationError('decode_option')

    def decode_enum(self, name: str) -> NoReturn:
        raise UnsupportedOperationError('decode_enum')

    def decode_map(self) -> NoReturn:
        raise UnsupportedOperationError('decode_map')

    def decode_any(self) -> NoReturn:
        raise UnsupportedOperationError('decode_any')

    def decode_identifier(self) -> NoReturn:
        raise UnsupportedOperationError('decode_identifier')

    def decode_ignored_any(self) -> NoReturn:
        raise UnsupportedOperationError('decode_ignored_any')

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

from typing import Any, ClassVar

from typing_extensions import Self, override

from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import CustomError
from podcodec.shapes.shape import Shape


class _SizedIntShape(Shape[int]):
    """ Base class for classes that represent `int` values with a fixed size and signedness.
    """

    __slots__ = ()
    _is_decodable = True
    # XXX: subclass must define these values:
    _name: ClassVar[str]
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # XXX: bool is a subclass of int, but it has its own shape
        if not isinstance(value, int) or isinstance(value, bool):
            raise CustomError(f'expected {self._name}, got {type(value).__name__}')
        if not self._lower_bound_value() <= value <= self._upper_bound_value():
            raise CustomError(f'{value} is out of range for {self._name}')

    @override
    def _encode(self, encoder: Encoder, value: int, /) -> None:
        encoder.encode_int(value, length=self._byte_size, signed=self._signed)

    @override
    def _decode(self, decoder: Decoder, /) -> int:
        return decoder.decode_int(length=self._byte_size, signed=self._signed)


class Int8Shape(_SizedIntShape):
    _name = 'i8'
    _signed = True
    _byte_size = 1


class Int16Shape(_SizedIntShape):
    _name = 'i16'
    _signed = True
    _byte_size = 2


class Int32Shape(_SizedIntShape):
    _name = 'i32'
    _signed = True
    _byte_size = 4


class Int64Shape(_SizedIntShape):
    _name = 'i64'
    _signed = True
    _byte_size = 8


class Int128Shape(_SizedIntShape):
    _name = 'i128'
    _signed = True
    _byte_size = 16


class Uint8Shape(_SizedIntShape):
    _name = 'u8'
    _signed = False
    _byte_size = 1


class Uint16Shape(_SizedIntShape):
    _name = 'u16'
    _signed = False
    _byte_size = 2


class Uint32Shape(_SizedIntShape):
    _name = 'u32'
    _signed = False
    _byte_size = 4


class Uint64Shape(_SizedIntShape):
    _name = 'u64'
    _signed = False
    _byte_size = 8


class Uint128Shape(_SizedIntShape):
    _name = 'u128'
    _signed = False
    _byte_size = 16

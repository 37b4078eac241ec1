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


class _FloatShape(Shape[float]):
    """ Base class for IEEE-754 floats, `int` values are accepted when encoding and converted.
    """

    __slots__ = ()
    _is_decodable = True
    # XXX: subclass must define these values:
    _name: ClassVar[str]
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise CustomError(f'expected {self._name}, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: float, /) -> None:
        encoder.encode_float(float(value), length=self._byte_size)

    @override
    def _decode(self, decoder: Decoder, /) -> float:
        return decoder.decode_float(length=self._byte_size)


class Float32Shape(_FloatShape):
    _name = 'f32'
    _byte_size = 4


class Float64Shape(_FloatShape):
    _name = 'f64'
    _byte_size = 8

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

from abc import ABC, abstractmethod
from typing import Annotated, Any, Generic, NamedTuple, TypeVar, final, get_origin

from podcodec.byteorder import ByteOrder
from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from podcodec.serialization.types import Buffer
from podcodec.shapes.utils import TypeAliasMap, TypeToShapeMap, get_usable_origin_type, strip_annotated
from podcodec.types import Length

T = TypeVar('T')


class Shape(ABC, Generic[T]):
    """ This class is used to model the structure of a value and how it maps to the `Encoder`/`Decoder` methods.

    Shapes are usually built from a type annotation with `Shape.from_type` (or `make_shape`), each kind of type has
    its own `Shape` subclass, compound shapes hold the shapes of their members. Instances are immutable and hold no
    state related to a particular encode/decode call, so they can be reused and shared freely.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        shapes_map: TypeToShapeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: leaf subclasses must initialize this property, compound subclasses override `is_decodable` instead
    _is_decodable: bool

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> Shape:
        """ Instantiate a Shape from a type annotation using the given maps.

        The `shapes_map` associates types (or `TypeKey`s for types matched by structure) to Shape classes, while the
        `alias_map` associates types with substitute types to use instead.
        """
        # `Annotated` is only meaningful for arrays, any other metadata is ignored
        if get_origin(type_) is Annotated and not any(isinstance(m, Length) for m in type_.__metadata__):
            type_ = strip_annotated(type_)
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        shape_class = type_map.shapes_map[usable_origin]
        return shape_class._from_type(type_, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Shape:
        """ Instantiate a Shape from a type annotation.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Shape.from_type` with the given `type_map` to build the shapes of its members.
        """
        # XXX: a Shape that is only meant to be instantiated directly does not need to implement _from_type
        raise UnsupportedTypeError(f'{cls.__name__} is not compatible with use in a Shape.TypeMap')

    def is_decodable(self) -> bool:
        """ Whether values of this shape can be decoded at all, compound shapes take their members into account.

        Encoding is always possible (except for untyped values), but booleans, optionals, enums and maps can't be
        decoded, neither can anything that contains them.
        """
        return self._is_decodable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises a `CustomError` if the given value doesn't match this shape, recursing into compound values.
        """
        self._check_value(value, deep=True)

    @final
    def encode(self, encoder: Encoder, value: T, /) -> None:
        """ Encode a value following this shape.

        The value is "shallow checked" before being encoded, compound shapes check their members as they encode
        them, so calling `check_value` before is not needed.
        """
        # XXX: subclasses must implement Shape._encode, not Shape.encode
        self._check_value(value, deep=False)
        self._encode(encoder, value)

    @final
    def decode(self, decoder: Decoder, /) -> T:
        """ Decode a value following this shape.
        """
        # XXX: subclasses must implement Shape._decode, not Shape.decode
        value = self._decode(decoder)
        self._check_value(value, deep=False)
        return value

    @final
    def to_bytes(self, value: T, /, byte_order: ByteOrder = ByteOrder.BIG) -> bytes:
        """ Shortcut to quickly convert a value to `bytes` without dealing with encoders and serializers.
        """
        serializer = Serializer.build_bytes_serializer()
        self.encode(Encoder(serializer, byte_order), value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, /, byte_order: ByteOrder = ByteOrder.BIG) -> T:
        """ Shortcut to quickly parse a value from `bytes` without dealing with decoders and deserializers.

        Bytes left after the value are ignored.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        return self.decode(Decoder(deserializer, byte_order))

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Shape.check_value`, should raise a `CustomError` if the value is not valid.

        Compound values should use `Shape._check_value` on the inner shape(s) and pass the `deep` argument along.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, encoder: Encoder, value: T, /) -> None:
        """ Inner implementation of `encode`, you can assume that the given value has been "shallow checked".

        Compound shapes should pass the `Shape.encode` of their members to the encoder, not `Shape._encode`, so the
        members get checked too.
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, decoder: Decoder, /) -> T:
        """ Inner implementation of `decode`.
        """
        raise NotImplementedError

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

from collections import OrderedDict, deque
from collections.abc import Mapping
from types import NoneType, UnionType
from typing import Annotated, Any, TypeVar

from podcodec.shapes.bool_shape import BoolShape
from podcodec.shapes.bytes_shape import BytesShape
from podcodec.shapes.collection_shape import ArrayShape, SequenceShape
from podcodec.shapes.dataclass_shape import StructShape
from podcodec.shapes.enum_shape import UnitEnumShape, VariantShape
from podcodec.shapes.float_shape import Float32Shape, Float64Shape
from podcodec.shapes.map_shape import MapShape
from podcodec.shapes.namedtuple_shape import TupleStructShape
from podcodec.shapes.newtype_shape import NewtypeShape
from podcodec.shapes.optional_shape import OptionalShape
from podcodec.shapes.shape import Shape
from podcodec.shapes.sized_int_shape import (
    Int8Shape,
    Int16Shape,
    Int32Shape,
    Int64Shape,
    Int128Shape,
    Uint8Shape,
    Uint16Shape,
    Uint32Shape,
    Uint64Shape,
    Uint128Shape,
)
from podcodec.shapes.str_shape import CharShape, StrShape
from podcodec.shapes.tuple_shape import TupleShape
from podcodec.shapes.unit_shape import UnitShape
from podcodec.shapes.unsupported_shape import AnyShape, IdentifierShape, IgnoredAnyShape
from podcodec.shapes.utils import TypeAliasMap, TypeKey, TypeToShapeMap
from podcodec.types import Identifier, IgnoredAny, char, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_SHAPE_MAP',
    'AnyShape',
    'ArrayShape',
    'BoolShape',
    'BytesShape',
    'CharShape',
    'Float32Shape',
    'Float64Shape',
    'IdentifierShape',
    'IgnoredAnyShape',
    'Int8Shape',
    'Int16Shape',
    'Int32Shape',
    'Int64Shape',
    'Int128Shape',
    'MapShape',
    'NewtypeShape',
    'OptionalShape',
    'SequenceShape',
    'Shape',
    'StrShape',
    'StructShape',
    'TupleShape',
    'TupleStructShape',
    'TypeAliasMap',
    'TypeKey',
    'TypeToShapeMap',
    'Uint8Shape',
    'Uint16Shape',
    'Uint32Shape',
    'Uint64Shape',
    'Uint128Shape',
    'UnitEnumShape',
    'UnitShape',
    'VariantShape',
    'make_shape',
]

T = TypeVar('T')

# types that have the same layout as another type, when these are used a debug message is logged
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    bytearray: bytes,
    float: f64,
    OrderedDict: dict,
}

# Mapping between types and Shape classes.
DEFAULT_TYPE_TO_SHAPE_MAP: TypeToShapeMap = {
    # sized numbers:
    i8: Int8Shape,
    i16: Int16Shape,
    i32: Int32Shape,
    i64: Int64Shape,
    i128: Int128Shape,
    u8: Uint8Shape,
    u16: Uint16Shape,
    u32: Uint32Shape,
    u64: Uint64Shape,
    u128: Uint128Shape,
    f32: Float32Shape,
    f64: Float64Shape,
    # builtin types:
    bool: BoolShape,
    bytes: BytesShape,
    char: CharShape,
    dict: MapShape,
    list: SequenceShape,
    str: StrShape,
    tuple: TupleShape,
    NoneType: UnitShape,
    # other Python types:
    Annotated: ArrayShape,
    Mapping: MapShape,
    UnionType: OptionalShape,
    deque: SequenceShape,
    # untyped and markers:
    Any: AnyShape,
    object: AnyShape,
    Identifier: IdentifierShape,
    IgnoredAny: IgnoredAnyShape,
    # types matched by their structure:
    TypeKey.DATACLASS: StructShape,
    TypeKey.ENUM: UnitEnumShape,
    TypeKey.NAMEDTUPLE: TupleStructShape,
    TypeKey.NEWTYPE: NewtypeShape,
    TypeKey.VARIANT: VariantShape,
}

DEFAULT_TYPE_MAP = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_SHAPE_MAP)


def make_shape(type_: Any, /) -> Shape:
    """ Like Shape.from_type, but with the default maps.

    If you need to customize the mapping use `Shape.from_type` instead.

    >>> from dataclasses import dataclass
    >>> from podcodec.byteorder import ByteOrder
    >>> @dataclass
    ... class Test:
    ...     int1: u32
    ...     int2: u16
    >>> shape = make_shape(Test)
    >>> shape.to_bytes(Test(0x12345678, 0xabcd)).hex()
    '12345678abcd'
    >>> shape.from_bytes(bytes.fromhex('78563412cdab'), ByteOrder.LITTLE) == Test(0x12345678, 0xabcd)
    True
    """
    return Shape.from_type(type_, type_map=DEFAULT_TYPE_MAP)

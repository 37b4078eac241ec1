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

from collections.abc import Hashable, Mapping
from dataclasses import is_dataclass
from enum import Enum, StrEnum
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Annotated, Any, NewType, TypeAlias, Union, get_args, get_origin

from structlog import get_logger

from podcodec.serialization import UnsupportedTypeError

if TYPE_CHECKING:
    from podcodec.shapes import Shape


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToShapeMap: TypeAlias = Mapping[Any, type['Shape']]


class TypeKey(StrEnum):
    """ Keys for types that are matched by their structure instead of by identity."""

    DATACLASS = 'dataclass'
    NAMEDTUPLE = 'namedtuple'
    NEWTYPE = 'newtype'
    ENUM = 'enum'
    VARIANT = 'variant'


# the error message for these is improved with a hint
_AMBIGUOUS_TYPES: dict[Any, str] = {
    int: 'the size of `int` is unknown, use one of i8, i16, i32, i64, i128, u8, u16, u32, u64 or u128',
}


def is_subclass(type_: Any, class_: type) -> bool:
    """ Same as `issubclass` but returns `False` instead of failing when `type_` is not a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(list[int], list)
    False
    >>> is_subclass(None, object)
    False
    """
    return isinstance(type_, type) and issubclass(type_, class_)


def is_namedtuple(type_: Any) -> bool:
    """
    >>> from typing import NamedTuple
    >>> class Point(NamedTuple):
    ...     x: int
    ...     y: int
    >>> is_namedtuple(Point)
    True
    >>> is_namedtuple(tuple)
    False
    """
    return is_subclass(type_, tuple) and hasattr(type_, '_fields')


def is_newtype(type_: Any) -> bool:
    return isinstance(type_, NewType)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(int)
    'int'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__') or hasattr(type_, '__metadata__'):
        return str(type_)
    elif hasattr(type_, '__name__'):
        return type_.__name__
    else:
        return repr(type_)


def get_origin_type(type_: Any) -> Any:
    """ The "outer" part of a type, with `None` normalized to `NoneType` and `typing.Union` to `types.UnionType`.

    >>> get_origin_type(dict[str, int])
    <class 'dict'>
    >>> get_origin_type(None)
    <class 'NoneType'>
    >>> from typing import Optional
    >>> get_origin_type(Optional[int])
    <class 'types.UnionType'>
    """
    if type_ is None:
        return NoneType
    origin = get_origin(type_) or type_
    if origin is Union:
        return UnionType
    return origin


def get_aliased_origin(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ The origin of the given type after applying the alias map.

    >>> from collections import OrderedDict
    >>> get_aliased_origin(OrderedDict[str, int], {OrderedDict: dict}, _verbose=False)
    <class 'dict'>
    """
    origin = get_origin_type(type_)
    if isinstance(origin, Hashable) and origin in alias_map:
        aliased = alias_map[origin]
        if _verbose:
            logger.debug('type replaced', old=pretty_type(origin), new=pretty_type(aliased))
        return aliased
    return origin


def strip_annotated(type_: Any) -> Any:
    """ Remove `Annotated[...]` wrappers.

    >>> strip_annotated(Annotated[int, 'meta'])
    <class 'int'>
    >>> strip_annotated(int)
    <class 'int'>
    """
    while get_origin(type_) is Annotated:
        type_ = type_.__origin__
    return type_


def get_usable_origin_type(type_: Any, /, *, type_map: 'Shape.TypeMap', _verbose: bool = True) -> Any:
    """ Map a given type into a key that is usable in `Shape.TypeMap.shapes_map`.

    Types are looked up by their (aliased) origin first, if that fails they are matched by structure (dataclasses,
    NamedTuples, NewTypes, enums and unions of classes). An `UnsupportedTypeError` is raised if there is no match.

    >>> from podcodec.shapes import DEFAULT_TYPE_MAP as type_map
    >>> get_usable_origin_type(list[str], type_map=type_map, _verbose=False)
    <class 'list'>
    >>> get_usable_origin_type(bytearray, type_map=type_map, _verbose=False)
    <class 'bytes'>
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Empty:
    ...     pass
    >>> get_usable_origin_type(Empty, type_map=type_map, _verbose=False)
    <TypeKey.DATACLASS: 'dataclass'>
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError('string annotations are not supported')

    origin = get_aliased_origin(type_, type_map.alias_map, _verbose=_verbose)
    shapes_map = type_map.shapes_map

    # unions without `None` are enums with a variant per class, otherwise they are optionals
    is_variant = origin is UnionType and NoneType not in get_args(type_)

    if not is_variant and isinstance(origin, Hashable) and origin in shapes_map:
        return origin

    if is_variant:
        key: TypeKey | None = TypeKey.VARIANT
    elif is_newtype(origin):
        key = TypeKey.NEWTYPE
    elif is_namedtuple(origin):
        key = TypeKey.NAMEDTUPLE
    elif isinstance(origin, type) and is_dataclass(origin):
        key = TypeKey.DATACLASS
    elif is_subclass(origin, Enum):
        key = TypeKey.ENUM
    else:
        key = None

    if key is not None and key in shapes_map:
        return key

    if isinstance(origin, Hashable) and origin in _AMBIGUOUS_TYPES:
        raise UnsupportedTypeError(_AMBIGUOUS_TYPES[origin])
    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any shape')

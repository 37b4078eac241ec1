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

"""
Annotations used to describe the binary layout of a value.

Python's `int` and `float` don't have a size, so the sized variants below must be used in annotations, for example:

    @dataclass
    class Header:
        magic: u32
        version: u16
        flags: Annotated[list[u8], Length(4)]

These are all `NewType`s, so at runtime `u32(5)` is just `5`.
"""

from dataclasses import dataclass
from typing import NewType

__all__ = [
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
    'f32',
    'f64',
    'char',
    'Length',
    'Identifier',
    'IgnoredAny',
]

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
i128 = NewType('i128', int)

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
u128 = NewType('u128', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)

# a single unicode code point
char = NewType('char', str)


@dataclass(frozen=True, slots=True)
class Length:
    """ Metadata for `Annotated` that fixes the number of elements of a sequence.

    `Annotated[list[u16], Length(3)]` is an array of exactly 3 `u16`, encoded without a count.
    """
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError('length cannot be negative')


class Identifier:
    """ Marker for a field/variant identifier, these only exist in self-describing formats and are not supported.
    """


class IgnoredAny:
    """ Marker for a value that should be skipped, skipping requires knowing the size and is not supported.
    """

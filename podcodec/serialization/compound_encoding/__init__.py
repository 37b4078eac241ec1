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
This module holds the compound encodings.

Compound encodings are generic in some way and delegate the encoding of some portion to another encoding. For
example a `value: Optional[T]` encoding handles the absence of a value and delegates the rest to an encoding that
knows how to encode `T`.

Each submodule `x` deals with a single layout and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...element encoders and config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...element decoders and config params...) -> ValueType:
        ...

None of these layouts adds a count, a tag or a terminator of its own, the bytes of a compound value are just the
bytes of its parts concatenated. Submodules should not have to take into consideration how types are mapped to
encoders.
"""

from typing import Protocol, TypeVar

from podcodec.serialization.deserializer import Deserializer
from podcodec.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)
S_contra = TypeVar('S_contra', bound=Serializer, contravariant=True)
D_contra = TypeVar('D_contra', bound=Deserializer, contravariant=True)


class ElementDecoder(Protocol[D_contra, T_co]):
    def __call__(self, deserializer: D_contra, /) -> T_co:
        ...


class ElementEncoder(Protocol[S_contra, T_contra]):
    def __call__(self, serializer: S_contra, value: T_contra, /) -> None:
        ...

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
This module holds the encodings of primitive values.

Primitive in this context means "not compound": a fixed-size int encoding has size/signedness/byte-order
parameters, but never a generic function or type as a parameter. Compound values (tuples, sequences, maps,
optionals) are in the `compound_encoding` module.

Each submodule `x` deals with a single type and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

None of these encodings writes a length, tag or terminator. Values of variable size (strings, byte buffers) are
decoded by reading everything that is left in the deserializer, use `Deserializer.take()` to bound them.

Some types can only be encoded, their module has no `decode_x` function.
"""

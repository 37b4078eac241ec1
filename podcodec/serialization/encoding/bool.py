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
This module implements encoding a boolean value using 1 byte.

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`

There is no decoder: a layout-mirroring format has no way to tell a byte that holds a boolean from one that holds a
small integer, so decoding booleans is not supported at all, not even for 0 and 1.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, False)
>>> encode_bool(se, True)
>>> bytes(se.finalize())
b'\x00\x01'
"""

from podcodec.serialization import Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    assert isinstance(value, bool)
    serializer.write_byte(0x01 if value else 0x00)

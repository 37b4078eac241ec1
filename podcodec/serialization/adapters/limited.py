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
Strings, byte buffers and sequences have no length on the wire, they are read until the source is empty. To decode
one of them from the middle of a larger stream the caller has to know its extent and slice the source first, that is
what `LimitedDeserializer` does: it looks like a source that ends after `limit` bytes.

>>> de = Deserializer.build_bytes_deserializer(b'\x04testrest')
>>> size = de.read_byte()
>>> bytes(de.take(size).read_all())
b'test'
>>> bytes(de.read_all())
b'rest'
"""

from typing import TypeVar

from typing_extensions import override

from ..deserializer import Deserializer
from ..exceptions import OutOfDataError
from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter

D = TypeVar('D', bound=Deserializer)


class LimitedDeserializer(GenericDeserializerAdapter[D]):
    def __init__(self, deserializer: D, limit: int) -> None:
        if limit < 0:
            raise ValueError('limit cannot be negative')
        super().__init__(deserializer)
        self._bytes_left = limit

    @property
    def bytes_left(self) -> int:
        return self._bytes_left

    def _check_available(self, n: int) -> None:
        if n > self._bytes_left:
            raise OutOfDataError(f'not enough bytes to read: {n} requested, limited to {self._bytes_left}')

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')

    @override
    def is_empty(self) -> bool:
        return self._bytes_left == 0 or self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        self._check_available(1)
        return super().peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check_available(n)
        return super().peek_bytes(min(n, self._bytes_left), exact=exact)

    @override
    def read_byte(self) -> int:
        self._check_available(1)
        b = super().read_byte()
        self._bytes_left -= 1
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._check_available(n)
        data = super().read_bytes(min(n, self._bytes_left), exact=exact)
        self._bytes_left -= len(memoryview(data))
        return data

    @override
    def read_all(self) -> Buffer:
        data = super().read_bytes(self._bytes_left, exact=False)
        self._bytes_left -= len(memoryview(data))
        return data

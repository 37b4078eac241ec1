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

from typing import IO

from typing_extensions import override

from .exceptions import SerializationIOError
from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Sink that writes straight into a binary file-like object (a file, a socket file, `io.BytesIO`, ...).

    Nothing is buffered here, any `OSError` raised by the stream is re-raised as a `SerializationIOError`.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pos = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(bytes((data,)))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        try:
            while view:
                written = self._stream.write(view)
                # XXX: buffered streams write everything or raise, raw streams can return a short count or None
                if not written:
                    raise SerializationIOError('stream did not accept any bytes')
                view = view[written:]
                self._pos += written
        except OSError as e:
            raise SerializationIOError(f'failed to write to stream: {e}') from e

    @override
    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise SerializationIOError(f'failed to flush stream: {e}') from e

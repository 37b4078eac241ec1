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

import io
from contextlib import contextmanager
from typing import IO, Iterator

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationIOError

DEFAULT_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


@contextmanager
def _translate_os_errors(action: str) -> Iterator[None]:
    try:
        yield
    except OSError as e:
        raise SerializationIOError(f'failed to {action} stream: {e}') from e


class StreamDeserializer(Deserializer):
    """Source that reads from a binary file-like object.

    Detecting the end of a sequence requires looking ahead without consuming, so the stream must have a `peek()`
    method (like `io.BufferedReader`); streams without one are wrapped in a `io.BufferedReader`. The wrapper reads
    ahead, `close()` releases it without closing the original stream and, when that stream is seekable, moves it back
    to right after the last consumed byte.

    Peeking is limited to what the buffer holds, so `peek_bytes` with `exact=True` can fail for large `n` even if
    the stream has enough data.
    """

    def __init__(self, stream: IO[bytes], *, buffer_size: int | None = None) -> None:
        # only set when the stream was wrapped here
        self._raw: IO[bytes] | None = None
        if not hasattr(stream, 'peek'):
            self._raw = stream
            stream = io.BufferedReader(stream, buffer_size or DEFAULT_BUFFER_SIZE)  # type: ignore[arg-type]
        self._stream = stream

    def close(self) -> None:
        """Release the buffered wrapper created around a stream without `peek()`, the original stream is left open.

        Streams that were given already buffered are not touched. The deserializer cannot be used after this.
        """
        if self._raw is None:
            return
        raw, self._raw = self._raw, None
        with _translate_os_errors('release'):
            pos = self._stream.tell() if raw.seekable() else None
            self._stream.detach()  # type: ignore[attr-defined]
            if pos is not None:
                raw.seek(pos)

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')

    @override
    def is_empty(self) -> bool:
        with _translate_os_errors('peek'):
            return not self._stream.peek(1)  # type: ignore[attr-defined]

    @override
    def peek_byte(self) -> int:
        with _translate_os_errors('peek'):
            data = self._stream.peek(1)  # type: ignore[attr-defined]
        if not data:
            raise OutOfDataError('not enough bytes to read')
        return data[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        with _translate_os_errors('peek'):
            data = bytes(self._stream.peek(n)[:n])  # type: ignore[attr-defined]
        if exact and len(data) < n:
            raise OutOfDataError(f'not enough bytes to peek: {n} requested, {len(data)} available')
        return data

    @override
    def read_byte(self) -> int:
        data = self.read_bytes(1)
        return data[0]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        buffer = bytearray()
        with _translate_os_errors('read from'):
            while len(buffer) < n:
                chunk = self._stream.read(n - len(buffer))
                if not chunk:
                    break
                buffer += chunk
        if exact and len(buffer) < n:
            raise OutOfDataError(f'not enough bytes to read: {n} requested, {len(buffer)} available')
        return bytes(buffer)

    @override
    def read_all(self) -> bytes:
        with _translate_os_errors('read from'):
            return self._stream.read()

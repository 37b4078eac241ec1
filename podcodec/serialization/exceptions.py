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
Every failure raised while encoding or decoding is a `SerializationError`, and falls in one of four categories:

- `SerializationIOError`: the sink or source failed, this includes running out of bytes on a fixed-width read;
- `EncodingError`: bytes read for a `char` or a `str` are not valid UTF-8;
- `UnsupportedOperationError`: the requested shape cannot be represented by this codec (e.g. decoding a `bool`);
- `CustomError`: a shape raised its own error, like a value that doesn't match its declared type.

Errors are never recovered from, the first one aborts the whole encode/decode call.
"""

from __future__ import annotations


class SerializationError(Exception):
    """Base class for all encoding/decoding failures."""

    @classmethod
    def custom(cls, msg: object) -> CustomError:
        """Build an opaque error carrying the given message, for use in custom shapes."""
        return CustomError(str(msg))


class SerializationIOError(SerializationError):
    """The underlying sink or source reported a write or read failure.

    When the failure comes from an `OSError` it is chained as `__cause__`.
    """


class OutOfDataError(SerializationIOError):
    """The source did not have enough bytes for a fixed-width read."""


class EncodingError(SerializationError):
    """The bytes read for a character or a string do not form valid UTF-8."""


class UnsupportedOperationError(SerializationError):
    """The requested operation is categorically not supported by this codec.

    The name of the operation is kept in `operation` for diagnostics.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f'`{operation}` is not supported')
        self.operation = operation


class CustomError(SerializationError):
    """An error raised by a shape during traversal, for example a value out of the range of its type."""


class UnsupportedTypeError(CustomError, TypeError):
    """A Python type could not be mapped to any shape."""

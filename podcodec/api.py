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
Entry points of the codec.

>>> from dataclasses import dataclass
>>> from podcodec.types import u16, u32
>>> @dataclass
... class Test:
...     int1: u32
...     int2: u16
>>> encode_to_bytes(Test(0x12345678, 0xabcd), ByteOrder.LITTLE).hex()
'78563412cdab'
>>> decode_from_bytes(Test, bytes.fromhex('12345678abcd'), ByteOrder.BIG)
Test(int1=305419896, int2=43981)

When the type of a value is not enough to know its layout (an `int` has no size), `type_` must be given:

>>> encode_to_bytes(0x1234, ByteOrder.BIG, type_=u16)
b'\x124'
"""

from typing import IO, Any, Optional, TypeVar, Union

from structlog import get_logger

from podcodec.byteorder import ByteOrder
from podcodec.conf import get_global_settings
from podcodec.decoder import Decoder
from podcodec.encoder import Encoder
from podcodec.serialization import Deserializer, Serializer
from podcodec.serialization.stream_deserializer import StreamDeserializer
from podcodec.serialization.types import Buffer
from podcodec.shapes import Shape, make_shape
from podcodec.shapes.utils import pretty_type

logger = get_logger()

T = TypeVar('T')

ByteOrderLike = Union[ByteOrder, str]


def _get_byte_order(byte_order: Optional[ByteOrderLike]) -> ByteOrder:
    if byte_order is None:
        return get_global_settings().DEFAULT_BYTE_ORDER
    return ByteOrder.parse(byte_order)


def _get_shape(type_: Any) -> Shape:
    if isinstance(type_, Shape):
        return type_
    return make_shape(type_)


def encode_to_sink(
    value: Any,
    byte_order: Optional[ByteOrderLike],
    sink: Union[Serializer, IO[bytes]],
    *,
    type_: Any = None,
) -> None:
    """ Encode a value into a `Serializer` or a writable binary stream, the sink is flushed at the end.

    The layout is taken from `type_` (a type annotation or a `Shape`), or from `type(value)` when not given.
    """
    settings = get_global_settings()
    serializer = sink if isinstance(sink, Serializer) else Serializer.build_stream_serializer(sink)
    shape = _get_shape(type(value) if type_ is None else type_)
    encoder = Encoder(serializer.with_optional_max_bytes(settings.MAX_ENCODE_BYTES), _get_byte_order(byte_order))
    start = encoder.cur_pos()
    shape.encode(encoder, value)
    encoder.flush()
    logger.debug(
        'encoded',
        shape=type(shape).__name__,
        byte_order=encoder.byte_order.value,
        size=encoder.cur_pos() - start,
    )


def encode_to_bytes(value: Any, byte_order: Optional[ByteOrderLike] = None, *, type_: Any = None) -> bytes:
    """ Encode a value and return its bytes, see `encode_to_sink`.
    """
    serializer = Serializer.build_bytes_serializer()
    encode_to_sink(value, byte_order, serializer, type_=type_)
    return bytes(serializer.finalize())


def decode_from_source(
    type_: Any,
    source: Union[Deserializer, IO[bytes]],
    byte_order: Optional[ByteOrderLike] = None,
) -> Any:
    """ Decode a value of the given type (a type annotation or a `Shape`) from a `Deserializer` or a readable binary
    stream.

    Only the bytes needed are consumed, except for values that are read until the end (strings, byte buffers and
    sequences of unknown length). Bytes left after the value are not an error. A stream is never closed, if it had
    to be wrapped for buffering and is seekable it is left right after the decoded value.
    """
    settings = get_global_settings()
    stream_deserializer: Optional[StreamDeserializer] = None
    if isinstance(source, Deserializer):
        deserializer: Deserializer = source
    else:
        deserializer = stream_deserializer = Deserializer.build_stream_deserializer(
            source,
            buffer_size=settings.STREAM_BUFFER_SIZE,
        )
    try:
        shape = _get_shape(type_)
        decoder = Decoder(
            deserializer.with_optional_max_bytes(settings.MAX_DECODE_BYTES),
            _get_byte_order(byte_order),
        )
        value = shape.decode(decoder)
    finally:
        # the caller keeps ownership of the stream
        if stream_deserializer is not None:
            stream_deserializer.close()
    logger.debug(
        'decoded',
        shape=type(shape).__name__,
        byte_order=decoder.byte_order.value,
        type=pretty_type(type(value)),
    )
    return value


def decode_from_bytes(type_: Any, data: Buffer, byte_order: Optional[ByteOrderLike] = None) -> Any:
    """ Decode a value of the given type from bytes, see `decode_from_source`.
    """
    return decode_from_source(type_, Deserializer.build_bytes_deserializer(data), byte_order)

import io
from dataclasses import dataclass
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from podcodec import (
    ByteOrder,
    Shape,
    decode_from_bytes,
    decode_from_source,
    encode_to_bytes,
    encode_to_sink,
    make_shape,
)
from podcodec.conf.get_settings import CONFIG_YAML_ENV_VAR
from podcodec.serialization import Deserializer, OutOfDataError, SerializationIOError, Serializer
from podcodec.serialization.adapters import MaxBytesExceededError
from podcodec.types import u8, u16, u32


@dataclass
class Test:
    int1: u32
    int2: u16


def _use_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, contents: str) -> None:
    config = tmp_path / 'codec.yml'
    config.write_text(contents)
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(config))


def test_encode_to_bytes() -> None:
    assert encode_to_bytes(Test(0x12345678, 0xABCD), ByteOrder.BIG) == bytes.fromhex('12345678abcd')
    assert encode_to_bytes(Test(0x12345678, 0xABCD), 'le') == bytes.fromhex('78563412cdab')


def test_encode_default_byte_order_is_big() -> None:
    assert encode_to_bytes(0x1234, type_=u16) == b'\x12\x34'


def test_encode_with_shape() -> None:
    shape = make_shape(list[u16])
    assert isinstance(shape, Shape)
    assert encode_to_bytes([1, 2], ByteOrder.LITTLE, type_=shape) == b'\x01\x00\x02\x00'


def test_encode_to_stream() -> None:
    stream = io.BytesIO()
    encode_to_sink(Test(0x12345678, 0xABCD), ByteOrder.BIG, stream)
    encode_to_sink(0xff, ByteOrder.BIG, stream, type_=u8)
    assert stream.getvalue() == bytes.fromhex('12345678abcdff')


def test_encode_to_serializer() -> None:
    serializer = Serializer.build_bytes_serializer()
    serializer.write_byte(0)
    encode_to_sink(0x1234, ByteOrder.LITTLE, serializer, type_=u16)
    assert bytes(serializer.finalize()) == b'\x00\x34\x12'


def test_encode_is_logged() -> None:
    with capture_logs() as log_list:
        encode_to_bytes(Test(1, 2), ByteOrder.LITTLE)
    encoded = [log for log in log_list if log['event'] == 'encoded']
    assert encoded == [{
        'event': 'encoded',
        'shape': 'StructShape',
        'byte_order': 'little',
        'size': 6,
        'log_level': 'debug',
    }]


def test_decode_from_bytes() -> None:
    assert decode_from_bytes(Test, bytes.fromhex('12345678abcd'), ByteOrder.BIG) == Test(0x12345678, 0xABCD)
    assert decode_from_bytes(Test, bytes.fromhex('78563412cdab'), 'little') == Test(0x12345678, 0xABCD)
    assert decode_from_bytes(make_shape(u16), b'\x12\x34') == 0x1234


def test_decode_ignores_trailing_data() -> None:
    assert decode_from_bytes(u8, b'\x01\x02', ByteOrder.BIG) == 1


def test_decode_from_stream() -> None:
    stream = io.BufferedReader(io.BytesIO(bytes.fromhex('12345678abcd' 'ff')))  # type: ignore[arg-type]
    assert decode_from_source(Test, stream, ByteOrder.BIG) == Test(0x12345678, 0xABCD)
    assert decode_from_source(u8, stream, ByteOrder.BIG) == 0xff


def test_decode_sequence_from_stream() -> None:
    stream = io.BytesIO(bytes.fromhex('12345678abcd'))
    assert decode_from_source(list[u16], stream, ByteOrder.LITTLE) == [0x3412, 0x7856, 0xCDAB]


def test_decode_leaves_stream_open() -> None:
    stream = io.BytesIO(bytes.fromhex('1234abcd'))
    assert decode_from_source(u16, stream, ByteOrder.BIG) == 0x1234
    assert not stream.closed
    # the read ahead was given back, the stream is right after the decoded value
    assert stream.tell() == 2
    assert decode_from_source(u16, stream, ByteOrder.BIG) == 0xabcd
    assert stream.read() == b''


def test_decode_leaves_stream_open_on_error() -> None:
    stream = io.BytesIO(b'\x00\x01\x02')
    with pytest.raises(OutOfDataError):
        decode_from_source(u32, stream, ByteOrder.BIG)
    assert not stream.closed


def test_decode_from_deserializer() -> None:
    deserializer = Deserializer.build_bytes_deserializer(b'\x00\x01\x02')
    assert decode_from_source(u8, deserializer) == 0
    assert decode_from_source(u16, deserializer) == 0x0102
    assert deserializer.is_empty()


def test_decode_stream_out_of_data() -> None:
    with pytest.raises(OutOfDataError):
        decode_from_source(u32, io.BytesIO(b'\x00\x00'), ByteOrder.BIG)


def test_decode_is_logged() -> None:
    with capture_logs() as log_list:
        decode_from_bytes(list[u8], b'\x01\x02', ByteOrder.BIG)
    decoded = [log for log in log_list if log['event'] == 'decoded']
    assert decoded == [{
        'event': 'decoded',
        'shape': 'SequenceShape',
        'byte_order': 'big',
        'type': 'list',
        'log_level': 'debug',
    }]


def test_invalid_byte_order() -> None:
    with pytest.raises(ValueError):
        encode_to_bytes(0, 'middle', type_=u8)


def test_default_byte_order_from_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _use_config(monkeypatch, tmp_path, 'DEFAULT_BYTE_ORDER: le\n')
    assert encode_to_bytes(0x1234, type_=u16) == b'\x34\x12'
    assert decode_from_bytes(u16, b'\x34\x12') == 0x1234
    # an explicit byte order wins
    assert encode_to_bytes(0x1234, ByteOrder.BIG, type_=u16) == b'\x12\x34'


def test_max_encode_bytes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _use_config(monkeypatch, tmp_path, 'MAX_ENCODE_BYTES: 4\n')
    assert encode_to_bytes(1, type_=u32) == b'\x00\x00\x00\x01'
    with pytest.raises(MaxBytesExceededError):
        encode_to_bytes(Test(1, 2))


def test_max_decode_bytes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _use_config(monkeypatch, tmp_path, 'MAX_DECODE_BYTES: 4\n')
    assert decode_from_bytes(list[u8], b'\x01\x02\x03\x04') == [1, 2, 3, 4]
    with pytest.raises(SerializationIOError):
        decode_from_bytes(list[u8], b'\x01\x02\x03\x04\x05')
    with pytest.raises(MaxBytesExceededError):
        decode_from_bytes(str, b'abcde')

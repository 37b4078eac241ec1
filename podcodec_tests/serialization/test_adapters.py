import io

import pytest

from podcodec.serialization import Deserializer, OutOfDataError, SerializationIOError, Serializer
from podcodec.serialization.adapters import (
    GenericSerializerAdapter,
    LimitedDeserializer,
    MaxBytesDeserializer,
    MaxBytesExceededError,
    MaxBytesSerializer,
)


def test_max_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    assert isinstance(se, MaxBytesSerializer)
    se.write_byte(1)
    se.write_bytes(b'\x02\x03')
    with pytest.raises(MaxBytesExceededError):
        se.write_byte(4)


def test_max_bytes_serializer_single_write() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(2)
    with pytest.raises(MaxBytesExceededError):
        se.write_bytes(b'abc')


def test_max_bytes_is_an_io_error() -> None:
    assert issubclass(MaxBytesExceededError, SerializationIOError)


def test_optional_max_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    assert isinstance(se.with_optional_max_bytes(10), MaxBytesSerializer)
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
    assert isinstance(de.with_optional_max_bytes(10), MaxBytesDeserializer)


def test_max_bytes_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04').with_max_bytes(3)
    assert de.read_byte() == 1
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    with pytest.raises(MaxBytesExceededError):
        de.read_byte()


def test_max_bytes_deserializer_read_all() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02').with_max_bytes(3)
    assert bytes(de.read_all()) == b'\x01\x02'

    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04').with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_all()


def test_max_bytes_deserializer_inexact_read() -> None:
    # only the bytes actually read count against the budget
    de = Deserializer.build_bytes_deserializer(b'\x01\x02').with_max_bytes(3)
    assert bytes(de.read_bytes(10, exact=False)) == b'\x01\x02'

    de = Deserializer.build_bytes_deserializer(b'\x01\x02').with_max_bytes(3)
    assert bytes(de.read_bytes(2, exact=False)) == b'\x01\x02'
    assert bytes(de.read_bytes(5, exact=False)) == b''

    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04').with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_bytes(10, exact=False)


def test_max_bytes_deserializer_exact_read_fails_before_reading() -> None:
    inner = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04')
    de = inner.with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_bytes(4)
    assert inner.read_byte() == 1


def test_generic_adapter_forwards() -> None:
    stream = io.BytesIO()
    inner = Serializer.build_stream_serializer(stream)
    with GenericSerializerAdapter(inner) as se:
        se.write_bytes(b'ab')
        assert se.cur_pos() == 2
    assert stream.getvalue() == b'ab'


def test_take() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    limited = de.take(4)
    assert isinstance(limited, LimitedDeserializer)
    assert limited.bytes_left == 4
    assert limited.read_byte() == ord('a')
    assert bytes(limited.peek_bytes(2)) == b'bc'
    assert bytes(limited.read_bytes(10, exact=False)) == b'bcd'
    assert limited.is_empty()
    limited.finalize()
    assert bytes(de.read_all()) == b'ef'


def test_take_out_of_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef')
    limited = de.take(2)
    with pytest.raises(OutOfDataError, match='limited to 2'):
        limited.read_bytes(3)
    # nothing was consumed
    assert bytes(limited.read_all()) == b'ab'
    with pytest.raises(OutOfDataError):
        limited.read_byte()
    with pytest.raises(OutOfDataError):
        limited.peek_byte()


def test_take_more_than_available() -> None:
    de = Deserializer.build_bytes_deserializer(b'ab')
    limited = de.take(5)
    assert bytes(limited.read_all()) == b'ab'
    assert limited.is_empty()
    assert limited.bytes_left == 3


def test_take_trailing_data() -> None:
    limited = Deserializer.build_bytes_deserializer(b'abc').take(2)
    limited.read_byte()
    with pytest.raises(ValueError, match='trailing data'):
        limited.finalize()


def test_take_negative() -> None:
    with pytest.raises(ValueError):
        Deserializer.build_bytes_deserializer(b'').take(-1)

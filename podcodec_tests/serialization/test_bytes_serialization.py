import pytest

from podcodec.serialization import Deserializer, OutOfDataError, Serializer


def test_serializer_appends_in_order() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.cur_pos() == 0
    se.write_byte(0x12)
    se.write_bytes(b'\x34\x56')
    se.write_bytes(bytearray(b'\x78'))
    se.write_bytes(memoryview(b'\x9a'))
    se.write_struct((0xbc,), 'B')
    assert se.cur_pos() == 6
    assert bytes(se.finalize()) == bytes.fromhex('123456789abc')


def test_serializer_byte_range() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_byte(256)
    with pytest.raises(ValueError):
        se.write_byte(-1)


def test_serializer_flush_is_noop() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(1)
    se.flush()
    assert bytes(se.finalize()) == b'\x01'


def test_serializer_cannot_be_reused_after_finalize() -> None:
    se = Serializer.build_bytes_serializer()
    se.finalize()
    with pytest.raises(AttributeError):
        se.write_byte(1)


def test_deserializer_reads() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('123456789abc'))
    assert not de.is_empty()
    assert de.peek_byte() == 0x12
    assert de.read_byte() == 0x12
    assert bytes(de.peek_bytes(2)) == b'\x34\x56'
    assert bytes(de.read_bytes(2)) == b'\x34\x56'
    assert de.remaining() == 3
    assert de.read_struct('>H') == (0x789a,)
    assert bytes(de.read_all()) == b'\xbc'
    assert de.is_empty()
    de.finalize()


def test_deserializer_not_exact() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    assert bytes(de.read_bytes(5, exact=False)) == b'\x01\x02'
    assert de.is_empty()
    assert bytes(de.read_bytes(1, exact=False)) == b''


def test_deserializer_out_of_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(OutOfDataError, match='2 requested, 1 available'):
        de.read_bytes(2)
    # a failed read doesn't consume anything
    assert de.read_byte() == 1
    with pytest.raises(OutOfDataError):
        de.read_byte()
    with pytest.raises(OutOfDataError):
        de.peek_byte()


def test_deserializer_negative_read() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(ValueError):
        de.read_bytes(-1)


def test_deserializer_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(ValueError, match='trailing data'):
        de.finalize()


def test_deserializer_read_all_empty() -> None:
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.is_empty()
    assert bytes(de.read_all()) == b''

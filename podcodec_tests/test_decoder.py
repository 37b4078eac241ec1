import struct
import unittest
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, NamedTuple, Optional

import pytest

from podcodec import ByteOrder, decode_from_bytes
from podcodec.decoder import Decoder
from podcodec.serialization import (
    CustomError,
    Deserializer,
    EncodingError,
    OutOfDataError,
    SerializationIOError,
    UnsupportedOperationError,
)
from podcodec.shapes import make_shape
from podcodec.types import Length, char, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128

BE = ByteOrder.BIG
LE = ByteOrder.LITTLE


def _decoder(data: bytes, byte_order: ByteOrder = BE) -> Decoder:
    return Decoder(Deserializer.build_bytes_deserializer(data), byte_order)


class DecodeIntegersTestCase(unittest.TestCase):
    def _check(self, type_, value: int, be_hex: str) -> None:
        data = bytes.fromhex(be_hex)
        self.assertEqual(decode_from_bytes(type_, data, BE), value)
        self.assertEqual(decode_from_bytes(type_, data[::-1], LE), value)

    def test_u8(self):
        self._check(u8, 0x12, '12')

    def test_i8(self):
        self._check(i8, 0x12, '12')

    def test_u16(self):
        self._check(u16, 0x1234, '1234')

    def test_i16(self):
        self._check(i16, 0x1234, '1234')

    def test_u32(self):
        self._check(u32, 0x12345678, '12345678')

    def test_i32(self):
        self._check(i32, 0x12345678, '12345678')

    def test_u64(self):
        self._check(u64, 0x12345678_90ABCDEF, '1234567890abcdef')

    def test_i64(self):
        self._check(i64, 0x12345678_90ABCDEF, '1234567890abcdef')

    def test_u128(self):
        self._check(u128, 0x12345678_90ABCDEF_12345678_90ABCDEF, '1234567890abcdef1234567890abcdef')

    def test_i128(self):
        self._check(i128, 0x12345678_90ABCDEF_12345678_90ABCDEF, '1234567890abcdef1234567890abcdef')

    def test_negative(self):
        self.assertEqual(decode_from_bytes(i8, b'\xff', BE), -1)
        self.assertEqual(decode_from_bytes(i16, b'\xfe\xff', LE), -2)
        self.assertEqual(decode_from_bytes(u16, b'\xfe\xff', LE), 0xfffe)

    def test_not_enough_bytes(self):
        with self.assertRaises(OutOfDataError):
            decode_from_bytes(u32, b'\x12\x34\x56', BE)

    def test_out_of_data_is_an_io_error(self):
        with self.assertRaises(SerializationIOError):
            decode_from_bytes(u64, b'', LE)


@pytest.mark.parametrize('value', [0.0, -0.0, 1.5, -2.25, 3.0e38, float('inf'), float('-inf')])
@pytest.mark.parametrize('byte_order', [BE, LE])
def test_decode_f32(value: float, byte_order: ByteOrder) -> None:
    data = struct.pack(byte_order.struct_prefix + 'f', value)
    decoded = decode_from_bytes(f32, data, byte_order)
    assert decoded == struct.unpack(byte_order.struct_prefix + 'f', data)[0]


@pytest.mark.parametrize('value', [0.0, 0.1, -1e300, 2.5e-308, float('inf')])
@pytest.mark.parametrize('byte_order', [BE, LE])
def test_decode_f64(value: float, byte_order: ByteOrder) -> None:
    data = struct.pack(byte_order.struct_prefix + 'd', value)
    assert decode_from_bytes(f64, data, byte_order) == value


def test_decode_f64_nan() -> None:
    data = struct.pack('<d', float('nan'))
    decoded = decode_from_bytes(f64, data, LE)
    assert decoded != decoded


@pytest.mark.parametrize('byte', range(256))
def test_decode_bool_always_fails(byte: int) -> None:
    decoder = _decoder(bytes((byte,)))
    with pytest.raises(UnsupportedOperationError) as exc_info:
        make_shape(bool).decode(decoder)
    assert exc_info.value.operation == 'decode_bool'
    # nothing was consumed
    assert not decoder.is_empty()


def test_decode_unit_struct() -> None:
    @dataclass
    class Test:
        pass

    assert decode_from_bytes(Test, b'', BE) == Test()
    assert decode_from_bytes(Test, b'', LE) == Test()


def test_decode_unit() -> None:
    decoder = _decoder(b'\x01')
    assert make_shape(None).decode(decoder) is None
    assert decoder.read_byte() == 1


def test_decode_newtype() -> None:
    class Test(NamedTuple):
        value: u32

    assert decode_from_bytes(Test, bytes.fromhex('12345678'), BE) == Test(0x12345678)
    assert decode_from_bytes(Test, bytes.fromhex('78563412'), LE) == Test(0x12345678)


def test_decode_tuple_struct() -> None:
    class Test(NamedTuple):
        int1: u32
        int2: u16

    assert decode_from_bytes(Test, bytes.fromhex('12345678abcd'), BE) == Test(0x12345678, 0xABCD)
    assert decode_from_bytes(Test, bytes.fromhex('78563412cdab'), LE) == Test(0x12345678, 0xABCD)


def test_decode_struct() -> None:
    @dataclass
    class Test:
        int1: u32
        int2: u16

    assert decode_from_bytes(Test, bytes.fromhex('12345678abcd'), BE) == Test(int1=0x12345678, int2=0xABCD)
    assert decode_from_bytes(Test, bytes.fromhex('78563412cdab'), LE) == Test(int1=0x12345678, int2=0xABCD)


def test_decode_nested_struct() -> None:
    @dataclass
    class Inner:
        a: u8
        b: i16

    @dataclass
    class Outer:
        inner: Inner
        pair: tuple[u8, u8]
        tail: u32

    data = bytes.fromhex('01fffe0203deadbeef')
    assert decode_from_bytes(Outer, data, BE) == Outer(Inner(1, -2), (2, 3), 0xdeadbeef)


def test_decode_tuple() -> None:
    decoder = _decoder(bytes.fromhex('12345678abcdff'))
    value = make_shape(tuple[u32, u16]).decode(decoder)
    assert value == (0x12345678, 0xABCD)
    # whatever comes after a tuple is left in the source
    assert bytes(decoder.read_all()) == b'\xff'


def test_decode_option_fails() -> None:
    with pytest.raises(UnsupportedOperationError) as exc_info:
        decode_from_bytes(Optional[u16], bytes.fromhex('1234'), BE)
    assert exc_info.value.operation == 'decode_option'


def test_decode_enum_fails() -> None:
    class Color(Enum):
        RED = 1
        GREEN = 2

    with pytest.raises(UnsupportedOperationError) as exc_info:
        decode_from_bytes(Color, b'', BE)
    assert exc_info.value.operation == 'decode_enum'


def test_decode_variant_fails() -> None:
    @dataclass
    class A:
        x: u8

    class B(NamedTuple):
        y: u16

    with pytest.raises(UnsupportedOperationError):
        decode_from_bytes(A | B, b'\x01', BE)


def test_decode_map_fails() -> None:
    with pytest.raises(UnsupportedOperationError) as exc_info:
        decode_from_bytes(dict[u8, u8], b'\x01\x02', BE)
    assert exc_info.value.operation == 'decode_map'


def test_decode_struct_with_bool_field_fails() -> None:
    @dataclass
    class Test:
        a: u8
        flag: bool

    assert not make_shape(Test).is_decodable()
    with pytest.raises(UnsupportedOperationError):
        decode_from_bytes(Test, b'\x01\x01', BE)


def test_decode_seq() -> None:
    data = bytes.fromhex('12345678abcd')
    assert decode_from_bytes(list[u16], data, BE) == [0x1234, 0x5678, 0xABCD]
    assert decode_from_bytes(list[u16], data, LE) == [0x3412, 0x7856, 0xCDAB]


def test_decode_seq_empty() -> None:
    assert decode_from_bytes(list[u32], b'', BE) == []


def test_decode_seq_builders() -> None:
    data = bytes.fromhex('0102')
    assert decode_from_bytes(tuple[u8, ...], data, BE) == (1, 2)
    from collections import deque
    assert decode_from_bytes(deque[u8], data, BE) == deque([1, 2])


def test_decode_seq_of_empty_elements_fails() -> None:
    @dataclass
    class Empty:
        pass

    class NoFields(NamedTuple):
        pass

    for type_ in (list[Empty], list[NoFields], list[None], tuple[Empty, ...]):
        with pytest.raises(CustomError, match='consumed no bytes'):
            decode_from_bytes(type_, b'\x01', BE)
    # nothing to decode, nothing to fail on
    assert decode_from_bytes(list[Empty], b'', BE) == []


def test_decoder_counts_bytes_read() -> None:
    decoder = _decoder(bytes.fromhex('0102030405'))
    decoder.decode_u8()
    decoder.decode_u16()
    assert decoder.bytes_read == 3
    decoder.read_all()
    assert decoder.bytes_read == 5


def test_decode_seq_truncated() -> None:
    with pytest.raises(OutOfDataError):
        decode_from_bytes(list[u16], bytes.fromhex('12345678ab'), BE)


def test_decode_str() -> None:
    data = 'тест'.encode('utf-8')
    assert decode_from_bytes(str, data, BE) == 'тест'
    assert decode_from_bytes(str, data, LE) == 'тест'


def test_decode_str_empty() -> None:
    assert decode_from_bytes(str, b'', BE) == ''


def test_decode_str_invalid() -> None:
    with pytest.raises(EncodingError):
        decode_from_bytes(str, b'\xd1', BE)


def test_decode_bytes() -> None:
    assert decode_from_bytes(bytes, b'\x00\x01\x02', LE) == b'\x00\x01\x02'


def test_decode_chars() -> None:
    decoder = _decoder('aт😎'.encode('utf-8'))
    assert [decoder.decode_char() for _ in range(3)] == ['a', 'т', '😎']
    assert decoder.is_empty()


def test_decode_char_invalid_start() -> None:
    with pytest.raises(EncodingError):
        decode_from_bytes(char, b'\xff', BE)


def test_decode_char_truncated() -> None:
    with pytest.raises(OutOfDataError):
        decode_from_bytes(char, b'\xf0\x9f\x98', BE)


def test_decode_array_empty() -> None:
    decoder = _decoder(b'')
    assert make_shape(Annotated[list[u16], Length(0)]).decode(decoder) == []


def test_decode_array() -> None:
    data = bytes.fromhex('12345678abcd')
    assert decode_from_bytes(Annotated[list[u16], Length(3)], data, BE) == [0x1234, 0x5678, 0xABCD]
    assert decode_from_bytes(Annotated[list[u16], Length(3)], data, LE) == [0x3412, 0x7856, 0xCDAB]
    assert decode_from_bytes(Annotated[tuple[u16, ...], Length(3)], data, BE) == (0x1234, 0x5678, 0xABCD)


def test_decode_array_truncated() -> None:
    with pytest.raises(OutOfDataError):
        decode_from_bytes(Annotated[list[u16], Length(3)], bytes.fromhex('12345678ab'), BE)


def test_decode_array_leaves_rest() -> None:
    decoder = _decoder(bytes.fromhex('0102030405'))
    assert make_shape(Annotated[list[u8], Length(2)]).decode(decoder) == [1, 2]
    assert make_shape(list[u8]).decode(decoder) == [3, 4, 5]


def test_decode_str_from_slice() -> None:
    # strings take everything, `take()` bounds them to a known extent
    @dataclass
    class Test:
        name: str

    source = Deserializer.build_bytes_deserializer(b'\x03abc\x12\x34')
    size = source.read_byte()
    assert decode_from_bytes(Test, bytes(source.read_bytes(size)), BE) == Test('abc')
    assert decode_from_bytes(u16, bytes(source.read_all()), BE) == 0x1234

    source = Deserializer.build_bytes_deserializer(b'abcdef')
    assert make_shape(str).decode(Decoder(source.take(3))) == 'abc'
    assert bytes(source.read_all()) == b'def'


def test_decoder_unsupported_operations() -> None:
    decoder = _decoder(b'\x00')
    for method, args in [
        (decoder.decode_bool, ()),
        (decoder.decode_option, ()),
        (decoder.decode_enum, ('E',)),
        (decoder.decode_map, ()),
        (decoder.decode_any, ()),
        (decoder.decode_identifier, ()),
        (decoder.decode_ignored_any, ()),
    ]:
        with pytest.raises(UnsupportedOperationError) as exc_info:
            method(*args)
        assert exc_info.value.operation == method.__name__
    assert decoder.read_byte() == 0


def test_decoder_is_not_human_readable() -> None:
    assert not _decoder(b'').is_human_readable()

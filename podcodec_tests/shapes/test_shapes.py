import unittest
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, NamedTuple, Optional, TypeVar

from podcodec.byteorder import ByteOrder
from podcodec.serialization import CustomError, UnsupportedOperationError
from podcodec.shapes import Shape, make_shape
from podcodec.types import Length, char, f32, i16, u8, u16, u32

T = TypeVar('T')


@dataclass
class Header:
    magic: u32
    version: u16


@dataclass
class Packet:
    header: Header
    flags: Annotated[list[u8], Length(2)]
    payload: bytes


class Pair(NamedTuple):
    left: i16
    right: i16


@dataclass
class WithFlag:
    value: u8
    enabled: bool


class Mode(Enum):
    ON = 'on'
    OFF = 'off'


class ShapesTestCase(unittest.TestCase):
    def _run_test(self, type_: type[T], value: T) -> None:
        shape = make_shape(type_)
        for byte_order in ByteOrder:
            result_bytes = shape.to_bytes(value, byte_order)
            result = shape.from_bytes(result_bytes, byte_order)
            self.assertEqual(value, result)

    def test_struct(self):
        self._run_test(Header, Header(magic=0xcafebabe, version=3))

    def test_nested_struct(self):
        packet = Packet(Header(1, 2), [3, 4], b'\x05\x06\x07')
        self._run_test(Packet, packet)
        self.assertEqual(make_shape(Packet).to_bytes(packet), bytes.fromhex('00000001' '0002' '0304' '050607'))
        self.assertEqual(make_shape(Packet).to_bytes(packet, ByteOrder.LITTLE),
                         bytes.fromhex('01000000' '0200' '0304' '050607'))

    def test_tuple_struct(self):
        self._run_test(Pair, Pair(-1, 2))
        self.assertEqual(make_shape(Pair).to_bytes(Pair(-1, 2)), bytes.fromhex('ffff0002'))

    def test_sequence_of_structs(self):
        self._run_test(list[Pair], [Pair(1, 2), Pair(3, 4)])
        self._run_test(list[Pair], [])

    def test_floats(self):
        self._run_test(f32, 1.5)
        self._run_test(list[float], [0.5, -1.25])

    def test_chars(self):
        self._run_test(tuple[char, char, u8], ('a', 'б', 7))

    def test_from_bytes_ignores_trailing_data(self):
        self.assertEqual(make_shape(u16).from_bytes(b'\x12\x34\x56'), 0x1234)

    def test_is_decodable(self):
        decodable = [u8, f32, char, str, bytes, None, Header, Packet, Pair, list[Pair], tuple[u8, str],
                     Annotated[list[u8], Length(3)]]
        for type_ in decodable:
            self.assertTrue(make_shape(type_).is_decodable(), type_)

        not_decodable = [bool, Optional[u8], Mode, Header | Pair, dict[u8, u8], WithFlag, list[bool],
                         tuple[u8, Optional[u8]], Annotated[list[bool], Length(1)]]
        for type_ in not_decodable:
            self.assertFalse(make_shape(type_).is_decodable(), type_)

    def test_encode_only_shapes(self):
        cases = [
            (bool, True, b'\x01', 'decode_bool'),
            (Optional[u16], 0x1234, b'\x12\x34', 'decode_option'),
            (Optional[u16], None, b'', 'decode_option'),
            (Mode, Mode.OFF, b'', 'decode_enum'),
            (Header | Pair, Pair(1, 2), b'\x00\x01\x00\x02', 'decode_enum'),
            (dict[u8, char], {1: 'a'}, b'\x01a', 'decode_map'),
        ]
        for type_, value, expected, operation in cases:
            shape = make_shape(type_)
            self.assertEqual(shape.to_bytes(value), expected)
            with self.assertRaises(UnsupportedOperationError) as cm:
                shape.from_bytes(expected)
            self.assertEqual(cm.exception.operation, operation)

    def test_check_value(self):
        shape = make_shape(Packet)
        shape.check_value(Packet(Header(1, 2), [3, 4], b''))

        invalid = [
            Header(1, 2),
            Packet(Header(1, -2), [3, 4], b''),
            Packet(Header(1, 2), [3, 4, 5], b''),
            Packet(Header(1, 2), [3, 256], b''),
            Packet(Header(1, 2), [3, 4], 'text'),
        ]
        for value in invalid:
            with self.assertRaises(CustomError):
                shape.check_value(value)

    def test_check_value_is_deep(self):
        shape = make_shape(list[Pair])
        value = [Pair(1, 2), Pair(3, 2**15)]
        with self.assertRaises(CustomError):
            shape.check_value(value)

    def test_encode_checks_each_element(self):
        shape = make_shape(list[u8])
        with self.assertRaises(CustomError):
            shape.to_bytes([1, 2, 300])

    def test_wrong_element_type(self):
        with self.assertRaises(CustomError):
            make_shape(list[u8]).to_bytes('abc')
        with self.assertRaises(CustomError):
            make_shape(dict[u8, u8]).to_bytes([1, 2])
        with self.assertRaises(CustomError):
            make_shape(str).to_bytes(b'abc')
        with self.assertRaises(CustomError):
            make_shape(bytes).to_bytes('abc')
        with self.assertRaises(CustomError):
            make_shape(None).to_bytes(0)
        with self.assertRaises(CustomError):
            make_shape(f32).to_bytes('1.0')
        with self.assertRaises(CustomError):
            make_shape(Mode).to_bytes('on')

    def test_shapes_are_reusable(self):
        shape = make_shape(Pair)
        self.assertEqual(shape.to_bytes(Pair(1, 2)), shape.to_bytes(Pair(1, 2)))
        self.assertEqual(shape.from_bytes(b'\x00\x01\x00\x02'), shape.from_bytes(b'\x00\x01\x00\x02'))

    def test_shape_subclass_check(self):
        self.assertIsInstance(make_shape(u8), Shape)


def test_array_of_tuples() -> None:
    shape = make_shape(Annotated[tuple[tuple[u8, u8], ...], Length(2)])
    assert shape.to_bytes(((1, 2), (3, 4))) == b'\x01\x02\x03\x04'
    assert shape.from_bytes(b'\x01\x02\x03\x04') == ((1, 2), (3, 4))


def test_struct_with_trailing_sequence() -> None:
    @dataclass
    class Message:
        kind: u8
        values: list[u16]

    shape = make_shape(Message)
    data = shape.to_bytes(Message(1, [2, 3]), ByteOrder.LITTLE)
    assert data == b'\x01\x02\x00\x03\x00'
    assert shape.from_bytes(data, ByteOrder.LITTLE) == Message(1, [2, 3])

import pytest

from podcodec.serialization import CustomError, Deserializer, EncodingError, OutOfDataError, Serializer
from podcodec.serialization.encoding.utf8 import decode_char, decode_utf8, encode_char, encode_utf8, utf8_char_width


def _expected_width(first_byte: int) -> int:
    if first_byte < 0x80:
        return 1
    if first_byte < 0xc2:
        return 0
    if first_byte < 0xe0:
        return 2
    if first_byte < 0xf0:
        return 3
    if first_byte < 0xf5:
        return 4
    return 0


@pytest.mark.parametrize('first_byte', range(256))
def test_char_width_table(first_byte: int) -> None:
    assert utf8_char_width(first_byte) == _expected_width(first_byte)


@pytest.mark.parametrize('char', [chr(c) for c in (0x00, 0x61, 0x7f, 0x80, 0xe9, 0x442, 0x7ff, 0x800, 0x20ac, 0xffff,
                                                   0x10000, 0x1f60e, 0x10ffff)])
def test_char_width_matches_encoding(char: str) -> None:
    encoded = char.encode('utf-8')
    assert utf8_char_width(encoded[0]) == len(encoded)

    se = Serializer.build_bytes_serializer()
    encode_char(se, char)
    assert bytes(se.finalize()) == encoded

    de = Deserializer.build_bytes_deserializer(encoded + b'\x00')
    assert decode_char(de) == char
    assert de.read_byte() == 0


def test_encode_char_length() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(CustomError, match='got 2'):
        encode_char(se, 'ab')
    with pytest.raises(CustomError, match='got 0'):
        encode_char(se, '')
    assert bytes(se.finalize()) == b''


def test_decode_char_lone_continuation() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x80\x80')
    with pytest.raises(EncodingError):
        decode_char(de)
    # only the offending byte was consumed
    assert bytes(de.read_all()) == b'\x80'


def test_decode_char_bad_continuation() -> None:
    de = Deserializer.build_bytes_deserializer(b'\xd1\x41')
    with pytest.raises(EncodingError) as exc_info:
        decode_char(de)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_decode_char_surrogate() -> None:
    # utf-8 encoding of U+D800, surrogates are not valid code points
    de = Deserializer.build_bytes_deserializer(b'\xed\xa0\x80')
    with pytest.raises(EncodingError):
        decode_char(de)


def test_decode_char_truncated() -> None:
    de = Deserializer.build_bytes_deserializer('т'.encode('utf-8')[:1])
    with pytest.raises(OutOfDataError):
        decode_char(de)


def test_decode_char_empty() -> None:
    de = Deserializer.build_bytes_deserializer(b'')
    with pytest.raises(OutOfDataError):
        decode_char(de)


def test_utf8_roundtrip_takes_everything() -> None:
    se = Serializer.build_bytes_serializer()
    encode_utf8(se, 'тест')
    encode_utf8(se, '!')
    data = bytes(se.finalize())
    assert data == 'тест!'.encode('utf-8')
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_utf8(de) == 'тест!'
    assert de.is_empty()


def test_decode_utf8_invalid() -> None:
    de = Deserializer.build_bytes_deserializer('тест'.encode('utf-8')[:-1])
    with pytest.raises(EncodingError):
        decode_utf8(de)

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

from tests import unittest
from xdrcodec import (
    BadDataError,
    DecodeError,
    IntegerOverflowError,
    InvalidTypeError,
    OutOfDataError,
    PrimitiveReceiver,
    Receiver,
    SelfDescribingDecodeError,
    TooLongError,
    UnsupportedTypeError,
)
from xdrcodec.conf import Settings


class Color(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 300


class Mode(Enum):
    FAST = 'fast'


class Flag(Enum):
    OFF = False
    ON = True


@dataclass
class Pair:
    a: int
    b: int


class SignedOnlyReceiver(Receiver[int]):
    def expecting(self) -> str:
        return 'a signed integer'

    def visit_i64(self, value: int) -> int:
        return value


class TaggingReceiver(Receiver[tuple[str, Any]]):
    """Records which visit method was called, to check the forwarding of narrow kinds."""

    def visit_i32(self, value: int) -> tuple[str, Any]:
        return ('i32', value)

    def visit_i64(self, value: int) -> tuple[str, Any]:
        return ('i64', value)

    def visit_f64(self, value: float) -> tuple[str, Any]:
        return ('f64', value)


# method name (without the decode_ prefix) and arguments before the receiver
REJECTED_CALLS = [
    ('char',),
    ('option',),
    ('unit',),
    ('unit_struct', 'Empty'),
    ('newtype_struct', 'Meters'),
    ('seq',),
    ('tuple', 2),
    ('tuple_struct', 'Point', 2),
    ('map',),
    ('enum', 'Shape', ('Circle', 'Rect')),
    ('struct', 'Pair', ('a', 'b')),
    ('identifier',),
]


class DecoderTestCase(unittest.TestCase):
    def decode_one(self, method: str, data: bytes, *args: Any, settings: Optional[Settings] = None) -> Any:
        decoder, deserializer = self.new_decoder(data, settings)
        value = getattr(decoder, f'decode_{method}')(*args, PrimitiveReceiver())
        deserializer.finalize()
        return value

    def test_integers(self) -> None:
        self.assertEqual(self.decode_one('i32', bytes.fromhex('fffffffe')), -2)
        self.assertEqual(self.decode_one('u32', bytes.fromhex('8000100e')), 0x8000100e)
        self.assertEqual(self.decode_one('i64', bytes.fromhex('ffffffffffffffff')), -1)
        self.assertEqual(self.decode_one('u64', bytes.fromhex('ffffffffffffffff')), 2**64 - 1)
        self.assertEqual(self.decode_one('i8', bytes.fromhex('ffffff80')), -128)
        self.assertEqual(self.decode_one('u16', bytes.fromhex('0000ffff')), 0xffff)

    def test_i8_all_values(self) -> None:
        encoder, serializer = self.new_encoder()
        values = list(range(-128, 128))
        for value in values:
            encoder.encode_i8(value)
        decoder, deserializer = self.new_decoder(bytes(serializer.finalize()))
        self.assertEqual([decoder.decode_i8(PrimitiveReceiver()) for _ in values], values)
        deserializer.finalize()

    def test_narrow_integer_overflow(self) -> None:
        cases = [
            ('i8', '00000080', 'int8', 128),
            ('i8', 'ffffff7f', 'int8', -129),
            ('u8', '00000100', 'uint8', 256),
            ('u8', 'ffffffff', 'uint8', 2**32 - 1),
            ('i16', '00008000', 'int16', 2**15),
            ('u16', '00010000', 'uint16', 2**16),
        ]
        for method, data, kind, value in cases:
            with self.subTest(method=method, data=data):
                with self.assertRaises(IntegerOverflowError) as cm:
                    self.decode_one(method, bytes.fromhex(data))
                self.assertEqual(cm.exception.kind, kind)
                self.assertEqual(cm.exception.value, value)
                self.assertEqual(str(cm.exception), f'value out of range for {kind}: {value}')

    def test_bool(self) -> None:
        self.assertIs(self.decode_one('bool', bytes.fromhex('00000001')), True)
        self.assertIs(self.decode_one('bool', bytes.fromhex('00000000')), False)
        with self.assertRaises(BadDataError):
            self.decode_one('bool', bytes.fromhex('00000002'))

    def test_floats(self) -> None:
        self.assertEqual(self.decode_one('f32', bytes.fromhex('3fc00000')), 1.5)
        self.assertEqual(self.decode_one('f64', bytes.fromhex('c000000000000000')), -2.0)
        self.assertNotEqual(self.decode_one('f32', bytes.fromhex('7fc00000')), 0.0)

    def test_unit_variant(self) -> None:
        self.assertEqual(self.decode_one('unit_variant', bytes.fromhex('0000012c'), 'Color', ()), 300)
        self.assertEqual(self.decode_one('unit_variant', bytes.fromhex('00000002'), 'Abc', ('A', 'B', 'C')), 2)
        with self.assertRaises(BadDataError) as cm:
            self.decode_one('unit_variant', bytes.fromhex('00000003'), 'Abc', ('A', 'B', 'C'))
        self.assertEqual(str(cm.exception), 'unknown variant index: 3')

    def test_opaque_and_string(self) -> None:
        self.assertEqual(self.decode_one('bytes', bytes.fromhex('00000003 01020300')), b'\x01\x02\x03')
        self.assertEqual(self.decode_one('bytes', bytes.fromhex('00000000')), b'')
        self.assertEqual(self.decode_one('str', bytes.fromhex('00000005 68656c6c6f000000')), 'hello')
        self.assertEqual(self.decode_one('str', bytes.fromhex('00000002 cf800000')), 'π')
        self.assertEqual(self.decode_one('fixed_opaque', bytes.fromhex('6162636465000000'), 5), b'abcde')

    def test_non_zero_padding(self) -> None:
        data = bytes.fromhex('00000001 01000100')
        with self.assertRaises(BadDataError) as cm:
            self.decode_one('bytes', data)
        self.assertEqual(str(cm.exception), 'non-zero padding')

        lenient = Settings(STRICT_PADDING=False)
        self.assertEqual(self.decode_one('bytes', data, settings=lenient), b'\x01')

    def test_invalid_utf8(self) -> None:
        with self.assertRaises(BadDataError) as cm:
            self.decode_one('str', bytes.fromhex('00000002 c3280000'))
        self.assertIsInstance(cm.exception.__cause__, UnicodeDecodeError)

    def test_length_limit_checked_before_payload(self) -> None:
        settings = Settings(MAX_OPAQUE_LENGTH=16, MAX_STRING_LENGTH=8)
        # only the prefix is present, the limit must fail before trying to read the payload
        with self.assertRaises(TooLongError) as cm:
            self.decode_one('bytes', bytes.fromhex('00000011'), settings=settings)
        self.assertEqual((cm.exception.length, cm.exception.max_length), (17, 16))
        with self.assertRaises(TooLongError):
            self.decode_one('str', bytes.fromhex('00000009'), settings=settings)

    def test_out_of_data(self) -> None:
        cases = [
            ('i32', '0000', 'int32'),
            ('u64', '00000000', 'uint64'),
            ('bool', '', 'bool'),
            ('str', '0000000a 61626300', 'string'),
            ('bytes', '00000002 6162', 'opaque'),
        ]
        for method, data, kind in cases:
            with self.subTest(method=method):
                with self.assertRaises(DecodeError) as cm:
                    self.decode_one(method, bytes.fromhex(data))
                self.assertEqual(cm.exception.kind, kind)
                self.assertIsInstance(cm.exception.__cause__, OutOfDataError)
                self.assertEqual(str(cm.exception), f'failed to deserialize {kind}')

    def test_self_describing_is_rejected(self) -> None:
        decoder, deserializer = self.new_decoder(bytes(4))
        with self.assertRaises(SelfDescribingDecodeError) as cm:
            decoder.decode_any(PrimitiveReceiver())
        self.assertEqual(str(cm.exception), 'cannot decode self-describing type')
        with self.assertRaises(SelfDescribingDecodeError):
            decoder.decode_ignored_any(PrimitiveReceiver())
        self.assertEqual(len(deserializer.read_all()), 4)

    def test_rejected_shapes_read_nothing(self) -> None:
        for method, *args in REJECTED_CALLS:
            with self.subTest(method=method):
                decoder, deserializer = self.new_decoder(bytes(8))
                with self.assertRaises(UnsupportedTypeError) as cm:
                    getattr(decoder, f'decode_{method}')(*args, PrimitiveReceiver())
                self.assertEqual(cm.exception.kind, method)
                self.assertEqual(len(deserializer.read_all()), 8)

    def test_receiver_defaults(self) -> None:
        decoder, _ = self.new_decoder(bytes.fromhex('00000001'))
        with self.assertRaises(InvalidTypeError) as cm:
            decoder.decode_bool(Receiver())
        self.assertEqual(cm.exception.kind, 'bool')
        self.assertEqual(str(cm.exception), 'invalid type: bool, expected a value')

    def test_receiver_forwards_narrow_kinds(self) -> None:
        decoder, _ = self.new_decoder(bytes.fromhex('0000007f 00007fff 00000005 3fc00000'))
        receiver = TaggingReceiver()
        self.assertEqual(decoder.decode_i8(receiver), ('i64', 127))
        self.assertEqual(decoder.decode_i16(receiver), ('i64', 0x7fff))
        # an explicit override wins over the forwarding
        self.assertEqual(decoder.decode_i32(receiver), ('i32', 5))
        self.assertEqual(decoder.decode_f32(receiver), ('f64', 1.5))

    def test_receiver_rejects_unhandled_kind(self) -> None:
        decoder, _ = self.new_decoder(bytes.fromhex('00000001 00000001'))
        self.assertEqual(decoder.decode_i32(SignedOnlyReceiver()), 1)
        with self.assertRaises(InvalidTypeError) as cm:
            decoder.decode_u8(SignedOnlyReceiver())
        self.assertEqual(cm.exception.kind, 'unsigned integer')
        self.assertEqual(cm.exception.expected, 'a signed integer')

    def test_decode_dispatch(self) -> None:
        cases: list[tuple[Any, str, Any]] = [
            (bool, '00000001', True),
            (float, '3ff8000000000000', 1.5),
            (str, '00000002 61620000', 'ab'),
            (bytes, '00000001 01000000', b'\x01'),
            (Color, '0000012c', Color.BLUE),
        ]
        for type_, data, expected in cases:
            with self.subTest(type_=type_):
                decoder, deserializer = self.new_decoder(bytes.fromhex(data))
                self.assertEqual(decoder.decode(type_), expected)
                deserializer.finalize()

    def test_decode_unknown_enum_discriminant(self) -> None:
        decoder, _ = self.new_decoder(bytes.fromhex('00000002'))
        with self.assertRaises(BadDataError) as cm:
            decoder.decode(Color)
        self.assertEqual(str(cm.exception), 'invalid Color discriminant: 2')

    def test_decode_dispatch_rejections(self) -> None:
        cases: list[tuple[Any, str]] = [
            (int, 'int'),
            (list[int], 'seq'),
            (frozenset, 'seq'),
            (tuple[int, int], 'tuple'),
            (dict[str, int], 'map'),
            (Optional[str], 'option'),
            (str | None, 'option'),
            (type(None), 'unit'),
            (Pair, 'struct'),
            (Mode, 'enum'),
            (Flag, 'enum'),
            (complex, 'complex'),
        ]
        for type_, kind in cases:
            with self.subTest(type_=type_):
                decoder, deserializer = self.new_decoder(bytes(8))
                with self.assertRaises(UnsupportedTypeError) as cm:
                    decoder.decode(type_)
                self.assertEqual(cm.exception.kind, kind)
                self.assertEqual(len(deserializer.read_all()), 8)

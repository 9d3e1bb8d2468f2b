import io
from dataclasses import dataclass

from typing_extensions import Self

from tests import unittest
from xdrcodec import (
    BadDataError,
    DecodeError,
    Decoder,
    EncodeError,
    Encoder,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    IntegerOverflowError,
    PrimitiveReceiver,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsupportedTypeError,
    from_bytes,
    from_reader,
    to_bytes,
    to_writer,
)


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    label: str

    def encode_xdr(self, encoder: Encoder, /) -> None:
        encoder.encode_i32(self.x)
        encoder.encode_i32(self.y)
        encoder.encode_str(self.label)

    @classmethod
    def decode_xdr(cls, decoder: Decoder, /) -> Self:
        x = decoder.decode_i32(PrimitiveReceiver())
        y = decoder.decode_i32(PrimitiveReceiver())
        label = decoder.decode_str(PrimitiveReceiver())
        return cls(x, y, label)


class HalfSupported:
    """Writes one primitive and then asks for a shape the codec does not support."""

    def encode_xdr(self, encoder: Encoder, /) -> None:
        encoder.encode_u32(1)
        encoder.encode_seq([2, 3])


class BrokenStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data):
        raise OSError('disk full')


class ApiTestCase(unittest.TestCase):
    def test_custom_type_round_trip(self) -> None:
        point = Point(-1, 2, 'origin')
        data = to_bytes(point)
        self.assertEqual(data.hex(), 'ffffffff' '00000002' '00000006' '6f726967696e' '0000')
        self.assertEqual(from_bytes(Point, data), point)

    def test_trailing_data(self) -> None:
        data = to_bytes(Int32(5)) + b'\x00'
        with self.assertRaises(BadDataError) as cm:
            from_bytes(Int32, data)
        self.assertEqual(str(cm.exception), 'trailing data')

    def test_short_data(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            from_bytes(Point, bytes.fromhex('00000001 00000002 00000006 6f72'))
        self.assertEqual(cm.exception.kind, 'string')

    def test_builtin_values(self) -> None:
        self.assertEqual(to_bytes(True).hex(), '00000001')
        self.assertIs(from_bytes(bool, bytes.fromhex('00000000')), False)
        self.assertEqual(from_bytes(str, to_bytes('xdr')), 'xdr')
        self.assertEqual(from_bytes(bytes, to_bytes(b'\x00\x01')), b'\x00\x01')
        self.assertEqual(from_bytes(float, to_bytes(0.1)), 0.1)
        with self.assertRaises(UnsupportedTypeError):
            to_bytes(1)
        with self.assertRaises(UnsupportedTypeError):
            to_bytes([True])

    def test_to_writer(self) -> None:
        stream = io.BytesIO()
        to_writer(stream, Point(1, 2, 'a'))
        to_writer(stream, UInt8(255), atomic=False)
        self.assertEqual(stream.getvalue().hex(), '00000001' '00000002' '00000001' '61000000' '000000ff')

    def test_to_writer_atomic_failure_writes_nothing(self) -> None:
        stream = io.BytesIO()
        with self.assertRaises(UnsupportedTypeError):
            to_writer(stream, HalfSupported())
        self.assertEqual(stream.getvalue(), b'')

    def test_to_writer_non_atomic_failure_keeps_prefix(self) -> None:
        stream = io.BytesIO()
        with self.assertRaises(UnsupportedTypeError):
            to_writer(stream, HalfSupported(), atomic=False)
        self.assertEqual(stream.getvalue().hex(), '00000001')

    def test_to_writer_sink_failure(self) -> None:
        with self.assertRaises(EncodeError) as cm:
            to_writer(BrokenStream(), Int64(1))
        self.assertEqual(cm.exception.kind, 'staged buffer')
        self.assertIsInstance(cm.exception.__cause__, OSError)

        with self.assertRaises(EncodeError) as cm:
            to_writer(BrokenStream(), Int64(1), atomic=False)
        self.assertEqual(cm.exception.kind, 'int64')

    def test_from_reader_consumes_one_value(self) -> None:
        stream = io.BytesIO(to_bytes(Int16(-3)) + to_bytes(Point(0, 0, '')) + b'rest')
        self.assertEqual(from_reader(Int16, stream), Int16(-3))
        self.assertEqual(from_reader(Point, stream), Point(0, 0, ''))
        self.assertEqual(stream.read(), b'rest')

    def test_from_reader_short_stream(self) -> None:
        with self.assertRaises(DecodeError):
            from_reader(UInt64, io.BytesIO(b'\x00\x00\x00'))


class ScalarsTestCase(unittest.TestCase):
    def test_encodings(self) -> None:
        cases = [
            (Int8(-1), 'ffffffff'),
            (Int16(-2), 'fffffffe'),
            (Int32(7), '00000007'),
            (Int64(-2), 'fffffffffffffffe'),
            (UInt8(255), '000000ff'),
            (UInt16(0x100e), '0000100e'),
            (UInt32(2**32 - 1), 'ffffffff'),
            (UInt64(2**64 - 1), 'ffffffffffffffff'),
            (Float32(1.5), '3fc00000'),
            (Float64(-2.0), 'c000000000000000'),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                data = to_bytes(value)
                self.assertEqual(data.hex(), expected)
                decoded = from_bytes(type(value), data)
                self.assertIs(type(decoded), type(value))
                self.assertEqual(decoded, value)

    def test_range_checked_on_construction(self) -> None:
        cases = [(Int8, 128), (Int8, -129), (UInt8, -1), (Int16, 2**15), (UInt16, 2**16), (Int32, 2**31),
                 (UInt32, 2**32), (Int64, -2**63 - 1), (UInt64, 2**64)]
        for scalar_class, value in cases:
            with self.subTest(scalar_class=scalar_class, value=value):
                with self.assertRaises(IntegerOverflowError) as cm:
                    scalar_class(value)
                self.assertEqual(cm.exception.kind, scalar_class.kind())
                self.assertEqual(cm.exception.value, value)

    def test_type_checked_on_construction(self) -> None:
        with self.assertRaises(TypeError):
            Int32(1.5)
        with self.assertRaises(TypeError):
            UInt8('1')

    def test_decoded_value_out_of_range(self) -> None:
        with self.assertRaises(IntegerOverflowError) as cm:
            from_bytes(Int8, bytes.fromhex('00000080'))
        self.assertEqual(cm.exception.value, 128)

    def test_repr(self) -> None:
        self.assertEqual(repr(Int8(-2)), 'Int8(-2)')
        self.assertEqual(repr(UInt64(3)), 'UInt64(3)')
        self.assertEqual(repr(Float32(0.5)), 'Float32(0.5)')
        self.assertEqual(Int16.kind(), 'int16')
        self.assertEqual(UInt32.kind(), 'uint32')

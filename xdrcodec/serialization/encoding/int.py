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
This module implements XDR integers: `int` (32-bit), `unsigned int`, `hyper` (64-bit) and `unsigned hyper`.

The encoding format is a standard big-endian two's complement format. XDR has no 8 or 16 bit integers, such values are
widened to a 32-bit container when encoding and range-checked against their narrow width when decoding.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int32(se, -2)  # writes fffffffe
>>> encode_uint32(se, 0x8000100e)  # writes 8000100e
>>> encode_hyper(se, -1)  # writes ffffffffffffffff
>>> encode_narrow_int(se, 127, bits=8, signed=True)  # writes 0000007f
>>> bytes(se.finalize()).hex()
'fffffffe8000100effffffffffffffff0000007f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('fffffffe 8000100e ffffffffffffffff 0000007f'))
>>> decode_int32(de)  # reads fffffffe
-2
>>> decode_uint32(de)  # reads 8000100e
2147487758
>>> decode_hyper(de)  # reads ffffffffffffffff
-1
>>> decode_narrow_int(de, bits=8, signed=True)  # reads 0000007f
127
>>> de.finalize()

A 32-bit container holding a value that does not fit the narrow width is rejected:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000080'))
>>> try:
...     decode_narrow_int(de, bits=8, signed=True)
... except IntegerOverflowError as e:
...     print(*e.args)
value out of range for int8: 128
"""

from xdrcodec.exceptions import IntegerOverflowError
from xdrcodec.serialization import Deserializer, Serializer

from . import XDR_UNIT


def int_kind(bits: int, signed: bool) -> str:
    """Name of an integer kind, as used in error messages (`int8`, `uint32`, ...)."""
    return f'int{bits}' if signed else f'uint{bits}'


def int_bounds(bits: int, signed: bool) -> tuple[int, int]:
    """Inclusive lower and upper bounds of an integer of the given width and signedness."""
    if signed:
        return -(2**(bits - 1)), 2**(bits - 1) - 1
    return 0, 2**bits - 1


def check_int_range(value: int, *, bits: int, signed: bool, kind: str | None = None) -> int:
    lower_bound, upper_bound = int_bounds(bits, signed)
    if not lower_bound <= value <= upper_bound:
        raise IntegerOverflowError(kind or int_kind(bits, signed), value)
    return value


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, kind: str | None = None) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        raise IntegerOverflowError(kind or int_kind(length * 8, signed), number) from None
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=signed)


def encode_narrow_int(serializer: Serializer, number: int, *, bits: int, signed: bool) -> None:
    """ Encode an 8 or 16 bit integer widened to a 32-bit container.

    The value is checked against its narrow width first, widening itself is lossless.
    """
    check_int_range(number, bits=bits, signed=signed)
    encode_int(serializer, number, length=XDR_UNIT, signed=signed)


def decode_narrow_int(deserializer: Deserializer, *, bits: int, signed: bool) -> int:
    """ Decode an 8 or 16 bit integer from a 32-bit container, failing if it does not fit the narrow width.
    """
    value = decode_int(deserializer, length=XDR_UNIT, signed=signed)
    return check_int_range(value, bits=bits, signed=signed)


def encode_int32(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=4, signed=True)


def decode_int32(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=4, signed=True)


def encode_uint32(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=4, signed=False)


def decode_uint32(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=4, signed=False)


def encode_hyper(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=8, signed=True)


def decode_hyper(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=8, signed=True)


def encode_uhyper(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=8, signed=False)


def decode_uhyper(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=8, signed=False)

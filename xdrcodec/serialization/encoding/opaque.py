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
This module implements XDR opaque data, both fixed-length and variable-length.

Layout of variable-length opaque data:

    [length: unsigned int][payload: length bytes][padding: (4 - length % 4) % 4 zero bytes]

Fixed-length opaque data has the same layout without the length prefix, the length is known by both sides. The
padding is never length-prefixed, it is implied by the length.

>>> [padding_length(n) for n in range(6)]
[0, 3, 2, 1, 0, 3]

>>> se = Serializer.build_bytes_serializer()
>>> encode_opaque(se, b'\x01\x02\x03')  # writes 00000003 010203 00
>>> encode_fixed_opaque(se, b'ab', 2)  # writes 6162 0000
>>> bytes(se.finalize()).hex()
'000000030102030061620000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000003 01020300 61620000'))
>>> decode_opaque(de)  # reads 00000003 010203 00
b'\x01\x02\x03'
>>> decode_fixed_opaque(de, 2)  # reads 6162 0000
b'ab'
>>> de.finalize()

Padding bytes must be zero:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000001 01ff0000'))
>>> try:
...     decode_opaque(de)
... except BadDataError as e:
...     print(*e.args)
non-zero padding

A maximum length can be imposed on both sides:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_opaque(se, b'12345', max_length=4)
... except TooLongError as e:
...     print(*e.args)
length 5 exceeds maximum of 4
"""

from typing import Optional

from xdrcodec.exceptions import BadDataError, TooLongError
from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.types import Buffer

from . import XDR_UNIT
from .int import decode_uint32, encode_uint32

MAX_XDR_LENGTH = 2**32 - 1

_ZEROS = bytes(XDR_UNIT)


def padding_length(length: int) -> int:
    """Number of zero bytes needed after `length` bytes to reach a multiple of 4."""
    return (XDR_UNIT - length % XDR_UNIT) % XDR_UNIT


def _check_length(length: int, max_length: Optional[int]) -> None:
    limit = MAX_XDR_LENGTH if max_length is None else min(max_length, MAX_XDR_LENGTH)
    if length > limit:
        raise TooLongError(length, limit)


def _write_padded(serializer: Serializer, data: memoryview) -> None:
    serializer.write_bytes(data)
    pad = padding_length(len(data))
    if pad:
        serializer.write_bytes(_ZEROS[:pad])


def _read_padded(deserializer: Deserializer, length: int, *, strict_padding: bool) -> bytes:
    data = bytes(deserializer.read_bytes(length))
    pad = padding_length(length)
    if pad:
        padding = deserializer.read_bytes(pad)
        if strict_padding and any(bytes(padding)):
            raise BadDataError('non-zero padding')
    return data


def encode_fixed_opaque(serializer: Serializer, data: Buffer, size: int) -> None:
    """ Encodes fixed-length opaque data, `data` must have exactly `size` bytes.
    """
    view = memoryview(data).cast('B')
    if len(view) != size:
        raise BadDataError(f'expected {size} bytes, got {len(view)}')
    _write_padded(serializer, view)


def decode_fixed_opaque(deserializer: Deserializer, size: int, *, strict_padding: bool = True) -> bytes:
    """ Decodes fixed-length opaque data of `size` bytes, consuming its padding too.
    """
    return _read_padded(deserializer, size, strict_padding=strict_padding)


def encode_opaque(serializer: Serializer, data: Buffer, *, max_length: Optional[int] = None) -> None:
    """ Encodes variable-length opaque data: length prefix, payload and padding.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data).cast('B')
    _check_length(len(view), max_length)
    encode_uint32(serializer, len(view))
    _write_padded(serializer, view)


def decode_opaque(
    deserializer: Deserializer,
    *,
    max_length: Optional[int] = None,
    strict_padding: bool = True,
) -> bytes:
    """ Decodes variable-length opaque data.

    The length prefix is checked against `max_length` before the payload is read.
    """
    length = decode_uint32(deserializer)
    _check_length(length, max_length)
    return _read_padded(deserializer, length, strict_padding=strict_padding)

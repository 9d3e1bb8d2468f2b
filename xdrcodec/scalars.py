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
Builtin numbers carry no wire width, these subclasses do.

Each class is an `int` (or `float`) subclass that checks its range on construction and implements both `Encodable` and
`Decodable`, so it can be used directly with `xdrcodec.to_bytes` and `xdrcodec.from_bytes`:

>>> from xdrcodec import from_bytes, to_bytes
>>> to_bytes(Int8(-2)).hex()
'fffffffe'
>>> from_bytes(UInt16, bytes.fromhex('0000100e'))
UInt16(4110)
>>> Int8(128)
Traceback (most recent call last):
    ...
xdrcodec.exceptions.IntegerOverflowError: value out of range for int8: 128
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import Self

from xdrcodec.receiver import Receiver
from xdrcodec.serialization.encoding.int import check_int_range, int_kind

if TYPE_CHECKING:
    from xdrcodec.decoder import Decoder
    from xdrcodec.encoder import Encoder


class _ScalarReceiver(Receiver[Any]):
    """Builds an instance of a scalar class from whatever number the decoder produced."""

    def __init__(self, scalar_class: Any) -> None:
        self._scalar_class = scalar_class

    def expecting(self) -> str:
        return self._scalar_class.__name__

    def visit_i64(self, value: int) -> Any:
        return self._scalar_class(value)

    def visit_u64(self, value: int) -> Any:
        return self._scalar_class(value)

    def visit_f64(self, value: float) -> Any:
        return self._scalar_class(value)


class _SizedInt(int):
    """ Base class for `int` values with a fixed size and signedness.
    """

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _bits: ClassVar[int]
    # suffix of the Encoder/Decoder methods used, e.g. 'i8' for encode_i8/decode_i8
    _method: ClassVar[str]

    def __new__(cls, value: int = 0) -> Self:
        if not isinstance(value, int):
            raise TypeError(f'expected int, got {type(value).__name__}')
        check_int_range(value, bits=cls._bits, signed=cls._signed)
        return super().__new__(cls, value)

    @classmethod
    def kind(cls) -> str:
        return int_kind(cls._bits, cls._signed)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({int(self)})'

    def encode_xdr(self, encoder: Encoder, /) -> None:
        getattr(encoder, f'encode_{self._method}')(int(self))

    @classmethod
    def decode_xdr(cls, decoder: Decoder, /) -> Self:
        return getattr(decoder, f'decode_{cls._method}')(_ScalarReceiver(cls))


class Int8(_SizedInt):
    _signed = True
    _bits = 8
    _method = 'i8'


class Int16(_SizedInt):
    _signed = True
    _bits = 16
    _method = 'i16'


class Int32(_SizedInt):
    _signed = True
    _bits = 32
    _method = 'i32'


class Int64(_SizedInt):
    _signed = True
    _bits = 64
    _method = 'i64'


class UInt8(_SizedInt):
    _signed = False
    _bits = 8
    _method = 'u8'


class UInt16(_SizedInt):
    _signed = False
    _bits = 16
    _method = 'u16'


class UInt32(_SizedInt):
    _signed = False
    _bits = 32
    _method = 'u32'


class UInt64(_SizedInt):
    _signed = False
    _bits = 64
    _method = 'u64'


class _SizedFloat(float):
    _method: ClassVar[str]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({float(self)!r})'

    def encode_xdr(self, encoder: Encoder, /) -> None:
        getattr(encoder, f'encode_{self._method}')(float(self))

    @classmethod
    def decode_xdr(cls, decoder: Decoder, /) -> Self:
        return getattr(decoder, f'decode_{cls._method}')(_ScalarReceiver(cls))


class Float32(_SizedFloat):
    """Single precision float, the value is rounded to single precision only when encoded."""
    _method = 'f32'


class Float64(_SizedFloat):
    _method = 'f64'

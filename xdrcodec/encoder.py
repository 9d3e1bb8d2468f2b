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

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from enum import Enum
from typing import Any, NoReturn, Optional

from structlog import get_logger

from xdrcodec.conf import Settings, get_settings
from xdrcodec.exceptions import EncodeError, UnsupportedTypeError, ValueRangeError
from xdrcodec.protocols import Encodable
from xdrcodec.serialization import Serializer
from xdrcodec.serialization.encoding.bool import encode_bool
from xdrcodec.serialization.encoding.discriminant import encode_discriminant
from xdrcodec.serialization.encoding.float import encode_float32, encode_float64
from xdrcodec.serialization.encoding.int import (
    encode_hyper,
    encode_int32,
    encode_narrow_int,
    encode_uhyper,
    encode_uint32,
)
from xdrcodec.serialization.encoding.opaque import encode_fixed_opaque, encode_opaque
from xdrcodec.serialization.encoding.string import encode_string
from xdrcodec.serialization.types import Buffer

logger = get_logger()


class Encoder:
    """ Writes XDR primitives to a borrowed byte sink.

    Every `encode_*` method writes exactly one primitive or fails on the first unsupported or out-of-range construct.
    Failures are not rolled back: a sink may hold a partial prefix after an error, callers that need all-or-nothing
    writes encode into a `BytesSerializer` first (that is what `xdrcodec.to_writer` does).

    Compound shapes (options, sequences, tuples, maps, structs, variants with payload) are rejected with
    `UnsupportedTypeError` before anything is written: XDR needs an external schema to lay them out and this codec does
    not consult one. Types that know their own layout implement `Encodable` and call the primitive methods.
    """

    def __init__(self, serializer: Serializer, *, settings: Optional[Settings] = None) -> None:
        self._serializer = serializer
        self._settings = settings if settings is not None else get_settings()
        self.log = logger.new()

    @contextmanager
    def _writing(self, kind: str, value: Any) -> Iterator[None]:
        try:
            yield
        except ValueRangeError as e:
            self.log.debug('value out of range', kind=e.kind, value=e.value)
            raise
        except OSError as e:
            self.log.debug('byte sink failed', kind=kind, error=str(e))
            raise EncodeError(kind, value) from e

    def _reject(self, kind: str) -> NoReturn:
        self.log.debug('rejecting unsupported data kind', kind=kind)
        raise UnsupportedTypeError(kind)

    def encode(self, value: Any) -> None:
        """ Encode a traversal value.

        `Encodable` values drive the encoder themselves. Builtin values with a single natural XDR mapping are accepted
        too: `bool`, `float` (as double), `str`, bytes-like objects (as variable-length opaque) and `Enum` members with
        an int value (as a discriminant). A plain `int` is rejected, it carries no width, use `xdrcodec.scalars`.
        """
        if isinstance(value, Encodable):
            value.encode_xdr(self)
        elif isinstance(value, bool):
            self.encode_bool(value)
        elif isinstance(value, Enum):
            self._encode_enum_member(value)
        elif isinstance(value, int):
            self._reject('int')
        elif isinstance(value, float):
            self.encode_f64(value)
        elif isinstance(value, str):
            self.encode_str(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self.encode_bytes(value)
        elif value is None:
            self.encode_none()
        elif isinstance(value, Mapping):
            self.encode_map(value)
        elif isinstance(value, tuple):
            self.encode_tuple(value)
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            self.encode_struct(type(value).__name__, value)
        elif isinstance(value, Iterable):
            self.encode_seq(value)
        else:
            self._reject(type(value).__name__)

    def _encode_enum_member(self, member: Enum) -> None:
        index = member.value
        if not isinstance(index, int) or isinstance(index, bool):
            self._reject('enum')
        self.encode_unit_variant(type(member).__name__, index, member.name)

    def encode_bool(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f'expected bool, got {type(value).__name__}')
        with self._writing('bool', value):
            encode_bool(self._serializer, value)

    def encode_i8(self, value: int) -> None:
        with self._writing('int8', value):
            encode_narrow_int(self._serializer, value, bits=8, signed=True)

    def encode_i16(self, value: int) -> None:
        with self._writing('int16', value):
            encode_narrow_int(self._serializer, value, bits=16, signed=True)

    def encode_i32(self, value: int) -> None:
        with self._writing('int32', value):
            encode_int32(self._serializer, value)

    def encode_i64(self, value: int) -> None:
        with self._writing('int64', value):
            encode_hyper(self._serializer, value)

    def encode_u8(self, value: int) -> None:
        with self._writing('uint8', value):
            encode_narrow_int(self._serializer, value, bits=8, signed=False)

    def encode_u16(self, value: int) -> None:
        with self._writing('uint16', value):
            encode_narrow_int(self._serializer, value, bits=16, signed=False)

    def encode_u32(self, value: int) -> None:
        with self._writing('uint32', value):
            encode_uint32(self._serializer, value)

    def encode_u64(self, value: int) -> None:
        with self._writing('uint64', value):
            encode_uhyper(self._serializer, value)

    def encode_f32(self, value: float) -> None:
        with self._writing('float32', value):
            encode_float32(self._serializer, value)

    def encode_f64(self, value: float) -> None:
        with self._writing('float64', value):
            encode_float64(self._serializer, value)

    def encode_unit_variant(self, name: str, index: int, variant: str) -> None:
        """Encode a variant without payload: only its discriminant is written."""
        with self._writing('discriminant', index):
            encode_discriminant(self._serializer, index)

    def encode_bytes(self, value: Buffer) -> None:
        with self._writing('opaque', value):
            encode_opaque(self._serializer, value, max_length=self._settings.MAX_OPAQUE_LENGTH)

    def encode_fixed_opaque(self, value: Buffer, size: int) -> None:
        with self._writing('fixed opaque', value):
            encode_fixed_opaque(self._serializer, value, size)

    def encode_str(self, value: str) -> None:
        with self._writing('string', value):
            encode_string(self._serializer, value, max_length=self._settings.MAX_STRING_LENGTH)

    # Shapes below have no schema-free XDR layout, they are rejected without writing anything.

    def encode_char(self, value: str) -> None:
        self._reject('char')

    def encode_none(self) -> None:
        self._reject('none')

    def encode_some(self, value: Any) -> None:
        self._reject('some')

    def encode_unit(self) -> None:
        self._reject('unit')

    def encode_unit_struct(self, name: str) -> None:
        self._reject('unit_struct')

    def encode_newtype_struct(self, name: str, value: Any) -> None:
        self._reject('newtype_struct')

    def encode_newtype_variant(self, name: str, index: int, variant: str, value: Any) -> None:
        self._reject('newtype_variant')

    def encode_seq(self, values: Iterable[Any]) -> None:
        self._reject('seq')

    def encode_tuple(self, values: tuple[Any, ...]) -> None:
        self._reject('tuple')

    def encode_tuple_struct(self, name: str, values: tuple[Any, ...]) -> None:
        self._reject('tuple_struct')

    def encode_tuple_variant(self, name: str, index: int, variant: str, values: tuple[Any, ...]) -> None:
        self._reject('tuple_variant')

    def encode_map(self, values: Mapping[Any, Any]) -> None:
        self._reject('map')

    def encode_struct(self, name: str, value: Any) -> None:
        self._reject('struct')

    def encode_struct_variant(self, name: str, index: int, variant: str, value: Any) -> None:
        self._reject('struct_variant')

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
import types
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from enum import Enum
from typing import Any, NoReturn, Optional, TypeVar, Union, cast, get_args, get_origin

from structlog import get_logger

from xdrcodec.conf import Settings, get_settings
from xdrcodec.exceptions import (
    BadDataError,
    DecodeError,
    OutOfDataError,
    SelfDescribingDecodeError,
    UnsupportedTypeError,
    ValueRangeError,
)
from xdrcodec.protocols import Decodable
from xdrcodec.receiver import PrimitiveReceiver, Receiver
from xdrcodec.serialization import Deserializer
from xdrcodec.serialization.encoding.bool import decode_bool
from xdrcodec.serialization.encoding.discriminant import decode_discriminant
from xdrcodec.serialization.encoding.float import decode_float32, decode_float64
from xdrcodec.serialization.encoding.int import (
    decode_hyper,
    decode_int32,
    decode_narrow_int,
    decode_uhyper,
    decode_uint32,
)
from xdrcodec.serialization.encoding.opaque import decode_fixed_opaque, decode_opaque
from xdrcodec.serialization.encoding.string import decode_string

logger = get_logger()

T = TypeVar('T')

# kind names used when rejecting container types passed to `Decoder.decode`
_CONTAINER_KINDS: dict[Any, str] = {
    list: 'seq',
    set: 'seq',
    frozenset: 'seq',
    tuple: 'tuple',
    dict: 'map',
    type(None): 'unit',
}


class Decoder:
    """ Reads XDR primitives from a borrowed byte source and feeds them to a `Receiver`.

    XDR is not self-describing, every `decode_*` call names the primitive expected next. The decoder reads exactly the
    bytes that primitive occupies, validates them (range of narrow integers, boolean values, padding, utf-8) and returns
    whatever the receiver builds from the value.

    Read failures (including running out of data) are raised as `DecodeError` chained to the underlying error. Shapes
    without a schema-free layout are rejected with `UnsupportedTypeError` before anything is read.
    """

    def __init__(self, deserializer: Deserializer, *, settings: Optional[Settings] = None) -> None:
        self._deserializer = deserializer
        self._settings = settings if settings is not None else get_settings()
        self.log = logger.new()

    @contextmanager
    def _reading(self, kind: str) -> Iterator[None]:
        try:
            yield
        except ValueRangeError as e:
            self.log.debug('value out of range', kind=e.kind, value=e.value)
            raise
        except BadDataError as e:
            self.log.debug('invalid data', kind=kind, error=str(e))
            raise
        except (OutOfDataError, OSError) as e:
            self.log.debug('byte source failed', kind=kind, error=str(e))
            raise DecodeError(kind) from e

    def _reject(self, kind: str) -> NoReturn:
        self.log.debug('rejecting unsupported data kind', kind=kind)
        raise UnsupportedTypeError(kind)

    def decode(self, type_: type[T]) -> T:
        """ Decode a value of the given type.

        `Decodable` types drive the decoder themselves. Builtin types with a single natural XDR mapping are accepted
        too, mirroring `Encoder.encode`: `bool`, `float` (as double), `str`, `bytes` (as variable-length opaque) and
        `Enum` subclasses with int values (read from a discriminant).
        """
        if isinstance(type_, Decodable):
            return cast(T, type_.decode_xdr(self))
        if type_ is bool:
            return cast(T, self.decode_bool(PrimitiveReceiver()))
        if isinstance(type_, type) and get_origin(type_) is None and issubclass(type_, Enum):
            if not all(isinstance(m.value, int) and not isinstance(m.value, bool) for m in type_):
                self._reject('enum')
            return cast(T, self._decode_enum_member(type_))
        if type_ is int:
            self._reject('int')
        if type_ is float:
            return cast(T, self.decode_f64(PrimitiveReceiver()))
        if type_ is str:
            return cast(T, self.decode_str(PrimitiveReceiver()))
        if type_ is bytes:
            return cast(T, self.decode_bytes(PrimitiveReceiver()))
        self._reject(self._kind_of(type_))

    @staticmethod
    def _kind_of(type_: Any) -> str:
        origin = get_origin(type_) or type_
        if origin in (Union, types.UnionType) and type(None) in get_args(type_):
            return 'option'
        if origin in _CONTAINER_KINDS:
            return _CONTAINER_KINDS[origin]
        if isinstance(origin, type) and issubclass(origin, Mapping):
            return 'map'
        if isinstance(origin, type) and issubclass(origin, Sequence):
            return 'seq'
        if dataclasses.is_dataclass(origin):
            return 'struct'
        return getattr(origin, '__name__', str(origin))

    def _decode_enum_member(self, enum_class: type[Enum]) -> Enum:
        index = self.decode_unit_variant(enum_class.__name__, (), PrimitiveReceiver())
        try:
            return enum_class(index)
        except ValueError as e:
            self.log.debug('invalid data', kind='discriminant', error=str(e))
            raise BadDataError(f'invalid {enum_class.__name__} discriminant: {index}') from e

    def decode_bool(self, receiver: Receiver[T]) -> T:
        with self._reading('bool'):
            value = decode_bool(self._deserializer)
        return receiver.visit_bool(value)

    def decode_i8(self, receiver: Receiver[T]) -> T:
        with self._reading('int8'):
            value = decode_narrow_int(self._deserializer, bits=8, signed=True)
        return receiver.visit_i8(value)

    def decode_i16(self, receiver: Receiver[T]) -> T:
        with self._reading('int16'):
            value = decode_narrow_int(self._deserializer, bits=16, signed=True)
        return receiver.visit_i16(value)

    def decode_i32(self, receiver: Receiver[T]) -> T:
        with self._reading('int32'):
            value = decode_int32(self._deserializer)
        return receiver.visit_i32(value)

    def decode_i64(self, receiver: Receiver[T]) -> T:
        with self._reading('int64'):
            value = decode_hyper(self._deserializer)
        return receiver.visit_i64(value)

    def decode_u8(self, receiver: Receiver[T]) -> T:
        with self._reading('uint8'):
            value = decode_narrow_int(self._deserializer, bits=8, signed=False)
        return receiver.visit_u8(value)

    def decode_u16(self, receiver: Receiver[T]) -> T:
        with self._reading('uint16'):
            value = decode_narrow_int(self._deserializer, bits=16, signed=False)
        return receiver.visit_u16(value)

    def decode_u32(self, receiver: Receiver[T]) -> T:
        with self._reading('uint32'):
            value = decode_uint32(self._deserializer)
        return receiver.visit_u32(value)

    def decode_u64(self, receiver: Receiver[T]) -> T:
        with self._reading('uint64'):
            value = decode_uhyper(self._deserializer)
        return receiver.visit_u64(value)

    def decode_f32(self, receiver: Receiver[T]) -> T:
        with self._reading('float32'):
            value = decode_float32(self._deserializer)
        return receiver.visit_f32(value)

    def decode_f64(self, receiver: Receiver[T]) -> T:
        with self._reading('float64'):
            value = decode_float64(self._deserializer)
        return receiver.visit_f64(value)

    def decode_unit_variant(self, name: str, variants: Sequence[str], receiver: Receiver[T]) -> T:
        """ Decode the discriminant of a variant without payload.

        When `variants` is not empty the discriminant must index one of them.
        """
        with self._reading('discriminant'):
            index = decode_discriminant(self._deserializer, variant_count=len(variants) or None)
        return receiver.visit_unit_variant(index)

    def decode_bytes(self, receiver: Receiver[T]) -> T:
        with self._reading('opaque'):
            value = decode_opaque(
                self._deserializer,
                max_length=self._settings.MAX_OPAQUE_LENGTH,
                strict_padding=self._settings.STRICT_PADDING,
            )
        return receiver.visit_bytes(value)

    def decode_fixed_opaque(self, size: int, receiver: Receiver[T]) -> T:
        with self._reading('fixed opaque'):
            value = decode_fixed_opaque(self._deserializer, size, strict_padding=self._settings.STRICT_PADDING)
        return receiver.visit_bytes(value)

    def decode_str(self, receiver: Receiver[T]) -> T:
        with self._reading('string'):
            value = decode_string(
                self._deserializer,
                max_length=self._settings.MAX_STRING_LENGTH,
                strict_padding=self._settings.STRICT_PADDING,
            )
        return receiver.visit_str(value)

    def decode_any(self, receiver: Receiver[T]) -> T:
        self.log.debug('rejecting self-describing decode request')
        raise SelfDescribingDecodeError

    def decode_ignored_any(self, receiver: Receiver[T]) -> T:
        return self.decode_any(receiver)

    # Shapes below have no schema-free XDR layout, they are rejected without reading anything.

    def decode_char(self, receiver: Receiver[T]) -> T:
        self._reject('char')

    def decode_option(self, receiver: Receiver[T]) -> T:
        self._reject('option')

    def decode_unit(self, receiver: Receiver[T]) -> T:
        self._reject('unit')

    def decode_unit_struct(self, name: str, receiver: Receiver[T]) -> T:
        self._reject('unit_struct')

    def decode_newtype_struct(self, name: str, receiver: Receiver[T]) -> T:
        self._reject('newtype_struct')

    def decode_seq(self, receiver: Receiver[T]) -> T:
        self._reject('seq')

    def decode_tuple(self, length: int, receiver: Receiver[T]) -> T:
        self._reject('tuple')

    def decode_tuple_struct(self, name: str, length: int, receiver: Receiver[T]) -> T:
        self._reject('tuple_struct')

    def decode_map(self, receiver: Receiver[T]) -> T:
        self._reject('map')

    def decode_enum(self, name: str, variants: Sequence[str], receiver: Receiver[T]) -> T:
        """Variants with a payload need a schema, only `decode_unit_variant` is supported."""
        self._reject('enum')

    def decode_struct(self, name: str, fields: Sequence[str], receiver: Receiver[T]) -> T:
        self._reject('struct')

    def decode_identifier(self, receiver: Receiver[T]) -> T:
        self._reject('identifier')

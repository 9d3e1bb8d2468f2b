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

from typing import Any, Generic, NoReturn, TypeVar

from xdrcodec.exceptions import InvalidTypeError

T = TypeVar('T')


class Receiver(Generic[T]):
    """ Assembly callbacks handed to a `Decoder`, one `visit_*` method per primitive kind.

    The decoder reads and validates exactly one primitive and then calls the matching method, whatever that method
    returns is what the decode call returns. Subclasses override only the kinds they accept, by default narrow
    integers are forwarded to the 64-bit methods and `visit_f32` is forwarded to `visit_f64`, every other kind fails
    with `InvalidTypeError`.
    """

    def expecting(self) -> str:
        """Describe what this receiver builds, used in error messages."""
        return 'a value'

    def _invalid(self, kind: str) -> NoReturn:
        raise InvalidTypeError(kind, self.expecting())

    def visit_bool(self, value: bool) -> T:
        self._invalid('bool')

    def visit_i8(self, value: int) -> T:
        return self.visit_i64(value)

    def visit_i16(self, value: int) -> T:
        return self.visit_i64(value)

    def visit_i32(self, value: int) -> T:
        return self.visit_i64(value)

    def visit_i64(self, value: int) -> T:
        self._invalid('signed integer')

    def visit_u8(self, value: int) -> T:
        return self.visit_u64(value)

    def visit_u16(self, value: int) -> T:
        return self.visit_u64(value)

    def visit_u32(self, value: int) -> T:
        return self.visit_u64(value)

    def visit_u64(self, value: int) -> T:
        self._invalid('unsigned integer')

    def visit_f32(self, value: float) -> T:
        return self.visit_f64(value)

    def visit_f64(self, value: float) -> T:
        self._invalid('float')

    def visit_str(self, value: str) -> T:
        self._invalid('string')

    def visit_bytes(self, value: bytes) -> T:
        self._invalid('opaque')

    def visit_unit_variant(self, index: int) -> T:
        self._invalid('discriminant')


class PrimitiveReceiver(Receiver[Any]):
    """Receiver that accepts every primitive and returns it unchanged."""

    def expecting(self) -> str:
        return 'any primitive'

    def visit_bool(self, value: bool) -> bool:
        return value

    def visit_i64(self, value: int) -> int:
        return value

    def visit_u64(self, value: int) -> int:
        return value

    def visit_f64(self, value: float) -> float:
        return value

    def visit_str(self, value: str) -> str:
        return value

    def visit_bytes(self, value: bytes) -> bytes:
        return value

    def visit_unit_variant(self, index: int) -> int:
        return index

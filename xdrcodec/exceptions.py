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

from typing import Any


class SerializationError(Exception):
    """Base class for every error raised by the codec."""


class OutOfDataError(SerializationError, EOFError):
    """The byte source ended before the requested bytes could be read."""


class BadDataError(SerializationError):
    """The bytes read are not a valid encoding of the requested kind."""


class TooLongError(SerializationError):
    """A variable-length payload exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(f'length {length} exceeds maximum of {max_length}')
        self.length = length
        self.max_length = max_length


class EncodeError(SerializationError):
    """ The byte sink failed while writing a primitive.

    The underlying error is available as `__cause__`.
    """

    def __init__(self, kind: str, value: Any) -> None:
        super().__init__(f'failed to serialize {kind}: {value!r}')
        self.kind = kind
        self.value = value


class DecodeError(SerializationError):
    """ The byte source failed while reading a primitive.

    The underlying error (for instance an `OutOfDataError`) is available as `__cause__`.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(f'failed to deserialize {kind}')
        self.kind = kind


class UnsupportedTypeError(SerializationError):
    """The value or the requested shape is not part of the alphabet supported by this codec."""

    def __init__(self, kind: str) -> None:
        super().__init__(f'invalid data type for this codec: {kind}')
        self.kind = kind


class ValueRangeError(SerializationError, OverflowError):
    """A value does not fit the wire width it was requested as."""

    def __init__(self, kind: str, value: Any) -> None:
        super().__init__(f'value out of range for {kind}: {value}')
        self.kind = kind
        self.value = value


class IntegerOverflowError(ValueRangeError):
    """An integer does not fit the width it was requested as, `value` holds the offending integer."""

    value: int


class SelfDescribingDecodeError(SerializationError):
    """XDR is not self-describing, the decoder must be told which shape to read."""

    def __init__(self) -> None:
        super().__init__('cannot decode self-describing type')


class InvalidTypeError(SerializationError):
    """A receiver was handed a kind it does not know how to assemble."""

    def __init__(self, kind: str, expected: str) -> None:
        super().__init__(f'invalid type: {kind}, expected {expected}')
        self.kind = kind
        self.expected = expected

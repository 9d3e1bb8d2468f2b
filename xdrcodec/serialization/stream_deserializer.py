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

from typing import BinaryIO

from typing_extensions import override

from ..exceptions import BadDataError, OutOfDataError
from .deserializer import Deserializer


class StreamDeserializer(Deserializer):
    """Byte source reading from a caller-owned binary stream.

    Peeked bytes are kept in a small lookahead buffer so that peeking never loses data. The stream is borrowed and is
    never closed by this class.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead = bytearray()

    def _fill(self, n: int) -> None:
        """Try to have at least n bytes in the lookahead buffer, stops early on EOF."""
        while len(self._lookahead) < n:
            chunk = self._stream.read(n - len(self._lookahead))
            if not chunk:
                break
            self._lookahead += chunk

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise BadDataError('trailing data')

    @override
    def is_empty(self) -> bool:
        self._fill(1)
        return not self._lookahead

    @override
    def peek_byte(self) -> int:
        self._fill(1)
        if not self._lookahead:
            raise OutOfDataError('not enough bytes to read')
        return self._lookahead[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._fill(n)
        if exact and len(self._lookahead) < n:
            raise OutOfDataError('not enough bytes to read')
        return bytes(self._lookahead[:n])

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        del self._lookahead[0]
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        b = self.peek_bytes(n, exact=exact)
        del self._lookahead[:len(b)]
        return b

    @override
    def read_all(self) -> bytes:
        rest = self._stream.read()
        b = bytes(self._lookahead) + (rest or b'')
        self._lookahead.clear()
        return b

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
Capabilities that let application types plug into the codec without the codec knowing their shape.

A value that knows how to walk itself into an encoder implements `Encodable`:

    class Point:
        def encode_xdr(self, encoder: Encoder, /) -> None:
            encoder.encode_i32(self.x)
            encoder.encode_i32(self.y)

A type that knows how to assemble itself from decoded primitives implements `Decodable`, usually by handing a
`Receiver` to the decoder:

    class Point:
        @classmethod
        def decode_xdr(cls, decoder: Decoder, /) -> Self:
            x = decoder.decode_i32(PrimitiveReceiver())
            y = decoder.decode_i32(PrimitiveReceiver())
            return cls(x, y)

The codec never inspects the fields of such types, the layout is entirely decided by these methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from typing_extensions import Self

if TYPE_CHECKING:
    from xdrcodec.decoder import Decoder
    from xdrcodec.encoder import Encoder


@runtime_checkable
class Encodable(Protocol):
    def encode_xdr(self, encoder: Encoder, /) -> None:
        """Write this value through the encoder, one primitive at a time."""
        ...


@runtime_checkable
class Decodable(Protocol):
    @classmethod
    def decode_xdr(cls, decoder: Decoder, /) -> Self:
        """Read the primitives this type is made of and build an instance."""
        ...

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

from typing import Any, BinaryIO, Optional, TypeVar

from xdrcodec.conf import Settings
from xdrcodec.decoder import Decoder
from xdrcodec.encoder import Encoder
from xdrcodec.exceptions import EncodeError
from xdrcodec.serialization import Deserializer, Serializer

T = TypeVar('T')


def to_bytes(value: Any, *, settings: Optional[Settings] = None) -> bytes:
    """ Encode a traversal value into a new byte string.
    """
    serializer = Serializer.build_bytes_serializer()
    Encoder(serializer, settings=settings).encode(value)
    return bytes(serializer.finalize())


def to_writer(writer: BinaryIO, value: Any, *, atomic: bool = True, settings: Optional[Settings] = None) -> None:
    """ Encode a traversal value into a borrowed binary stream.

    With `atomic=True` the value is staged in memory first and nothing reaches the stream unless encoding succeeds.
    With `atomic=False` bytes are written as they are produced and a failure may leave a partial prefix behind.
    """
    if not atomic:
        Encoder(Serializer.build_stream_serializer(writer), settings=settings).encode(value)
        return
    data = to_bytes(value, settings=settings)
    try:
        Serializer.build_stream_serializer(writer).write_bytes(data)
    except OSError as e:
        raise EncodeError('staged buffer', f'{len(data)} bytes') from e


def from_bytes(type_: type[T], data: bytes, *, settings: Optional[Settings] = None) -> T:
    """ Decode a value of the given type, all bytes must be consumed.
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = Decoder(deserializer, settings=settings).decode(type_)
    deserializer.finalize()
    return value


def from_reader(type_: type[T], reader: BinaryIO, *, settings: Optional[Settings] = None) -> T:
    """ Decode a value of the given type from a borrowed binary stream.

    Only the bytes of that value are consumed, the stream can hold more data after it.
    """
    deserializer = Deserializer.build_stream_deserializer(reader)
    return Decoder(deserializer, settings=settings).decode(type_)

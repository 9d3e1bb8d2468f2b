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
XDR (External Data Representation, RFC 4506) encoder and decoder.
"""

from xdrcodec.api import from_bytes, from_reader, to_bytes, to_writer
from xdrcodec.decoder import Decoder
from xdrcodec.encoder import Encoder
from xdrcodec.exceptions import (
    BadDataError,
    DecodeError,
    EncodeError,
    IntegerOverflowError,
    InvalidTypeError,
    OutOfDataError,
    SelfDescribingDecodeError,
    SerializationError,
    TooLongError,
    UnsupportedTypeError,
    ValueRangeError,
)
from xdrcodec.protocols import Decodable, Encodable
from xdrcodec.receiver import PrimitiveReceiver, Receiver
from xdrcodec.scalars import Float32, Float64, Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64
from xdrcodec.version import __version__

__all__ = [
    'BadDataError',
    'DecodeError',
    'Decodable',
    'Decoder',
    'Encodable',
    'EncodeError',
    'Encoder',
    'Float32',
    'Float64',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'IntegerOverflowError',
    'InvalidTypeError',
    'OutOfDataError',
    'PrimitiveReceiver',
    'Receiver',
    'SelfDescribingDecodeError',
    'SerializationError',
    'TooLongError',
    'UInt8',
    'UInt16',
    'UInt32',
    'UInt64',
    'UnsupportedTypeError',
    'ValueRangeError',
    'from_bytes',
    'from_reader',
    'to_bytes',
    'to_writer',
    '__version__',
]

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
This module implements XDR `float` and `double`: the IEEE-754 single and double precision bit patterns, big-endian.

No value validation is done, NaN and infinities are encoded as they are.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float32(se, 1.5)  # writes 3fc00000
>>> encode_float64(se, -2.0)  # writes c000000000000000
>>> encode_float32(se, float('inf'))  # writes 7f800000
>>> bytes(se.finalize()).hex()
'3fc00000c0000000000000007f800000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000 c000000000000000 7f800000'))
>>> decode_float32(de)  # reads 3fc00000
1.5
>>> decode_float64(de)  # reads c000000000000000
-2.0
>>> decode_float32(de)  # reads 7f800000
inf
>>> de.finalize()

A finite value too big for single precision cannot be encoded as a `float`:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float32(se, 1e300)
... except ValueRangeError as e:
...     print(*e.args)
value out of range for float32: 1e+300
"""

from xdrcodec.exceptions import ValueRangeError
from xdrcodec.serialization import Deserializer, Serializer


def encode_float32(serializer: Serializer, value: float) -> None:
    try:
        serializer.write_struct((value,), '>f')
    except OverflowError:
        raise ValueRangeError('float32', value) from None


def decode_float32(deserializer: Deserializer) -> float:
    value, = deserializer.read_struct('>f')
    return value


def encode_float64(serializer: Serializer, value: float) -> None:
    serializer.write_struct((value,), '>d')


def decode_float64(deserializer: Deserializer) -> float:
    value, = deserializer.read_struct('>d')
    return value

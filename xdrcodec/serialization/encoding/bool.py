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
This module implements the XDR boolean, an unsigned 32-bit integer that can only be 0 or 1.

- `False` maps to `b'\\x00\\x00\\x00\\x00'`
- `True` maps to `b'\\x00\\x00\\x00\\x01'`
- any other value is invalid

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, True)  # writes 00000001
>>> encode_bool(se, False)  # writes 00000000
>>> bytes(se.finalize()).hex()
'0000000100000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000001 00000000 00000002'))
>>> decode_bool(de)  # reads 00000001
True
>>> decode_bool(de)  # reads 00000000
False
>>> try:
...     decode_bool(de)
... except BadDataError as e:
...     print(*e.args)
2 is not a valid boolean
"""

from xdrcodec.exceptions import BadDataError
from xdrcodec.serialization import Deserializer, Serializer

from .int import decode_uint32, encode_uint32


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value using 4 bytes.
    """
    assert isinstance(value, bool)
    encode_uint32(serializer, 1 if value else 0)


def decode_bool(deserializer: Deserializer) -> bool:
    """ Decodes a boolean value from 4 bytes.
    """
    i = decode_uint32(deserializer)
    if i == 0:
        return False
    elif i == 1:
        return True
    else:
        raise BadDataError(f'{i} is not a valid boolean')

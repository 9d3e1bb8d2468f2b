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

r"""
This module implements the XDR string.

It works exactly like variable-length opaque data but the payload is utf-8 and it takes/returns a `str`. The maximum
length, when given, applies to the encoded bytes and not to the number of characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_string(se, 'foobar')  # writes 00000006 666f6f626172 0000
>>> encode_string(se, 'π')  # writes 00000002 cf80 0000
>>> bytes(se.finalize()).hex()
'00000006666f6f626172000000000002cf800000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000006 666f6f626172 0000 00000002 cf80 0000'))
>>> decode_string(de)  # reads 00000006 666f6f626172 0000
'foobar'
>>> decode_string(de)  # reads 00000002 cf80 0000
'π'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000001 ff000000'))
>>> try:
...     decode_string(de)
... except BadDataError as e:
...     print(*e.args)
string payload is not valid utf-8
"""

from typing import Optional

from xdrcodec.exceptions import BadDataError
from xdrcodec.serialization import Deserializer, Serializer

from .opaque import decode_opaque, encode_opaque


def encode_string(serializer: Serializer, value: str, *, max_length: Optional[int] = None) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix and padding.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise BadDataError('string is not valid utf-8') from e
    encode_opaque(serializer, data, max_length=max_length)


def decode_string(
    deserializer: Deserializer,
    *,
    max_length: Optional[int] = None,
    strict_padding: bool = True,
) -> str:
    """ Decodes a UTF-8 string with a length prefix and padding.

    This modules's docstring has more details and examples.
    """
    data = decode_opaque(deserializer, max_length=max_length, strict_padding=strict_padding)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError('string payload is not valid utf-8') from e

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
This module implements the discriminant of an enum or union: an unsigned 32-bit tag.

Only the tag is handled here, a tag is unambiguous without a schema, whatever payload follows it is not.

>>> se = Serializer.build_bytes_serializer()
>>> encode_discriminant(se, 300)  # writes 0000012c
>>> bytes(se.finalize()).hex()
'0000012c'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000012c'))
>>> decode_discriminant(de)
300

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000003'))
>>> try:
...     decode_discriminant(de, variant_count=3)
... except BadDataError as e:
...     print(*e.args)
unknown variant index: 3
"""

from typing import Optional

from xdrcodec.exceptions import BadDataError
from xdrcodec.serialization import Deserializer, Serializer

from .int import decode_uint32, encode_int


def encode_discriminant(serializer: Serializer, index: int) -> None:
    encode_int(serializer, index, length=4, signed=False, kind='discriminant')


def decode_discriminant(deserializer: Deserializer, *, variant_count: Optional[int] = None) -> int:
    """ Decodes a discriminant, optionally checking it indexes one of `variant_count` variants.
    """
    index = decode_uint32(deserializer)
    if variant_count is not None and index >= variant_count:
        raise BadDataError(f'unknown variant index: {index}')
    return index

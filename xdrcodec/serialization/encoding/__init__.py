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
This module holds the XDR (RFC 4506) encoding of each wire primitive.

Every primitive occupies a multiple of 4 bytes on the wire and integers are always big-endian. Integers narrower than
32 bits have no wire representation of their own, they are carried in a 32-bit container.

The general organization is that each submodule `x` deals with a single primitive and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The "config params" are optional and specific to each encoder. Submodules do not know how application types map to
primitives, that is the job of `xdrcodec.encoder` and `xdrcodec.decoder`.
"""

XDR_UNIT = 4

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

from pydantic import Field, model_validator
from typing_extensions import Self

from xdrcodec.serialization.encoding.opaque import MAX_XDR_LENGTH
from xdrcodec.utils.pydantic import BaseModel


class Settings(BaseModel):
    """Knobs of the codec that are not part of the wire format itself."""

    # Maximum length in bytes of variable-length opaque data, checked before reading the payload
    MAX_OPAQUE_LENGTH: int = Field(default=2**20, gt=0, le=MAX_XDR_LENGTH)

    # Maximum length in bytes (not characters) of the utf-8 payload of a string
    MAX_STRING_LENGTH: int = Field(default=2**16, gt=0, le=MAX_XDR_LENGTH)

    # Whether the decoder rejects padding bytes that are not zero
    STRICT_PADDING: bool = True

    @model_validator(mode='after')
    def _check_string_fits_opaque(self) -> Self:
        if self.MAX_STRING_LENGTH > self.MAX_OPAQUE_LENGTH:
            raise ValueError('MAX_STRING_LENGTH cannot be greater than MAX_OPAQUE_LENGTH')
        return self

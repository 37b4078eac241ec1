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

from pathlib import Path
from typing import Annotated, Any, Optional, Union

import pydantic

from podcodec.byteorder import ByteOrder
from podcodec.utils.yaml import dict_from_yaml

PositiveInt = Annotated[int, pydantic.Field(gt=0)]


class CodecSettings(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, extra='forbid')

    # Byte order used by the entry points when none is given, accepts 'big'/'little' and also 'be'/'le'
    DEFAULT_BYTE_ORDER: ByteOrder = ByteOrder.BIG

    # Maximum number of bytes a single encode call can write, `None` means unlimited
    MAX_ENCODE_BYTES: Optional[PositiveInt] = None

    # Maximum number of bytes a single decode call can read, `None` means unlimited
    MAX_DECODE_BYTES: Optional[PositiveInt] = None

    # Buffer size used when a stream without `peek()` has to be wrapped to be decoded from
    STREAM_BUFFER_SIZE: PositiveInt = 8192

    @pydantic.field_validator('DEFAULT_BYTE_ORDER', mode='before')
    @classmethod
    def _parse_byte_order(cls, value: Any) -> ByteOrder:
        if isinstance(value, str):
            return ByteOrder.parse(value)
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)

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

from podcodec.conf.get_settings import get_global_settings, get_settings_source, reset_global_settings
from podcodec.conf.settings import CodecSettings

__all__ = [
    'CodecSettings',
    'get_global_settings',
    'get_settings_source',
    'reset_global_settings',
]

# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""PyCORS policy — configuration, origin matching and header assembly."""

from pycors.cors.config import (
    DEFAULT_ALLOW_METHODS,
    DEFAULT_ALLOW_ORIGINS,
    CORSConfig,
    SkipPredicate,
    default_cors_config,
    with_defaults,
)
from pycors.cors.matcher import allowed_origin
from pycors.cors.policy import (
    CORSRequest,
    actual_request_headers,
    is_preflight,
    preflight_headers,
)
from pycors.cors.properties import CORSProperties

__all__ = [
    "DEFAULT_ALLOW_METHODS",
    "DEFAULT_ALLOW_ORIGINS",
    "CORSConfig",
    "CORSProperties",
    "CORSRequest",
    "SkipPredicate",
    "actual_request_headers",
    "allowed_origin",
    "default_cors_config",
    "is_preflight",
    "preflight_headers",
    "with_defaults",
]

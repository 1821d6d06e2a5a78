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
"""PyCORS — Cross-Origin Resource Sharing filter for Starlette applications."""

from pycors.cors import (
    CORSConfig,
    CORSProperties,
    CORSRequest,
    default_cors_config,
    with_defaults,
)
from pycors.web import CORSFilter, cors_handler, create_app, with_cors

__version__ = "0.1.0"

__all__ = [
    "CORSConfig",
    "CORSFilter",
    "CORSProperties",
    "CORSRequest",
    "cors_handler",
    "create_app",
    "default_cors_config",
    "with_cors",
    "with_defaults",
]

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
"""PyCORS Web — filter port and the Starlette adapter.

Framework-agnostic types are exported directly.  Default adapter
(Starlette) exports are re-exported for convenience.
"""

from pycors.web.adapters.starlette import (
    CORSFilter,
    WebFilterChainMiddleware,
    cors_handler,
    create_app,
    with_cors,
)
from pycors.web.filters import OncePerRequestFilter, wrap_handler
from pycors.web.ports.filter import CallNext, WebFilter

__all__ = [
    # Framework-agnostic
    "CallNext",
    "OncePerRequestFilter",
    "WebFilter",
    "wrap_handler",
    # Default adapter (Starlette)
    "CORSFilter",
    "WebFilterChainMiddleware",
    "cors_handler",
    "create_app",
    "with_cors",
]

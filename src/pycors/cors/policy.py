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
"""Framework-agnostic CORS evaluation.

Turns a :class:`CORSConfig` and a read-only :class:`CORSRequest` view into
the response headers for either a preflight or an actual request.  Nothing
here touches a request or response object, so every rule can be checked
without an HTTP stack.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pycors.cors.config import CORSConfig
from pycors.cors.headers import (
    HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS,
    HEADER_ACCESS_CONTROL_ALLOW_HEADERS,
    HEADER_ACCESS_CONTROL_ALLOW_METHODS,
    HEADER_ACCESS_CONTROL_ALLOW_ORIGIN,
    HEADER_ACCESS_CONTROL_EXPOSE_HEADERS,
    HEADER_ACCESS_CONTROL_MAX_AGE,
    HEADER_ACCESS_CONTROL_REQUEST_HEADERS,
    HEADER_ACCESS_CONTROL_REQUEST_METHOD,
    HEADER_ORIGIN,
    PREFLIGHT_METHOD,
    allow_headers_value,
    join_values,
    max_age_value,
)
from pycors.cors.matcher import allowed_origin


@dataclass(frozen=True)
class CORSRequest:
    """The parts of an inbound request that CORS decisions depend on.

    ``origin`` is ``None`` when the header is absent and ``""`` when it is
    present but empty.
    """

    method: str
    origin: str | None = None
    request_headers: str | None = None
    request_method: str | None = None

    @classmethod
    def from_headers(cls, method: str, headers: Mapping[str, Any]) -> CORSRequest:
        return cls(
            method=method,
            origin=headers.get(HEADER_ORIGIN),
            request_headers=headers.get(HEADER_ACCESS_CONTROL_REQUEST_HEADERS),
            request_method=headers.get(HEADER_ACCESS_CONTROL_REQUEST_METHOD),
        )


def is_preflight(request: CORSRequest) -> bool:
    return request.method == PREFLIGHT_METHOD


def actual_request_headers(config: CORSConfig, request: CORSRequest) -> dict[str, str]:
    """Headers attached to a non-preflight response before the handler runs."""
    headers: dict[str, str] = {}

    origin = allowed_origin(config, request.origin)
    if origin:
        headers[HEADER_ACCESS_CONTROL_ALLOW_ORIGIN] = origin
    if config.allow_credentials:
        headers[HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS] = "true"
    if config.expose_headers:
        headers[HEADER_ACCESS_CONTROL_EXPOSE_HEADERS] = join_values(config.expose_headers)

    return headers


def preflight_headers(config: CORSConfig, request: CORSRequest) -> dict[str, str]:
    """Headers for the empty 204 answer to a preflight request."""
    headers: dict[str, str] = {}

    origin = allowed_origin(config, request.origin)
    if origin:
        headers[HEADER_ACCESS_CONTROL_ALLOW_ORIGIN] = origin

    headers[HEADER_ACCESS_CONTROL_ALLOW_METHODS] = join_values(config.allow_methods)

    allow_headers = allow_headers_value(config.allow_headers, request.request_headers)
    if allow_headers is not None:
        headers[HEADER_ACCESS_CONTROL_ALLOW_HEADERS] = allow_headers

    if config.allow_credentials:
        headers[HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS] = "true"

    max_age = max_age_value(config.max_age)
    if max_age is not None:
        headers[HEADER_ACCESS_CONTROL_MAX_AGE] = max_age

    return headers

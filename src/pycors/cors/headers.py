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
"""CORS header names and pure helpers for assembling header values."""

from __future__ import annotations

from collections.abc import Iterable

HEADER_ORIGIN = "Origin"
HEADER_ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
HEADER_ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"
HEADER_ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
HEADER_ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
HEADER_ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
HEADER_ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"
HEADER_ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"

PREFLIGHT_METHOD = "OPTIONS"
WILDCARD = "*"


def join_values(values: Iterable[str]) -> str:
    """Join header values with a bare comma, keeping their order."""
    return ",".join(values)


def allow_headers_value(configured: Iterable[str], requested: str | None) -> str | None:
    """Return the preflight ``Access-Control-Allow-Headers`` value.

    The configured list wins when it is non-empty.  Otherwise the request's
    ``Access-Control-Request-Headers`` value is echoed back verbatim, and
    ``None`` is returned when the request did not carry one.
    """
    joined = join_values(configured)
    if joined:
        return joined
    return requested


def max_age_value(max_age: int) -> str | None:
    """Decimal ``Access-Control-Max-Age`` value, or ``None`` when unset (<= 0)."""
    if max_age > 0:
        return str(max_age)
    return None

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
"""CORS policy configuration and the default policy."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from pycors.cors.headers import WILDCARD

DEFAULT_ALLOW_ORIGINS: tuple[str, ...] = (WILDCARD,)
DEFAULT_ALLOW_METHODS: tuple[str, ...] = ("GET", "HEAD", "PUT", "PATCH", "POST", "DELETE")

# Receives the incoming request; returning True bypasses CORS handling.
SkipPredicate = Callable[[Any], bool]


@dataclass(frozen=True)
class CORSConfig:
    """Cross-Origin Resource Sharing policy for a single filter.

    Sequences are copied into tuples on construction, so the caller's lists
    are never shared with (or mutated through) the policy.  A bare string is
    taken as a single entry, and a ``max_age`` that is not an integer (for
    example ``None``) becomes ``0``.

    Attributes:
        allow_origins: Origins allowed to receive an ``Access-Control-Allow-Origin``
            header.  Empty, or containing ``"*"``, means any origin.
        allow_methods: Methods advertised in preflight responses.
        allow_headers: Headers advertised in preflight responses.  When empty
            the request's ``Access-Control-Request-Headers`` is echoed.
        expose_headers: Headers exposed to scripts on non-preflight responses.
        allow_credentials: Emit ``Access-Control-Allow-Credentials: true`` and
            echo the literal request origin.
        max_age: Preflight cache duration in seconds; ``<= 0`` omits the header.
        skip_predicate: Optional callable; when it returns ``True`` for a
            request no CORS processing happens at all.
    """

    allow_origins: Sequence[str] = DEFAULT_ALLOW_ORIGINS
    allow_methods: Sequence[str] = DEFAULT_ALLOW_METHODS
    allow_headers: Sequence[str] = ()
    expose_headers: Sequence[str] = ()
    allow_credentials: bool = False
    max_age: int = 0
    skip_predicate: SkipPredicate | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for name in ("allow_origins", "allow_methods", "allow_headers", "expose_headers"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        object.__setattr__(self, "max_age", _as_max_age(self.max_age))


def _as_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _as_max_age(value: Any) -> int:
    # Values int() cannot convert disable the header.
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def default_cors_config() -> CORSConfig:
    """The policy used when no configuration is given: any origin, standard methods."""
    return CORSConfig()


def with_defaults(config: CORSConfig | None) -> CORSConfig:
    """Fill in defaults for an absent or partially empty configuration.

    ``None`` yields :func:`default_cors_config`.  An empty ``allow_origins``
    becomes the wildcard and an empty ``allow_methods`` becomes the standard
    method set.  The argument is never modified and applying this twice gives
    the same result as applying it once.
    """
    if config is None:
        return default_cors_config()

    changes: dict[str, Any] = {}
    if not config.allow_origins:
        changes["allow_origins"] = DEFAULT_ALLOW_ORIGINS
    if not config.allow_methods:
        changes["allow_methods"] = DEFAULT_ALLOW_METHODS
    if not changes:
        return config
    return dataclasses.replace(config, **changes)

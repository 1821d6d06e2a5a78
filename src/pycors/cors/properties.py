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
"""Bindable CORS properties (pycors.cors.*)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pycors.core.config import config_properties
from pycors.cors.config import CORSConfig, SkipPredicate, with_defaults


def _as_list(value: Any) -> list[str]:
    """Accept a list or a comma-separated string (as supplied by env vars)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value]


@config_properties(prefix="pycors.cors")
@dataclass
class CORSProperties:
    """Configuration for the CORS filter (pycors.cors.*).

    Example ``pycors.yaml``::

        pycors:
          cors:
            allow_origins: ["https://app.example.com"]
            allow_credentials: true
            max_age: 3600
    """

    enabled: bool = True
    allow_origins: list[str] = field(default_factory=list)
    allow_methods: list[str] = field(default_factory=list)
    allow_headers: list[str] = field(default_factory=list)
    expose_headers: list[str] = field(default_factory=list)
    allow_credentials: bool = False
    max_age: int = 0

    def to_config(self, skip_predicate: SkipPredicate | None = None) -> CORSConfig:
        """Build the defaulted :class:`CORSConfig` these properties describe.

        Values that cannot be interpreted fall back to the defaults; a
        non-integer ``max_age`` becomes ``0``.
        """
        return with_defaults(
            CORSConfig(
                allow_origins=_as_list(self.allow_origins),
                allow_methods=_as_list(self.allow_methods),
                allow_headers=_as_list(self.allow_headers),
                expose_headers=_as_list(self.expose_headers),
                allow_credentials=bool(self.allow_credentials),
                max_age=self.max_age,
                skip_predicate=skip_predicate,
            )
        )

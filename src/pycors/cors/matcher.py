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
"""Origin matching against a CORS allow-list."""

from __future__ import annotations

from pycors.cors.config import CORSConfig
from pycors.cors.headers import WILDCARD


def allowed_origin(config: CORSConfig, origin: str | None) -> str:
    """Return the ``Access-Control-Allow-Origin`` value for *origin*.

    An empty string means the header must not be set, which is the only way
    a disallowed origin is signalled; the request itself is never rejected.

    Entries are checked in configuration order and the first match wins:

    * A wildcard entry (``"*"`` or an empty list) yields ``"*"``, unless
      credentials are allowed and the request named a non-empty origin, in
      which case that origin is echoed.  A missing and an empty ``Origin``
      header both get ``"*"``.
    * Any other entry must equal the origin exactly (case-sensitive) and
      yields the literal request origin.
    """
    entries = config.allow_origins or (WILDCARD,)
    for entry in entries:
        if entry == WILDCARD:
            if config.allow_credentials and origin:
                return origin
            return WILDCARD
        if origin is not None and entry == origin:
            return origin
    return ""

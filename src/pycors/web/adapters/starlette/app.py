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
"""PyCORS web application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute

from pycors.container.ordering import get_order
from pycors.cors.properties import CORSProperties
from pycors.logging.port import LoggingPort
from pycors.logging.structlog_adapter import StructlogAdapter
from pycors.web.adapters.starlette.cors_filter import CORSFilter
from pycors.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from pycors.web.ports.filter import WebFilter

if TYPE_CHECKING:
    from pycors.core.config import Config
    from pycors.cors.config import CORSConfig


def create_app(
    routes: Sequence[BaseRoute] = (),
    cors: CORSConfig | None = None,
    config: Config | None = None,
    filters: Sequence[WebFilter] = (),
    debug: bool = False,
    lifespan: Any = None,
    logging_adapter: LoggingPort | None = None,
) -> Starlette:
    """Create a Starlette application with the CORS filter mounted.

    The CORS policy comes from ``cors`` when given, otherwise from the
    ``pycors.cors`` section of ``config`` (unless ``pycors.cors.enabled`` is
    false).  With neither, no CORS filter is installed.  When ``config`` is
    given, logging is configured from it as well, through
    ``logging_adapter`` (a :class:`StructlogAdapter` by default).

    Caller-supplied ``filters`` join the chain and everything is sorted by
    ``@order``.
    """
    chain: list[WebFilter] = list(filters)

    if config is not None:
        adapter: LoggingPort = logging_adapter or StructlogAdapter()
        adapter.configure(config)

    if cors is not None:
        chain.append(CORSFilter(cors))
    elif config is not None:
        props = config.bind(CORSProperties)
        if props.enabled:
            chain.append(CORSFilter(props.to_config()))

    chain.sort(key=lambda f: get_order(type(f)))

    return Starlette(
        debug=debug,
        routes=list(routes),
        middleware=[Middleware(WebFilterChainMiddleware, filters=chain)],
        lifespan=lifespan,
    )

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
"""CORSFilter — answers preflights and annotates responses with CORS headers.

Per request:

1. If the configured skip predicate returns ``True`` the request is handed
   to the next handler untouched.
2. ``OPTIONS`` requests are preflights: they are answered here with an empty
   ``204 No Content`` carrying the preflight headers, and the wrapped handler
   is never called.
3. Every other request is forwarded; the allow-origin, credentials and
   expose headers are added to whatever response the handler produces.

A disallowed origin is never rejected.  It simply gets no
``Access-Control-Allow-Origin`` header and the browser enforces the rest.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import cast

import structlog
from starlette.requests import Request
from starlette.responses import Response

from pycors.container.ordering import HIGHEST_PRECEDENCE, order
from pycors.cors.config import CORSConfig, with_defaults
from pycors.cors.headers import HEADER_ACCESS_CONTROL_ALLOW_ORIGIN
from pycors.cors.policy import (
    CORSRequest,
    actual_request_headers,
    is_preflight,
    preflight_headers,
)
from pycors.web.filters import OncePerRequestFilter, wrap_handler
from pycors.web.ports.filter import CallNext

logger = structlog.get_logger("pycors.web")


@order(HIGHEST_PRECEDENCE + 50)
class CORSFilter(OncePerRequestFilter):
    """Enforces a :class:`CORSConfig` on every request it is applied to.

    ``None`` (or no argument) uses the default policy: any origin and the
    standard ``GET,HEAD,PUT,PATCH,POST,DELETE`` method set.
    """

    def __init__(self, config: CORSConfig | None = None) -> None:
        self._config = with_defaults(config)

    @property
    def config(self) -> CORSConfig:
        return self._config

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        cfg = self._config

        if cfg.skip_predicate is not None and cfg.skip_predicate(request):
            logger.debug("cors_skipped", method=request.method, path=request.url.path)
            return cast(Response, await call_next(request))

        view = CORSRequest.from_headers(request.method, request.headers)

        if is_preflight(view):
            headers = preflight_headers(cfg, view)
            self._log_decision("cors_preflight", request, view, headers)
            return Response(status_code=204, headers=headers)

        headers = actual_request_headers(cfg, view)
        self._log_decision("cors_request", request, view, headers)

        response = cast(Response, await call_next(request))
        # Headers the handler set itself take precedence.
        for name, value in headers.items():
            response.headers.setdefault(name, value)
        return response

    @staticmethod
    def _log_decision(event: str, request: Request, view: CORSRequest, headers: dict[str, str]) -> None:
        allowed = headers.get(HEADER_ACCESS_CONTROL_ALLOW_ORIGIN)
        if view.origin and not allowed:
            logger.debug(
                "cors_origin_rejected",
                method=request.method,
                path=request.url.path,
                origin=view.origin,
            )
            return
        logger.debug(
            event,
            method=request.method,
            path=request.url.path,
            origin=view.origin,
            allow_origin=allowed,
        )


def cors_handler(handler: CallNext, config: CORSConfig | None = None) -> CallNext:
    """Wrap an async Starlette endpoint in a :class:`CORSFilter`."""
    return functools.wraps(handler)(wrap_handler(CORSFilter(config), handler))


def with_cors(config: CORSConfig | None = None) -> Callable[[CallNext], CallNext]:
    """Decorator form of :func:`cors_handler`.

    Usage::

        @with_cors(CORSConfig(allow_origins=["https://app.example.com"]))
        async def items(request):
            return JSONResponse([...])

        Route("/items", items, methods=["GET", "OPTIONS"])

    The route must accept ``OPTIONS`` for preflights to reach the endpoint;
    mount :class:`CORSFilter` in the filter chain to cover every route instead.
    """

    def decorator(handler: CallNext) -> CallNext:
        return cors_handler(handler, config)

    return decorator

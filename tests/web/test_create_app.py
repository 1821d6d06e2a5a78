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
"""Tests for create_app() — CORS policy from arguments or configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from pycors.container.ordering import order
from pycors.core.config import Config
from pycors.cors.config import CORSConfig
from pycors.web.adapters.starlette.app import create_app
from pycors.web.filters import OncePerRequestFilter

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def hello(request: Request) -> JSONResponse:
    return JSONResponse({"msg": "hello"})


HELLO_ROUTE = Route("/hello", hello)


class RecordingLogging:
    """LoggingPort that remembers the configs it was given."""

    def __init__(self) -> None:
        self.configured: list[Config] = []

    def configure(self, config: Config) -> None:
        self.configured.append(config)

    def get_logger(self, name: str) -> Any:
        return None

    def set_level(self, name: str, level: str) -> None:
        pass


@order(100)
class OriginEchoFilter(OncePerRequestFilter):
    """Copies the allow-origin header seen on the inner response into X-Seen-Origin."""

    async def do_filter(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Seen-Origin"] = response.headers.get("Access-Control-Allow-Origin", "none")
        return response


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCreateAppWithCORSConfig:
    def test_simple_request(self):
        app = create_app(routes=[HELLO_ROUTE], cors=CORSConfig(allow_origins=["http://example.com"]))
        resp = TestClient(app).get("/hello", headers={"Origin": "http://example.com"})

        assert resp.status_code == 200
        assert resp.json() == {"msg": "hello"}
        assert resp.headers["access-control-allow-origin"] == "http://example.com"

    def test_preflight_request(self):
        app = create_app(
            routes=[HELLO_ROUTE],
            cors=CORSConfig(allow_origins=["http://example.com"], allow_methods=["GET", "POST"]),
        )
        resp = TestClient(app).options(
            "/hello",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
        )

        assert resp.status_code == 204
        assert resp.headers["access-control-allow-origin"] == "http://example.com"
        assert resp.headers["access-control-allow-methods"] == "GET,POST"

    def test_cors_filter_runs_outside_user_filters(self):
        app = create_app(routes=[HELLO_ROUTE], cors=CORSConfig(), filters=[OriginEchoFilter()])
        resp = TestClient(app).get("/hello")

        assert resp.headers["access-control-allow-origin"] == "*"
        assert resp.headers["x-seen-origin"] == "none"


class TestCreateAppFromConfig:
    def test_policy_from_config(self):
        config = Config({"pycors": {"cors": {"allow_origins": ["localhost"], "max_age": 3600}}})
        app = create_app(routes=[HELLO_ROUTE], config=config)

        resp = TestClient(app).options("/hello", headers={"Origin": "localhost"})

        assert resp.status_code == 204
        assert resp.headers["access-control-allow-origin"] == "localhost"
        assert resp.headers["access-control-max-age"] == "3600"

    def test_policy_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "pycors.yaml"
        config_file.write_text(
            "pycors:\n"
            "  cors:\n"
            "    allow_origins: [http://example.com]\n"
            "    expose_headers: [ETag]\n"
        )
        app = create_app(routes=[HELLO_ROUTE], config=Config.from_file(config_file))

        resp = TestClient(app).get("/hello", headers={"Origin": "http://example.com"})

        assert resp.headers["access-control-allow-origin"] == "http://example.com"
        assert resp.headers["access-control-expose-headers"] == "ETag"

    def test_disabled_in_config(self):
        config = Config({"pycors": {"cors": {"enabled": False}}})
        app = create_app(routes=[HELLO_ROUTE], config=config)

        resp = TestClient(app).get("/hello", headers={"Origin": "http://example.com"})

        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers

    def test_malformed_max_age_in_config_does_not_break_preflight(self):
        config = Config({"pycors": {"cors": {"max_age": "soon"}}})
        app = create_app(routes=[HELLO_ROUTE], config=config)

        resp = TestClient(app).options("/hello", headers={"Origin": "localhost"})

        assert resp.status_code == 204
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "access-control-max-age" not in resp.headers

    def test_explicit_cors_wins_over_config(self):
        config = Config({"pycors": {"cors": {"allow_origins": ["localhost"]}}})
        app = create_app(routes=[HELLO_ROUTE], cors=CORSConfig(allow_origins=["http://example.com"]), config=config)

        resp = TestClient(app).get("/hello", headers={"Origin": "localhost"})

        assert "access-control-allow-origin" not in resp.headers


class TestCreateAppMalformedPolicy:
    def test_null_max_age_preflight(self):
        app = create_app(routes=[HELLO_ROUTE], cors=CORSConfig(max_age=None))  # type: ignore[arg-type]

        resp = TestClient(app).options("/hello", headers={"Origin": "x"})

        assert resp.status_code == 204
        assert resp.headers["access-control-allow-methods"] == "GET,HEAD,PUT,PATCH,POST,DELETE"
        assert "access-control-max-age" not in resp.headers


class TestCreateAppLogging:
    def test_logging_adapter_receives_config(self):
        adapter = RecordingLogging()
        config = Config({"pycors": {"logging": {"format": "json"}}})

        create_app(routes=[HELLO_ROUTE], config=config, logging_adapter=adapter)

        assert adapter.configured == [config]

    def test_logging_untouched_without_config(self):
        adapter = RecordingLogging()

        create_app(routes=[HELLO_ROUTE], cors=CORSConfig(), logging_adapter=adapter)

        assert adapter.configured == []


class TestCreateAppWithoutCORS:
    def test_no_cors_when_not_configured(self):
        app = create_app(routes=[HELLO_ROUTE])
        resp = TestClient(app).get("/hello", headers={"Origin": "http://example.com"})

        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers

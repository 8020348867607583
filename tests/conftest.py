import asyncio
import json
import time
from dataclasses import dataclass

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from qpay import Config, QPay


@dataclass
class RecordedCall:
    method: str
    path: str
    authorization: str | None
    content_type: str | None
    body: str

    def json(self):
        return json.loads(self.body)


class FakeQPay:
    """In-process stand-in for the QPay API.

    Records every request and replays queued responses per (method, path).
    The last queued response for a route is repeated once the others are used.
    """

    def __init__(self) -> None:
        self.base_url = ""
        self.calls: list[RecordedCall] = []
        self.delay = 0.0
        self._responses: dict[tuple[str, str], list[tuple[int, object, str | None]]] = {}

    def add_response(self, method: str, path: str, *, status: int = 200, json=None, text=None) -> None:
        self._responses.setdefault((method, path), []).append((status, json, text))

    def add_token(
        self,
        path: str = "/v2/auth/token",
        *,
        access: str = "access-abc",
        refresh: str = "refresh-xyz",
        expires_in: int = 3600,
        refresh_expires_in: int = 7200,
    ) -> dict:
        now = int(time.time())
        payload = {
            "access_token": access,
            "refresh_token": refresh,
            "expires_in": now + expires_in,
            "refresh_expires_in": now + refresh_expires_in,
            "token_type": "Bearer",
        }
        self.add_response("POST", path, json=payload)
        return payload

    def calls_to(self, path: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.path == path]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        body = await request.text()
        self.calls.append(
            RecordedCall(
                method=request.method,
                path=request.path,
                authorization=request.headers.get("Authorization"),
                content_type=request.headers.get("Content-Type"),
                body=body,
            )
        )
        if self.delay:
            await asyncio.sleep(self.delay)

        queue = self._responses.get((request.method, request.path))
        if not queue:
            return web.json_response(
                {"error": "UNEXPECTED_CALL", "message": f"{request.method} {request.path}"},
                status=500,
            )
        status, payload, text = queue.pop(0) if len(queue) > 1 else queue[0]
        if payload is not None:
            return web.json_response(payload, status=status)
        return web.Response(status=status, text=text or "")


@pytest_asyncio.fixture
async def qpay_server():
    fake = FakeQPay()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.base_url = f"http://{server.host}:{server.port}"
    yield fake
    await server.close()


@pytest.fixture
def config(qpay_server) -> Config:
    return Config(
        base_url=qpay_server.base_url,
        username="testuser",
        password="testpass",
        invoice_code="TEST_INVOICE",
        callback_url="https://example.com/callback",
    )


@pytest.fixture
def client(config) -> QPay:
    return QPay(config)


@pytest.fixture
def authed(qpay_server):
    """Queue a valid token so domain calls authenticate on first use."""
    return qpay_server.add_token()

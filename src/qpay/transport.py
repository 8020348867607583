"""Single HTTP exchange with the QPay API and response classification."""

import json
import logging
from collections.abc import Mapping
from http import HTTPStatus

import aiohttp

from .constants import DEFAULT_TIMEOUT_SECONDS
from .exceptions import QPayAPIError, QPayDecodeError, QPayEncodeError
from .models import Model

logger = logging.getLogger(__name__)

# aiohttp 3.14 deprecates BasicAuth in favour of encode_basic_auth
_encode_basic_auth = getattr(aiohttp, "encode_basic_auth", None)


def bearer(token: str) -> str:
    """Return an ``Authorization`` header value for a bearer token."""
    return f"Bearer {token}"


def basic(username: str, password: str) -> str:
    """Return an ``Authorization`` header value for HTTP Basic credentials."""
    if _encode_basic_auth is not None:
        return _encode_basic_auth(username, password)
    return aiohttp.BasicAuth(username, password).encode()


def _status_text(status: int, reason: str | None) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return reason or str(status)


def classify_error(status: int, body: bytes, reason: str | None = None) -> QPayAPIError:
    """Build a :class:`QPayAPIError` from a non-2xx status and its raw body.

    The body is decoded as ``{"error": ..., "message": ...}`` when possible.
    A missing code falls back to the HTTP reason phrase and a missing message
    to the body text. The text replaces invalid UTF-8; the exact bytes are
    kept on ``raw_body``.
    """
    text = body.decode("utf-8", errors="replace")
    code = ""
    message = ""
    try:
        payload = json.loads(text)
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        if isinstance(payload.get("error"), str):
            code = payload["error"]
        if isinstance(payload.get("message"), str):
            message = payload["message"]

    return QPayAPIError(
        status_code=status,
        code=code or _status_text(status, reason),
        message=message or text,
        response_body=text,
        raw_body=body,
    )


def _encode_body(body) -> bytes:
    if isinstance(body, Model):
        body = body.to_dict()
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise QPayEncodeError(f"Failed to encode request body: {e}") from e


class Transport:
    """Performs one HTTP request against the QPay API; knows nothing about tokens.

    Without a caller-supplied ``aiohttp.ClientSession`` every call opens its
    own short-lived session bounded by *timeout* seconds. A supplied session
    is used as-is (its own timeout applies) and is never closed here.
    """

    def __init__(
        self,
        base_url: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.timeout = timeout

    async def do(
        self,
        method: str,
        path: str,
        body: Model | Mapping | None = None,
        authorization: str | None = None,
    ) -> bytes:
        """Send one request and return the raw response body.

        Raises QPayEncodeError if *body* cannot be serialized, QPayAPIError
        for any non-2xx status. Connection errors, timeouts and cancellation
        propagate unchanged.
        """
        headers = {}
        data = None
        if body is not None:
            data = _encode_body(body)
            headers["Content-Type"] = "application/json"
        if authorization:
            headers["Authorization"] = authorization

        url = f"{self.base_url}{path}"
        if self.session is not None:
            status, reason, raw = await self._send(self.session, method, url, headers, data)
        else:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                status, reason, raw = await self._send(session, method, url, headers, data)

        logger.debug("%s %s → %s", method, path, status)
        if status < 200 or status >= 300:
            raise classify_error(status, raw, reason)
        return raw

    async def request(
        self,
        method: str,
        path: str,
        body: Model | Mapping | None = None,
        authorization: str | None = None,
        model: type[Model] | None = None,
    ):
        """Send one request and decode the response into *model*.

        Returns None when no model is given and an empty *model* when the body
        is empty. Raises QPayDecodeError when a 2xx body is not valid JSON for
        *model*.
        """
        raw = await self.do(method, path, body=body, authorization=authorization)
        if model is None:
            return None
        if not raw:
            return model()
        try:
            return model.from_dict(json.loads(raw))
        except (TypeError, ValueError) as e:
            raise QPayDecodeError(
                f"Failed to decode {model.__name__} from {method} {path}: {e}"
            ) from e

    @staticmethod
    async def _send(
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        headers: dict[str, str],
        data: bytes | None,
    ) -> tuple[int, str | None, bytes]:
        async with session.request(method, url, headers=headers, data=data) as response:
            return response.status, response.reason, await response.read()

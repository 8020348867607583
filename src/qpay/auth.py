"""Token lifecycle: acquisition, caching, lazy refresh and re-authentication."""

import asyncio
import logging
import threading
import time
from collections.abc import Mapping
from dataclasses import dataclass

import aiohttp

from .constants import REFRESH_PATH, TOKEN_BUFFER_SECONDS, TOKEN_PATH
from .exceptions import QPayDecodeError, QPayError
from .models import Model, TokenResponse
from .transport import Transport, basic, bearer

logger = logging.getLogger(__name__)

# Failures of a refresh attempt that fall back to full authentication.
_REFRESH_FAILURES = (QPayError, aiohttp.ClientError, asyncio.TimeoutError)


@dataclass(frozen=True)
class TokenState:
    """Current token pair with absolute expiry timestamps (Unix seconds)."""

    access_token: str = ""
    refresh_token: str = ""
    access_expires_at: int = 0
    refresh_expires_at: int = 0

    @classmethod
    def from_response(cls, token: TokenResponse) -> "TokenState":
        # expires_in / refresh_expires_in are absolute timestamps on the wire
        return cls(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            access_expires_at=token.expires_in,
            refresh_expires_at=token.refresh_expires_in,
        )

    def access_valid(self, now: float) -> bool:
        return bool(self.access_token) and now < self.access_expires_at - TOKEN_BUFFER_SECONDS

    def refresh_valid(self, now: float) -> bool:
        return bool(self.refresh_token) and now < self.refresh_expires_at - TOKEN_BUFFER_SECONDS


class TokenManager:
    """Manages the QPay access/refresh token pair for one client.

    The token state is replaced wholesale under a lock; network calls run
    outside it, so callers holding a still-valid token are never queued behind
    a slow authentication. Two callers may race to refresh at the same time;
    the last successful result wins.
    """

    def __init__(self, transport: Transport, username: str, password: str):
        self._transport = transport
        self._username = username
        self._password = password
        self._lock = threading.Lock()
        self._state = TokenState()

    @property
    def state(self) -> TokenState:
        """Snapshot of the current token state."""
        with self._lock:
            return self._state

    async def get_access_token(self) -> TokenResponse:
        """Authenticate with username/password and store the new token pair."""
        token = await self._request_token()
        self._store(token)
        logger.info("Obtained QPay access token (expires at %s)", token.expires_in)
        return token

    async def refresh_access_token(self) -> TokenResponse:
        """Exchange the stored refresh token for a new token pair and store it."""
        with self._lock:
            refresh_token = self._state.refresh_token
        token = await self._request_refresh(refresh_token)
        self._store(token)
        logger.info("Refreshed QPay access token (expires at %s)", token.expires_in)
        return token

    async def ensure_valid_token(self) -> str:
        """Return an access token valid for at least the safety margin.

        Reuses the cached token, otherwise refreshes it, otherwise performs a
        full authentication. A failed refresh is logged and falls through to
        full authentication; a failed authentication propagates and leaves
        the stored state untouched.
        """
        with self._lock:
            state = self._state
        now = time.time()

        if state.access_valid(now):
            return state.access_token

        if state.refresh_valid(now):
            try:
                token = await self._request_refresh(state.refresh_token)
            except _REFRESH_FAILURES as e:
                logger.warning("Token refresh failed, re-authenticating: %s", e)
            else:
                self._store(token)
                logger.debug("Refreshed QPay access token")
                return token.access_token

        try:
            token = await self._request_token()
        except Exception as e:
            logger.error("QPay authentication failed for user '%s': %s", self._username, e)
            raise
        self._store(token)
        logger.info("Obtained QPay access token (expires at %s)", token.expires_in)
        return token.access_token

    def _store(self, token: TokenResponse) -> None:
        state = TokenState.from_response(token)
        with self._lock:
            self._state = state

    async def _request_token(self) -> TokenResponse:
        token = await self._transport.request(
            "POST",
            TOKEN_PATH,
            authorization=basic(self._username, self._password),
            model=TokenResponse,
        )
        return _checked(token, TOKEN_PATH)

    async def _request_refresh(self, refresh_token: str) -> TokenResponse:
        token = await self._transport.request(
            "POST",
            REFRESH_PATH,
            authorization=bearer(refresh_token),
            model=TokenResponse,
        )
        return _checked(token, REFRESH_PATH)


def _checked(token: TokenResponse, path: str) -> TokenResponse:
    if not token.access_token:
        raise QPayDecodeError(f"Token response from {path} has no access_token")
    return token


async def authorized_request(
    transport: Transport,
    token_mgr: TokenManager,
    method: str,
    path: str,
    body: Model | Mapping | None = None,
    model: type[Model] | None = None,
):
    """Ensure a valid token, then send one bearer-authenticated request."""
    token = await token_mgr.ensure_valid_token()
    return await transport.request(
        method, path, body=body, authorization=bearer(token), model=model
    )

"""Client configuration and environment loading."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import (
    ENV_BASE_URL,
    ENV_CALLBACK_URL,
    ENV_INVOICE_CODE,
    ENV_PASSWORD,
    ENV_USERNAME,
)
from .exceptions import QPayConfigError


@dataclass(frozen=True)
class Config:
    """Connection settings and merchant defaults for one QPay client."""

    base_url: str
    username: str
    password: str
    invoice_code: str = ""
    callback_url: str = ""

    def __repr__(self) -> str:
        return (
            f"Config(base_url={self.base_url!r}, username={self.username!r}, "
            f"password='***', invoice_code={self.invoice_code!r}, "
            f"callback_url={self.callback_url!r})"
        )


def load_config_from_env(environ: Mapping[str, str] | None = None) -> Config:
    """Build a :class:`Config` from ``QPAY_*`` environment variables.

    All of QPAY_BASE_URL, QPAY_USERNAME, QPAY_PASSWORD, QPAY_INVOICE_CODE and
    QPAY_CALLBACK_URL are required; empty values count as missing.
    """
    env = os.environ if environ is None else environ
    required = (
        ENV_BASE_URL,
        ENV_USERNAME,
        ENV_PASSWORD,
        ENV_INVOICE_CODE,
        ENV_CALLBACK_URL,
    )
    missing = [key for key in required if not env.get(key, "").strip()]
    if missing:
        raise QPayConfigError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return Config(
        base_url=env[ENV_BASE_URL].strip(),
        username=env[ENV_USERNAME].strip(),
        password=env[ENV_PASSWORD],
        invoice_code=env[ENV_INVOICE_CODE].strip(),
        callback_url=env[ENV_CALLBACK_URL].strip(),
    )

"""Main QPay client: public interface and orchestration."""

import logging

import aiohttp

from .auth import TokenManager
from .config import Config, load_config_from_env
from .constants import DEFAULT_TIMEOUT_SECONDS
from .ebarimt import cancel_ebarimt as _cancel_ebarimt
from .ebarimt import create_ebarimt as _create_ebarimt
from .invoice import apply_invoice_defaults
from .invoice import cancel_invoice as _cancel_invoice
from .invoice import create_invoice as _create_invoice
from .models import (
    CreateEbarimtInvoiceRequest,
    CreateEbarimtRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    EbarimtResponse,
    InvoiceResponse,
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentCheckResponse,
    PaymentDetail,
    PaymentListRequest,
    PaymentListResponse,
    PaymentRefundRequest,
    TokenResponse,
)
from .payment import cancel_payment as _cancel_payment
from .payment import check_payment as _check_payment
from .payment import get_payment as _get_payment
from .payment import list_payments as _list_payments
from .payment import refund_payment as _refund_payment
from .transport import Transport

logger = logging.getLogger(__name__)


class QPay:
    """Async client for the QPay V2 merchant API.

    Tokens are obtained and refreshed on demand; a single instance may be
    shared by concurrent tasks. Usage::

        api = QPay(Config(base_url, username, password, invoice_code, callback_url))
        invoice = await api.create_simple_invoice(
            CreateSimpleInvoiceRequest("ORDER-1", "terminal", "Order #1", 1000)
        )
        check = await api.check_payment(PaymentCheckRequest("INVOICE", invoice.invoice_id))

    Pass *session* to reuse an existing ``aiohttp.ClientSession``; its own
    timeout then applies instead of *timeout*.
    """

    def __init__(
        self,
        config: Config,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.config = config
        self._transport = Transport(config.base_url, session=session, timeout=timeout)
        self._token_mgr = TokenManager(self._transport, config.username, config.password)

    @classmethod
    def from_env(
        cls,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "QPay":
        """Create a client configured from ``QPAY_*`` environment variables."""
        config = load_config_from_env()
        logger.debug("Loaded QPay config for %s (user '%s')", config.base_url, config.username)
        return cls(config, session=session, timeout=timeout)

    @property
    def token_manager(self) -> TokenManager:
        return self._token_mgr

    # ── Auth ─────────────────────────────────────────────────────────────

    async def get_token(self) -> TokenResponse:
        """Authenticate now and store the new token pair."""
        return await self._token_mgr.get_access_token()

    async def refresh_token(self) -> TokenResponse:
        """Refresh the stored token pair now."""
        return await self._token_mgr.refresh_access_token()

    # ── Invoices ─────────────────────────────────────────────────────────

    async def create_invoice(self, request: CreateInvoiceRequest) -> InvoiceResponse:
        """Create a detailed invoice."""
        return await self._create(request)

    async def create_simple_invoice(self, request: CreateSimpleInvoiceRequest) -> InvoiceResponse:
        """Create an invoice with the minimal set of fields."""
        return await self._create(request)

    async def create_ebarimt_invoice(self, request: CreateEbarimtInvoiceRequest) -> InvoiceResponse:
        """Create an invoice carrying tax (ebarimt) lines."""
        return await self._create(request)

    async def cancel_invoice(self, invoice_id: str) -> None:
        await _cancel_invoice(self._transport, self._token_mgr, invoice_id)

    # ── Payments ─────────────────────────────────────────────────────────

    async def get_payment(self, payment_id: str) -> PaymentDetail:
        return await _get_payment(self._transport, self._token_mgr, payment_id)

    async def check_payment(self, request: PaymentCheckRequest) -> PaymentCheckResponse:
        return await _check_payment(self._transport, self._token_mgr, request)

    async def list_payments(self, request: PaymentListRequest) -> PaymentListResponse:
        return await _list_payments(self._transport, self._token_mgr, request)

    async def cancel_payment(
        self, payment_id: str, request: PaymentCancelRequest | None = None
    ) -> None:
        """Cancel a card payment."""
        await _cancel_payment(self._transport, self._token_mgr, payment_id, request)

    async def refund_payment(
        self, payment_id: str, request: PaymentRefundRequest | None = None
    ) -> None:
        """Refund a card payment."""
        await _refund_payment(self._transport, self._token_mgr, payment_id, request)

    # ── Ebarimt ──────────────────────────────────────────────────────────

    async def create_ebarimt(self, request: CreateEbarimtRequest) -> EbarimtResponse:
        return await _create_ebarimt(self._transport, self._token_mgr, request)

    async def cancel_ebarimt(self, payment_id: str) -> EbarimtResponse:
        return await _cancel_ebarimt(self._transport, self._token_mgr, payment_id)

    # ── Internal helpers ─────────────────────────────────────────────────

    async def _create(self, request) -> InvoiceResponse:
        return await _create_invoice(
            self._transport, self._token_mgr, apply_invoice_defaults(request, self.config)
        )

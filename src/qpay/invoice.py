"""Invoice endpoints: create (simple, detailed, with ebarimt) and cancel."""

import dataclasses
import logging

from .auth import TokenManager, authorized_request
from .config import Config
from .constants import INVOICE_PATH
from .models import (
    CreateEbarimtInvoiceRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    InvoiceResponse,
)
from .transport import Transport

logger = logging.getLogger(__name__)

InvoiceRequest = CreateInvoiceRequest | CreateSimpleInvoiceRequest | CreateEbarimtInvoiceRequest


def apply_invoice_defaults(request: InvoiceRequest, config: Config) -> InvoiceRequest:
    """Fill an empty invoice_code / callback_url from *config*.

    Returns a new request; values already set on *request* are kept.
    """
    changes = {}
    if not request.invoice_code and config.invoice_code:
        changes["invoice_code"] = config.invoice_code
    if not request.callback_url and config.callback_url:
        changes["callback_url"] = config.callback_url
    if not changes:
        return request
    return dataclasses.replace(request, **changes)


async def create_invoice(
    transport: Transport, token_mgr: TokenManager, request: InvoiceRequest
) -> InvoiceResponse:
    """Create an invoice of any variant.

    POST {base}/v2/invoice
    """
    invoice = await authorized_request(
        transport, token_mgr, "POST", INVOICE_PATH, body=request, model=InvoiceResponse
    )
    logger.debug("Created invoice %s (%s)", invoice.invoice_id, request.sender_invoice_no)
    return invoice


async def cancel_invoice(transport: Transport, token_mgr: TokenManager, invoice_id: str) -> None:
    """Cancel an unpaid invoice.

    DELETE {base}/v2/invoice/{invoice_id}
    """
    await authorized_request(transport, token_mgr, "DELETE", f"{INVOICE_PATH}/{invoice_id}")
    logger.debug("Canceled invoice %s", invoice_id)

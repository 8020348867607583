"""Ebarimt (electronic tax receipt) endpoints."""

import logging

from .auth import TokenManager, authorized_request
from .constants import EBARIMT_CREATE_PATH, EBARIMT_PATH
from .models import CreateEbarimtRequest, EbarimtResponse
from .transport import Transport

logger = logging.getLogger(__name__)


async def create_ebarimt(
    transport: Transport, token_mgr: TokenManager, request: CreateEbarimtRequest
) -> EbarimtResponse:
    """Issue a tax receipt for a payment.

    POST {base}/v2/ebarimt_v3/create
    """
    receipt = await authorized_request(
        transport, token_mgr, "POST", EBARIMT_CREATE_PATH, body=request, model=EbarimtResponse
    )
    logger.debug("Ebarimt %s issued for payment %s", receipt.id, request.payment_id)
    return receipt


async def cancel_ebarimt(
    transport: Transport, token_mgr: TokenManager, payment_id: str
) -> EbarimtResponse:
    """Cancel the tax receipt issued for a payment.

    DELETE {base}/v2/ebarimt_v3/{payment_id}
    """
    return await authorized_request(
        transport, token_mgr, "DELETE", f"{EBARIMT_PATH}/{payment_id}", model=EbarimtResponse
    )

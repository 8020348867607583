"""Payment endpoints: get, check, list, cancel and refund."""

import logging

from .auth import TokenManager, authorized_request
from .constants import (
    PAYMENT_CANCEL_PATH,
    PAYMENT_CHECK_PATH,
    PAYMENT_LIST_PATH,
    PAYMENT_PATH,
    PAYMENT_REFUND_PATH,
)
from .models import (
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentCheckResponse,
    PaymentDetail,
    PaymentListRequest,
    PaymentListResponse,
    PaymentRefundRequest,
)
from .transport import Transport

logger = logging.getLogger(__name__)


async def get_payment(
    transport: Transport, token_mgr: TokenManager, payment_id: str
) -> PaymentDetail:
    """Fetch payment details.

    GET {base}/v2/payment/{payment_id}
    """
    return await authorized_request(
        transport, token_mgr, "GET", f"{PAYMENT_PATH}/{payment_id}", model=PaymentDetail
    )


async def check_payment(
    transport: Transport, token_mgr: TokenManager, request: PaymentCheckRequest
) -> PaymentCheckResponse:
    """Check whether an object (usually an invoice) has been paid.

    POST {base}/v2/payment/check
    """
    result = await authorized_request(
        transport, token_mgr, "POST", PAYMENT_CHECK_PATH,
        body=request, model=PaymentCheckResponse,
    )
    logger.debug(
        "Payment check %s %s: count=%s paid=%s",
        request.object_type, request.object_id, result.count, result.paid_amount,
    )
    return result


async def list_payments(
    transport: Transport, token_mgr: TokenManager, request: PaymentListRequest
) -> PaymentListResponse:
    """List payments for an object within a date range.

    POST {base}/v2/payment/list
    """
    return await authorized_request(
        transport, token_mgr, "POST", PAYMENT_LIST_PATH,
        body=request, model=PaymentListResponse,
    )


async def cancel_payment(
    transport: Transport,
    token_mgr: TokenManager,
    payment_id: str,
    request: PaymentCancelRequest | None = None,
) -> None:
    """Cancel a card payment.

    DELETE {base}/v2/payment/cancel/{payment_id}
    """
    await authorized_request(
        transport, token_mgr, "DELETE", f"{PAYMENT_CANCEL_PATH}/{payment_id}", body=request
    )
    logger.info("Canceled payment %s", payment_id)


async def refund_payment(
    transport: Transport,
    token_mgr: TokenManager,
    payment_id: str,
    request: PaymentRefundRequest | None = None,
) -> None:
    """Refund a card payment.

    DELETE {base}/v2/payment/refund/{payment_id}
    """
    await authorized_request(
        transport, token_mgr, "DELETE", f"{PAYMENT_REFUND_PATH}/{payment_id}", body=request
    )
    logger.info("Refunded payment %s", payment_id)

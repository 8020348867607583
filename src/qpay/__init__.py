"""Async Python client for the QPay V2 merchant API."""

from .auth import TokenManager, TokenState
from .client import QPay
from .config import Config, load_config_from_env
from .constants import ErrorCode
from .exceptions import (
    QPayAPIError,
    QPayConfigError,
    QPayDecodeError,
    QPayEncodeError,
    QPayError,
)
from .models import (
    Account,
    Address,
    CardTransaction,
    CreateEbarimtInvoiceRequest,
    CreateEbarimtRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    Deeplink,
    EbarimtHistory,
    EbarimtInvoiceLine,
    EbarimtItem,
    EbarimtResponse,
    InvoiceLine,
    InvoiceReceiverData,
    InvoiceResponse,
    Offset,
    P2PTransaction,
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentCheckResponse,
    PaymentCheckRow,
    PaymentDetail,
    PaymentListItem,
    PaymentListRequest,
    PaymentListResponse,
    PaymentRefundRequest,
    SenderBranchData,
    SenderStaffData,
    TaxEntry,
    TokenResponse,
    Transaction,
)

__all__ = [
    "QPay",
    "Config",
    "load_config_from_env",
    "TokenManager",
    "TokenState",
    "ErrorCode",
    "QPayError",
    "QPayAPIError",
    "QPayConfigError",
    "QPayDecodeError",
    "QPayEncodeError",
    "Account",
    "Address",
    "CardTransaction",
    "CreateEbarimtInvoiceRequest",
    "CreateEbarimtRequest",
    "CreateInvoiceRequest",
    "CreateSimpleInvoiceRequest",
    "Deeplink",
    "EbarimtHistory",
    "EbarimtInvoiceLine",
    "EbarimtItem",
    "EbarimtResponse",
    "InvoiceLine",
    "InvoiceReceiverData",
    "InvoiceResponse",
    "Offset",
    "P2PTransaction",
    "PaymentCancelRequest",
    "PaymentCheckRequest",
    "PaymentCheckResponse",
    "PaymentCheckRow",
    "PaymentDetail",
    "PaymentListItem",
    "PaymentListRequest",
    "PaymentListResponse",
    "PaymentRefundRequest",
    "SenderBranchData",
    "SenderStaffData",
    "TaxEntry",
    "TokenResponse",
    "Transaction",
]

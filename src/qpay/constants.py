"""Constants for the QPay V2 merchant API."""

# Auth endpoints
TOKEN_PATH = "/v2/auth/token"
REFRESH_PATH = "/v2/auth/refresh"

# Invoice endpoints
INVOICE_PATH = "/v2/invoice"

# Payment endpoints
PAYMENT_PATH = "/v2/payment"
PAYMENT_CHECK_PATH = "/v2/payment/check"
PAYMENT_LIST_PATH = "/v2/payment/list"
PAYMENT_CANCEL_PATH = "/v2/payment/cancel"
PAYMENT_REFUND_PATH = "/v2/payment/refund"

# Ebarimt (electronic tax receipt) endpoints
EBARIMT_CREATE_PATH = "/v2/ebarimt_v3/create"
EBARIMT_PATH = "/v2/ebarimt_v3"

# A token is treated as stale this many seconds before its declared expiry
TOKEN_BUFFER_SECONDS = 30

DEFAULT_TIMEOUT_SECONDS = 30

ENV_BASE_URL = "QPAY_BASE_URL"
ENV_USERNAME = "QPAY_USERNAME"
ENV_PASSWORD = "QPAY_PASSWORD"
ENV_INVOICE_CODE = "QPAY_INVOICE_CODE"
ENV_CALLBACK_URL = "QPAY_CALLBACK_URL"


class ErrorCode:
    """Symbolic error codes returned in the ``error`` field of failed calls."""
    ACCOUNT_BANK_DUPLICATED = "ACCOUNT_BANK_DUPLICATED"
    ACCOUNT_SELECTION_INVALID = "ACCOUNT_SELECTION_INVALID"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    BANK_ACCOUNT_NOTFOUND = "BANK_ACCOUNT_NOTFOUND"
    BANK_MCC_ALREADY_ADDED = "BANK_MCC_ALREADY_ADDED"
    BANK_MCC_NOT_FOUND = "BANK_MCC_NOT_FOUND"
    CARD_TERMINAL_NOTFOUND = "CARD_TERMINAL_NOTFOUND"
    CLIENT_NOTFOUND = "CLIENT_NOTFOUND"
    CLIENT_USERNAME_DUPLICATED = "CLIENT_USERNAME_DUPLICATED"
    CUSTOMER_DUPLICATE = "CUSTOMER_DUPLICATE"
    CUSTOMER_NOTFOUND = "CUSTOMER_NOTFOUND"
    CUSTOMER_REGISTER_INVALID = "CUSTOMER_REGISTER_INVALID"
    EBARIMT_CANCEL_NOTSUPPERDED = "EBARIMT_CANCEL_NOTSUPPERDED"  # sic, as sent by the server
    EBARIMT_NOT_REGISTERED = "EBARIMT_NOT_REGISTERED"
    EBARIMT_QR_CODE_INVALID = "EBARIMT_QR_CODE_INVALID"
    INFORM_NOTFOUND = "INFORM_NOTFOUND"
    INPUT_CODE_REGISTERED = "INPUT_CODE_REGISTERED"
    INPUT_NOTFOUND = "INPUT_NOTFOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_OBJECT_TYPE = "INVALID_OBJECT_TYPE"
    INVOICE_ALREADY_CANCELED = "INVOICE_ALREADY_CANCELED"
    INVOICE_CODE_INVALID = "INVOICE_CODE_INVALID"
    INVOICE_CODE_REGISTERED = "INVOICE_CODE_REGISTERED"
    INVOICE_LINE_REQUIRED = "INVOICE_LINE_REQUIRED"
    INVOICE_NOTFOUND = "INVOICE_NOTFOUND"
    INVOICE_PAID = "INVOICE_PAID"
    INVOICE_RECEIVER_DATA_ADDRESS_REQUIRED = "INVOICE_RECEIVER_DATA_ADDRESS_REQUIRED"
    INVOICE_RECEIVER_DATA_EMAIL_REQUIRED = "INVOICE_RECEIVER_DATA_EMAIL_REQUIRED"
    INVOICE_RECEIVER_DATA_PHONE_REQUIRED = "INVOICE_RECEIVER_DATA_PHONE_REQUIRED"
    INVOICE_RECEIVER_DATA_REQUIRED = "INVOICE_RECEIVER_DATA_REQUIRED"
    MAX_AMOUNT_ERR = "MAX_AMOUNT_ERR"
    MCC_NOTFOUND = "MCC_NOTFOUND"
    MERCHANT_ALREADY_REGISTERED = "MERCHANT_ALREADY_REGISTERED"
    MERCHANT_INACTIVE = "MERCHANT_INACTIVE"
    MERCHANT_NOTFOUND = "MERCHANT_NOTFOUND"
    MIN_AMOUNT_ERR = "MIN_AMOUNT_ERR"
    NO_CREDENDIALS = "NO_CREDENDIALS"  # sic
    OBJECT_DATA_ERROR = "OBJECT_DATA_ERROR"
    P2P_TERMINAL_NOTFOUND = "P2P_TERMINAL_NOTFOUND"
    PAYMENT_ALREADY_CANCELED = "PAYMENT_ALREADY_CANCELED"
    PAYMENT_NOT_PAID = "PAYMENT_NOT_PAID"
    PAYMENT_NOTFOUND = "PAYMENT_NOTFOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    QRACCOUNT_INACTIVE = "QRACCOUNT_INACTIVE"
    QRACCOUNT_NOTFOUND = "QRACCOUNT_NOTFOUND"
    QRCODE_NOTFOUND = "QRCODE_NOTFOUND"
    QRCODE_USED = "QRCODE_USED"
    SENDER_BRANCH_DATA_REQUIRED = "SENDER_BRANCH_DATA_REQUIRED"
    TAX_LINE_REQUIRED = "TAX_LINE_REQUIRED"
    TAX_PRODUCT_CODE_REQUIRED = "TAX_PRODUCT_CODE_REQUIRED"
    TRANSACTION_NOT_APPROVED = "TRANSACTION_NOT_APPROVED"
    TRANSACTION_REQUIRED = "TRANSACTION_REQUIRED"

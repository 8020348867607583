"""Request and response shapes for the QPay V2 API.

Every shape is a dataclass deriving from :class:`Model`, which maps it to and
from the JSON wire format:

- attribute names are the wire keys, unless a field carries a ``json``
  metadata entry (for keys that are not valid identifiers);
- ``None`` values are left out of the encoded body;
- unknown keys in a response are ignored, nested shapes and lists of shapes
  are decoded recursively.
"""

import functools
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


class Model:
    """Base class for JSON-mapped dataclasses."""

    def to_dict(self) -> dict:
        """Return the JSON-ready representation, omitting unset (None) fields."""
        payload = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[f.metadata.get("json", f.name)] = _dump(value)
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping):
        """Build an instance from a decoded JSON object.

        Raises TypeError if *payload* is not an object, a value does not
        match its field's type, or a field without a default is absent.
        ``null`` on a field that is not Optional leaves the field's default.
        """
        if not isinstance(payload, Mapping):
            raise TypeError(
                f"{cls.__name__} expects a JSON object, got {type(payload).__name__}"
            )
        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in payload:
                continue
            value = payload[key]
            if value is None and not _nullable(hints[f.name]):
                continue
            try:
                kwargs[f.name] = _load(hints[f.name], value)
            except TypeError as e:
                raise TypeError(f"{cls.__name__}.{key}: {e}") from e
        return cls(**kwargs)


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict:
    return typing.get_type_hints(cls)


def _dump(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _nullable(annotation: Any) -> bool:
    if annotation is Any:
        return True
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        return type(None) in typing.get_args(annotation)
    return False


def _load(annotation: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        candidates = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(candidates) == 1:
            return _load(candidates[0], value)
        for candidate in candidates:
            try:
                return _load(candidate, value)
            except TypeError:
                continue
        raise TypeError(f"expected {annotation}, got {type(value).__name__}")

    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"expected a JSON array, got {type(value).__name__}")
        args = typing.get_args(annotation)
        item_type = args[0] if args else Any
        return [_load(item_type, item) for item in value]

    if isinstance(annotation, type) and issubclass(annotation, Model):
        return annotation.from_dict(value)

    if annotation in (str, int, float, bool, dict):
        return _check_scalar(annotation, value)

    return value


def _check_scalar(annotation: type, value: Any) -> Any:
    # bool is an int subclass; JSON true/false is never a number
    if isinstance(value, bool):
        matches = annotation is bool
    elif annotation is float:
        matches = isinstance(value, (int, float))
    else:
        matches = isinstance(value, annotation)
    if not matches:
        raise TypeError(f"expected {annotation.__name__}, got {type(value).__name__}")
    return value


# ── Auth ─────────────────────────────────────────────────────────────────


@dataclass
class TokenResponse(Model):
    """Token pair returned by the token and refresh endpoints.

    ``expires_in`` and ``refresh_expires_in`` hold absolute Unix timestamps
    (seconds), not durations, despite their names.
    """

    token_type: str = ""
    refresh_expires_in: int = 0
    refresh_token: str = ""
    access_token: str = ""
    expires_in: int = 0
    scope: str = ""
    not_before_policy: str | int | None = field(
        default=None, metadata={"json": "not-before-policy"}
    )
    session_state: str = ""


# ── Common nested types ──────────────────────────────────────────────────


@dataclass
class Address(Model):
    city: str | None = None
    district: str | None = None
    street: str | None = None
    building: str | None = None
    address: str | None = None
    zipcode: str | None = None
    longitude: str | None = None
    latitude: str | None = None


@dataclass
class SenderBranchData(Model):
    register: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None


@dataclass
class SenderStaffData(Model):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


@dataclass
class InvoiceReceiverData(Model):
    register: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None


@dataclass
class Account(Model):
    """Bank account that receives (part of) a transaction."""

    account_bank_code: str
    account_number: str
    account_name: str
    account_currency: str
    iban_number: str = ""
    is_default: bool = False


@dataclass
class Transaction(Model):
    description: str
    amount: str
    accounts: list[Account] | None = None


@dataclass
class TaxEntry(Model):
    """A tax, discount or surcharge applied to an invoice line."""

    description: str
    amount: float
    tax_code: str | None = None
    discount_code: str | None = None
    surcharge_code: str | None = None
    note: str | None = None


@dataclass
class InvoiceLine(Model):
    line_description: str
    line_quantity: str
    line_unit_price: str
    tax_product_code: str | None = None
    note: str | None = None
    discounts: list[TaxEntry] | None = None
    surcharges: list[TaxEntry] | None = None
    taxes: list[TaxEntry] | None = None


@dataclass
class EbarimtInvoiceLine(Model):
    line_description: str
    line_quantity: str
    line_unit_price: str
    tax_product_code: str | None = None
    barcode: str | None = None
    note: str | None = None
    classification_code: str | None = None
    taxes: list[TaxEntry] | None = None


@dataclass
class Deeplink(Model):
    """Bank or wallet app link for paying an invoice."""

    name: str = ""
    description: str = ""
    logo: str = ""
    link: str = ""


# ── Invoice ──────────────────────────────────────────────────────────────


@dataclass
class CreateInvoiceRequest(Model):
    """Detailed invoice with optional branch, staff, receiver and line data.

    Empty ``invoice_code`` / ``callback_url`` are filled from the client config.
    """

    sender_invoice_no: str
    invoice_receiver_code: str
    invoice_description: str
    amount: float
    invoice_code: str = ""
    callback_url: str = ""
    sender_branch_code: str | None = None
    sender_branch_data: SenderBranchData | None = None
    sender_staff_data: SenderStaffData | None = None
    sender_staff_code: str | None = None
    invoice_receiver_data: InvoiceReceiverData | None = None
    enable_expiry: str | None = None
    allow_partial: bool | None = None
    minimum_amount: float | None = None
    allow_exceed: bool | None = None
    maximum_amount: float | None = None
    sender_terminal_code: str | None = None
    sender_terminal_data: dict | None = None
    allow_subscribe: bool | None = None
    subscription_interval: str | None = None
    subscription_webhook: str | None = None
    note: str | None = None
    transactions: list[Transaction] | None = None
    lines: list[InvoiceLine] | None = None


@dataclass
class CreateSimpleInvoiceRequest(Model):
    sender_invoice_no: str
    invoice_receiver_code: str
    invoice_description: str
    amount: float
    invoice_code: str = ""
    callback_url: str = ""
    sender_branch_code: str | None = None


@dataclass
class CreateEbarimtInvoiceRequest(Model):
    """Invoice that carries tax (ebarimt) line information."""

    sender_invoice_no: str
    invoice_receiver_code: str
    invoice_description: str
    tax_type: str
    district_code: str
    lines: list[EbarimtInvoiceLine]
    invoice_code: str = ""
    callback_url: str = ""
    sender_branch_code: str | None = None
    sender_staff_data: SenderStaffData | None = None
    sender_staff_code: str | None = None
    invoice_receiver_data: InvoiceReceiverData | None = None


@dataclass
class InvoiceResponse(Model):
    invoice_id: str = ""
    qr_text: str = ""
    qr_image: str = ""
    qpay_short_url: str = field(default="", metadata={"json": "qPay_shortUrl"})
    urls: list[Deeplink] = field(default_factory=list)


# ── Payment ──────────────────────────────────────────────────────────────


@dataclass
class Offset(Model):
    """Pagination window."""

    page_number: int
    page_limit: int


@dataclass
class PaymentCheckRequest(Model):
    object_type: str
    object_id: str
    offset: Offset | None = None


@dataclass
class CardTransaction(Model):
    card_type: str = ""
    is_cross_border: bool = False
    settlement_status: str = ""
    settlement_status_date: str = ""
    card_merchant_code: str | None = None
    card_terminal_code: str | None = None
    card_number: str | None = None
    amount: str | None = None
    transaction_amount: str | None = None
    currency: str | None = None
    transaction_currency: str | None = None
    date: str | None = None
    transaction_date: str | None = None
    status: str | None = None
    transaction_status: str | None = None


@dataclass
class P2PTransaction(Model):
    transaction_bank_code: str = ""
    account_bank_code: str = ""
    account_bank_name: str = ""
    account_number: str = ""
    status: str = ""
    amount: str = ""
    currency: str = ""
    settlement_status: str = ""


@dataclass
class PaymentCheckRow(Model):
    payment_id: str = ""
    payment_status: str = ""
    payment_amount: str = ""
    trx_fee: str = ""
    payment_currency: str = ""
    payment_wallet: str = ""
    payment_type: str = ""
    next_payment_date: str | None = None
    next_payment_datetime: str | None = None
    card_transactions: list[CardTransaction] = field(default_factory=list)
    p2p_transactions: list[P2PTransaction] = field(default_factory=list)


@dataclass
class PaymentCheckResponse(Model):
    count: int = 0
    paid_amount: float | None = None
    rows: list[PaymentCheckRow] = field(default_factory=list)


@dataclass
class PaymentDetail(Model):
    payment_id: str = ""
    payment_status: str = ""
    payment_fee: str = ""
    payment_amount: str = ""
    payment_currency: str = ""
    payment_date: str = ""
    payment_wallet: str = ""
    transaction_type: str = ""
    object_type: str = ""
    object_id: str = ""
    next_payment_date: str | None = None
    next_payment_datetime: str | None = None
    card_transactions: list[CardTransaction] = field(default_factory=list)
    p2p_transactions: list[P2PTransaction] = field(default_factory=list)


@dataclass
class PaymentListRequest(Model):
    object_type: str
    object_id: str
    start_date: str
    end_date: str
    offset: Offset


@dataclass
class PaymentListItem(Model):
    payment_id: str = ""
    payment_date: str = ""
    payment_status: str = ""
    payment_fee: str = ""
    payment_amount: str = ""
    payment_currency: str = ""
    payment_wallet: str = ""
    payment_name: str = ""
    payment_description: str = ""
    qr_code: str = ""
    paid_by: str = ""
    object_type: str = ""
    object_id: str = ""


@dataclass
class PaymentListResponse(Model):
    count: int = 0
    rows: list[PaymentListItem] = field(default_factory=list)


@dataclass
class PaymentCancelRequest(Model):
    callback_url: str | None = None
    note: str | None = None


@dataclass
class PaymentRefundRequest(Model):
    callback_url: str | None = None
    note: str | None = None


# ── Ebarimt ──────────────────────────────────────────────────────────────


@dataclass
class CreateEbarimtRequest(Model):
    """Issue an electronic tax receipt for a completed payment."""

    payment_id: str
    ebarimt_receiver_type: str
    ebarimt_receiver: str | None = None
    district_code: str | None = None
    classification_code: str | None = None


@dataclass
class EbarimtItem(Model):
    id: str = ""
    barimt_id: str = ""
    merchant_product_code: str | None = None
    tax_product_code: str = ""
    bar_code: str | None = None
    name: str = ""
    unit_price: str = ""
    quantity: str = ""
    amount: str = ""
    city_tax_amount: str = ""
    vat_amount: str = ""
    note: str | None = None
    created_by: str = ""
    created_date: str = ""
    updated_by: str = ""
    updated_date: str = ""
    status: bool = False


@dataclass
class EbarimtHistory(Model):
    id: str = ""
    barimt_id: str = ""
    ebarimt_receiver_type: str = ""
    ebarimt_receiver: str = ""
    ebarimt_register_no: str | None = None
    ebarimt_bill_id: str = ""
    ebarimt_date: str = ""
    ebarimt_mac_address: str = ""
    ebarimt_internal_code: str = ""
    ebarimt_bill_type: str = ""
    ebarimt_qr_data: str = ""
    ebarimt_lottery: str = ""
    ebarimt_lottery_msg: str | None = None
    ebarimt_error_code: str | None = None
    ebarimt_error_msg: str | None = None
    ebarimt_response_code: str | None = None
    ebarimt_response_msg: str | None = None
    note: str | None = None
    barimt_status: str = ""
    barimt_status_date: str = ""
    ebarimt_sent_email: str | None = None
    ebarimt_receiver_phone: str = ""
    tax_type: str = ""
    created_by: str = ""
    created_date: str = ""
    updated_by: str = ""
    updated_date: str = ""
    status: bool = False


@dataclass
class EbarimtResponse(Model):
    """Receipt returned when creating or canceling an ebarimt."""

    id: str = ""
    ebarimt_by: str = ""
    g_wallet_id: str = ""
    g_wallet_customer_id: str = ""
    ebarimt_receiver_type: str = ""
    ebarimt_receiver: str = ""
    ebarimt_district_code: str = ""
    ebarimt_bill_type: str = ""
    g_merchant_id: str = ""
    merchant_branch_code: str = ""
    merchant_terminal_code: str | None = None
    merchant_staff_code: str | None = None
    merchant_register_no: str = ""
    g_payment_id: str = ""
    paid_by: str = ""
    object_type: str = ""
    object_id: str = ""
    amount: str = ""
    vat_amount: str = ""
    city_tax_amount: str = ""
    ebarimt_qr_data: str = ""
    ebarimt_lottery: str = ""
    note: str | None = None
    barimt_status: str = ""
    barimt_status_date: str = ""
    ebarimt_sent_email: str | None = None
    ebarimt_receiver_phone: str = ""
    tax_type: str = ""
    merchant_tin: str | None = None
    ebarimt_receipt_id: str | None = None
    created_by: str = ""
    created_date: str = ""
    updated_by: str = ""
    updated_date: str = ""
    status: bool = False
    barimt_items: list[EbarimtItem] = field(default_factory=list)
    barimt_transactions: list[Any] = field(default_factory=list)
    barimt_histories: list[EbarimtHistory] = field(default_factory=list)

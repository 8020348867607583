import pytest

from qpay import (
    ErrorCode,
    Offset,
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentListRequest,
    PaymentRefundRequest,
    QPayAPIError,
)


@pytest.mark.asyncio
async def test_get_payment(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "GET",
        "/v2/payment/PAY_1",
        json={
            "payment_id": "PAY_1",
            "payment_status": "PAID",
            "payment_fee": "1.00",
            "payment_amount": "100.00",
            "payment_currency": "MNT",
            "payment_date": "2024-01-15T10:30:00",
            "payment_wallet": "qPay wallet",
            "transaction_type": "P2P",
            "object_type": "INVOICE",
            "object_id": "INV_1",
            "next_payment_date": None,
            "card_transactions": [],
            "p2p_transactions": [
                {
                    "transaction_bank_code": "050000",
                    "account_bank_code": "050000",
                    "account_bank_name": "Khan bank",
                    "account_number": "5000000000",
                    "status": "SUCCESS",
                    "amount": "100.00",
                    "currency": "MNT",
                    "settlement_status": "SETTLED",
                }
            ],
        },
    )

    payment = await client.get_payment("PAY_1")

    assert payment.payment_id == "PAY_1"
    assert payment.payment_status == "PAID"
    assert payment.next_payment_date is None
    assert payment.p2p_transactions[0].account_bank_name == "Khan bank"
    [call] = qpay_server.calls_to("/v2/payment/PAY_1")
    assert call.method == "GET"
    assert call.authorization == "Bearer access-abc"


@pytest.mark.asyncio
async def test_get_payment_not_found(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "GET",
        "/v2/payment/PAY_404",
        status=404,
        json={"error": "PAYMENT_NOTFOUND", "message": "Payment not found"},
    )

    with pytest.raises(QPayAPIError) as exc_info:
        await client.get_payment("PAY_404")

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == ErrorCode.PAYMENT_NOTFOUND


@pytest.mark.asyncio
async def test_check_payment(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "POST",
        "/v2/payment/check",
        json={
            "count": 1,
            "paid_amount": 100,
            "rows": [
                {
                    "payment_id": "PAY_1",
                    "payment_status": "PAID",
                    "payment_amount": "100.00",
                    "trx_fee": "0.00",
                    "payment_currency": "MNT",
                    "payment_wallet": "qPay wallet",
                    "payment_type": "P2P",
                    "card_transactions": [
                        {"card_type": "VISA", "is_cross_border": True, "settlement_status": ""}
                    ],
                    "p2p_transactions": [],
                }
            ],
        },
    )
    request = PaymentCheckRequest(
        object_type="INVOICE", object_id="INV_1", offset=Offset(page_number=1, page_limit=100)
    )

    result = await client.check_payment(request)

    assert result.count == 1
    assert result.paid_amount == 100
    assert result.rows[0].payment_id == "PAY_1"
    assert result.rows[0].card_transactions[0].is_cross_border is True
    [call] = qpay_server.calls_to("/v2/payment/check")
    assert call.json() == {
        "object_type": "INVOICE",
        "object_id": "INV_1",
        "offset": {"page_number": 1, "page_limit": 100},
    }


@pytest.mark.asyncio
async def test_check_payment_no_payment(qpay_server, client, authed) -> None:
    qpay_server.add_response("POST", "/v2/payment/check", json={"count": 0, "rows": []})

    result = await client.check_payment(PaymentCheckRequest("INVOICE", "INV_1"))

    assert result.count == 0
    assert result.paid_amount is None
    assert result.rows == []
    assert "offset" not in qpay_server.calls_to("/v2/payment/check")[0].json()


@pytest.mark.asyncio
async def test_list_payments(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "POST",
        "/v2/payment/list",
        json={
            "count": 2,
            "rows": [
                {"payment_id": "PAY_1", "payment_status": "PAID", "payment_amount": "100"},
                {"payment_id": "PAY_2", "payment_status": "PAID", "payment_amount": "200"},
            ],
        },
    )
    request = PaymentListRequest(
        object_type="MERCHANT",
        object_id="MERCHANT_1",
        start_date="2024-01-01",
        end_date="2024-01-31",
        offset=Offset(1, 20),
    )

    result = await client.list_payments(request)

    assert result.count == 2
    assert [row.payment_id for row in result.rows] == ["PAY_1", "PAY_2"]
    body = qpay_server.calls_to("/v2/payment/list")[0].json()
    assert body["start_date"] == "2024-01-01"
    assert body["offset"] == {"page_number": 1, "page_limit": 20}


@pytest.mark.asyncio
async def test_list_payments_server_error(qpay_server, client, authed) -> None:
    qpay_server.add_response("POST", "/v2/payment/list", status=502, text="Bad gateway")
    request = PaymentListRequest("MERCHANT", "M", "2024-01-01", "2024-01-31", Offset(1, 20))

    with pytest.raises(QPayAPIError) as exc_info:
        await client.list_payments(request)

    assert exc_info.value.code == "Bad Gateway"
    assert exc_info.value.message == "Bad gateway"


@pytest.mark.asyncio
async def test_cancel_payment(qpay_server, client, authed) -> None:
    qpay_server.add_response("DELETE", "/v2/payment/cancel/PAY_1", text="")

    await client.cancel_payment(
        "PAY_1", PaymentCancelRequest(callback_url="https://example.com/cb", note="duplicate")
    )

    [call] = qpay_server.calls_to("/v2/payment/cancel/PAY_1")
    assert call.method == "DELETE"
    assert call.json() == {"callback_url": "https://example.com/cb", "note": "duplicate"}


@pytest.mark.asyncio
async def test_cancel_payment_without_body(qpay_server, client, authed) -> None:
    qpay_server.add_response("DELETE", "/v2/payment/cancel/PAY_1", text="")

    await client.cancel_payment("PAY_1")

    assert qpay_server.calls_to("/v2/payment/cancel/PAY_1")[0].body == ""


@pytest.mark.asyncio
async def test_cancel_payment_already_canceled(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "DELETE",
        "/v2/payment/cancel/PAY_1",
        status=400,
        json={"error": "PAYMENT_ALREADY_CANCELED", "message": "Payment already canceled"},
    )

    with pytest.raises(QPayAPIError) as exc_info:
        await client.cancel_payment("PAY_1", PaymentCancelRequest())

    assert exc_info.value.code == ErrorCode.PAYMENT_ALREADY_CANCELED


@pytest.mark.asyncio
async def test_refund_payment(qpay_server, client, authed) -> None:
    qpay_server.add_response("DELETE", "/v2/payment/refund/PAY_1", text="")

    await client.refund_payment("PAY_1", PaymentRefundRequest(note="customer request"))

    [call] = qpay_server.calls_to("/v2/payment/refund/PAY_1")
    assert call.method == "DELETE"
    assert call.json() == {"note": "customer request"}


@pytest.mark.asyncio
async def test_refund_payment_not_paid(qpay_server, client, authed) -> None:
    qpay_server.add_response(
        "DELETE",
        "/v2/payment/refund/PAY_1",
        status=400,
        json={"error": "PAYMENT_NOT_PAID", "message": "Payment not paid"},
    )

    with pytest.raises(QPayAPIError) as exc_info:
        await client.refund_payment("PAY_1")

    assert exc_info.value.code == ErrorCode.PAYMENT_NOT_PAID

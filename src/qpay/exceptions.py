"""Exception hierarchy for the QPay client."""


class QPayError(Exception):
    """Base exception for all QPay errors."""


class QPayConfigError(QPayError):
    """Missing or invalid client configuration."""


class QPayEncodeError(QPayError):
    """A request body could not be serialized to JSON."""


class QPayDecodeError(QPayError):
    """A successful response carried a body that could not be decoded."""


class QPayAPIError(QPayError):
    """Non-2xx response from the QPay API.

    ``code`` is the server's symbolic error (see :class:`qpay.constants.ErrorCode`),
    falling back to the HTTP reason phrase. ``message`` falls back to the
    response body text. ``response_body`` is that text decoded as UTF-8, with
    invalid bytes replaced; ``raw_body`` keeps the exact bytes received.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        response_body: str = "",
        raw_body: bytes = b"",
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.response_body = response_body
        self.raw_body = raw_body
        super().__init__(f"{code} - {message} (status {status_code})")

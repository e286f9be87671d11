"""HTTP adapter – MiaApiClient for the MIA QR and Request to Pay APIs."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from maib_mia.adapters.http.client import HttpxHttpClient
from maib_mia.adapters.http.envelope import unwrap_response
from maib_mia.application.endpoints import (
    AUTH_TOKEN_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    Operation,
    endpoint_for,
    render_path,
    validate_required_fields,
)
from maib_mia.config.settings import MiaSettings
from maib_mia.kernel.errors import AuthError, MiaError, ValidationError
from maib_mia.observability.logging import get_logger

logger = get_logger(__name__)

__all__ = ["MiaApiClient"]


class MiaApiClient(HttpxHttpClient):
    """Async client for the maib MIA merchant API.

    One request per call, no retries and no token caching: obtain a token
    with :meth:`generate_token` and pass it to every operation.

    Usage::

        async with MiaApiClient(SANDBOX_BASE_URL) as client:
            token = (await client.generate_token(client_id, client_secret))["accessToken"]
            qr = await client.qr_create({...}, token)
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self.base_url = base_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: MiaSettings, **kwargs: Any) -> "MiaApiClient":
        return cls(settings.base_url, settings.timeout, **kwargs)

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    @staticmethod
    def _auth_headers(token: str | None) -> dict[str, str]:
        if not token:
            raise AuthError("Access token is required")
        return {"Authorization": f"Bearer {token}"}

    async def generate_token(self, client_id: str, client_secret: str) -> dict[str, Any]:
        """Exchange merchant credentials for an access token.

        Returns the ``result`` object, e.g.
        ``{"accessToken": "...", "expiresIn": 300, "tokenType": "Bearer"}``.
        """
        if not client_id or not client_secret:
            raise ValidationError("Client ID and Client Secret are required")
        logger.debug("mia_request", operation="auth_token", method="POST", path=AUTH_TOKEN_PATH)
        response = await self.post(
            AUTH_TOKEN_PATH,
            json={"clientId": client_id, "clientSecret": client_secret},
        )
        logger.debug("mia_response", operation="auth_token", status_code=response.status_code)
        return unwrap_response(response)

    async def execute(
        self,
        operation: Operation | str,
        token: str | None,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        path: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send *operation* and return the unwrapped ``result``.

        Args:
            operation: Member of :class:`Operation` (or its string value).
            token: Bearer access token.
            body: JSON body; checked against the operation's required fields.
            params: Query string parameters.
            path: Values for the ``:name`` placeholders of the path template.

        Raises:
            AuthError: *token* is empty.
            ValidationError: Required body field or path identifier missing.
            NetworkError: Transport failure.
            ApiError: The API answered with an ``errors`` envelope.
            ProtocolError: The answer is not a recognisable envelope.
        """
        endpoint = endpoint_for(operation)
        headers = self._auth_headers(token)
        validate_required_fields(body, endpoint.required_fields)
        url = render_path(endpoint.path, path)

        kwargs: dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = dict(body)
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}

        op_name = Operation(operation).value
        logger.debug("mia_request", operation=op_name, method=endpoint.method, path=url)
        try:
            response = await self._request(endpoint.method, url, **kwargs)
            logger.debug("mia_response", operation=op_name, status_code=response.status_code)
            return unwrap_response(response)
        except MiaError as exc:
            logger.warning("mia_failure", operation=op_name, **exc.log_fields())
            raise

    # ------------------------------------------------------------------
    # MIA QR
    # ------------------------------------------------------------------

    async def qr_create(self, data: Mapping[str, Any], token: str) -> Any:
        """Create a static or dynamic QR code."""
        return await self.execute(Operation.QR_CREATE, token, body=data)

    async def qr_create_hybrid(self, data: Mapping[str, Any], token: str) -> Any:
        return await self.execute(Operation.QR_CREATE_HYBRID, token, body=data)

    async def qr_create_extension(self, qr_id: str, data: Mapping[str, Any], token: str) -> Any:
        """Attach a new extension (amount, order) to a hybrid QR code."""
        return await self.execute(Operation.QR_CREATE_EXTENSION, token, body=data, path={"qrId": qr_id})

    async def qr_details(self, qr_id: str, token: str) -> Any:
        return await self.execute(Operation.QR_DETAILS, token, path={"qrId": qr_id})

    async def qr_cancel(self, qr_id: str, data: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.QR_CANCEL, token, body=data, path={"qrId": qr_id})

    async def qr_cancel_extension(self, qr_id: str, data: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.QR_CANCEL_EXTENSION, token, body=data, path={"qrId": qr_id})

    async def qr_list(self, params: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.QR_LIST, token, params=params)

    async def test_pay(self, data: Mapping[str, Any], token: str) -> Any:
        """Simulate a payment for a QR code (sandbox only)."""
        return await self.execute(Operation.TEST_PAY, token, body=data)

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    async def payment_details(self, pay_id: str, token: str) -> Any:
        return await self.execute(Operation.PAYMENT_DETAILS, token, path={"payId": pay_id})

    async def payment_refund(self, pay_id: str, data: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.PAYMENT_REFUND, token, body=data, path={"payId": pay_id})

    async def payment_list(self, params: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.PAYMENT_LIST, token, params=params)

    # ------------------------------------------------------------------
    # Request to Pay
    # ------------------------------------------------------------------

    async def rtp_create(self, data: Mapping[str, Any], token: str) -> Any:
        return await self.execute(Operation.RTP_CREATE, token, body=data)

    async def rtp_status(self, rtp_id: str, token: str) -> Any:
        return await self.execute(Operation.RTP_STATUS, token, path={"rtpId": rtp_id})

    async def rtp_cancel(self, rtp_id: str, data: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.RTP_CANCEL, token, body=data, path={"rtpId": rtp_id})

    async def rtp_list(self, params: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.RTP_LIST, token, params=params)

    async def rtp_refund(self, pay_id: str, data: Mapping[str, Any] | None, token: str) -> Any:
        return await self.execute(Operation.RTP_REFUND, token, body=data, path={"payId": pay_id})

    async def rtp_test_accept(self, rtp_id: str, data: Mapping[str, Any], token: str) -> Any:
        """Simulate the payer accepting a request to pay (sandbox only)."""
        return await self.execute(Operation.RTP_TEST_ACCEPT, token, body=data, path={"rtpId": rtp_id})

    async def rtp_test_reject(self, rtp_id: str, token: str) -> Any:
        """Simulate the payer rejecting a request to pay (sandbox only)."""
        return await self.execute(Operation.RTP_TEST_REJECT, token, path={"rtpId": rtp_id})

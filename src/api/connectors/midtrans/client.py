"""Cliente HTTP especializado para o gateway Midtrans.

Tratamento específico:
- Autenticação Basic com a server key (senha vazia)
- Core API responde HTTP 200 com `status_code: "404"` para pedido
  inexistente; normalizado para HttpError 404
- Logging sem server key e sem dados do comprador
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.payload_builders.midtrans import build_basic_auth_header, build_snap_transaction_payload
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.http_client import PaymentGatewayProtocol

if TYPE_CHECKING:
    import httpx

    from app.domain.payment_requests import SnapTokenRequest
    from config.settings import MidtransSettings

logger = logging.getLogger(__name__)

NOT_FOUND_STATUS_CODE = "404"


class MidtransClient(HttpClient, PaymentGatewayProtocol):
    """Cliente do gateway (Snap + Core API)."""

    def __init__(
        self,
        settings: MidtransSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            HttpClientConfig(
                timeout_seconds=settings.token_timeout_seconds,
                default_headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            ),
            transport=transport,
        )
        self._settings = settings

    def _auth_headers(self) -> dict[str, str]:
        if not self._settings.server_key:
            raise ValueError("MIDTRANS_SERVER_KEY é obrigatório para chamadas ao gateway")
        return {"Authorization": build_basic_auth_header(self._settings.server_key)}

    async def create_snap_token(self, request: SnapTokenRequest) -> dict[str, Any]:
        """Cria transação Snap e retorna {token, redirect_url}."""
        response = await self.post(
            self._settings.snap_url,
            json=build_snap_transaction_payload(request),
            headers=self._auth_headers(),
            timeout_seconds=self._settings.token_timeout_seconds,
        )
        data = _json_object(response)
        if not data.get("token"):
            raise HttpError("snap_token_missing", status_code=response.status_code, payload=data)
        logger.info("snap_token_created", extra={"order_id": request.order_id})
        return data

    async def get_transaction_status(self, order_id: str) -> dict[str, Any]:
        """Consulta GET /v2/{order_id}/status."""
        url = f"{self._settings.core_api_url}/v2/{quote(order_id, safe='')}/status"
        response = await self.get(
            url,
            headers=self._auth_headers(),
            timeout_seconds=self._settings.status_timeout_seconds,
        )
        data = _json_object(response)
        if str(data.get("status_code", "")) == NOT_FOUND_STATUS_CODE:
            raise HttpError("http_status_404", status_code=404, payload=data)
        return data


def _json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise HttpError("invalid_json_response", status_code=response.status_code) from exc
    if not isinstance(data, dict):
        raise HttpError("invalid_json_response", status_code=response.status_code)
    return data

"""Cliente HTTP base para provedores externos (httpx).

Sem retry: cada chamada é feita uma única vez, com timeout fixo por
operação. Falhas viram HttpError sem dados sensíveis (sem headers).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP.

    Attributes:
        status_code: Status HTTP do provedor (None em timeout/conexão)
        payload: Corpo de erro do provedor (JSON ou texto), quando houver
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def is_timeout(self) -> bool:
        return str(self) == "http_timeout"


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Configuração base (timeout padrão, headers).
        transport: Transport httpx opcional (ex.: MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout_seconds: float | None = None,
    ) -> httpx.Response:
        return await self._request("POST", url, json=json, headers=headers, timeout_seconds=timeout_seconds)

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout_seconds: float | None = None,
    ) -> httpx.Response:
        return await self._request("GET", url, headers=headers, timeout_seconds=timeout_seconds)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None,
        timeout_seconds: float | None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        timeout = timeout_seconds or self._config.timeout_seconds
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=timeout,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method, "timeout": timeout})
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
        if response.is_error:
            logger.warning(
                "http_error_status",
                extra={"method": method, "status_code": response.status_code, "latency_ms": latency_ms},
            )
            raise HttpError(
                f"http_status_{response.status_code}",
                status_code=response.status_code,
                payload=_safe_body(response),
            )

        logger.debug(
            "http_request_ok",
            extra={"method": method, "status_code": response.status_code, "latency_ms": latency_ms},
        )
        return response


def _safe_body(response: httpx.Response) -> Any:
    """Extrai o corpo de erro como JSON, com fallback para texto."""
    try:
        return response.json()
    except ValueError:
        return response.text or None

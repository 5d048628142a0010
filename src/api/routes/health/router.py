"""Endpoints de informação, liveness e readiness."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.endpoints import SERVICE_ENDPOINTS
from app.bootstrap.container import ServiceContainer
from app.bootstrap.dependencies import get_container
from app.protocols.payment_record_store import PaymentRecordStoreProtocol

router = APIRouter()

RECORD_OWNERSHIP_NOTE = "Payment records are created by frontend, backend only updates status"


class InfoResponse(BaseModel):
    """Resposta da rota raiz."""

    message: str = "Payment Backend Server"
    status: str = "RUNNING"
    firebase_enabled: bool
    email_config_ok: bool
    midtrans_config_ok: bool
    note: str = RECORD_OWNERSHIP_NOTE
    endpoints: list[str]


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    firebase_enabled: bool
    email_config_ok: bool
    midtrans_config_ok: bool
    timestamp: str


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "disabled", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/", response_model=InfoResponse)
async def service_info(container: ServiceContainer = Depends(get_container)) -> InfoResponse:
    runtime = container.runtime
    return InfoResponse(
        firebase_enabled=runtime.firebase_enabled,
        email_config_ok=runtime.email_config_ok,
        midtrans_config_ok=runtime.midtrans_config_ok,
        endpoints=list(SERVICE_ENDPOINTS),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(container: ServiceContainer = Depends(get_container)) -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    runtime = container.runtime
    return HealthResponse(
        status="OK",
        firebase_enabled=runtime.firebase_enabled,
        email_config_ok=runtime.email_config_ok,
        midtrans_config_ok=runtime.midtrans_config_ok,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(container: ServiceContainer = Depends(get_container)) -> JSONResponse:
    """Readiness probe: o document store, quando habilitado, precisa responder."""
    firestore_check = await _check_record_store(container.record_store)
    ready = firestore_check.status != "failed"

    payload = {
        "success": ready,
        "status": "ready" if ready else "not_ready",
        "checks": {"firestore": firestore_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_record_store(store: PaymentRecordStoreProtocol | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="disabled", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(store.ping(), timeout=3.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))

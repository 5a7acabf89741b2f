"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import os
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import (
    BaseSettings,
    ContactSettings,
    get_base_settings,
    get_contact_settings,
)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check(
    base: Annotated[BaseSettings, Depends(get_base_settings)],
) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=base.service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    contact: Annotated[ContactSettings, Depends(get_contact_settings)],
) -> JSONResponse:
    """Readiness probe: backend do rate limit e diretório de log de e-mail."""
    rate_limit_check, email_log_check = await asyncio.gather(
        _check_rate_limit_backend(contact),
        _timed(_directory_writable, Path(contact.email_log_dir)),
    )
    ready = rate_limit_check.status == "ok" and email_log_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "rate_limit": rate_limit_check.as_dict(),
            "email_log": email_log_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_rate_limit_backend(contact: ContactSettings) -> DependencyCheck:
    if contact.rate_limit_backend == "memory":
        return DependencyCheck(status="ok")
    if contact.rate_limit_backend == "redis":
        return await _timed(_ping_redis)
    return await _timed(_directory_writable, Path(contact.rate_limit_dir))


async def _timed(check: Any, *args: Any) -> DependencyCheck:
    started_at = time.perf_counter()
    try:
        ok = await asyncio.wait_for(asyncio.to_thread(check, *args), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    if not ok:
        return DependencyCheck(status="failed", error="not_writable")
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _ping_redis() -> bool:
    from app.bootstrap.clients import create_redis_client

    return bool(create_redis_client().ping())


def _directory_writable(directory: Path) -> bool:
    """Diretório existente e gravável, ou criável a partir do ancestral."""
    candidate = directory
    while not candidate.exists():
        if candidate.parent == candidate:
            return False
        candidate = candidate.parent
    return candidate.is_dir() and os.access(candidate, os.W_OK | os.X_OK)

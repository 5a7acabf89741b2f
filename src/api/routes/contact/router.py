"""Endpoint do formulário de contato.

Endpoints:
- OPTIONS /api/contact: preflight CORS (204)
- POST /api/contact: envio form-encoded
- demais métodos: 405

CORS é aplicado por rota: Access-Control-Allow-Origin só é ecoado quando
a origem coincide exatamente com ALLOWED_ORIGINS.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.bootstrap import get_submit_contact_use_case
from app.observability import (
    CORRELATION_ID_HEADER,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from app.use_cases.contact import ContactResult, SubmitContactUseCase
from config.settings import ContactSettings, get_contact_settings

logger = logging.getLogger(__name__)

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def cors_headers(origin: str | None, settings: ContactSettings) -> dict[str, str]:
    """Cabeçalhos CORS da rota (origem ecoada só se permitida)."""
    headers = {
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Vary": "Origin",
    }
    if origin and settings.is_origin_allowed(origin):
        headers["Access-Control-Allow-Origin"] = origin
    return headers


def resolve_client_address(request: Request, trust_forwarded_for: bool) -> str:
    """Endereço do cliente; primeiro X-Forwarded-For quando confiável."""
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else "unknown"


async def _read_form(request: Request) -> dict[str, str]:
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


@router.api_route("", methods=ALL_METHODS, response_model=None)
async def contact(
    request: Request,
    use_case: Annotated[SubmitContactUseCase, Depends(get_submit_contact_use_case)],
    settings: Annotated[ContactSettings, Depends(get_contact_settings)],
) -> Response:
    """Recebe o formulário e responde com JSON {success, message|errors}."""
    correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    token = set_correlation_id(correlation_id)
    try:
        headers = cors_headers(request.headers.get("origin"), settings)
        headers[CORRELATION_ID_HEADER] = correlation_id

        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)

        if request.method != "POST":
            result = ContactResult.method_not_allowed()
            headers["Allow"] = ALLOW_METHODS
            return JSONResponse(result.body, status_code=result.status_code, headers=headers)

        try:
            form = await _read_form(request)
            client_address = resolve_client_address(request, settings.trust_forwarded_for)
            result = await asyncio.to_thread(use_case.execute, form, client_address)
        except Exception:
            logger.exception("contact_request_failed")
            result = ContactResult.delivery_failed()

        return JSONResponse(result.body, status_code=result.status_code, headers=headers)
    finally:
        reset_correlation_id(token)

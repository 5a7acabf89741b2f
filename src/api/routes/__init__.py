"""Rotas HTTP da API: adapters de entrada.

- routes/contact/: endpoint do formulário de contato (/api/contact)
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

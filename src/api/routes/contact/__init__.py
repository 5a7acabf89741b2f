"""Rotas do formulário de contato."""

from api.routes.contact.router import router

__all__ = ["router"]

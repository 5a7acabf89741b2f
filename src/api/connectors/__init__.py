"""Connectors: adapters de borda do lado cliente.

Estrutura:
- contact/: controller do formulário de contato (httpx)
"""

__all__: list[str] = []

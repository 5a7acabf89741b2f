"""Validators: validação e sanitização de entradas da API.

Estrutura:
- contact/: formulário de contato (regras compartilhadas com o cliente)
"""

__all__: list[str] = []

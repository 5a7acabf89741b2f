"""API: camada de borda.

Responsabilidades:
- Receber o formulário de contato via HTTP
- Validar e sanitizar campos (regras compartilhadas com o cliente)
- Cliente do formulário (connectors/) que espelha as regras de UX

Subpastas:
- connectors/: cliente HTTP do formulário (controller)
- validators/: validação de campos e limites
- routes/: endpoints HTTP (contato, health)

NÃO PODE conter: regras de rate limit, entrega de e-mail, orquestração de use cases.
"""

"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: caso de uso de envio do formulário
- services/: Mailer, EmailRenderer e RateLimiter
- infra/: implementações concretas de IO (SMTP, arquivos, Redis)
- protocols/: contratos/interfaces
- domain/: modelos do domínio (Submission, EmailMessage, RateRecord)
- observability/: correlation id e métricas
- templates/: template HTML do e-mail

Padrão: app executa; api adapta; fsm governa a conversa SMTP; utils apoia.
"""

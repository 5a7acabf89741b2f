"""Limites dos campos do formulário de contato."""

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 2000

PHONE_MAX_LENGTH = 30

# Campos obrigatórios, na ordem em que os erros são reportados
REQUIRED_FIELDS = ("name", "email", "subject", "message")

# Campo oculto que usuários reais nunca preenchem
HONEYPOT_FIELD = "website"

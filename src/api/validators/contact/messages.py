"""Mensagens de erro (pt-BR) exibidas por campo."""

NAME_REQUIRED = "Por favor, informe seu nome."
NAME_TOO_SHORT = "O nome deve ter pelo menos 3 caracteres."
NAME_TOO_LONG = "O nome deve ter no máximo 100 caracteres."

EMAIL_REQUIRED = "Por favor, informe seu e-mail."
EMAIL_INVALID = "Informe um e-mail válido."

SUBJECT_REQUIRED = "Selecione um assunto."
SUBJECT_INVALID = "Assunto inválido."

MESSAGE_REQUIRED = "Escreva sua mensagem."
MESSAGE_TOO_SHORT = "A mensagem deve ter pelo menos 10 caracteres."
MESSAGE_TOO_LONG = "A mensagem deve ter no máximo 2000 caracteres."

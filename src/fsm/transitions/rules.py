"""
Regras de transição válidas entre estados da sequência SMTP.

O grafo é linear, com um único desvio opcional (STARTTLS → EHLO_TLS)
e uma aresta para FAILED a partir de todo estado não-terminal.
"""

from fsm.states.smtp import TERMINAL_STATES, SmtpState

TransitionMap = dict[SmtpState, frozenset[SmtpState]]

VALID_TRANSITIONS: TransitionMap = {
    SmtpState.CONNECT: frozenset({SmtpState.GREETING, SmtpState.FAILED}),
    SmtpState.GREETING: frozenset({SmtpState.EHLO, SmtpState.FAILED}),
    # EHLO: segue para STARTTLS (modo tls) ou direto para autenticação
    SmtpState.EHLO: frozenset({
        SmtpState.STARTTLS,
        SmtpState.AUTH_LOGIN,
        SmtpState.FAILED,
    }),
    SmtpState.STARTTLS: frozenset({SmtpState.EHLO_TLS, SmtpState.FAILED}),
    SmtpState.EHLO_TLS: frozenset({SmtpState.AUTH_LOGIN, SmtpState.FAILED}),
    SmtpState.AUTH_LOGIN: frozenset({SmtpState.AUTH_USERNAME, SmtpState.FAILED}),
    SmtpState.AUTH_USERNAME: frozenset({SmtpState.AUTH_PASSWORD, SmtpState.FAILED}),
    SmtpState.AUTH_PASSWORD: frozenset({SmtpState.MAIL_FROM, SmtpState.FAILED}),
    SmtpState.MAIL_FROM: frozenset({SmtpState.RCPT_TO, SmtpState.FAILED}),
    SmtpState.RCPT_TO: frozenset({SmtpState.DATA, SmtpState.FAILED}),
    SmtpState.DATA: frozenset({SmtpState.BODY_TERMINATE, SmtpState.FAILED}),
    SmtpState.BODY_TERMINATE: frozenset({SmtpState.QUIT, SmtpState.FAILED}),
    # Após a mensagem aceita, QUIT sempre conclui
    SmtpState.QUIT: frozenset({SmtpState.DONE}),
    SmtpState.DONE: frozenset(),
    SmtpState.FAILED: frozenset(),
}


def get_valid_targets(state: SmtpState) -> frozenset[SmtpState]:
    """Retorna os estados de destino permitidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SmtpState, to_state: SmtpState) -> bool:
    """Verifica se uma transição é permitida pelo grafo."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def next_state(state: SmtpState, use_starttls: bool) -> SmtpState:
    """
    Retorna o sucessor de um estado no caminho feliz.

    Args:
        state: Estado atual (não-terminal)
        use_starttls: Se a sessão faz upgrade via STARTTLS

    Returns:
        Próximo estado da sequência

    Raises:
        ValueError: Se o estado for terminal
    """
    if state in TERMINAL_STATES:
        raise ValueError(f"Estado {state.name} é terminal")
    if state is SmtpState.EHLO:
        return SmtpState.STARTTLS if use_starttls else SmtpState.AUTH_LOGIN
    if state is SmtpState.QUIT:
        return SmtpState.DONE
    targets = get_valid_targets(state) - {SmtpState.FAILED}
    (target,) = targets
    return target


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in SmtpState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        if VALID_TRANSITIONS.get(state):
            errors.append(f"Estado terminal {state.name} não deveria ter transições")

    for from_state, targets in VALID_TRANSITIONS.items():
        if from_state in TERMINAL_STATES or from_state is SmtpState.QUIT:
            continue
        if SmtpState.FAILED not in targets:
            errors.append(f"Estado {from_state.name} sem transição para FAILED")

    return errors

"""Protocolos de domínio para stores de rate limit.

Interfaces leves (ABCs) dependidas pelo caso de uso de contato.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class RateLimitStoreProtocol(ABC):
    """Contrato de store com janela deslizante por chave.

    Métodos canônicos:
    - count(key, window_seconds, now) -> int
      Tentativas estritamente dentro da janela (somente leitura).
    - try_acquire(key, limit, window_seconds, now) -> bool
      Check-and-append atômico: registra `now` e retorna True se ainda há
      espaço; retorna False sem registrar quando o limite já foi atingido.
    - purge(window_seconds, now) -> int
      Remove registros sem tentativas na janela.
    """

    @abstractmethod
    def count(self, key: str, window_seconds: float, now: float) -> int:
        """Conta tentativas de `key` com timestamp > now - window_seconds.

        Estado ausente ou corrompido conta como zero tentativas.
        """

    @abstractmethod
    def try_acquire(
        self,
        key: str,
        limit: int,
        window_seconds: float,
        now: float,
    ) -> bool:
        """Registra uma tentativa se a contagem na janela for < limit.

        Args:
            key: Chave opaca do cliente (hash do endereço)
            limit: Máximo de tentativas na janela
            window_seconds: Tamanho da janela deslizante
            now: Timestamp unix atual

        Returns:
            True se registrou; False se o limite já estava atingido.
        """

    @abstractmethod
    def purge(self, window_seconds: float, now: float) -> int:
        """Remove registros expirados e retorna quantos foram removidos."""

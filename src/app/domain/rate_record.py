"""RateRecord - tentativas de envio de um cliente dentro da janela.

Formato persistido: {"attempts": [unix_timestamps]}.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RateRecord(BaseModel):
    """Sequência ordenada de timestamps de tentativas de envio."""

    attempts: list[float] = Field(default_factory=list)

    def pruned(self, window_seconds: float, now: float) -> RateRecord:
        """Retorna cópia só com tentativas estritamente dentro da janela.

        Uma tentativa em exatamente `now - window_seconds` fica de fora.
        """
        cutoff = now - window_seconds
        return RateRecord(attempts=[ts for ts in self.attempts if ts > cutoff])

    def with_attempt(self, now: float) -> RateRecord:
        """Retorna cópia com a tentativa `now` anexada."""
        return RateRecord(attempts=[*self.attempts, now])

    @property
    def count(self) -> int:
        return len(self.attempts)

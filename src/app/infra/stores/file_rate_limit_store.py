"""File Rate Limit Store: um arquivo JSON por cliente.

Formato: {"attempts": [unix_timestamps]} em
`<diretório>/mesa_contato_rate_<key>.json`.

Concorrência: o check-and-append roda sob `fcntl.flock` exclusivo em um
arquivo de lock por chave; a escrita é atômica (arquivo temporário +
os.replace), então leituras sem lock nunca veem JSON parcial.

Contrato de Keys:
    Keys devem ser hashes/IDs opacos ([A-Za-z0-9_-]). Nunca o IP em claro.
"""

from __future__ import annotations

import contextlib
import fcntl
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.rate_record import RateRecord
from app.protocols.rate_limit_store import RateLimitStoreProtocol
from utils.errors import RateLimitStoreError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

FILE_PREFIX = "mesa_contato_rate_"
_SAFE_KEY = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


class FileRateLimitStore(RateLimitStoreProtocol):
    """Store de rate limit baseado em arquivos locais.

    Args:
        directory: Diretório dos arquivos (criado se ausente)
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            msg = "Chave de rate limit inválida"
            raise ValueError(msg)
        return self._directory / f"{FILE_PREFIX}{key}.json"

    def _lock_path(self, key: str) -> Path:
        return self._directory / f"{FILE_PREFIX}{key}.lock"

    @contextlib.contextmanager
    def _locked(self, key: str) -> Iterator[None]:
        """Lock exclusivo entre processos/threads para a chave."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            lock_file = open(self._lock_path(key), "a+")  # noqa: SIM115
        except OSError as exc:
            raise RateLimitStoreError("Falha ao abrir lock de rate limit") from exc
        try:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            yield
        finally:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
            lock_file.close()

    def _read(self, path: Path) -> RateRecord:
        """Lê o registro; ausente ou corrompido = nenhuma tentativa."""
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return RateRecord()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "rate_limit_state_corrupted",
                extra={"file": path.name, "error_type": type(exc).__name__},
            )
            return RateRecord()

        try:
            return RateRecord.model_validate_json(raw)
        except ValidationError:
            logger.warning(
                "rate_limit_state_corrupted",
                extra={"file": path.name, "error_type": "ValidationError"},
            )
            return RateRecord()

    def _write(self, path: Path, record: RateRecord) -> None:
        """Escrita atômica via arquivo temporário no mesmo diretório."""
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".tmp_", suffix=".json")
        except OSError as exc:
            raise RateLimitStoreError("Falha ao gravar estado de rate limit") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(record.model_dump_json())
            os.replace(tmp_name, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise RateLimitStoreError("Falha ao gravar estado de rate limit") from exc

    def count(self, key: str, window_seconds: float, now: float) -> int:
        return self._read(self._path(key)).pruned(window_seconds, now).count

    def try_acquire(
        self,
        key: str,
        limit: int,
        window_seconds: float,
        now: float,
    ) -> bool:
        path = self._path(key)
        with self._locked(key):
            record = self._read(path).pruned(window_seconds, now)
            if record.count >= limit:
                return False
            self._write(path, record.with_attempt(now))
            return True

    def purge(self, window_seconds: float, now: float) -> int:
        """Remove arquivos cujas tentativas saíram todas da janela."""
        if not self._directory.is_dir():
            return 0

        removed = 0
        for path in self._directory.glob(f"{FILE_PREFIX}*.json"):
            key = path.name[len(FILE_PREFIX):-len(".json")]
            if not _SAFE_KEY.match(key):
                continue
            with self._locked(key):
                if self._read(path).pruned(window_seconds, now).count:
                    continue
                with contextlib.suppress(FileNotFoundError):
                    path.unlink()
                    removed += 1
            with contextlib.suppress(FileNotFoundError):
                self._lock_path(key).unlink()

        if removed:
            logger.info("rate_limit_files_purged", extra={"removed": removed})
        return removed

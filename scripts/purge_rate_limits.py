#!/usr/bin/env python3
"""Remove registros de rate limit expirados e logs de e-mail antigos.

Uso:
    python scripts/purge_rate_limits.py
    python scripts/purge_rate_limits.py --email-logs-days 30

Usa as mesmas variaveis de ambiente do servico (RATE_LIMIT_BACKEND,
RATE_LIMIT_DIR, EMAIL_LOG_DIR, ...).
"""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

from app.bootstrap import get_rate_limit_store, initialize_app
from app.infra.mail import EmailFileLog
from config.settings import get_contact_settings

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class PurgeStats:
    rate_limit_records: int = 0
    email_logs: int = 0


def purge(email_logs_days: int | None, now: float | None = None) -> PurgeStats:
    now = time.time() if now is None else now
    contact = get_contact_settings()

    records = get_rate_limit_store().purge(contact.rate_limit_window_seconds, now)

    email_logs = 0
    if email_logs_days is not None:
        email_logs = EmailFileLog(contact.email_log_dir).purge_older_than(
            email_logs_days * SECONDS_PER_DAY, now
        )

    return PurgeStats(rate_limit_records=records, email_logs=email_logs)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--email-logs-days",
        type=int,
        default=None,
        help="Remove logs de e-mail com mais de N dias. Se omitido, nao remove.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_app()
    stats = purge(args.email_logs_days)
    print(
        f"rate_limit_records={stats.rate_limit_records} "
        f"email_logs={stats.email_logs}"
    )


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
import sys
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console

from hostprobe.config import settings
from hostprobe.models import ProbeConfig
from hostprobe.runner import run_report

logger = logging.getLogger(__name__)

PROG = "hostprobe"
USAGE = f"Usage: {PROG} [-d duration_in_seconds] <ip_or_dns_name>"


class ConfigurationError(ValueError):
    pass


def parse_args(argv: Sequence[str], default_duration: int | None = None) -> ProbeConfig:
    """
    Accepts ``[-d <seconds>] <ip-or-dns>``.
    The ``-d`` form is only recognised when three arguments are present;
    otherwise the first argument is taken as the target.
    """
    args = list(argv)
    if not args:
        raise ConfigurationError(USAGE)

    duration = settings.DEFAULT_DURATION if default_duration is None else default_duration
    if args[0] == "-d" and len(args) >= 3:
        try:
            duration = int(args[1])
        except ValueError as exc:
            raise ConfigurationError(f"Invalid duration specified: {args[1]}") from exc
        target = args[2]
    else:
        target = args[0]

    try:
        return ProbeConfig(target=target, duration_s=duration)
    except ValidationError as exc:
        if duration < 1:
            raise ConfigurationError(f"Invalid duration specified: {duration}") from exc
        raise ConfigurationError(USAGE) from exc


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = console or Console(highlight=False)

    try:
        config = parse_args(sys.argv[1:] if argv is None else argv)
    except ConfigurationError as exc:
        console.print(str(exc), markup=False)
        return 1

    logger.info("Probing %s for %ss", config.target, config.duration_s)
    run_report(config, console=console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import logging
import subprocess

from hostprobe.checks.results import EchoResult

logger = logging.getLogger(__name__)


def build_echo_command(ping_bin: str, target: str, duration_s: int) -> list[str]:
    return [ping_bin, "-c", str(duration_s), "-i", "1", target]


def run_echo(target: str, duration_s: int, ping_bin: str = "ping") -> EchoResult:
    """Run the system ping for ``duration_s`` one-second intervals.

    The exit status is not treated as a failure: an unreachable host still
    produces text worth parsing. Only a failure to launch the tool yields
    ``ok=False``.
    """
    cmd = build_echo_command(ping_bin, target, duration_s)
    logger.debug("Running echo probe: %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Echo probe could not be started: %s", e)
        return EchoResult(ok=False, output="", error=str(e))

    logger.debug("Echo probe exited with status %s", proc.returncode)
    return EchoResult(ok=True, output=proc.stdout or "", returncode=proc.returncode)

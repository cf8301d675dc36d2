import logging
import os
from dotenv import load_dotenv

load_dotenv()


def _parse_ports(raw: str) -> tuple[int, ...]:
    ports = tuple(int(port.strip()) for port in raw.split(",") if port.strip())
    for port in ports:
        if port < 1 or port > 65535:
            raise ValueError(f"Invalid port in HOSTPROBE_PORTS: {port}")
    return ports


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "WARNING"


class Settings:
    PING_BIN: str = os.getenv("HOSTPROBE_PING_BIN", "ping")
    DEFAULT_DURATION: int = int(os.getenv("HOSTPROBE_DEFAULT_DURATION", 60))
    PORTS: tuple[int, ...] = _parse_ports(
        os.getenv("HOSTPROBE_PORTS", "22,443,80,5432")
    )
    OPEN_TIMEOUT_SECONDS: float = float(
        os.getenv("HOSTPROBE_OPEN_TIMEOUT_SECONDS", "2.0")
    )
    CONNECT_TIMEOUT_SECONDS: float = float(
        os.getenv("HOSTPROBE_CONNECT_TIMEOUT_SECONDS", "5.0")
    )
    PORT_WORKERS: int = int(os.getenv("HOSTPROBE_PORT_WORKERS", 1))
    LOG_LEVEL: str = _parse_log_level(os.getenv("HOSTPROBE_LOG_LEVEL", "WARNING"))


settings = Settings()

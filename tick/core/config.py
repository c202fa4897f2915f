from os import getenv
from pathlib import Path
from typing import Tuple

WEB_DIR = Path(__file__).resolve().parent.parent / "web"


class Settings:
    ADDR = getenv("TICK_ADDR", ":8080")  # host:port
    DB_PATH = getenv("TICK_DB", "tick.db")
    STATIC_DIR = getenv("TICK_STATIC_DIR", str(WEB_DIR))
    LOG_LEVEL = getenv("TICK_LOG_LEVEL", "INFO")

settings = Settings()


def parse_addr(addr: str) -> Tuple[str, int]:
    """Découpe une adresse d'écoute "host:port" (":8080", "127.0.0.1:9000")."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {addr!r}")
    port_num = int(port)
    if port_num > 65535:
        raise ValueError(f"invalid port: {port}")
    # [::1]:8080
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port_num

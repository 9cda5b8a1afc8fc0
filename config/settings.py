import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://127.0.0.1:8000"
DEFAULT_SESSION_PATH = Path.home() / ".promptnexus" / "session.json"


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    http_timeout: float = 10.0
    session_path: Path = DEFAULT_SESSION_PATH
    login_delay_ms: int = 1000

    @classmethod
    def from_env(cls) -> "Settings":
        session = os.getenv("PROMPT_NEXUS_SESSION_PATH")
        return cls(
            api_url=(os.getenv("PROMPT_NEXUS_API_URL") or DEFAULT_API_URL).rstrip("/"),
            http_timeout=_float_env("PROMPT_NEXUS_HTTP_TIMEOUT", 10.0),
            session_path=Path(session).expanduser() if session else DEFAULT_SESSION_PATH,
            login_delay_ms=max(_int_env("PROMPT_NEXUS_LOGIN_DELAY_MS", 1000), 0),
        )

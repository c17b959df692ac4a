import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, TypeAdapter, field_validator

# Force-load .env from the project root
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")

DEFAULT_BASE_URL = "http://localhost:3000"


def _env_flag(name: str) -> str:
    return os.getenv(name, "").strip() or "false"


class ClientConfig(BaseModel):
    """Where the resource clients send their requests."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")


class MockServerConfig(BaseModel):
    database_url: str = "sqlite://"
    strict: bool = False


def load_client_config() -> ClientConfig:
    return ClientConfig(
        base_url=os.getenv("PAYMENTS_API_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.getenv("PAYMENTS_API_TIMEOUT", "10")),
    )


def load_mock_server_config() -> MockServerConfig:
    return MockServerConfig(
        database_url=os.getenv("MOCK_DATABASE_URL", "sqlite://"),
        strict=_env_flag("MOCK_STRICT"),
    )


def live_mode() -> bool:
    """True when the contract suite should target a running server."""
    return TypeAdapter(bool).validate_python(_env_flag("PAYMENTS_HARNESS_LIVE"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")

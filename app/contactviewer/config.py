import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str

    keap_api_token: str
    keap_base_url: str
    keap_timeout_seconds: int
    contact_list_limit: int


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getenv_int(name: str, default: int) -> int:
    raw = _getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer (got {raw!r}).")


def load_settings() -> Settings:
    return Settings(
        secret_key=_getenv("SECRET_KEY", "change-me"),
        env=_getenv("ENV", "development"),
        keap_api_token=_getenv("KEAP_API_TOKEN", ""),
        keap_base_url=_getenv("KEAP_BASE_URL", "https://api.infusionsoft.com/crm/rest"),
        keap_timeout_seconds=_getenv_int("KEAP_TIMEOUT_SECONDS", 30),
        contact_list_limit=_getenv_int("CONTACT_LIST_LIMIT", 100),
    )


def load_config() -> dict:
    s = load_settings()
    is_production = s.env in ("prod", "production")
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "KEAP_API_TOKEN": s.keap_api_token,
        "KEAP_BASE_URL": s.keap_base_url,
        "KEAP_TIMEOUT_SECONDS": s.keap_timeout_seconds,
        "CONTACT_LIST_LIMIT": s.contact_list_limit,
        # security defaults
        "SESSION_COOKIE_HTTPONLY": True,
        "SESSION_COOKIE_SAMESITE": "Lax",
        "SESSION_COOKIE_SECURE": is_production,  # Require HTTPS in production
    }

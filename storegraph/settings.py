# storegraph/settings.py
from __future__ import annotations
from typing import List, Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict
import json

DEFAULT_CORS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def _parse_cors(v: Optional[str | List[str]]) -> List[str]:
    """
    Accept JSON array (e.g. '["http://localhost:3000"]') or
    comma-separated string ('http://localhost:3000,http://127.0.0.1:3000').
    """
    if v is None:
        return list(DEFAULT_CORS)
    if isinstance(v, list):
        return v
    s = v.strip()
    if not s:
        return list(DEFAULT_CORS)
    try:
        parsed = json.loads(s)
        if isinstance(parsed, list) and all(isinstance(x, str) for x in parsed):
            return parsed
    except ValueError:
        pass
    # fallback: comma separated
    return [p.strip() for p in s.split(",") if p.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",   # ignore unknown env keys instead of raising
    )

    # --- API ---
    api_host: str = Field(default="127.0.0.1", validation_alias=AliasChoices("API_HOST",))
    api_port: int = Field(default=8000,        validation_alias=AliasChoices("API_PORT",))
    cors_origins_raw: Optional[str | List[str]] = Field(
        default=None, validation_alias=AliasChoices("CORS_ORIGINS",)
    )
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL",))

    # --- Store backend ---
    account: str = Field(
        default="storecomponents",
        validation_alias=AliasChoices("STORE_ACCOUNT", "ACCOUNT"),
    )
    workspace: str = Field(
        default="master",
        validation_alias=AliasChoices("STORE_WORKSPACE", "WORKSPACE"),
    )
    # when set, replaces the account-derived checkout host (useful for local mocks)
    checkout_base_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("CHECKOUT_BASE_URL",)
    )
    request_timeout: float = Field(
        default=30.0, validation_alias=AliasChoices("REQUEST_TIMEOUT",)
    )

    # --- Auth ---
    auth_cookie_name: str = Field(
        default="VtexIdclientAutCookie",
        validation_alias=AliasChoices("AUTH_COOKIE_NAME",)
    )

    @property
    def cors_origins(self) -> List[str]:
        return _parse_cors(self.cors_origins_raw)

# singleton
settings = Settings()

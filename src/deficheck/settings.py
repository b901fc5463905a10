"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import (
    CATALOG_PAGE_SIZE,
    CATALOG_TIMEOUT_SECONDS,
    DEFAULT_CATALOG_URL,
    DEFAULT_RPC_URL,
)

load_dotenv()

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class QuoteSettings(BaseSettings):
    """Single source of truth for configuration. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with DEFICHECK_)
    - Config file (TOML), lowest precedence

    Do not read os.environ or files elsewhere in the codebase.
    """

    # --- endpoints ---
    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request deadline (seconds) for JSON-RPC calls.",
    )
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_timeout: float = Field(
        default=CATALOG_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request deadline (seconds) for REST catalog calls.",
    )
    catalog_page_size: int = Field(default=CATALOG_PAGE_SIZE, ge=1, le=1000)

    # --- pool source strategy ---
    mock: bool = False
    use_api: bool = False
    use_onchain: bool = False

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DEFICHECK_",
        env_file=".env",
        extra="ignore",  # ignore unknown keys in env/config file
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {v!r}"
            )
        return level

    @field_validator("rpc_url", "catalog_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v:
            raise ValueError("endpoint URL must not be empty")
        return v.rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: CLI > ENV > FILE."""
        env_cfg = os.environ.get("DEFICHECK_CONFIG")
        cfg_path = Path(env_cfg) if env_cfg else None

        class TomlConfigSource(PydanticBaseSettingsSource):
            def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
                super().__init__(settings_cls)
                self._path = path

            def get_field_value(
                self, field: Any, field_name: str
            ) -> tuple[Any, str, bool]:
                return None, "", False

            def __call__(self) -> dict[str, Any]:
                if not self._path:
                    # Try default locations
                    local_config = Path("deficheck.toml")
                    user_config = Path.home() / ".config" / "deficheck" / "config.toml"
                    if local_config.exists():
                        self._path = local_config
                    elif user_config.exists():
                        self._path = user_config
                    else:
                        return {}

                if not self._path.exists():
                    return {}

                with self._path.open("rb") as f:
                    data = tomllib.load(f)  # supports top-level or [deficheck]
                body = data.get("deficheck", data)
                if not isinstance(body, dict):
                    return {}
                return body

        return (
            init_settings,  # CLI (highest)
            env_settings,  # ENV
            dotenv_settings,  # .env
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
            file_secret_settings,  # optional secrets dir
        )

    def as_safe_dict(self) -> dict[str, Any]:
        """Return the config as a dict suitable for display."""
        return self.model_dump()

    @property
    def strategy_name(self) -> str:
        """Human-readable name of the pool source strategy in effect."""
        if self.mock:
            return "mock"
        locator = "catalog" if self.use_api else "hardcoded"
        loader = "onchain" if self.use_onchain else ("catalog" if self.use_api else "legacy-rpc")
        return f"{locator}/{loader}"

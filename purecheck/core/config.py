"""
PureCheck - application settings

All settings can be overridden through environment variables prefixed with
``PURECHECK_`` (or a local ``.env`` file). Pydantic validates types and the
score penalty ordering at startup.

Usage:
    from purecheck.core.config import settings

    backend = settings.analyzer_backend
"""

from typing import List, Literal, Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings

    Defaults are suitable for local development with the deterministic
    local analyzer; the Gemini backend additionally needs an API key.
    """

    # ==========================================
    # Application
    # ==========================================
    app_name: str = "PureCheck"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")   # DEBUG/INFO/WARNING/ERROR
    log_json: bool = Field(default=True)     # JSON log lines on stdout

    # ==========================================
    # API server
    # ==========================================
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    cors_origins: Optional[str] = Field(default=None)  # comma-separated

    # ==========================================
    # Analyzer selection
    # ==========================================
    analyzer_backend: Literal["local", "gemini"] = Field(default="local")

    # ==========================================
    # Gemini (external model backend)
    # ==========================================
    gemini_api_key: Optional[str] = Field(default=None)
    gemini_model: str = Field(default="gemini-2.5-flash-lite")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_timeout_seconds: float = Field(default=30.0, gt=0)

    # ==========================================
    # Reference data
    # ==========================================
    reference_data_path: Optional[str] = Field(default=None)  # extra curated entries (JSON)

    # ==========================================
    # Purity score penalties (LOW is always 0)
    # ==========================================
    penalty_high: int = Field(default=25, ge=0, le=100)
    penalty_moderate: int = Field(default=10, ge=0, le=100)
    penalty_unknown: int = Field(default=3, ge=0, le=100)

    model_config = {
        "env_file": ".env",
        "env_prefix": "PURECHECK_",
        "case_sensitive": False,
        "extra": "ignore"
    }

    @model_validator(mode="after")
    def validate_penalty_order(self):
        """HIGH > MODERATE > UNKNOWN > LOW (0)"""
        if not (self.penalty_high > self.penalty_moderate > self.penalty_unknown > 0):
            raise ValueError(
                "Score penalties must satisfy high > moderate > unknown > 0, got "
                f"high={self.penalty_high}, moderate={self.penalty_moderate}, "
                f"unknown={self.penalty_unknown}"
            )
        return self

    @property
    def cors_origin_list(self) -> List[str]:
        if not self.cors_origins:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()


def get_settings() -> Settings:
    """Settings instance (for dependency injection)"""
    return settings

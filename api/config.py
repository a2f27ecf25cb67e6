"""Application configuration using Pydantic Settings."""

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from core.models import PageGeometry


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: str = Field(default="development", description="Environment: development, stage, prod")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    max_input_chars: int = Field(
        default=1_000_000, gt=0, description="Maximum characters accepted per formatting request"
    )

    # Page geometry (A4, centimetres)
    page_height_cm: float = Field(default=29.7, gt=0.0, description="Physical page height")
    page_width_cm: float = Field(default=21.0, gt=0.0, description="Physical page width")
    page_margin_top_cm: float = Field(default=1.9, ge=0.0, description="Top margin")
    page_margin_bottom_cm: float = Field(default=1.9, ge=0.0, description="Bottom margin")
    page_margin_left_cm: float = Field(default=2.5, ge=0.0, description="Left margin")
    page_margin_right_cm: float = Field(default=2.5, ge=0.0, description="Right margin")

    # Typography
    font_family: str = Field(default="Amiri", description="Screenplay font family")
    font_size_pt: float = Field(default=12.0, gt=0.0, description="Screenplay font size in points")

    # Classification hints
    hint_provider: str = Field(
        default="none", description="AI classification hint provider: none or ollama"
    )
    hint_min_confidence: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Minimum confidence for a hint to win"
    )
    ollama_base_url: str = Field(default="http://ollama:11434", description="Ollama base URL")
    ollama_model: str = Field(default="mistral", description="Ollama model name")
    ollama_timeout: int = Field(default=60, description="Ollama request timeout in seconds")

    # Observability
    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics endpoint")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            value = v.strip()
            if not value:
                return []
            if value.startswith("["):
                parsed = json.loads(value)
                if not isinstance(parsed, list):
                    raise ValueError("CORS_ORIGINS JSON value must be a list")
                return [str(origin).strip() for origin in parsed if str(origin).strip()]
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        if isinstance(v, list):
            return [str(origin).strip() for origin in v if str(origin).strip()]
        return v

    @model_validator(mode="after")
    def validate_page_geometry(self) -> "Settings":
        """Reject margins that leave no printable area."""
        if self.page_margin_top_cm + self.page_margin_bottom_cm >= self.page_height_cm:
            raise ValueError("Top and bottom margins leave no usable page height")
        if self.page_margin_left_cm + self.page_margin_right_cm >= self.page_width_cm:
            raise ValueError("Left and right margins leave no usable page width")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env in {"prod", "production"}

    @property
    def page_geometry(self) -> PageGeometry:
        """Page size and margins as a ``PageGeometry``."""
        return PageGeometry(
            page_height_cm=self.page_height_cm,
            page_width_cm=self.page_width_cm,
            margin_top_cm=self.page_margin_top_cm,
            margin_bottom_cm=self.page_margin_bottom_cm,
            margin_left_cm=self.page_margin_left_cm,
            margin_right_cm=self.page_margin_right_cm,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

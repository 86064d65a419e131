from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

# Repo root (one level above the package)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_OUTPUT_PATH = PROJECT_ROOT / "public" / "data" / "segment.json"


class Settings(BaseSettings):
    """
    Centralized configuration for the segment sync job.
    Loads from .env file or environment variables.

    Credentials default to None; each client validates its own.
    """
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), ".env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Shopify Admin API
    SHOPIFY_STORE: Optional[str] = None
    SHOPIFY_ADMIN_TOKEN: Optional[str] = None
    SHOPIFY_API_VERSION: str = "2024-07"

    # GA4 service account
    GA4_PROPERTY_ID: Optional[str] = None
    GA4_CLIENT_EMAIL: Optional[str] = None
    GA4_PRIVATE_KEY: Optional[str] = None

    # Segment filters
    SEGMENT_SHOPIFY_QUERY: str = ""
    SEGMENT_GA_FILTER: Optional[str] = None

    # Output
    SEGMENT_OUTPUT_PATH: Optional[str] = None

    @field_validator(
        "SHOPIFY_STORE", "SHOPIFY_ADMIN_TOKEN", "GA4_PROPERTY_ID",
        "GA4_CLIENT_EMAIL", "GA4_PRIVATE_KEY", "SEGMENT_GA_FILTER",
        "SEGMENT_OUTPUT_PATH",
        mode="before"
    )
    @classmethod
    def blank_to_none(cls, value):
        """GitHub Actions passes unset secrets as empty strings"""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def OUTPUT_PATH(self) -> Path:
        """Destination of the segment summary file"""
        if self.SEGMENT_OUTPUT_PATH:
            return Path(self.SEGMENT_OUTPUT_PATH)
        return DEFAULT_OUTPUT_PATH

settings = Settings()

"""Report configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``CONTENTFUL_*`` environment variables.
The space and environment identifiers end up in the report header only;
they never influence decoding.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """Settings for fetching a content model and writing its report.

    Examples
    --------
    Configure via environment::

        export CONTENTFUL_SPACE_ID=abc123
        export CONTENTFUL_MANAGEMENT_TOKEN=CFPAT-...
        export CONTENTFUL_ENVIRONMENT_ID=staging
        export OUTPUT_DIR=reports

    Or via .env file::

        CONTENTFUL_SPACE_ID=abc123
        CONTENTFUL_MANAGEMENT_TOKEN=CFPAT-...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONTENTFUL_",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Credentials, required only when fetching from the Management API
    space_id: str = ""
    management_token: str = ""
    environment_id: str = "master"

    # Output
    output_dir: Path = Field(
        default=Path("reports"),
        validation_alias=AliasChoices("OUTPUT_DIR", "CONTENTFUL_OUTPUT_DIR", "output_dir"),
    )

    # Management API client
    api_base_url: str = "https://api.contentful.com"
    page_limit: int = 1000
    request_timeout_seconds: float = 30.0

    # Observability
    log_level: str = "WARNING"

    def missing_credentials(self) -> list[str]:
        """Names of the required environment variables that are unset."""
        missing: list[str] = []
        if not self.space_id:
            missing.append("CONTENTFUL_SPACE_ID")
        if not self.management_token:
            missing.append("CONTENTFUL_MANAGEMENT_TOKEN")
        return missing

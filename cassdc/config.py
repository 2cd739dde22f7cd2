"""Operator settings: env-driven, read through pydantic-settings.

Reads from a .env file and ``CASSDC_*`` environment variables.  The base OS
selector keeps its historical name ``BASE_IMAGE_OS`` so operator images built
on UBI keep working unchanged.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cassdc.models.profile import DeploymentProfile

ENV_BASE_IMAGE_OS = "BASE_IMAGE_OS"


class OperatorSettings(BaseSettings):
    """Process-wide settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BASE_IMAGE_OS=ubi7
        export CASSDC_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CASSDC_",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"

    # Image selection
    base_image_os: str = Field(
        default="",
        validation_alias=AliasChoices(ENV_BASE_IMAGE_OS, "CASSDC_BASE_IMAGE_OS"),
    )

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"

    def deployment_profile(self) -> DeploymentProfile:
        """Return the image-selection profile for these settings."""
        return DeploymentProfile(base_image_os=self.base_image_os)


def get_settings() -> OperatorSettings:
    """Build settings from the current environment.

    A fresh object per call, so changes to ``BASE_IMAGE_OS`` after import
    are observed.
    """
    return OperatorSettings()

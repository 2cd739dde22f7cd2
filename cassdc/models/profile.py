"""Deployment profile: the base-OS selector for image resolution."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DeploymentProfile(BaseModel):
    """Which family of container images this operator deploys.

    An empty ``base_image_os`` selects the default images.  Any other value
    (for example ``ubi7``) selects the Universal Base Image variants.
    """

    model_config = ConfigDict(frozen=True)

    base_image_os: str = ""

    @property
    def uses_universal_base(self) -> bool:
        return self.base_image_os != ""

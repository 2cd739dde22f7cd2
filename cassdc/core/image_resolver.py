"""Container image resolution for server and config-builder containers.

Images are looked up by ``<serverType>-<serverVersion>`` in one of two
tables.  The tables share their keys and differ only in tags: the default
table, and the Universal Base Image (UBI) table used when the operator runs
with a base OS selected.
"""

from __future__ import annotations

import logging

from cassdc.config import get_settings
from cassdc.core.errors import UnsupportedServerVersionError
from cassdc.models.profile import DeploymentProfile

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_BUILDER_IMAGE = "datastax/cass-config-builder:1.0.1"
UBI_DEFAULT_CONFIG_BUILDER_IMAGE = "datastax/cass-config-builder:1.0.1-ubi7"

DEFAULT_BASE_OS_IMAGES: dict[str, str] = {
    "dse-6.8.0": "datastax/dse-server:6.8.0",
    "dse-6.8.1": "datastax/dse-server:6.8.1",
    "cassandra-3.11.6": "datastax/cassandra-mgmtapi-3_11_6:v0.1.5",
    "cassandra-4.0.0": "datastax/cassandra-mgmtapi-4_0_0:v0.1.5",
}

UNIVERSAL_BASE_OS_IMAGES: dict[str, str] = {
    "dse-6.8.0": "datastax/dse-server:6.8.0-ubi7",
    "dse-6.8.1": "datastax/dse-server:6.8.1-ubi7",
    "cassandra-3.11.6": "datastax/cassandra:3.11.6-ubi7",
    "cassandra-4.0.0": "datastax/cassandra:4.0-ubi7",
}


def _resolve_profile(profile: DeploymentProfile | None) -> DeploymentProfile:
    if profile is not None:
        return profile
    return get_settings().deployment_profile()


def image_table(profile: DeploymentProfile) -> dict[str, str]:
    """Return the version-to-image table for a deployment profile."""
    if profile.uses_universal_base:
        return UNIVERSAL_BASE_OS_IMAGES
    return DEFAULT_BASE_OS_IMAGES


def server_version_key(server_type: str, server_version: str) -> str:
    return f"{server_type}-{server_version}"


def get_image_for_server_version(
    server_type: str,
    server_version: str,
    profile: DeploymentProfile | None = None,
) -> str:
    """Look up the known image for a server type and version.

    Raises UnsupportedServerVersionError when the combination is unknown.
    """
    profile = _resolve_profile(profile)
    key = server_version_key(server_type, server_version)
    try:
        return image_table(profile)[key]
    except KeyError:
        raise UnsupportedServerVersionError(
            server_type, server_version, profile.base_image_os
        ) from None


def resolve_server_image(
    server_type: str,
    server_version: str,
    explicit_image: str = "",
    profile: DeploymentProfile | None = None,
) -> str:
    """Produce a pullable server image for a datacenter.

    ``explicit_image`` may be ``[hostname[:port]/][path/with/repo]:[tag]``;
    when non-empty it wins and is returned verbatim.  Otherwise the image is
    looked up from the server type and version.
    """
    if explicit_image:
        return explicit_image

    image = get_image_for_server_version(server_type, server_version, profile)
    logger.debug(
        "Resolved server image %s for %s", image,
        server_version_key(server_type, server_version),
    )
    return image


def resolve_config_builder_image(
    explicit_image: str = "",
    profile: DeploymentProfile | None = None,
) -> str:
    """Config builder init-container image: explicit, UBI default, or default."""
    if explicit_image:
        return explicit_image
    if _resolve_profile(profile).uses_universal_base:
        return UBI_DEFAULT_CONFIG_BUILDER_IMAGE
    return DEFAULT_CONFIG_BUILDER_IMAGE

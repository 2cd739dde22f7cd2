"""Error taxonomy for datacenter derivations.

Every derivation failure is raised synchronously to the caller; nothing in
this package retries.  The external reconciler decides whether to re-queue
or to surface the error on the resource's conditions.
"""

from __future__ import annotations


class DatacenterError(RuntimeError):
    """Base class for failures deriving facts from a CassandraDatacenter."""


class UnsupportedServerVersionError(DatacenterError):
    """Raised when no image is known for a server type/version/base OS."""

    def __init__(
        self, server_type: str, server_version: str, base_image_os: str = ""
    ) -> None:
        self.server_type = server_type
        self.server_version = server_version
        self.base_image_os = base_image_os
        if base_image_os:
            message = (
                f"server '{server_type}' and version '{server_version}', "
                f"along with the specified base OS '{base_image_os}', "
                "do not work together"
            )
        else:
            message = (
                f"server '{server_type}' and version '{server_version}' "
                "do not work together"
            )
        super().__init__(message)


class InvalidUserConfigError(DatacenterError):
    """Raised when spec.config is not valid JSON."""


class ModelMergeError(DatacenterError):
    """Raised when the model document cannot be built or merged."""

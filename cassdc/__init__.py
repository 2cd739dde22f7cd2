"""cassdc: declarative model for a managed Cassandra/DSE datacenter.

Turns a CassandraDatacenter declaration into deployment facts:
  - server and config-builder container images (default or UBI tags)
  - the merged JSON document for the node-configuration generator
  - container ports, including prometheus when configured
  - per-rack node counts
  - condition bookkeeping on the status block
"""

__version__ = "0.1.0"
__description__ = "Declarative CassandraDatacenter model and deployment-fact derivations"

from cassdc.models import CassandraDatacenter, DeploymentProfile
from cassdc.core.errors import (
    DatacenterError,
    InvalidUserConfigError,
    ModelMergeError,
    UnsupportedServerVersionError,
)
from cassdc.core.rack_splitter import split_racks

__all__ = [
    "CassandraDatacenter",
    "DeploymentProfile",
    "DatacenterError",
    "InvalidUserConfigError",
    "ModelMergeError",
    "UnsupportedServerVersionError",
    "split_racks",
    "__version__",
]

"""Container port model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Limit imposed by the Kubernetes container port schema.
MAX_PORT_NAME_LENGTH = 15


class ContainerPort(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str = Field(min_length=1, max_length=MAX_PORT_NAME_LENGTH)
    container_port: int = Field(ge=1, le=65535)

"""
RPC request and response type definitions.
"""

import json
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from jobs_rpc.types.pipeline import PipelineConfiguration


def to_string_option(value: Any) -> str:
    """
    Encode a single pipeline option the way the server's string map expects.

    Args:
        value: The option value.

    Returns:
        The string form of the value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class DeclareRequest(BaseModel):
    """Request body for ``jobs.Declare``."""

    pipeline: dict[str, str]

    @classmethod
    def from_configuration(cls, config: PipelineConfiguration) -> "DeclareRequest":
        """Build a declare request from a pipeline configuration."""
        return cls(
            pipeline={
                key: to_string_option(value)
                for key, value in config.to_pipeline().items()
                if value is not None
            }
        )


class Pipelines(BaseModel):
    """
    Ordered collection of pipeline names.

    Used as the ``jobs.List`` response and as the request body of the
    pause, resume and destroy commands.
    """

    pipelines: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce_response(cls, data: Any) -> Any:
        # Empty repeated fields are omitted on the wire.
        if data is None:
            return {}
        if isinstance(data, list):
            return {"pipelines": data}
        if isinstance(data, dict) and data.get("pipelines", []) is None:
            return {**data, "pipelines": []}
        return data

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.pipelines)

    def __len__(self) -> int:
        return len(self.pipelines)


class Stat(BaseModel):
    """Runtime statistics of a single pipeline."""

    model_config = ConfigDict(extra="ignore")

    pipeline: str
    driver: str = ""
    queue: str = ""
    priority: int = 0
    active: int = 0
    delayed: int = 0
    reserved: int = 0
    ready: bool = False


class Stats(BaseModel):
    """Response body of ``jobs.Stat``."""

    stats: list[Stat] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce_response(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict) and data.get("stats", []) is None:
            return {**data, "stats": []}
        return data

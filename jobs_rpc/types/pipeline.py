"""
Pipeline declaration types.

A pipeline configuration is an immutable description of a queue to be
declared on the job server. Driver presets fix the driver identifier and
carry the options that backend understands.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from jobs_rpc.constants import PRIORITY_DEFAULT_VALUE, Driver


class PipelineConfiguration(BaseModel):
    """
    Configuration of a pipeline to declare.

    Driver-specific options that have no preset field go into ``options``
    and are sent to the server unchanged.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Pipeline name")
    driver: str = Field(..., min_length=1, description="Backend identifier")
    priority: int = Field(default=PRIORITY_DEFAULT_VALUE, ge=0, description="Pipeline priority")
    options: dict[str, Any] = Field(default_factory=dict, description="Driver-specific options")

    @model_validator(mode="after")
    def _check_option_keys(self) -> "PipelineConfiguration":
        reserved = set(self.options) & (set(type(self).model_fields) - {"options"})
        if reserved:
            raise ValueError(f"options must not redefine fields: {sorted(reserved)}")
        return self

    def to_pipeline(self) -> dict[str, Any]:
        """
        Flatten the configuration into the declare map.

        Returns:
            Mapping with ``name``, ``driver`` and ``priority`` first, then
            preset fields, then free-form options.
        """
        fields = self.model_dump(mode="python", exclude={"options"})
        return fields | {key: value for key, value in self.options.items() if key not in fields}


class MemoryCreateInfo(PipelineConfiguration):
    """In-memory pipeline."""

    driver: Literal[Driver.MEMORY] = Driver.MEMORY
    prefetch: int = Field(default=10, ge=1)


class AMQPCreateInfo(PipelineConfiguration):
    """AMQP (RabbitMQ) pipeline."""

    driver: Literal[Driver.AMQP] = Driver.AMQP
    prefetch: int = Field(default=100, ge=1)
    queue: str = "default"
    exchange: str = "amqp.default"
    exchange_type: Literal["direct", "fanout", "topic", "headers"] = "direct"
    routing_key: str = ""
    exclusive: bool = False
    multiple_ack: bool = False
    requeue_on_fail: bool = False
    durable: bool = False


class BeanstalkCreateInfo(PipelineConfiguration):
    """Beanstalk pipeline."""

    driver: Literal[Driver.BEANSTALK] = Driver.BEANSTALK
    tube_priority: int = Field(default=10, ge=0)
    tube: str = "default"
    reserve_timeout: int = Field(default=5, ge=0)


class SQSCreateInfo(PipelineConfiguration):
    """Amazon SQS pipeline."""

    driver: Literal[Driver.SQS] = Driver.SQS
    prefetch: int = Field(default=10, ge=1)
    visibility_timeout: int = Field(default=0, ge=0)
    wait_time_seconds: int = Field(default=0, ge=0)
    queue: str = "default"
    attributes: dict[str, Any] = Field(default_factory=dict)
    tags: dict[str, str] = Field(default_factory=dict)


class BoltdbCreateInfo(PipelineConfiguration):
    """BoltDB (embedded file) pipeline."""

    driver: Literal[Driver.BOLTDB] = Driver.BOLTDB
    file: str = "rr.db"
    prefetch: int = Field(default=10000, ge=1)


class NatsCreateInfo(PipelineConfiguration):
    """NATS JetStream pipeline."""

    driver: Literal[Driver.NATS] = Driver.NATS
    subject: str = Field(..., min_length=1)
    stream: str = Field(..., min_length=1)
    prefetch: int = Field(default=100, ge=1)
    deliver_new: bool = True
    rate_limit: int = Field(default=100, ge=0)
    delete_stream_on_stop: bool = False
    delete_after_ack: bool = False

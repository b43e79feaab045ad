"""
Type definitions for the jobs client.
Contains pipeline configurations and RPC request/response bodies.
"""

from jobs_rpc.types.pipeline import (
    AMQPCreateInfo,
    BeanstalkCreateInfo,
    BoltdbCreateInfo,
    MemoryCreateInfo,
    NatsCreateInfo,
    PipelineConfiguration,
    SQSCreateInfo,
)
from jobs_rpc.types.rpc import (
    DeclareRequest,
    Pipelines,
    Stat,
    Stats,
    to_string_option,
)

__all__ = [
    # Pipeline configurations
    "PipelineConfiguration",
    "MemoryCreateInfo",
    "AMQPCreateInfo",
    "BeanstalkCreateInfo",
    "SQSCreateInfo",
    "BoltdbCreateInfo",
    "NatsCreateInfo",
    # RPC bodies
    "DeclareRequest",
    "Pipelines",
    "Stat",
    "Stats",
    "to_string_option",
]

"""
Jobs RPC Client

A client-side facade for a remote job-queue manager: declare pipelines, list
them, pause and resume them, and probe whether the jobs plugin is available,
all through a synchronous RPC gateway.
"""

__version__ = "1.0.0"

from jobs_rpc.exceptions import GatewayError, JobsError
from jobs_rpc.gateway import HttpRpcGateway, RpcGateway
from jobs_rpc.jobs import Jobs
from jobs_rpc.queue import QueueHandle
from jobs_rpc.types import (
    AMQPCreateInfo,
    BeanstalkCreateInfo,
    BoltdbCreateInfo,
    MemoryCreateInfo,
    NatsCreateInfo,
    PipelineConfiguration,
    SQSCreateInfo,
)

__all__ = [
    "Jobs",
    "QueueHandle",
    "RpcGateway",
    "HttpRpcGateway",
    "JobsError",
    "GatewayError",
    "PipelineConfiguration",
    "MemoryCreateInfo",
    "AMQPCreateInfo",
    "BeanstalkCreateInfo",
    "SQSCreateInfo",
    "BoltdbCreateInfo",
    "NatsCreateInfo",
]

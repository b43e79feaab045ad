"""
Client constants.
Centralized location for RPC method names, driver identifiers and defaults.
"""

from enum import StrEnum


class RpcMethod(StrEnum):
    """Remote procedures exposed by the job server."""

    JOBS_DECLARE = "jobs.Declare"
    JOBS_LIST = "jobs.List"
    JOBS_PAUSE = "jobs.Pause"
    JOBS_RESUME = "jobs.Resume"
    JOBS_DESTROY = "jobs.Destroy"
    JOBS_STAT = "jobs.Stat"
    INFORMER_LIST = "informer.List"


class Driver(StrEnum):
    """Pipeline backends known to the job server."""

    MEMORY = "memory"
    AMQP = "amqp"
    BEANSTALK = "beanstalk"
    SQS = "sqs"
    BOLTDB = "boltdb"
    NATS = "nats"


class PipelineCommand(StrEnum):
    """Batch commands applied to a set of pipelines."""

    PAUSE = "pause"
    RESUME = "resume"
    DESTROY = "destroy"


# Default values
PRIORITY_DEFAULT_VALUE = 10
JOBS_PLUGIN_NAME = "jobs"

# Metrics names
METRIC_RPC_REQUESTS = "rpc_requests_total"
METRIC_RPC_LATENCY = "rpc_request_latency_seconds"
METRIC_PIPELINES_DECLARED = "pipelines_declared_total"
METRIC_PIPELINE_COMMANDS = "pipeline_commands_total"

# Trace span names
SPAN_RPC_CALL = "rpc_call"

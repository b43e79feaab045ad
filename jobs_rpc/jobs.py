"""
Jobs facade.

Turns pipeline lifecycle calls into RPC requests, RPC responses into queue
handles and stats, and every gateway failure into ``JobsError``.
"""

import logging
import time
from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import StrictStr, TypeAdapter, ValidationError

from jobs_rpc.config import Settings
from jobs_rpc.constants import JOBS_PLUGIN_NAME, SPAN_RPC_CALL, PipelineCommand, RpcMethod
from jobs_rpc.exceptions import JobsError
from jobs_rpc.gateway import HttpRpcGateway, RpcGateway
from jobs_rpc.observability.logging import bound_context
from jobs_rpc.observability.metrics import MetricsCollector, get_metrics
from jobs_rpc.observability.tracing import create_span
from jobs_rpc.queue import QueueHandle
from jobs_rpc.types.pipeline import PipelineConfiguration
from jobs_rpc.types.rpc import DeclareRequest, Pipelines, Stat, Stats

logger = logging.getLogger(__name__)

_PLUGIN_LIST = TypeAdapter(Sequence[StrictStr])


class Jobs:
    """
    Registry of pipelines on a remote job server.

    Every operation except ``connect`` is an independent round trip through
    the gateway. Nothing is cached: iterating twice lists pipelines twice.

    Iterating the facade yields a ``QueueHandle`` per pipeline from a single
    ``jobs.List`` call. Use ``count()`` for the number of pipelines.
    """

    def __init__(self, rpc: RpcGateway, metrics: MetricsCollector | None = None):
        """
        Initialize the facade.

        Args:
            rpc: The RPC gateway used for every remote call.
            metrics: Optional metrics collector. Uses the global one if not provided.
        """
        self._rpc = rpc
        self._metrics = metrics or get_metrics()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Jobs":
        """Create a facade backed by the HTTP gateway from configuration."""
        return cls(HttpRpcGateway.from_settings(settings))

    def create(self, config: PipelineConfiguration) -> QueueHandle:
        """
        Declare a new pipeline.

        Args:
            config: The pipeline configuration.

        Returns:
            A handle for the declared pipeline.

        Raises:
            JobsError: If the options cannot be encoded or the server
                rejects the declaration.
        """
        try:
            request = DeclareRequest.from_configuration(config)
        except (TypeError, ValueError) as e:
            raise JobsError(
                f"Cannot encode pipeline options: {e}", method=RpcMethod.JOBS_DECLARE
            ) from e

        self._call(RpcMethod.JOBS_DECLARE, request)
        self._metrics.record_pipeline_declared(str(config.driver))

        logger.info(
            "Pipeline declared",
            extra={"pipeline": config.name, "driver": str(config.driver)},
        )
        return self.connect(config.name)

    def connect(self, name: str) -> QueueHandle:
        """Get a handle for a pipeline by name without contacting the server."""
        return QueueHandle(name=name, jobs=self)

    def is_available(self) -> bool:
        """
        Check if the server has the jobs plugin enabled.

        Never raises: a failed call or a response that is not a list of
        plugin names means the plugin is unavailable.
        """
        try:
            response = self._call(RpcMethod.INFORMER_LIST)
            plugins = _PLUGIN_LIST.validate_python(response)
        except (JobsError, ValidationError):
            return False
        return JOBS_PLUGIN_NAME in plugins

    def iterate(self) -> Iterator[QueueHandle]:
        """
        Iterate over the pipelines currently registered on the server.

        The list is fetched when iteration starts.

        Raises:
            JobsError: If the pipelines cannot be listed.
        """
        for name in self._list_pipelines():
            yield self.connect(name)

    def count(self) -> int:
        """
        Count the pipelines currently registered on the server.

        Raises:
            JobsError: If the pipelines cannot be listed.
        """
        return len(self._list_pipelines())

    def pause(self, queues: Sequence[QueueHandle]) -> None:
        """
        Pause pipelines, in the given order.

        Raises:
            JobsError: If the server rejects the command.
        """
        self._command(RpcMethod.JOBS_PAUSE, PipelineCommand.PAUSE, queues)

    def resume(self, queues: Sequence[QueueHandle]) -> None:
        """
        Resume pipelines, in the given order.

        Raises:
            JobsError: If the server rejects the command.
        """
        self._command(RpcMethod.JOBS_RESUME, PipelineCommand.RESUME, queues)

    def destroy(self, queues: Sequence[QueueHandle]) -> None:
        """
        Stop and remove pipelines, in the given order.

        Raises:
            JobsError: If the server rejects the command.
        """
        self._command(RpcMethod.JOBS_DESTROY, PipelineCommand.DESTROY, queues)

    def stats(self) -> list[Stat]:
        """
        Get runtime statistics for every pipeline.

        Raises:
            JobsError: If the statistics cannot be fetched.
        """
        response = self._call(RpcMethod.JOBS_STAT)
        try:
            return Stats.model_validate(response).stats
        except ValidationError as e:
            raise JobsError(
                f"Malformed {RpcMethod.JOBS_STAT} response", method=RpcMethod.JOBS_STAT
            ) from e

    def __iter__(self) -> Iterator[QueueHandle]:
        return self.iterate()

    def _list_pipelines(self) -> Pipelines:
        response = self._call(RpcMethod.JOBS_LIST)
        try:
            return Pipelines.model_validate(response)
        except ValidationError as e:
            raise JobsError(
                f"Malformed {RpcMethod.JOBS_LIST} response", method=RpcMethod.JOBS_LIST
            ) from e

    def _command(
        self,
        method: RpcMethod,
        command: PipelineCommand,
        queues: Sequence[QueueHandle],
    ) -> None:
        names = [queue.name for queue in queues]
        if not names:
            logger.debug("No pipelines given, skipping command", extra={"command": command})
            return

        self._call(method, Pipelines(pipelines=names))
        self._metrics.record_pipeline_command(command, len(names))

        logger.info(
            "Pipeline command sent",
            extra={"command": command, "pipelines": names},
        )

    def _call(self, method: RpcMethod, payload: Any = None) -> Any:
        """
        Issue one RPC call, converting any failure into ``JobsError``.

        Args:
            method: The remote method.
            payload: Request body or None.

        Returns:
            The raw decoded response.
        """
        start = time.perf_counter()
        with bound_context(rpc_method=str(method)), create_span(
            SPAN_RPC_CALL, **{"rpc.method": method}
        ):
            try:
                result = self._rpc.call(method, payload)
            except Exception as e:
                self._metrics.record_rpc_call(method, "error", time.perf_counter() - start)
                logger.warning(
                    "RPC call failed",
                    extra={"method": method, "error": str(e)},
                )
                raise JobsError(str(e) or f"{method} failed", method=method) from e

        self._metrics.record_rpc_call(method, "ok", time.perf_counter() - start)
        return result

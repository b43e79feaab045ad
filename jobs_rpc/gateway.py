"""
RPC gateway contract and the default HTTP transport.

The facade only depends on ``RpcGateway``: call a remote method by name
with a request payload and get the decoded result back. Transport and
framing are the gateway's business.
"""

import itertools
import logging
from typing import Any, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel

from jobs_rpc.config import Settings, get_settings
from jobs_rpc.exceptions import GatewayError

logger = logging.getLogger(__name__)


@runtime_checkable
class RpcGateway(Protocol):
    """Synchronous RPC gateway: one call in flight per invocation."""

    def call(self, method: str, payload: Any = None) -> Any:
        """
        Invoke a remote method.

        Args:
            method: Remote method name, e.g. ``jobs.List``.
            payload: Request body, usually a pydantic model, or None.

        Returns:
            The decoded response.

        Raises:
            GatewayError: If the call fails for any reason.
        """
        ...


class HttpRpcGateway:
    """
    JSON-RPC gateway over HTTP.

    Sends ``{"method", "params": [payload], "id"}`` envelopes and unwraps
    ``{"id", "result", "error"}`` replies, the shape used by Go's
    ``net/rpc/jsonrpc`` codec.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the gateway.

        Args:
            url: Endpoint accepting JSON-RPC POST requests.
            timeout: Request timeout in seconds. Ignored for injected clients.
            client: Optional pre-configured client. Closing the gateway
                leaves an injected client open.
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._ids = itertools.count(1)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "HttpRpcGateway":
        """Create a gateway from configuration."""
        settings = settings or get_settings()
        return cls(settings.rpc_url, timeout=settings.rpc_timeout_seconds)

    def call(self, method: str, payload: Any = None) -> Any:
        request_id = next(self._ids)
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")

        try:
            response = self._client.post(
                self.url,
                json={"method": method, "params": [payload], "id": request_id},
            )
        except httpx.HTTPError as e:
            raise GatewayError(f"{method}: transport error: {e}") from e

        if not response.is_success:
            raise GatewayError(
                f"{method}: HTTP {response.status_code}",
                code=str(response.status_code),
            )

        try:
            body = response.json()
        except ValueError as e:
            raise GatewayError(f"{method}: response is not valid JSON") from e

        if not isinstance(body, dict):
            raise GatewayError(f"{method}: malformed response envelope")

        if body.get("id") != request_id:
            logger.debug(
                "RPC response id mismatch",
                extra={"method": method, "expected": request_id, "actual": body.get("id")},
            )

        if body.get("error"):
            raise GatewayError(f"{method}: {body['error']}")

        return body.get("result")

    def close(self) -> None:
        """Close the underlying client if this gateway created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpRpcGateway":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

"""
Error types raised by gateways and by the jobs facade.
"""


class GatewayError(Exception):
    """RPC call failed: transport error, bad envelope, or remote error."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(f"[{code}] {message}" if code else message)


class JobsError(Exception):
    """
    Failure of a jobs operation.

    The only error callers of the facade need to handle. The originating
    fault is chained as ``__cause__``.
    """

    def __init__(self, message: str, method: str | None = None) -> None:
        self.message = message
        self.method = method
        super().__init__(message)

"""Exception hierarchy shared by the upstream clients and the routers."""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base class for failures that are reported to the caller as JSON."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidInput(GatewayError):
    """A required caller parameter is missing or not a finite number."""

    status_code = 400


class UpstreamError(GatewayError):
    """A provider answered with a non-2xx status, or could not be reached."""

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        detail: Optional[str] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.detail = detail
        self.body = body

    def to_body(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.upstream_status is not None:
            payload["status"] = self.upstream_status
        if self.detail is not None:
            payload["message"] = self.detail
        if self.body is not None:
            payload["body"] = self.body
        return payload


class InternalFault(GatewayError):
    """Anything unexpected raised while building a request or parsing a reply."""

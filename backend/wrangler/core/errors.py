"""Error Hierarchy — typed exceptions for every failure the plugin HTTP surface reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - message is caller-safe; the internal cause lives in `cause` and is only logged
    - to_plain_text() is the exact body sent to the caller

Design Decisions:
    - Single hierarchy with PluginError base: the dispatcher catches one type
    - Collaborator failures (HostAPIError, BundlePathError) are NOT PluginErrors:
      handlers translate them so the caller never sees host error text
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logs."""
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    ROUTING = "routing"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


class PluginError(Exception):
    """Base exception for all errors converted into an HTTP response."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.cause = cause

    def to_plain_text(self) -> str:
        """Body written to the caller."""
        return self.message

    def log_text(self) -> str:
        """Message plus internal cause, for the log sink only."""
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


# ─── Request Errors (400-level) ─────────────────────────────────

class UnauthenticatedError(PluginError):
    """Caller identity header missing or empty."""
    def __init__(self):
        super().__init__(
            "not authorized", "UNAUTHENTICATED",
            ErrorCategory.AUTHENTICATION, 401,
        )


class MethodNotAllowedError(PluginError):
    """Route called with an unsupported HTTP method."""
    def __init__(self, method: str, allowed: str = "GET"):
        super().__init__(
            f"method {method} is not allowed, must be {allowed}",
            "METHOD_NOT_ALLOWED", ErrorCategory.ROUTING, 405,
        )
        self.method = method


class RouteNotFoundError(PluginError):
    """No entry in the route table matches the path."""
    def __init__(self, path: str):
        super().__init__(
            "not found", "NOT_FOUND", ErrorCategory.ROUTING, 404,
        )
        self.path = path


# ─── Server Errors (500-level) ──────────────────────────────────

class ConfigurationInvalidError(PluginError):
    """Plugin configuration failed its validity check."""
    def __init__(self, reason: str):
        super().__init__(
            "This plugin is not configured", "CONFIGURATION_INVALID",
            ErrorCategory.CONFIGURATION, 501,
        )
        self.reason = reason

    def log_text(self) -> str:
        return f"{self.message}: {self.reason}"


class UpstreamQueryError(PluginError):
    """Host directory query failed."""
    def __init__(self, operation: str, cause: BaseException | None = None):
        super().__init__(
            "internal error", "UPSTREAM_QUERY_FAILED",
            ErrorCategory.UPSTREAM, 500, cause,
        )
        self.operation = operation

    def log_text(self) -> str:
        return f"{self.operation}: {self.cause}"


class InternalResourceError(PluginError):
    """Bundle path or bundled file could not be read."""
    def __init__(self, resource: str, cause: BaseException | None = None):
        super().__init__(
            "internal error", "INTERNAL_RESOURCE_FAILURE",
            ErrorCategory.INTERNAL, 500, cause,
        )
        self.resource = resource


class SerializationError(PluginError):
    """Response body could not be encoded as JSON."""
    def __init__(self, cause: BaseException | None = None):
        super().__init__(
            "failed to marshal response", "SERIALIZATION_FAILURE",
            ErrorCategory.INTERNAL, 500, cause,
        )


class WriteFailureError(PluginError):
    """Response bytes could not be delivered; status may already be committed."""
    def __init__(self, cause: BaseException | None = None):
        super().__init__(
            "failed to write response", "WRITE_FAILURE",
            ErrorCategory.INTERNAL, 500, cause,
        )


# ─── Collaborator Errors ────────────────────────────────────────

class HostAPIError(Exception):
    """The host REST API returned an error or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class BundlePathError(Exception):
    """The plugin bundle directory could not be resolved."""

# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
#   ArgumentError    Tool arguments rejected by the schema.  Raised BEFORE
#                    any network call.  The caller can fix and retry.
#   RemoteCallError  The API answered with a non-2xx status.  Terminal for
#                    the invocation.
#
#   Network failures (DNS, refused connection, timeout) are NOT wrapped:
#   the httpx exception reaches the caller as-is.
#
#   None of these are caught inside the server.  FastMCP turns them into an
#   MCP error result for the agent.
# =============================================================================


class ArgumentError(ValueError):
    """Invalid tool argument.  `field` names the offending argument."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid argument '{field}': {reason}")


class RemoteCallError(RuntimeError):
    """Non-success HTTP response from the remote API."""

    def __init__(self, status: int, message: str):
        self.status = status
        super().__init__(message)

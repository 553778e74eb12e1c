"""Exceptions shared by the tool executor and the JSON-RPC endpoint."""

# JSON-RPC error codes
UNAUTHORIZED = -32001
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class ToolArgumentError(ValueError):
    """A tool argument is missing or cannot be coerced."""


class UpstreamError(Exception):
    """Base class for failures talking to the CFBD API."""


class UpstreamStatusError(UpstreamError):
    """The CFBD API answered with a non-success HTTP status."""

    def __init__(self, status: int):
        super().__init__(f"CFBD API error: {status}")
        self.status = status


class UpstreamRequestError(UpstreamError):
    """The request never produced a usable response (timeout, network, bad JSON)."""


class UnknownToolError(LookupError):
    def __init__(self, name):
        super().__init__(f"Unknown tool: {name}")
        self.name = name

"""CollegeFootballData.com stats served as MCP tools.

``create_app`` and ``main`` are resolved from :mod:`cfbd_mcp.server` on first
access, so ``python -m cfbd_mcp`` does not import the server module twice.
"""

__all__ = ["create_app", "main"]


def __getattr__(name: str):
    if name not in __all__:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from cfbd_mcp import server
    return getattr(server, name)

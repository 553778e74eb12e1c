#!/usr/bin/env python3
"""CFBD Stats MCP server: JSON-RPC over HTTP in front of the CFBD REST API"""

import asyncio
import json
import logging
import re
import time
from contextlib import asynccontextmanager, suppress
from typing import Any, Dict, Optional

import requests
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cfbd_mcp.client import CFBDClient
from cfbd_mcp.config import Settings
from cfbd_mcp.errors import INTERNAL_ERROR, METHOD_NOT_FOUND, UNAUTHORIZED, UnknownToolError
from cfbd_mcp.registry import TOOLS
from cfbd_mcp.tools import ToolExecutor

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2025-06-18"
SERVER_NAME = "cfbd-stats"
SERVER_VERSION = "2.0.0"

_ID_PATTERN = re.compile(r'"id"\s*:\s*("(?:[^"\\]|\\.)*"|-?\d+)')


def envelope(request_body: Any, **payload) -> Dict[str, Any]:
    """Wrap a result or error, echoing the request id when the request had one."""
    response = {"jsonrpc": "2.0", **payload}
    if isinstance(request_body, dict) and "id" in request_body:
        response["id"] = request_body["id"]
    return response


def rpc_error(request_body: Any, code: int, message: str) -> Dict[str, Any]:
    return envelope(request_body, error={"code": code, "message": message})


def best_effort_body(raw: bytes) -> Optional[Dict[str, Any]]:
    """Recover at least the request id from a body that may not parse."""
    try:
        body = json.loads(raw)
    except ValueError:
        match = _ID_PATTERN.search(raw.decode("utf-8", errors="replace"))
        return {"id": json.loads(match.group(1))} if match else None
    return body if isinstance(body, dict) else None


async def keep_alive(settings: Settings):
    """Ping our own /health so idle hosting platforms keep the process up."""
    started = time.monotonic()
    url = f"http://localhost:{settings.port}/health"
    while True:
        await asyncio.sleep(settings.keepalive_interval)
        try:
            await asyncio.to_thread(requests.get, url, timeout=5)
        except requests.RequestException as e:
            logger.debug(f"Keep-alive ping failed: {e}")
        logger.debug(f"Alive: {int(time.monotonic() - started)}s")


def create_app(settings: Optional[Settings] = None, client=None) -> FastAPI:
    """Create the FastAPI app.

    ``client`` defaults to a :class:`CFBDClient` built from ``settings``; tests
    pass a stand-in with the same ``async get(path, params)`` method.
    """
    settings = settings or Settings.from_env()
    owns_client = client is None
    client = client or CFBDClient(settings)
    executor = ToolExecutor(settings, client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("CFBD Stats MCP server starting up...")
        logger.info(f"PORT: {settings.port}")
        logger.info(f"CFBD Key: {'SET' if settings.cfbd_api_key else 'MISSING'}")
        logger.info(f"MCP Key: {'SET' if settings.mcp_api_key else 'NONE'}")
        logger.info(f"Available tools: {[t['name'] for t in TOOLS]}")
        task = None
        if settings.keepalive_interval > 0:
            task = asyncio.create_task(keep_alive(settings))
        app.state.keepalive_task = task
        yield
        if task is not None:
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        if owns_client:
            client.close()
        logger.info("CFBD Stats MCP server shutting down...")

    app = FastAPI(
        title="CFBD Stats MCP",
        description="MCP server exposing CollegeFootballData.com stats as text tools.",
        version=SERVER_VERSION,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.executor = executor

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/")
    async def read_root():
        return {"service": "CFBD Stats MCP Server", "status": "running", "version": SERVER_VERSION}

    @app.get("/mcp")
    async def mcp_get():
        """Connection probe; not part of JSON-RPC."""
        return {"service": "MCP Server", "status": "ready"}

    async def dispatch(data: Dict[str, Any]) -> Dict[str, Any]:
        method = data.get("method")
        logger.info(f"MCP request: method={method}, id={data.get('id')}")

        if method == "initialize":
            return envelope(data, result={
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            })

        elif method == "ping":
            return envelope(data, result={})

        elif method == "tools/list":
            return envelope(data, result={"tools": TOOLS})

        elif method == "tools/call":
            params = data.get("params")
            if not isinstance(params, dict):
                params = {}
            tool_name = params.get("name")
            arguments = params.get("arguments")
            if not isinstance(arguments, dict):
                arguments = {}

            logger.info(f"Tool call: {tool_name} with arguments: {arguments}")
            try:
                text = await executor.call(tool_name, arguments)
            except UnknownToolError as e:
                return rpc_error(data, METHOD_NOT_FOUND, str(e))
            return envelope(data, result={"content": [{"type": "text", "text": text}]})

        return rpc_error(data, METHOD_NOT_FOUND, f"Method not found: {method}")

    @app.post("/mcp")
    async def mcp_endpoint(request: Request):
        """Main JSON-RPC endpoint for MCP protocol"""
        raw = b""
        try:
            raw = await request.body()
            if settings.mcp_api_key:
                if request.headers.get("authorization") != f"Bearer {settings.mcp_api_key}":
                    logger.warning("Rejected MCP request with missing or invalid Authorization header")
                    return JSONResponse(
                        status_code=401,
                        content=rpc_error(best_effort_body(raw), UNAUTHORIZED, "Unauthorized"),
                    )

            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("JSON-RPC request must be an object")
            return await dispatch(data)
        except Exception as e:
            logger.exception(f"Error in MCP endpoint: {e}")
            return JSONResponse(
                status_code=500,
                content=rpc_error(best_effort_body(raw), INTERNAL_ERROR, str(e)),
            )

    return app


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

"""Test helpers: a fake CFBD client and JSON-RPC request builders."""

from typing import Any, Dict, List, Optional, Tuple

from fastapi.testclient import TestClient


class FakeCFBD:
    """Stands in for CFBDClient; answers by path and records every call."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = dict(routes or {})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append((path, dict(params or {})))
        response = self.routes.get(path, [])
        if isinstance(response, Exception):
            raise response
        return response


def rpc(method: str, params: Optional[Dict[str, Any]] = None, rpc_id: Any = 1) -> Dict[str, Any]:
    body = {"jsonrpc": "2.0", "method": method, "id": rpc_id}
    if params is not None:
        body["params"] = params
    return body


def call_tool(http: TestClient, name: str, arguments: Optional[Dict[str, Any]] = None, **headers):
    return http.post("/mcp", json=rpc("tools/call", {"name": name, "arguments": arguments or {}}), headers=headers)


def tool_text(response) -> str:
    body = response.json()
    assert "error" not in body, body
    content = body["result"]["content"]
    assert content[0]["type"] == "text"
    return content[0]["text"]



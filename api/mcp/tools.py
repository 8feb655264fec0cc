"""
Vercel Python Function for rest plan tool calls.

POST /api/mcp/tools with {"tool_name": ..., "arguments": {...}} runs one
of the tools in rest_plan_tools and returns {"result": ...}.

Status codes:
- 400: malformed JSON, missing tool_name, unknown tool or bad arguments
- 403: MCP_INTERNAL_SECRET is set and the X-MCP-Internal header differs
- 413: body larger than MAX_BODY_SIZE
- 500: unexpected failure inside a tool
"""

from http.server import BaseHTTPRequestHandler
import json
import os
import sys
from pathlib import Path

# Add the _python directory to the Python path for importing flightrests
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from rest_plan_tools import invoke_tool

MAX_BODY_SIZE = 64 * 1024  # Rest requests are a few hundred bytes
INTERNAL_SECRET = os.environ.get("MCP_INTERNAL_SECRET", "")


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Run the named tool and return its result."""
        if INTERNAL_SECRET and self.headers.get("X-MCP-Internal") != INTERNAL_SECRET:
            self._send_json_response(403, {"error": "Forbidden"})
            return

        content_length = int(self.headers.get("Content-Length", 0))
        if content_length > MAX_BODY_SIZE:
            self._send_json_response(413, {"error": "Request body too large"})
            return

        try:
            data = json.loads(self.rfile.read(content_length))
            if not isinstance(data, dict) or not data.get("tool_name"):
                self._send_json_response(400, {"error": "Missing tool_name"})
                return

            # invoke_tool rejects unknown tool names with ValueError
            result = invoke_tool(data["tool_name"], data.get("arguments") or {})
            self._send_json_response(200, {"result": result})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except ValueError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            self._send_json_response(500, {"error": f"Tool execution failed: {e}"})

    def _send_json_response(self, status_code: int, data: dict):
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type, X-MCP-Internal")
        self.end_headers()

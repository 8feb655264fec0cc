"""
Vercel Python Function for rest plan calculation.

This endpoint handles POST requests to /api/rests/calculate and returns
a rest plan for the given picker times, crew role and rest preferences.
"""

from http.server import BaseHTTPRequestHandler
import json
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing flightrests
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from rest_plan_tools import calculate_rest_plan, validate_arguments


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for rest plan calculation."""
        try:
            # Read request body
            content_length = int(self.headers.get("Content-Length", 0))
            body = self.rfile.read(content_length)
            data = json.loads(body)

            if not isinstance(data, dict):
                self._send_json_response(400, {"error": "Request body must be a JSON object"})
                return

            # Validate input
            validation_error = validate_arguments(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            result = {
                "id": str(uuid4()),
                "result": calculate_rest_plan(data),
            }

            self._send_json_response(200, result)

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except Exception as e:
            self._send_json_response(500, {"error": f"Rest calculation failed: {str(e)}"})

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
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
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

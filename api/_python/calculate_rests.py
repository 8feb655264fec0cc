#!/usr/bin/env python3
"""
Calculate a rest plan from a JSON request file.

Usage: python3 calculate_rests.py <request_file.json>

This script reads a rest request (picker times, crew role, users, periods,
break settings, time zone) from a JSON file and outputs the rest plan as
JSON to stdout.

Security: This script only reads from the specified JSON file and writes
to stdout. It does not accept any code or commands as input.
"""

import json
import sys

# Assumes api/_python is in path or the script is run from there
from rest_plan_tools import calculate_rest_plan


def main() -> None:
    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: calculate_rests.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        with open(request_file) as f:
            data = json.load(f)

        print(json.dumps(calculate_rest_plan(data)))

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except KeyError as e:
        print(json.dumps({"error": f"Missing required field: {e}"}))
        sys.exit(1)
    except Exception as e:
        print(json.dumps({"error": f"Rest calculation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()

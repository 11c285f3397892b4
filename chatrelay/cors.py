"""
Fixed CORS header set for browser callers
"""

from typing import Dict

from fastapi.responses import Response

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
    "Content-Type": "application/json",
}


def preflight_response() -> Response:
    """Empty answer to a browser preflight check"""
    return Response(headers=CORS_HEADERS)

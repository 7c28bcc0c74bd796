from fastapi.responses import Response

# Browser clients call this function from arbitrary origins.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
}

PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "*",
}

def preflight_response() -> Response:
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)

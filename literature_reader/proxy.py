"""
Run-code proxy
Relays code from the reader to the external compile service
"""

import logging
from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse, StreamingResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}
PREFLIGHT_MAX_AGE = "86400"


async def _relay(resp: httpx.Response) -> AsyncIterator[bytes]:
    try:
        async for chunk in resp.aiter_bytes():
            yield chunk
    finally:
        await resp.aclose()


async def forward(client: httpx.AsyncClient, url: str, request: Request) -> Response:
    """Send the request body to url and stream the answer back unchanged"""
    headers = {}
    content_type = request.headers.get("content-type")
    if content_type is not None:
        headers["Content-Type"] = content_type

    req = client.build_request(
        method="POST",
        url=url,
        headers=headers,
        content=request.stream(),
    )
    try:
        resp = await client.send(req, stream=True)
    except httpx.HTTPError as e:
        logger.warning("Compile service %s unreachable: %s", url, e)
        return PlainTextResponse(
            f"Failed to reach compile service: {e}",
            status_code=502,
            headers=CORS_HEADERS,
        )

    logger.debug("Compile service %s answered %s", url, resp.status_code)
    headers = dict(CORS_HEADERS)
    if "content-type" in resp.headers:
        headers["Content-Type"] = resp.headers["content-type"]
    return StreamingResponse(
        _relay(resp),
        status_code=resp.status_code,
        headers=headers,
    )


router = APIRouter()


async def run_code(request: Request):
    """Proxy code to the compile service (POST), answer pre-flight (OPTIONS)"""
    if request.method == "OPTIONS":
        headers = dict(CORS_HEADERS)
        headers["Access-Control-Max-Age"] = PREFLIGHT_MAX_AGE
        return Response(status_code=200, headers=headers)

    if request.method != "POST":
        return PlainTextResponse(
            "Only POST requests are supported",
            status_code=405,
            headers=CORS_HEADERS,
        )

    state = request.app.state
    return await forward(state.http_client, state.settings.compile_url, request)


# Plain route without a method list so every verb reaches run_code
router.add_route("/api/run-code", run_code)

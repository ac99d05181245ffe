# app/router/proxy.py

import logging

import httpx
from fastapi import Request, Response

logger = logging.getLogger(__name__)

# Connection-scoped headers that must not be forwarded in either direction.
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
}


def _request_headers(request: Request) -> dict:
    headers = {
        k: v
        for k, v in request.headers.items()
        if k.lower() not in HOP_BY_HOP_HEADERS and k.lower() != "content-length"
    }

    client = request.client.host if request.client else ""
    prior = request.headers.get("x-forwarded-for")

    headers["host"] = request.headers.get("host", "")
    headers["x-real-ip"] = client
    headers["x-forwarded-for"] = f"{prior}, {client}" if prior else client
    headers["x-forwarded-proto"] = request.url.scheme
    return headers


def _response_headers(upstream: httpx.Response) -> dict:
    # httpx hands back the decoded body, so length and encoding are recomputed.
    skip = HOP_BY_HOP_HEADERS | {"content-length", "content-encoding"}
    return {k: v for k, v in upstream.headers.items() if k.lower() not in skip}


async def forward(client: httpx.AsyncClient, request: Request) -> Response:
    """
    Replay the incoming request against the client's base URL, keeping
    method, path, query string and body.
    """
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    body = await request.body()

    try:
        upstream = await client.request(
            request.method,
            url,
            headers=_request_headers(request),
            content=body,
        )
    except httpx.HTTPError as e:
        logger.error("Upstream request %s %s failed: %s", request.method, request.url.path, e)
        return Response(
            content=b'{"detail":"Bad gateway"}',
            status_code=502,
            media_type="application/json",
        )

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        headers=_response_headers(upstream),
    )

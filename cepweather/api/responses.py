"""Shared request and response helpers for service routers."""

from fastapi import Request
from fastapi.responses import PlainTextResponse
from opentelemetry.trace import Span, Status, StatusCode


async def api_read_raw_body(request: Request) -> bytes:
    """Read the untouched request body for handlers that must relay it verbatim.

    Args:
        request: Inbound request.

    Returns:
        bytes: Raw body bytes.

    Raises:
        starlette.requests.ClientDisconnect: Raised when the client disconnects mid-body.
    """

    return await request.body()


def api_plain_text_response(span: Span, status_code: int, message: str) -> PlainTextResponse:
    """Build a plain-text error response and record its status on the server span.

    Args:
        span: Active server span for the request.
        status_code: HTTP status to return.
        message: Caller-facing message without internal detail.

    Returns:
        PlainTextResponse: Newline-terminated message with `nosniff` set.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    span.set_attribute("http.response.status_code", status_code)
    if status_code >= 500:
        span.set_status(Status(StatusCode.ERROR, message))
    return PlainTextResponse(
        content=f"{message}\n",
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )

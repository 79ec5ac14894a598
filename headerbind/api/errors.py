from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from headerbind.core.errors import HeaderBindError

log = logging.getLogger("headerbind.api")


async def header_bind_error_handler(request: Request, exc: HeaderBindError) -> JSONResponse:
    log.info("header bind error path=%s field=%s: %s", request.url.path, exc.field, exc)
    payload = exc.to_dict()
    rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
    if rid:
        payload["request_id"] = rid
    return JSONResponse(status_code=400, content={"detail": payload})


def install_error_handlers(app: FastAPI) -> None:
    """Answer 400 for HeaderBindError raised anywhere below the app (never a traceback)."""
    app.add_exception_handler(HeaderBindError, header_bind_error_handler)

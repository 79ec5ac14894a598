from __future__ import annotations

import logging
from typing import Callable, Optional, Type, TypeVar

from fastapi import HTTPException, Request

from headerbind.core.binder import Binder, get_default_binder
from headerbind.core.errors import HeaderBindError

log = logging.getLogger("headerbind.api")

R = TypeVar("R")


def bind_headers(record_type: Type[R], *, binder: Optional[Binder] = None) -> Callable[[Request], R]:
    """
    FastAPI dependency-style header binding.

        @router.get("/items")
        def list_items(ctx: RequestHeaders = Depends(bind_headers(RequestHeaders))):
            ...

    Each request gets a fresh record_type(); a header that fails to bind
    answers 400 instead of reaching the endpoint.
    """

    def dependency(request: Request) -> R:
        b = binder or get_default_binder()
        record = record_type()
        try:
            b.bind(record, request.headers)
        except HeaderBindError as e:
            log.info("rejecting request path=%s: %s", request.url.path, e)
            raise HTTPException(status_code=400, detail=e.to_dict()) from e
        except ValueError as e:
            # custom unmarshalers raise their own errors
            log.info("rejecting request path=%s: %s", request.url.path, e)
            raise HTTPException(
                status_code=400,
                detail={"error": "invalid_header", "message": str(e), "field": None, "header": None},
            ) from e
        return record

    return dependency

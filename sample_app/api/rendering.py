"""Response rendering helpers shared by API routers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal Server Error"


def api_render_json(payload: Any, response_name: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Encode a JSON payload completely before any response bytes are sent.

    Args:
        payload: JSON-compatible response content.
        response_name: Short response label used in error logs.
        status_code: HTTP status for a successfully encoded payload.

    Returns:
        JSONResponse: Encoded payload, or a 500 error response when encoding fails.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        return JSONResponse(content=payload, status_code=status_code)
    except (TypeError, ValueError) as error:
        logger.error("Error encoding %s response: %s", response_name, error)
        return JSONResponse(
            content={"detail": INTERNAL_ERROR_DETAIL},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

"""Per-request choice between HTML pages and JSON payloads."""

from enum import StrEnum
from typing import Annotated

from fastapi import Depends, Query, Request

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"


class ResponseFormat(StrEnum):
    HTML = "html"
    JSON = "json"


def _prefers_json(accept: str) -> bool:
    """Whether JSON ranks above HTML in an Accept header."""
    best: dict[str, float] = {}
    for part in accept.split(","):
        media_type, _, params = part.strip().partition(";")
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        best[media_type.strip().lower()] = quality
    json_q = best.get(JSON_MEDIA_TYPE, 0.0)
    return json_q > 0 and json_q >= best.get(HTML_MEDIA_TYPE, 0.0)


def get_response_format(
    request: Request,
    format: str | None = Query(None, description="Force 'json' or 'html'"),
) -> ResponseFormat:
    """JSON when asked for explicitly or preferred by Accept; HTML otherwise."""
    if format:
        return ResponseFormat.JSON if format.lower() == ResponseFormat.JSON else ResponseFormat.HTML
    if _prefers_json(request.headers.get("accept", "")):
        return ResponseFormat.JSON
    return ResponseFormat.HTML


ResponseFormatDep = Annotated[ResponseFormat, Depends(get_response_format)]

"""Team request bodies: JSON documents or HTML form submissions.

Form fields use bracketed names for nested entries, e.g.::

    name=Blue
    roles[0][id]=r1
    roles[0][action]=update
    roles[0][github_handle]=carla
    sources[0][url]=https://blue.example.org

When a field is sent twice the last value wins, so a checkbox placed after a
hidden input of the same name overrides it.
"""

import json
import re
from collections.abc import Iterable
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from seasonteams.services.team_schemas import TeamPayload

FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_NESTED_FIELD = re.compile(r"^(roles|sources)\[(\d+)\]\[(\w+)\]$")


def form_to_dict(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Turn flat form fields into the shape of a team payload.

    Empty values become None so blank inputs read as "not given".
    """
    data: dict[str, Any] = {}
    nested: dict[str, dict[int, dict[str, Any]]] = {"roles": {}, "sources": {}}

    for key, value in items:
        if not isinstance(value, str):
            continue  # file uploads
        value = value or None
        match = _NESTED_FIELD.match(key)
        if match:
            collection, index, field = match.groups()
            nested[collection].setdefault(int(index), {})[field] = value
        else:
            data[key] = value

    for collection, entries in nested.items():
        if entries:
            data[collection] = [entries[index] for index in sorted(entries)]
    return data


async def get_team_payload(request: Request) -> TeamPayload:
    """Parse the request body into a TeamPayload.

    Raises:
        RequestValidationError: Body is not valid JSON or does not fit the payload
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_MEDIA_TYPES):
        form = await request.form()
        raw = form_to_dict(form.multi_items())
    else:
        try:
            raw = await request.json()
        except json.JSONDecodeError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body", e.pos), "msg": "JSON decode error"}]
            ) from e

    try:
        return TeamPayload.model_validate(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in errors]
        ) from e


TeamPayloadDep = Annotated[TeamPayload, Depends(get_team_payload)]

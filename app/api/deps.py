"""Request-scoped dependencies: injected collaborators and body decoding."""
from __future__ import annotations

from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from ..domain.admin import AdminPortal
from ..domain.store import CoasterStore
from .models import CoasterCreate

JSON_MEDIA_TYPE = "application/json"


def get_store(request: Request) -> CoasterStore:
    """Return the store wired into the app by `create_app`."""
    return request.app.state.store


def get_admin_portal(request: Request) -> AdminPortal:
    return request.app.state.admin


async def read_coaster_payload(request: Request) -> CoasterCreate:
    """Decode the request body into a `CoasterCreate`.

    - 415 unless the content type is application/json (parameters allowed)
    - 400 with the parser's message for malformed or mistyped JSON
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=(
                "status 415, unsupported content type, "
                f"want '{JSON_MEDIA_TYPE}', got '{content_type}'"
            ),
            headers={"Accept": JSON_MEDIA_TYPE},
        )

    body = await request.body()
    try:
        return CoasterCreate.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

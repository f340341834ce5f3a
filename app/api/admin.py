from __future__ import annotations

import base64
import binascii
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from ..domain.admin import ADMIN_PAGE_HTML, AdminPortal
from ..logging_conf import get_logger
from .deps import get_admin_portal

router = APIRouter()
logger = get_logger("api.admin")

_REALM = "admin"

_ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def read_basic_credentials(request: Request) -> Optional[HTTPBasicCredentials]:
    """Decode an `Authorization: Basic` header as UTF-8 `user:password`.

    Returns None for a missing header, another scheme, or an undecodable value.
    """
    scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "basic" or not param:
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return HTTPBasicCredentials(username=username, password=password)


@router.api_route(
    "/admin",
    methods=_ANY_METHOD,
    response_class=HTMLResponse,
    summary="Password-gated admin page",
)
def admin_page(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(read_basic_credentials),
    portal: AdminPortal = Depends(get_admin_portal),
) -> HTMLResponse:
    """Serve the static admin page to `admin` holding the configured secret."""
    if credentials is None or not portal.check(credentials.username, credentials.password):
        logger.warning(
            "admin.denied",
            extra={
                "event": "admin_denied",
                "method": request.method,
                "has_credentials": credentials is not None,
            },
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="status 401 - unauthorized",
            headers={"WWW-Authenticate": f'Basic realm="{_REALM}"'},
        )
    return HTMLResponse(content=ADMIN_PAGE_HTML)

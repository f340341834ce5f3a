from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from ..domain.coaster import Coaster
from ..domain.store import CoasterStore
from ..service import coaster_service
from ..service.coaster_service import CoasterNotFoundError
from .deps import get_store, read_coaster_payload
from .models import CoasterCreate

router = APIRouter()

# Path operations are plain `def` so each request runs on its own worker thread;
# the store lock serializes the shared map underneath.


@router.get(
    "/coasters",
    response_model=list[Coaster],
    summary="List all coasters",
)
def list_coasters(store: CoasterStore = Depends(get_store)) -> list[Coaster]:
    """Return every stored coaster in unspecified order."""
    return coaster_service.list_coasters(store)


@router.post(
    "/coasters",
    response_model=Coaster,
    status_code=status.HTTP_201_CREATED,
    summary="Create a coaster",
)
def create_coaster(
    response: Response,
    payload: CoasterCreate = Depends(read_coaster_payload),
    store: CoasterStore = Depends(get_store),
) -> Coaster:
    """Store a new coaster under a server-generated id and return it."""
    coaster = coaster_service.create_coaster(store, coaster=payload.to_coaster())
    response.headers["Location"] = f"/coasters/{coaster.id}"
    return coaster


# Must be registered before /coasters/{coaster_id} so "random" is not taken as an id.
@router.get(
    "/coasters/random",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    summary="Redirect to a random coaster",
)
def random_coaster(store: CoasterStore = Depends(get_store)) -> RedirectResponse:
    try:
        coaster_id = coaster_service.pick_random_coaster_id(store)
    except CoasterNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.code}: {e}") from e
    return RedirectResponse(url=f"/coasters/{coaster_id}", status_code=status.HTTP_302_FOUND)


@router.get(
    "/coasters/{coaster_id}",
    response_model=Coaster,
    summary="Get a coaster by id",
)
def get_coaster(coaster_id: str, store: CoasterStore = Depends(get_store)) -> Coaster:
    try:
        return coaster_service.get_coaster(store, coaster_id=coaster_id)
    except CoasterNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.code}: {e}") from e

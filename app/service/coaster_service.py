from __future__ import annotations

from ..domain.coaster import Coaster
from ..domain.store import CoasterStore
from ..logging_conf import get_logger

logger = get_logger("service.coaster")


class CoasterNotFoundError(LookupError):
    """Raised when a lookup finds no matching coaster.

    The `code` attribute gives the API a stable machine code for the miss.
    """

    code: str = "coaster_not_found"


# ------------------------
# Use-cases
# ------------------------

def create_coaster(store: CoasterStore, *, coaster: Coaster) -> Coaster:
    """Store `coaster` under a freshly minted id and return the stored record.

    Any id already present on `coaster` is discarded.
    """
    coaster_id = store.insert(coaster)
    logger.info(
        "coaster.create",
        extra={"event": "coaster_create", "coaster_id": coaster_id, "coaster_name": coaster.name},
    )
    return coaster.model_copy(update={"id": coaster_id})


def list_coasters(store: CoasterStore) -> list[Coaster]:
    """Return every stored coaster; order is unspecified."""
    return store.list()


def get_coaster(store: CoasterStore, *, coaster_id: str) -> Coaster:
    coaster = store.get(coaster_id)
    if coaster is None:
        raise CoasterNotFoundError(f"no coaster with id {coaster_id!r}")
    return coaster


def pick_random_coaster_id(store: CoasterStore) -> str:
    """Return the id of a uniformly chosen coaster.

    Raises:
        CoasterNotFoundError: if the store is empty.
    """
    coaster_id = store.random_id()
    if coaster_id is None:
        raise CoasterNotFoundError("no coasters stored")
    logger.info("coaster.random", extra={"event": "coaster_random", "coaster_id": coaster_id})
    return coaster_id

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Coaster",
]


class Coaster(BaseModel):
    """A roller coaster record as held by the store.

    `in_park` is exposed as `inPark` on the wire; both names are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""  # server-assigned, never taken from the client
    name: str = ""
    manufacturer: str = ""
    in_park: str = Field("", alias="inPark")
    height: int = 0

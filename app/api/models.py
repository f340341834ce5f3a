from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ..domain.coaster import Coaster


class CoasterCreate(BaseModel):
    """Client payload for creating a coaster.

    Unknown keys, including any client-supplied `id`, are ignored. `height`
    must be a JSON integer; numeric strings and floats are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    manufacturer: str = ""
    in_park: str = Field("", alias="inPark")
    height: StrictInt = 0

    def to_coaster(self) -> Coaster:
        return Coaster(
            name=self.name,
            manufacturer=self.manufacturer,
            in_park=self.in_park,
            height=self.height,
        )


class HealthResponse(BaseModel):
    ok: bool = True

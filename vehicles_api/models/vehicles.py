# vehicles_api/models/vehicles.py

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict

# A vehicle is whatever object the data file holds; no schema is imposed.
VehicleRecord = Dict[str, Any]


class VehicleList(BaseModel):
    """
    All vehicle records, in file order, as loaded at startup.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    records: Tuple[VehicleRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

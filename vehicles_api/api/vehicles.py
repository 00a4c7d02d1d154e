# vehicles_api/api/vehicles.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from vehicles_api.models.vehicles import VehicleList

logger = logging.getLogger(__name__)

router = APIRouter(tags=["vehicles"])


def get_vehicle_list(request: Request) -> VehicleList:
    return request.app.state.vehicles


@router.api_route("/vehicles", methods=["GET", "HEAD"], response_class=JSONResponse)
def list_vehicles(vehicles: VehicleList = Depends(get_vehicle_list)) -> JSONResponse:
    """
    Return every vehicle record, in the order of the data file.
    """
    try:
        return JSONResponse(content=list(vehicles.records))
    except (TypeError, ValueError):
        logger.exception("Could not serialize vehicles from %s", vehicles.source)
        raise HTTPException(status_code=500, detail="Vehicle data could not be serialized")

# vehicles_api/main.py

from fastapi import FastAPI

from vehicles_api.api.vehicles import router as vehicles_router
from vehicles_api.models.vehicles import VehicleList


def create_app(vehicles: VehicleList) -> FastAPI:
    """
    Build the API around an already loaded vehicle list.

    The list is shared read-only by every request for the life of the app.
    /vehicles is the only route; the generated docs are switched off.
    """
    app = FastAPI(
        title="Vehicles API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.vehicles = vehicles

    app.include_router(vehicles_router)
    return app

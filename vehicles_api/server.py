# vehicles_api/server.py
"""
Process entry point: load the data file, then serve it with uvicorn.

Usage:
    python -m vehicles_api

Run from the directory holding data/vehicles.json (the repository root), or
point VEHICLES_DATA_PATH at the data file; the default path is resolved
against the working directory and the data file is not installed with the
package.
"""

import logging
import sys

import uvicorn

from vehicles_api.config import Settings, get_settings
from vehicles_api.data.loader import StartupError, load_vehicles
from vehicles_api.main import create_app
from vehicles_api.models.vehicles import VehicleList

logger = logging.getLogger(__name__)


class VehicleServer(uvicorn.Server):
    """uvicorn server that announces itself once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            print(f"{self.config.port} is Listening!", flush=True)


def serve(settings: Settings, vehicles: VehicleList) -> None:
    config = uvicorn.Config(
        create_app(vehicles),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    # uvicorn logs and exits with status 1 if the port cannot be bound
    VehicleServer(config).run()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    settings = get_settings()

    try:
        vehicles = load_vehicles(settings.data_path)
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)

    serve(settings, vehicles)

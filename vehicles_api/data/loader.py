# vehicles_api/data/loader.py

import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json

from vehicles_api.models.vehicles import VehicleList, VehicleRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[VehicleRecord])

_UTF8_BOM = b"\xef\xbb\xbf"


class StartupError(Exception):
    """The vehicle data file is missing, unreadable or malformed."""


def load_vehicles(path: Union[str, Path]) -> VehicleList:
    """
    Read the JSON data file at *path* and return its records.

    The file must hold a JSON array of objects. Anything else raises
    StartupError; the service must not serve without its data.
    """
    path = Path(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StartupError(f"Cannot read vehicle data file {path}: {e}") from e

    if raw.startswith(_UTF8_BOM):
        raw = raw[len(_UTF8_BOM):]

    # NaN and Infinity are not JSON
    try:
        parsed = from_json(raw, allow_inf_nan=False)
    except ValueError as e:
        raise StartupError(f"Malformed vehicle data file {path}: {e}") from e

    try:
        records = _records_adapter.validate_python(parsed)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise StartupError(
            f"Malformed vehicle data file {path}: {first['msg']} at {loc}"
        ) from e

    logger.info("Loaded %s vehicle records from %s", len(records), path)
    return VehicleList(source=str(path), records=records)

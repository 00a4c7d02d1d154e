# parse_data.py
"""
Load the vehicle data file and print basic stats.

Usage:
    python parse_data.py [PATH]
"""

import sys

from vehicles_api.config import get_settings
from vehicles_api.data.loader import StartupError, load_vehicles


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else get_settings().data_path

    try:
        vehicles = load_vehicles(path)
    except StartupError as e:
        print(f"Error: {e}")
        return 1

    fields = sorted({key for record in vehicles.records for key in record})

    print(f"Data file:         {vehicles.source}")
    print(f"Vehicle records:   {len(vehicles)}")
    print(f"Distinct fields:   {', '.join(fields) if fields else '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

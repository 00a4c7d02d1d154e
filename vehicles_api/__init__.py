# vehicles_api/__init__.py
"""
Vehicles API: serves a static list of vehicle records as JSON.

Run with:
    python -m vehicles_api
"""

from .data.loader import StartupError, load_vehicles
from .main import create_app

__all__ = ["StartupError", "create_app", "load_vehicles"]

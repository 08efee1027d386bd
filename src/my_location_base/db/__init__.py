from .schema import create_schema, connect, init_database
from .location_repo import LocationPoint, insert_location, list_locations, count_locations

__all__ = [
    "create_schema",
    "connect",
    "init_database",
    "LocationPoint",
    "insert_location",
    "list_locations",
    "count_locations",
]

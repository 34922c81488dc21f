"""
Application Constants
=====================
Fixed identifiers shared by the catalogue, the aggregates and the report.
"""

from pathlib import Path

# Registry namespaces; a model's implementation identifier is appended to one.
SENSOR_PATH = "sensors."
ACTUATOR_PATH = "actuators."

# Report bucket for devices that carry no sensor at all.
WITHOUT_FUNCTIONALITY = "Without functionality"

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_SENSOR_CATALOGUE = str(DATA_DIR / "sensor_catalogue.json")
DEFAULT_ACTUATOR_CATALOGUE = str(DATA_DIR / "actuator_catalogue.json")

DEVICE_LOG_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"
DEFAULT_DEVICE_LOG_LIMIT = 100

INVALID_ARGUMENTS = "Invalid arguments"
INVALID_CONSTRUCTOR_ARGUMENTS = "Invalid arguments passed to constructor."
